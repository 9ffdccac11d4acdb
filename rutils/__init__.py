"""Small file utilities: cat, cp, echo, head and mv, with shared path helpers."""

__version__ = "0.1.0"
__all__ = ["cat", "cp", "echo", "head", "mv", "paths"]