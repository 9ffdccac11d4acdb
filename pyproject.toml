[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rutils"
version = "0.1.0"
description = "Small file utilities: cat, cp, echo, head and mv"
requires-python = ">=3.10"
dependencies = []
keywords = ["cat", "cp", "echo", "head", "mv", "command-line", "files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rcat = "rutils.cat:main"
rcp = "rutils.cp:main"
recho = "rutils.echo:main"
rhead = "rutils.head:main"
rmv = "rutils.mv:main"

[tool.hatch.build.targets.wheel]
packages = ["rutils"]

[tool.pytest.ini_options]
addopts = "-ra"
