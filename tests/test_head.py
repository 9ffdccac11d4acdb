import io

import pytest

from rutils.head import head_file, head_lines, main


def test_head_lines_limits_count():
    assert list(head_lines(io.StringIO("1\n2\n3\n"), 2)) == ["1\n", "2\n"]


def test_head_lines_short_input():
    assert list(head_lines(io.StringIO("a\nb"), 5)) == ["a\n", "b"]


def test_head_lines_zero_still_gives_first_line():
    assert list(head_lines(io.StringIO("a\nb\n"), 0)) == ["a\n"]


def test_head_lines_empty_stream():
    assert list(head_lines(io.StringIO(""), 3)) == []


def test_head_file_header_and_stripped_lines(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"one\r\ntwo\nthree\n")
    assert list(head_file(str(path), 2)) == [f"==> {path} <==", "one", "two"]


def test_head_file_zero_gives_header_only(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("x\n")
    assert list(head_file(str(path), 0)) == [f"==> {path} <=="]


def test_head_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(head_file(str(tmp_path / "missing"), 1))


def test_main_default_count(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_text("".join(f"{i}\n" for i in range(12)))
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 11
    assert lines[1:] == [str(i) for i in range(10)]


def test_main_separates_files(tmp_path, capsys):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("x\n")
    b.write_text("y\n")
    assert main(["-n", "1", str(a), str(b)]) == 0
    out = capsys.readouterr().out
    assert out == f"==> {a} <==\nx\n\n==> {b} <==\ny\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope")]) == 1
    assert capsys.readouterr().err.startswith("Error reading file: ")


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\nc\n"))
    assert main(["-n", "2"]) == 0
    assert capsys.readouterr().out == "a\nb\n"


def test_main_rejects_negative_count():
    with pytest.raises(SystemExit) as info:
        main(["-n", "-1"])
    assert info.value.code == 2