import io

import pytest

from rutils.cp import CopyError, CopyOptions, copy, main


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "src.txt"
    path.write_bytes(b"payload\x00\xff")
    return path


def test_copy_creates_target(source, tmp_path):
    dst = tmp_path / "dst.txt"
    assert copy(str(source), str(dst)) == str(dst)
    assert dst.read_bytes() == source.read_bytes()


def test_copy_into_directory(source, tmp_path):
    folder = tmp_path / "out"
    folder.mkdir()
    result = copy(str(source), str(folder))
    assert result == f"{folder}/src.txt"
    assert (folder / "src.txt").read_bytes() == source.read_bytes()


def test_copy_verbose(source, tmp_path):
    dst = tmp_path / "dst.txt"
    out = io.StringIO()
    copy(str(source), str(dst), CopyOptions(verbose=True), stdout=out)
    assert out.getvalue() == f"{source} -> {dst}\n"


def test_copy_missing_source(tmp_path):
    missing = str(tmp_path / "missing")
    with pytest.raises(CopyError) as info:
        copy(missing, str(tmp_path / "dst"))
    assert info.value.status == 1
    assert info.value.message == f"rcp: {missing}: No such file or directory"


def test_copy_directory_source(tmp_path):
    with pytest.raises(CopyError) as info:
        copy(str(tmp_path), str(tmp_path / "dst"))
    assert info.value.message == f"rcp: {tmp_path}: Is a directory"


def test_copy_identical(source, tmp_path):
    with pytest.raises(CopyError) as info:
        copy(str(source), str(tmp_path))
    assert info.value.status == 1
    assert "are identical (not copied)." in info.value.message


def test_copy_no_clobber(source, tmp_path):
    dst = tmp_path / "dst.txt"
    dst.write_text("keep")
    with pytest.raises(CopyError) as info:
        copy(str(source), str(dst), CopyOptions(no_clobber=True))
    assert info.value.status == 2
    assert info.value.message == f"{dst} not overwritten"
    assert dst.read_text() == "keep"


def test_copy_interactive_declined(source, tmp_path):
    dst = tmp_path / "dst.txt"
    dst.write_text("keep")
    err = io.StringIO()
    with pytest.raises(CopyError) as info:
        copy(str(source), str(dst), CopyOptions(interactive=True),
             stdin=io.StringIO("n\n"), stderr=err)
    assert info.value.status == 2
    assert err.getvalue() == f"overwrite {dst}? (y/n [n]) not overwritten\n"
    assert dst.read_text() == "keep"


def test_copy_interactive_accepted(source, tmp_path):
    dst = tmp_path / "dst.txt"
    dst.write_text("old")
    copy(str(source), str(dst), CopyOptions(interactive=True),
         stdin=io.StringIO("y\n"), stderr=io.StringIO())
    assert dst.read_bytes() == source.read_bytes()


def test_copy_overwrites_by_default(source, tmp_path):
    dst = tmp_path / "dst.txt"
    dst.write_text("old")
    copy(str(source), str(dst), CopyOptions(force=True))
    assert dst.read_bytes() == source.read_bytes()


def test_main_success_and_no_clobber(source, tmp_path, capsys):
    dst = tmp_path / "dst.txt"
    assert main([str(source), str(dst)]) == 0
    assert main(["-n", str(source), str(dst)]) == 2
    assert capsys.readouterr().err == f"{dst} not overwritten\n"