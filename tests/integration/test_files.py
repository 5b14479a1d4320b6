"""Integration tests for pyutils.files against the real filesystem."""

from pathlib import Path

import pytest

from pyutils.files import file_exists, read_entire_file, write_text_file


def test_write_then_read(tmp_path: Path):
    """A written file reads back unchanged, as str or Path."""
    target = tmp_path / "test.txt"
    assert write_text_file(target, "Hello, File!") is True
    assert read_entire_file(target) == "Hello, File!"
    assert read_entire_file(str(target)) == "Hello, File!"


def test_write_truncates_existing_file(tmp_path: Path):
    """Writing replaces earlier content instead of appending."""
    target = tmp_path / "test.txt"
    write_text_file(target, "a much longer first version")
    write_text_file(target, "short")
    assert read_entire_file(target) == "short"


def test_empty_file_reads_as_empty_string(tmp_path: Path):
    """An empty file is a successful read of ''."""
    target = tmp_path / "empty.txt"
    target.touch()
    assert read_entire_file(target) == ""


def test_missing_file_reads_as_none(tmp_path: Path):
    """An unopenable path is reported by value, not raised."""
    assert read_entire_file(tmp_path / "nope.txt") is None
    assert read_entire_file(tmp_path) is None


@pytest.mark.parametrize("name", ["missing-dir/out.txt", "."])
def test_unwritable_path_returns_false(tmp_path: Path, name: str):
    """A missing parent directory or a directory target fails cleanly."""
    assert write_text_file(tmp_path / name, "x") is False


def test_newlines_are_not_translated(tmp_path: Path):
    """CRLF and lone CR survive both directions byte for byte."""
    target = tmp_path / "crlf.txt"
    assert write_text_file(target, "one\r\ntwo\rthree\n")
    assert target.read_bytes() == b"one\r\ntwo\rthree\n"
    assert read_entire_file(target) == "one\r\ntwo\rthree\n"


def test_utf8_content(tmp_path: Path):
    """Text is stored as UTF-8."""
    target = tmp_path / "utf8.txt"
    assert write_text_file(target, "naïve café ✓")
    assert target.read_bytes() == "naïve café ✓".encode("utf-8")


def test_invalid_utf8_bytes_round_trip(tmp_path: Path):
    """Undecodable bytes are carried through a read/write cycle unchanged."""
    source, copy = tmp_path / "raw.bin", tmp_path / "copy.bin"
    payload = b"ok \xff\xfe end"
    source.write_bytes(payload)

    content = read_entire_file(source)
    assert content is not None
    assert write_text_file(copy, content)
    assert copy.read_bytes() == payload


def test_file_exists(tmp_path: Path):
    """Existing files and directories count; missing paths do not."""
    target = tmp_path / "present.txt"
    assert file_exists(target) is False
    write_text_file(target, "")
    assert file_exists(target) is True
    assert file_exists(str(target)) is True
    assert file_exists(tmp_path) is True


def test_unencodable_content_leaves_file_untouched(tmp_path: Path):
    """A lone surrogate is refused before the existing file is truncated."""
    target = tmp_path / "keep.txt"
    write_text_file(target, "original")
    assert write_text_file(target, "a\ud800b") is False
    assert target.read_bytes() == b"original"
    assert write_text_file(tmp_path / "new.txt", "\udfff") is False
    assert not (tmp_path / "new.txt").exists()


@pytest.mark.parametrize("name", ["bad\0path", "dir\0/file.txt"])
def test_nul_in_path_is_reported_by_value(tmp_path: Path, name: str):
    """Paths the OS cannot represent read as None, write as False, never exist."""
    for path in (name, str(tmp_path / name)):
        assert read_entire_file(path) is None
        assert write_text_file(path, "x") is False
        assert file_exists(path) is False
