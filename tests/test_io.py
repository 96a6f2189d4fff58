from __future__ import annotations

from tools.atclause import io


def test_read_lines_drops_terminators(tmp_path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"one\ntwo\r\nthree\rfour")
    assert io.read_lines(path) == ["one", "two", "three", "four"]


def test_read_lines_trailing_newline_and_blank_lines(tmp_path):
    path = tmp_path / "a.txt"
    path.write_bytes(b"one\n\n")
    assert io.read_lines(path) == ["one", ""]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert io.read_lines(path) == []


def test_write_lines_terminates_every_line(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("stale content that is longer than the new one\n", encoding="utf-8")
    io.write_lines(path, ["a", "b"])
    assert path.read_bytes() == b"a\nb\n"
