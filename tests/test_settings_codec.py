from __future__ import annotations

from pathlib import Path

from flatkv.settings import codec


def test_parse_lines_rules() -> None:
    text = "a=1\nbadline\nb=2=3\nempty=\n=nokey\n\nspaced = x \r\n"
    data, skipped = codec.parse_lines(text)

    assert data == {"a": "1", "b": "2=3", "": "nokey", "spaced ": " x \r"}
    # "badline" and "empty=" (blank lines are not counted).
    assert skipped == 2


def test_parse_lines_without_trailing_newline() -> None:
    data, skipped = codec.parse_lines("a=1\nb=2")
    assert data == {"a": "1", "b": "2"}
    assert skipped == 0


def test_format_lines() -> None:
    assert codec.format_lines({"a": "1", "b": "x=y"}) == "a=1\nb=x=y\n"
    assert codec.format_lines({}) == ""


def test_non_utf8_bytes_survive_read_write(tmp_path: Path) -> None:
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    raw = b"name=caf\xe9\n"
    src.write_bytes(raw)

    data, _ = codec.parse_lines(codec.read_text(src))
    codec.write_text(dst, codec.format_lines(data))
    assert dst.read_bytes() == raw
