import pytest

from inistruct.errors import FileAccessError
from inistruct.parser import RawEntry, SectionHeader, parse_text, read_source


def test_parse_text_trims_key_and_value() -> None:
    items = list(parse_text("  HOST =  localhost  \nURL = http://x/?a=b\n"))
    assert items == [
        RawEntry(key="HOST", value="localhost", lineno=1),
        RawEntry(key="URL", value="http://x/?a=b", lineno=2),
    ]


def test_parse_text_skips_blank_comment_and_malformed_lines() -> None:
    text = "\n   \n# comment=1\n  ; other=2\nno separator here\n = orphan\n[]\nKEY=1\n"
    assert list(parse_text(text)) == [RawEntry(key="KEY", value="1", lineno=8)]


def test_parse_text_keeps_empty_values() -> None:
    assert list(parse_text("EMPTY =\n")) == [RawEntry(key="EMPTY", value="", lineno=1)]


def test_parse_text_section_headers() -> None:
    items = list(parse_text("a=1\n [abc] \nb=2\n[ spaced ]\n"))
    assert items == [
        RawEntry(key="a", value="1", lineno=1),
        SectionHeader(name="abc", lineno=2),
        RawEntry(key="b", value="2", lineno=3),
        SectionHeader(name=" spaced ", lineno=4),
    ]


def test_parse_text_handles_crlf() -> None:
    items = list(parse_text("A=1\r\nB=2\r\n"))
    assert [(item.key, item.value) for item in items] == [("A", "1"), ("B", "2")]


def test_read_source_strips_bom_once(tmp_path) -> None:
    path = tmp_path / "bom.conf"
    path.write_bytes(b"\xef\xbb\xbfHOST=localhost\n")
    text = read_source(path)
    assert text == "HOST=localhost\n"
    assert list(parse_text(text)) == [RawEntry(key="HOST", value="localhost", lineno=1)]


def test_read_source_short_file(tmp_path) -> None:
    path = tmp_path / "short.conf"
    path.write_bytes(b"a=")
    assert read_source(path) == "a="


def test_read_source_missing_file(tmp_path) -> None:
    with pytest.raises(FileAccessError) as excinfo:
        read_source(tmp_path / "missing.conf")
    assert isinstance(excinfo.value, OSError)
    assert "missing.conf" in str(excinfo.value)


def test_read_source_rejects_invalid_utf8(tmp_path) -> None:
    path = tmp_path / "latin.conf"
    path.write_bytes(b"NAME=\xff\xfe\n")
    with pytest.raises(FileAccessError):
        read_source(path)
