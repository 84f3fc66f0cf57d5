"""Line-oriented tokenizer for INI-style key/value files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .errors import FileAccessError

UTF8_BOM = b"\xef\xbb\xbf"
COMMENT_PREFIXES = ("#", ";")


@dataclass(frozen=True)
class SectionHeader:
    """A ``[name]`` line."""

    name: str
    lineno: int


@dataclass(frozen=True)
class RawEntry:
    """A trimmed ``key=value`` pair before any type coercion."""

    key: str
    value: str
    lineno: int


Line = SectionHeader | RawEntry


def read_source(path: str | Path) -> str:
    """Read ``path`` as UTF-8, dropping one leading byte-order mark."""

    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise FileAccessError(str(path), exc.strerror or str(exc)) from exc
    if raw.startswith(UTF8_BOM):
        raw = raw[len(UTF8_BOM) :]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FileAccessError(str(path), f"not valid UTF-8 at byte {exc.start}") from exc


def parse_text(text: str) -> Iterator[Line]:
    """Yield section headers and entries from ``text`` in file order.

    Blank lines, ``#``/``;`` comments and lines without ``=`` or with an
    empty key produce nothing. Empty values are kept.
    """

    for lineno, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        if line[0] == "[" and line[-1] == "]" and len(line) > 2:
            yield SectionHeader(name=line[1:-1], lineno=lineno)
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        yield RawEntry(key=key, value=value.strip(), lineno=lineno)
