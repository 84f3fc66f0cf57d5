"""Sectioned key/value store with typed accessors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

from .binder import bind
from .errors import (
    LookupFailure,
    NotFloatError,
    NotFoundError,
    NotInt64Error,
    NotIntError,
    NotStringError,
)
from .parser import RawEntry, SectionHeader, parse_text, read_source
from .values import ConfigValue, Scalar

DEFAULT_SECTION = "_DEFAULT_"

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Config:
    """Parsed configuration data.

    Entries live in named sections. Reads and writes go to the current
    section, which starts as (and after every parse returns to)
    ``DEFAULT_SECTION``.
    """

    def __init__(self, *targets: Any) -> None:
        self.section = DEFAULT_SECTION
        self._sections: list[str] = []
        self._data: dict[str, dict[str, ConfigValue]] = {}
        self.set_section(DEFAULT_SECTION)
        self.bind(*targets)

    @classmethod
    def from_file(cls, path: str | Path, *targets: Any) -> "Config":
        config = cls()
        config.parse(path)
        config.bind(*targets)
        return config

    def parse(self, path: str | Path) -> "Config":
        """Merge the entries of ``path`` into this store."""

        text = read_source(path)
        self.set_section(DEFAULT_SECTION)
        entries = 0
        for item in parse_text(text):
            if isinstance(item, SectionHeader):
                self.set_section(item.name)
            elif isinstance(item, RawEntry):
                self.set(item.key, item.value)
                entries += 1
        self.set_section(DEFAULT_SECTION)
        _logger.debug(
            "config_parsed",
            extra={"path": str(path), "entries": entries, "sections": len(self._sections)},
        )
        return self

    def bind(self, *targets: Any) -> "Config":
        for target in targets:
            bind(self, target)
        return self

    def set_section(self, name: str) -> "Config":
        self.section = name
        if name not in self._data:
            self._sections.append(name)
            self._data[name] = {}
        return self

    def set(self, key: str, value: Scalar) -> "Config":
        self._data[self.section][key] = ConfigValue.of(value)
        return self

    def sections(self) -> list[str]:
        return list(self._sections)

    def has_section(self, name: str) -> bool:
        return name in self._data

    def keys(self, section: str | None = None) -> list[str]:
        return list(self._data.get(self.section if section is None else section, {}))

    def __contains__(self, key: object) -> bool:
        return key in self._data[self.section]

    def __repr__(self) -> str:
        return f"Config(section={self.section!r}, sections={self._sections!r})"

    def _lookup(self, key: str) -> ConfigValue:
        try:
            return self._data[self.section][key]
        except KeyError:
            raise NotFoundError(key, self.section) from None

    def get_string(self, key: str) -> str:
        value = self._lookup(key)
        try:
            return value.as_string()
        except TypeError as exc:
            raise NotStringError(key, self.section, str(exc)) from exc

    def get_int(self, key: str) -> int:
        value = self._lookup(key)
        try:
            return value.as_int()
        except ValueError as exc:
            raise NotIntError(key, self.section, str(exc)) from exc

    def get_int64(self, key: str) -> int:
        value = self._lookup(key)
        try:
            return value.as_int64()
        except ValueError as exc:
            raise NotInt64Error(key, self.section, str(exc)) from exc

    def get_float(self, key: str) -> float:
        value = self._lookup(key)
        try:
            return value.as_float()
        except ValueError as exc:
            raise NotFloatError(key, self.section, str(exc)) from exc

    def get_list(self, key: str, delimiter: str = " ") -> list[str]:
        return self.get_string(key).split(delimiter)

    def get_string_default(self, key: str, default: str) -> str:
        return _or_default(self.get_string, key, default)

    def get_int_default(self, key: str, default: int) -> int:
        return _or_default(self.get_int, key, default)

    def get_int64_default(self, key: str, default: int) -> int:
        return _or_default(self.get_int64, key, default)

    def get_float_default(self, key: str, default: float) -> float:
        return _or_default(self.get_float, key, default)

    def get_list_default(self, key: str, default: list[str], delimiter: str = " ") -> list[str]:
        return _or_default(lambda name: self.get_list(name, delimiter), key, default)

    def search(self, key: str) -> tuple[str, str]:
        """Return ``(value, section)`` for the first section holding ``key``.

        Sections are scanned in the order they were first seen, so the
        default section comes first.
        """

        for name in self._sections:
            value = self._data[name].get(key)
            if value is not None:
                return value.text(), name
        raise NotFoundError(key)


def _or_default(getter: Callable[[str], T], key: str, default: T) -> T:
    try:
        return getter(key)
    except LookupFailure as exc:
        _logger.debug("config_default_used", extra={"key": key, "reason": exc.reason})
        return default


def load(path: str | Path | None, *targets: Any) -> Config:
    """Parse ``path`` (or start empty when it is falsy) and bind ``targets``."""

    if not path:
        return Config(*targets)
    return Config.from_file(path, *targets)
