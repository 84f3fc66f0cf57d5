"""Error types raised by configuration parsing, lookups and binding."""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for every inistruct error."""


class LookupFailure(ConfigError):
    """A key lookup or coercion failed.

    The ``*_default`` accessors catch exactly this family and substitute the
    caller's default.
    """

    reason = "lookup failed"

    def __init__(self, key: str, section: str | None = None, detail: str | None = None) -> None:
        self.key = key
        self.section = section
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f" in section {self.section!r}" if self.section is not None else ""
        message = f"{self.reason}: {self.key!r}{where}"
        if self.detail:
            message = f"{message} ({self.detail})"
        return message

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self._describe()


class NotFoundError(LookupFailure, KeyError):
    reason = "not found"


class NotStringError(LookupFailure, TypeError):
    reason = "not string"


class NotIntError(LookupFailure, ValueError):
    reason = "not int"


class NotInt64Error(LookupFailure, ValueError):
    reason = "not int64"


class NotFloatError(LookupFailure, ValueError):
    reason = "not float"


class FileAccessError(ConfigError, OSError):
    """The configuration source could not be opened, read or decoded."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"cannot read {path}: {detail}")

    def __str__(self) -> str:
        return self.args[0]


class SchemaError(ConfigError, ValueError):
    """A bind target declares a default literal that does not fit its field type."""

    def __init__(self, field_name: str, literal: str, detail: str) -> None:
        self.field_name = field_name
        self.literal = literal
        super().__init__(f"invalid default {literal!r} for field {field_name!r}: {detail}")
