"""Read INI-style key/value files and bind them onto typed objects."""

from .binder import FieldBinding, bind, field_bindings, setting
from .config import LoggingConfig
from .errors import (
    ConfigError,
    FileAccessError,
    LookupFailure,
    NotFloatError,
    NotFoundError,
    NotInt64Error,
    NotIntError,
    NotStringError,
    SchemaError,
)
from .logging_utils import JsonFormatter, configure_logging
from .parser import RawEntry, SectionHeader, parse_text, read_source
from .store import DEFAULT_SECTION, Config, load
from .values import ConfigValue, Int64, ValueKind, parse_float, parse_int, parse_int64

__all__ = [
    "Config",
    "DEFAULT_SECTION",
    "load",
    "bind",
    "field_bindings",
    "setting",
    "FieldBinding",
    "ConfigValue",
    "Int64",
    "ValueKind",
    "parse_int",
    "parse_int64",
    "parse_float",
    "RawEntry",
    "SectionHeader",
    "parse_text",
    "read_source",
    "ConfigError",
    "LookupFailure",
    "NotFoundError",
    "NotStringError",
    "NotIntError",
    "NotInt64Error",
    "NotFloatError",
    "FileAccessError",
    "SchemaError",
    "LoggingConfig",
    "JsonFormatter",
    "configure_logging",
]
