"""Stored value representation and strict text-to-number conversions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
import re
from typing import NewType

# Marks a bound field as a signed 64-bit integer.
Int64 = NewType("Int64", int)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class ValueKind(Enum):
    STRING = "string"
    INT = "int"
    INT64 = "int64"
    FLOAT = "float"


Scalar = str | int | float


@dataclass(frozen=True)
class ConfigValue:
    """A stored entry: the raw payload tagged with its kind."""

    kind: ValueKind
    data: Scalar

    @classmethod
    def of(cls, obj: Scalar) -> "ConfigValue":
        # bool is an int subclass but never a config scalar.
        if isinstance(obj, bool):
            raise TypeError("bool values are not supported")
        if isinstance(obj, str):
            return cls(ValueKind.STRING, obj)
        if isinstance(obj, int):
            if not INT64_MIN <= obj <= INT64_MAX:
                raise ValueError(f"integer {obj} does not fit in 64 bits")
            return cls(ValueKind.INT, obj)
        if isinstance(obj, float):
            return cls(ValueKind.FLOAT, obj)
        raise TypeError(f"unsupported value type {type(obj).__name__}")

    def text(self) -> str:
        """Render the payload the way it would appear in a file."""

        if self.kind is ValueKind.STRING:
            return str(self.data)
        if self.kind is ValueKind.FLOAT:
            return _format_float(float(self.data))
        return str(self.data)

    def as_string(self) -> str:
        if self.kind is not ValueKind.STRING:
            raise TypeError(f"stored value is {self.kind.value}")
        return str(self.data)

    def as_int(self) -> int:
        if self.kind in (ValueKind.INT, ValueKind.INT64):
            return int(self.data)
        if self.kind is ValueKind.STRING:
            return parse_int(str(self.data))
        raise ValueError(f"stored value is {self.kind.value}")

    def as_int64(self) -> int:
        return _check_int64(self.as_int())

    def as_float(self) -> float:
        if self.kind is ValueKind.FLOAT:
            return float(self.data)
        if self.kind in (ValueKind.INT, ValueKind.INT64):
            return float(self.data)
        return parse_float(str(self.data))


def parse_int(text: str) -> int:
    """Parse a signed decimal integer with no surrounding whitespace."""

    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer syntax {text!r}")
    return int(text)


def parse_int64(text: str) -> int:
    return _check_int64(parse_int(text))


def parse_float(text: str) -> float:
    """Parse a decimal or scientific float, or inf/infinity/nan."""

    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid float syntax {text!r}")
    value = float(text)
    if math.isinf(value) and not text.lstrip("+-")[:1].isalpha():
        raise ValueError(f"float {text!r} out of range")
    return value


def _check_int64(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer {value} out of int64 range")
    return value


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return repr(value)
