import math

import pytest

from inistruct.values import ConfigValue, ValueKind, parse_float, parse_int, parse_int64


def test_parse_int_accepts_signed_decimal() -> None:
    assert parse_int("1984") == 1984
    assert parse_int("+7") == 7
    assert parse_int("-12") == -12


@pytest.mark.parametrize("text", ["", " 1", "1_000", "0x10", "1.0", "abc"])
def test_parse_int_rejects_other_syntax(text: str) -> None:
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_int64_range() -> None:
    assert parse_int64("9223372036854775807") == 2**63 - 1
    assert parse_int64("-9223372036854775808") == -(2**63)
    with pytest.raises(ValueError):
        parse_int64("9223372036854775808")


def test_parse_float() -> None:
    assert parse_float("1.1") == 1.1
    assert parse_float("1e3") == 1000.0
    assert parse_float(".5") == 0.5
    assert parse_float("-Inf") == -math.inf
    assert math.isnan(parse_float("NaN"))
    for text in ["", "1,5", "1e", " 1.0", "1e999"]:
        with pytest.raises(ValueError):
            parse_float(text)


def test_config_value_of() -> None:
    assert ConfigValue.of("x").kind is ValueKind.STRING
    assert ConfigValue.of(3).kind is ValueKind.INT
    assert ConfigValue.of(2.5).kind is ValueKind.FLOAT
    with pytest.raises(TypeError):
        ConfigValue.of(True)
    with pytest.raises(TypeError):
        ConfigValue.of([1])
    with pytest.raises(ValueError):
        ConfigValue.of(2**64)


def test_config_value_coercion() -> None:
    number = ConfigValue.of(42)
    assert number.as_int() == 42
    assert number.as_int64() == 42
    assert number.as_float() == 42.0
    with pytest.raises(TypeError):
        number.as_string()

    ratio = ConfigValue.of(0.25)
    assert ratio.as_float() == 0.25
    with pytest.raises(ValueError):
        ratio.as_int()

    assert ConfigValue.of("1984").as_int() == 1984
    assert ConfigValue.of("1.5").as_float() == 1.5


def test_config_value_text() -> None:
    assert ConfigValue.of("a b").text() == "a b"
    assert ConfigValue.of(-3).text() == "-3"
    assert ConfigValue.of(1.5).text() == "1.5"
