import math

import pytest

from isismock.fromstring import ArgType, ConversionError, from_string


def test_descriptions_match_help_text():
    assert ArgType.INT.description() == "<int>"
    assert ArgType.STRING.description() == "<string>"
    assert ArgType.STRING_LIST.description() == "<list of strings>"


def test_string_passes_through():
    assert from_string("xxxx.xxxx.xxxx", ArgType.STRING) == "xxxx.xxxx.xxxx"


@pytest.mark.parametrize(
    "text, kind, expected",
    [
        ("42", ArgType.INT, 42),
        ("+42", ArgType.INT, 42),
        ("-42", ArgType.INT, -42),
        ("127", ArgType.SIGNED_CHAR, 127),
        ("-128", ArgType.SIGNED_CHAR, -128),
        ("255", ArgType.UNSIGNED_CHAR, 255),
        ("+7", ArgType.UNSIGNED_INT, 7),
        ("65535", ArgType.UNSIGNED_SHORT, 65535),
        ("-32768", ArgType.SHORT, -32768),
        ("9223372036854775807", ArgType.LONG_LONG, 9223372036854775807),
        ("18446744073709551615", ArgType.UNSIGNED_LONG, 18446744073709551615),
    ],
)
def test_integers_in_range(text, kind, expected):
    assert from_string(text, kind) == expected


@pytest.mark.parametrize(
    "text, kind",
    [
        ("", ArgType.INT),
        ("+", ArgType.INT),
        ("-", ArgType.INT),
        ("12a", ArgType.INT),
        (" 12", ArgType.INT),
        ("1_0", ArgType.INT),
        ("-+5", ArgType.INT),
        ("128", ArgType.SIGNED_CHAR),
        ("-129", ArgType.SIGNED_CHAR),
        ("256", ArgType.UNSIGNED_CHAR),
        ("-1", ArgType.UNSIGNED_INT),
        ("2147483648", ArgType.INT),
        ("18446744073709551616", ArgType.UNSIGNED_LONG_LONG),
    ],
)
def test_integers_rejected(text, kind):
    with pytest.raises(ConversionError):
        from_string(text, kind)


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        from_string("x", ArgType.INT)


@pytest.mark.parametrize("text, expected", [("true", True), ("false", False), ("1", True), ("0", False)])
def test_bool(text, expected):
    assert from_string(text, ArgType.BOOL) is expected


@pytest.mark.parametrize("text", ["2", "-1", "yes", "True", ""])
def test_bool_rejected(text):
    with pytest.raises(ConversionError):
        from_string(text, ArgType.BOOL)


def test_char():
    assert from_string("x", ArgType.CHAR) == "x"
    with pytest.raises(ConversionError):
        from_string("xy", ArgType.CHAR)
    with pytest.raises(ConversionError):
        from_string("", ArgType.CHAR)


@pytest.mark.parametrize("text, expected", [("1.5", 1.5), ("-2.25", -2.25), ("1e3", 1e3), (".5", 0.5)])
def test_double(text, expected):
    assert from_string(text, ArgType.DOUBLE) == expected
    assert from_string(text, ArgType.LONG_DOUBLE) == expected


def test_float_rounds_to_single_precision():
    assert from_string("0.5", ArgType.FLOAT) == 0.5
    value = from_string("0.1", ArgType.FLOAT)
    assert value != 0.1
    assert abs(value - 0.1) < 1e-7


def test_infinity_and_nan():
    assert math.isinf(from_string("inf", ArgType.DOUBLE))
    assert from_string("-inf", ArgType.FLOAT) < 0
    assert math.isnan(from_string("nan", ArgType.DOUBLE))


def test_hex_float():
    assert from_string("0x10", ArgType.DOUBLE) == 16.0


def test_list_of_strings_is_not_a_single_word_type():
    with pytest.raises(TypeError):
        from_string("a b", ArgType.STRING_LIST)