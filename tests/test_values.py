"""Tests for result_line.values."""

import math

import pytest

from result_line.values import (
    Boolean,
    Character,
    Empty,
    Float,
    Integer,
    Named,
    NamedItem,
    Text,
    _EmptyType,
    is_scalar,
    to_result_value,
)


class TestEmpty:
    def test_singleton(self):
        assert Empty is _EmptyType()

    def test_falsy(self):
        assert not Empty

    def test_repr(self):
        assert repr(Empty) == "Empty"

    def test_str(self):
        assert str(Empty) == ""

    def test_is_empty(self):
        assert Empty.is_empty()
        assert not Integer(0).is_empty()
        assert not Text("").is_empty()


class TestScalars:
    def test_integer(self):
        assert str(Integer(-123423904)) == "-123423904"

    def test_float(self):
        assert str(Float(8123.23)) == "8123.23"

    def test_float_integral(self):
        assert str(Float(100.0)) == "100"

    def test_float_special(self):
        assert str(Float(math.inf)) == "inf"
        assert str(Float(-math.inf)) == "-inf"
        assert str(Float(math.nan)) == "NaN"

    def test_boolean(self):
        assert str(Boolean(True)) == "true"
        assert str(Boolean(False)) == "false"

    def test_character(self):
        assert str(Character("x")) == "x"

    def test_character_rejects_long_text(self):
        with pytest.raises(ValueError):
            Character("xy")

    def test_text(self):
        assert str(Text("some value")) == "some value"

    def test_equality_is_typed(self):
        assert Integer(1) != Float(1.0)
        assert Integer(1) != Boolean(True)
        assert Text("a") != Character("a")

    def test_is_scalar(self):
        assert is_scalar(Text("a"))
        assert is_scalar(Character("a"))
        assert not is_scalar(Empty)
        assert not is_scalar(Named(NamedItem("a", 1)))
        assert not is_scalar("a")


# ---------------------------------------------------------------------------
# NamedItem / Named
# ---------------------------------------------------------------------------

class TestNamedItem:
    def test_plain(self):
        assert str(NamedItem("a", 1)) == "a=1"

    def test_quotes_key_with_whitespace(self):
        assert str(NamedItem("a key", 12315)) == '"a key"=12315'

    def test_quotes_value_with_whitespace(self):
        assert str(NamedItem("a", "hello world")) == 'a="hello world"'

    def test_tab_is_whitespace(self):
        assert str(NamedItem("a", "x\ty")) == 'a="x\ty"'

    def test_converts_natives(self):
        item = NamedItem("d", True)
        assert item.name == Text("d")
        assert item.value == Boolean(True)

    def test_default_value_is_empty(self):
        assert NamedItem("a").value is Empty

    def test_empty_value_renders_blank(self):
        assert str(NamedItem("a", None)) == "a="

    def test_rejects_named_key(self):
        with pytest.raises(ValueError):
            NamedItem(Named(NamedItem("a", 1)), 2)

    def test_rejects_empty_key(self):
        with pytest.raises(ValueError):
            NamedItem(Empty, 2)

    def test_named_wrapper(self):
        named = Named(NamedItem("x", 2.5))
        assert named.key == Text("x")
        assert named.value == Float(2.5)
        assert str(named) == "x=2.5"
        assert not named.is_empty()


# ---------------------------------------------------------------------------
# to_result_value
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "native, expected",
    [
        (True, Boolean(True)),
        (0, Integer(0)),
        (2**64, Integer(2**64)),
        (-7, Integer(-7)),
        (1.5, Float(1.5)),
        ("abc", Text("abc")),
        (None, Empty),
        (Character("c"), Character("c")),
    ],
)
def test_to_result_value(native, expected):
    assert to_result_value(native) == expected


def test_to_result_value_bool_is_not_integer():
    assert isinstance(to_result_value(False), Boolean)


def test_to_result_value_rejects_other_types():
    with pytest.raises(TypeError):
        to_result_value([1, 2])
