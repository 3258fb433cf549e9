"""Tests for luasv_core.values."""

from luasv_core.values import (
    Nil,
    VBool,
    VDict,
    VList,
    VNumber,
    VText,
    _Nil,
    format_number,
)


class TestNil:
    def test_singleton(self):
        assert Nil is _Nil()

    def test_falsy(self):
        assert not Nil

    def test_repr(self):
        assert repr(Nil) == "Nil"
        assert str(Nil) == "nil"


class TestToPython:
    def test_scalars(self):
        assert Nil.to_python() is None
        assert VBool(True).to_python() is True
        assert VText("hi").to_python() == "hi"

    def test_integral_number_becomes_int(self):
        v = VNumber(42.0).to_python()
        assert v == 42
        assert isinstance(v, int)

    def test_fractional_number_stays_float(self):
        assert VNumber(42.5).to_python() == 42.5

    def test_nested(self):
        v = VDict({"a": VList([VNumber(1.0), Nil]), "b": VDict({})})
        assert v.to_python() == {"a": [1, None], "b": {}}


def test_str_forms():
    assert str(VNumber(3.0)) == "3"
    assert str(VNumber(-0.5)) == "-0.5"
    assert str(VBool(False)) == "false"
    assert str(VList([VText("a"), VNumber(2.0)])) == "[a, 2]"


def test_format_number():
    assert format_number(1.0) == "1"
    assert format_number(2.5) == "2.5"
    assert format_number(-3.0) == "-3"


def test_format_number_non_finite():
    assert format_number(float("inf")) == "inf"
    assert format_number(float("-inf")) == "-inf"


def test_huge_number_to_python_and_json():
    from luasv_core import parse, to_json

    v = parse("x = " + "9" * 400)
    assert v.to_python() == {"x": float("inf")}
    assert to_json(v, indent=None) == '{"x": Infinity}'
