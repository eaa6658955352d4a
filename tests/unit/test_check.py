"""
Unit tests -- value-shape predicates.
"""
import pytest

from d2client.core.check import (
    is_array,
    is_integer,
    is_numeric,
    is_object,
    is_string,
    to_number,
)


@pytest.mark.parametrize("value", [0, 3, -7, 3.0])
def test_integers(value):
    assert is_integer(value)


@pytest.mark.parametrize("value", [3.5, "3", True, None, float("inf"), float("nan")])
def test_not_integers(value):
    assert not is_integer(value)


@pytest.mark.parametrize("value", [1, 2.5, "12", " 4.25 ", "-3"])
def test_numeric(value):
    assert is_numeric(value)


@pytest.mark.parametrize("value", ["abc", "", "+47 123", None, False, [1], float("nan"), "inf"])
def test_not_numeric(value):
    assert not is_numeric(value)


def test_to_number_parses_strings():
    assert to_number("12") == 12.0
    assert to_number("x") is None


def test_array_string_object():
    assert is_array([1, 2]) and is_array((1,))
    assert not is_array("ab")
    assert is_string("ab") and not is_string(b"ab")
    assert is_object({"a": 1}) and not is_object([("a", 1)])
