import pytest
from .. import InvalidDimension, InvalidMenuChoice, InvalidTriangle, MalformedInput, ShapeError

pytestmark = pytest.mark.group_validation


def test_construction_errors_share_a_base():
    assert issubclass(InvalidDimension, ShapeError)
    assert issubclass(InvalidTriangle, ShapeError)
    assert issubclass(ShapeError, ValueError)


def test_input_errors_are_not_shape_errors():
    assert not issubclass(InvalidMenuChoice, ShapeError)
    assert not issubclass(MalformedInput, ShapeError)


def test_invalid_dimension_fields():
    err = InvalidDimension("width", -2.0)
    assert (err.name, err.value) == ("width", -2.0)
    assert str(err) == "Width must be greater than zero, got -2.0"


def test_invalid_menu_choice_fields():
    err = InvalidMenuChoice(9)
    assert err.choice == 9
    assert "9" in str(err)


def test_malformed_input_fields():
    err = MalformedInput("x", "whole number")
    assert (err.text, err.expected) == ("x", "whole number")
    assert str(err) == "expected a whole number, got 'x'"
