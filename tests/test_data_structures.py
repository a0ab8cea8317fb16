"""Test the grid's basic data structures."""

from __future__ import annotations

import pytest

from gridframe.data_structures import DiInt, Position, Shape


def test_position_shift() -> None:
    """Positions can be offset by rows and columns."""
    assert Position(1, 2).shift(rows=1) == Position(2, 2)
    assert Position(1, 2).shift(cols=-2) == Position(1, 0)


def test_shape_contains() -> None:
    """Shapes report which positions fall inside them."""
    shape = Shape(2, 3)
    assert (0, 0) in shape
    assert Position(1, 2) in shape
    assert (2, 0) not in shape
    assert (0, 3) not in shape
    assert (-1, 0) not in shape
    assert "ab" not in shape
    assert (0, 0) not in Shape(0, 0)


def test_diint_coerce() -> None:
    """Single values are spread over all four sides."""
    assert DiInt.coerce(2) == DiInt(2, 2, 2, 2)
    assert DiInt.coerce((1, 2, 3, 4)) == DiInt(1, 2, 3, 4)
    assert DiInt(1, 2, 3, 4).horizontal == 6
    assert DiInt(1, 2, 3, 4).vertical == 4


def test_diint_coerce_negative() -> None:
    """Negative padding is rejected."""
    with pytest.raises(ValueError):
        DiInt.coerce(-1)
    with pytest.raises(ValueError):
        DiInt.coerce(DiInt(0, 1, -1, 0))
