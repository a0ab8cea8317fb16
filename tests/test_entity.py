"""Test entity addressing and entity-keyed settings."""

from __future__ import annotations

import pytest

from gridframe.data_structures import Position, Shape
from gridframe.entity import Entity, EntityMap


def test_entity_kinds() -> None:
    """Entities are built for the grid, rows, columns and cells."""
    assert Entity.grid().is_global
    assert Entity.of_cell(1, 2).is_cell
    assert Entity.of_row(1) == Entity(row=1)
    assert Entity.of_column(3) != Entity.of_row(3)
    assert repr(Entity.of_column(3)) == "Entity.of_column(3)"
    assert len({Entity.of_cell(0, 0), Entity(0, 0)}) == 1


def test_entity_type_check() -> None:
    """Entity indices must be integers."""
    with pytest.raises(TypeError):
        Entity(row="1")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Entity(col=1.5)  # type: ignore[arg-type]


def test_entity_iter() -> None:
    """Entities list the positions they cover in a grid."""
    shape = Shape(2, 3)
    assert list(Entity.grid().iter(shape)) == [
        Position(0, 0),
        Position(0, 1),
        Position(0, 2),
        Position(1, 0),
        Position(1, 1),
        Position(1, 2),
    ]
    assert list(Entity.of_row(1).iter(shape)) == [(1, 0), (1, 1), (1, 2)]
    assert list(Entity.of_column(2).iter(shape)) == [(0, 2), (1, 2)]
    assert list(Entity.of_cell(5, 5).iter(shape)) == [(5, 5)]
    assert list(Entity.grid().iter(Shape(0, 3))) == []


def test_entity_map_precedence() -> None:
    """Cell values beat column values, which beat row values."""
    em: EntityMap[int] = EntityMap(0)
    assert em.is_empty()
    em.set(Entity.of_row(1), 1)
    em.set(Entity.of_column(1), 2)
    em.set(Entity.of_cell(2, 2), 3)

    assert em.get((0, 0)) == 0
    assert em.get((1, 0)) == 1
    assert em.get((0, 1)) == 2
    assert em.get((2, 2)) == 3
    # The column was set after the row, so it wins where they cross
    assert em.get((1, 1)) == 2


def test_entity_map_later_row_wins() -> None:
    """Setting a row after a column writes the crossing cell."""
    em: EntityMap[str] = EntityMap("")
    em.set(Entity.of_column(0), "col")
    em.set(Entity.of_row(0), "row")
    assert em.get((0, 0)) == "row"
    assert em.get((1, 0)) == "col"


def test_entity_map_invalidate() -> None:
    """Setting a row clears cell values on it, and setting the grid clears all."""
    em: EntityMap[int] = EntityMap(0)
    em.set(Entity.of_cell(0, 0), 5)
    em.set(Entity.of_row(0), 6)
    assert em.get((0, 0)) == 6

    em.set(Entity.grid(), 7)
    assert em.is_empty()
    assert em.get((0, 0)) == 7
