"""Address groups of cells and store settings against them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from gridframe.data_structures import Position

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gridframe.data_structures import Shape

T = TypeVar("T")


class Entity:
    """A target on the grid: the whole grid, a row, a column or a single cell.

    An entity with neither index set addresses the whole grid; with only a row
    or a column it addresses that row or column; with both it addresses one
    cell.
    """

    __slots__ = ("row", "col")

    def __init__(self, row: int | None = None, col: int | None = None) -> None:
        """Create a new entity.

        Raises:
            TypeError: If an index is given which is not an integer

        """
        for index in (row, col):
            if index is not None and (
                not isinstance(index, int) or isinstance(index, bool)
            ):
                raise TypeError(f"Entity indices must be integers, not {index!r}")
        self.row = row
        self.col = col

    @classmethod
    def grid(cls) -> Entity:
        """Address every cell."""
        return cls()

    @classmethod
    def of_row(cls, row: int) -> Entity:
        """Address every cell of a row."""
        return cls(row=row)

    @classmethod
    def of_column(cls, col: int) -> Entity:
        """Address every cell of a column."""
        return cls(col=col)

    @classmethod
    def of_cell(cls, row: int, col: int) -> Entity:
        """Address a single cell."""
        return cls(row=row, col=col)

    @property
    def is_global(self) -> bool:
        """Whether the entity addresses the whole grid."""
        return self.row is None and self.col is None

    @property
    def is_cell(self) -> bool:
        """Whether the entity addresses a single cell."""
        return self.row is not None and self.col is not None

    def iter(self, shape: Shape) -> Iterator[Position]:
        """Iterate over the positions the entity covers in a grid of a given shape.

        Row and column entities are bounded by the shape; a cell entity always
        yields its own position unless the grid is empty.
        """
        rows, cols = shape
        if rows == 0 or cols == 0:
            return
        if self.row is not None and self.col is not None:
            yield Position(self.row, self.col)
        elif self.row is not None:
            for col in range(cols):
                yield Position(self.row, col)
        elif self.col is not None:
            for row in range(rows):
                yield Position(row, self.col)
        else:
            for row in range(rows):
                for col in range(cols):
                    yield Position(row, col)

    def __eq__(self, other: object) -> bool:
        """Compare entities by the indices they address."""
        if isinstance(other, Entity):
            return (self.row, self.col) == (other.row, other.col)
        return NotImplemented

    def __hash__(self) -> int:
        """Hash the entity by the indices it addresses."""
        return hash((Entity, self.row, self.col))

    def __repr__(self) -> str:
        """Represent the entity as a string."""
        if self.is_global:
            return "Entity.grid()"
        if self.is_cell:
            return f"Entity.of_cell({self.row}, {self.col})"
        if self.row is not None:
            return f"Entity.of_row({self.row})"
        return f"Entity.of_column({self.col})"


class EntityMap(Generic[T]):
    """A value for the whole grid, with overrides for rows, columns and cells.

    Lookups for a cell prefer a cell override, then a column override, then a
    row override, before falling back to the global value.
    """

    def __init__(self, default: T) -> None:
        """Create a map where every cell has the ``default`` value."""
        self.global_value = default
        self.rows: dict[int, T] = {}
        self.columns: dict[int, T] = {}
        self.cells: dict[Position, T] = {}

    def is_empty(self) -> bool:
        """Determine if nothing beyond the global value has been set."""
        return not (self.rows or self.columns or self.cells)

    def set(self, entity: Entity, value: T) -> None:
        """Set the value for an entity.

        Setting a row or column replaces cell overrides on it, and writes cell
        entries where it crosses columns or rows which already have overrides,
        so the most recent setting wins at those crossings. Setting the global
        value clears every override.
        """
        self._invalidate(entity)
        if entity.row is not None and entity.col is not None:
            self.cells[Position(entity.row, entity.col)] = value
        elif entity.row is not None:
            for col in self.columns:
                self.cells[Position(entity.row, col)] = value
            self.rows[entity.row] = value
        elif entity.col is not None:
            for row in self.rows:
                self.cells[Position(row, entity.col)] = value
            self.columns[entity.col] = value
        else:
            self.global_value = value

    def get(self, pos: tuple[int, int]) -> T:
        """Return the value which applies to a cell."""
        if self.is_empty():
            return self.global_value
        row, col = pos
        if (key := Position(row, col)) in self.cells:
            return self.cells[key]
        if col in self.columns:
            return self.columns[col]
        if row in self.rows:
            return self.rows[row]
        return self.global_value

    def _invalidate(self, entity: Entity) -> None:
        if entity.is_global:
            self.cells.clear()
            self.rows.clear()
            self.columns.clear()
        elif entity.is_cell:
            return
        elif entity.row is not None:
            self.cells = {k: v for k, v in self.cells.items() if k.row != entity.row}
        else:
            self.cells = {k: v for k, v in self.cells.items() if k.col != entity.col}
