"""Estimate the widths of columns and heights of rows in a grid.

Estimation happens in two passes. Every visible cell is measured first; cells
without a span widen their own column or row directly, while spanned cells are
set aside. Once the number of rows is known, the spanned cells are reconciled,
smallest span first, by spreading any shortfall across the columns or rows they
cover.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from gridframe.data_structures import Position, Shape
from gridframe.records import iter_grid_rows
from gridframe.utils import string_dimension

if TYPE_CHECKING:
    from collections.abc import Callable

    from gridframe.config import GridConfig
    from gridframe.records import Records

log = logging.getLogger(__name__)


class CellSize(NamedTuple):
    """The padded size of a cell."""

    pos: Position
    width: int
    height: int


class _Pending(NamedTuple):
    """A spanned cell awaiting reconciliation."""

    span: int
    pos: Position
    size: int


def measure(records: Records, cfg: GridConfig) -> tuple[Shape, list[CellSize]]:
    """Measure every cell of some records, including padding.

    Returns:
        The shape of the grid and a size for every cell, in row-major order

    """
    cells = []
    count_rows = 0
    for row, texts in enumerate(iter_grid_rows(records)):
        count_rows += 1
        for col, text in enumerate(texts):
            pos = Position(row, col)
            lines, width = string_dimension(text)
            pad = cfg.get_padding(pos)
            cells.append(CellSize(pos, width + pad.horizontal, lines + pad.vertical))
    return Shape(count_rows, records.count_columns()), cells


def inc_range(sizes: list[int], amount: int, start: int, end: int) -> None:
    """Spread ``amount`` over ``sizes[start:end]``.

    Each entry grows by an equal share, and the first also takes the remainder.
    """
    if not sizes or end <= start:
        return
    one, rest = divmod(amount, end - start)
    for i in range(start, end):
        sizes[i] += one
    sizes[start] += rest


def _reconcile(
    pending: list[_Pending],
    sizes: list[int],
    axis: Callable[[Position], int],
    has_border: Callable[[int], bool],
    kind: str,
) -> None:
    for span, pos, needed in sorted(pending):
        start = axis(pos)
        end = start + span
        borders = sum(1 for i in range(start + 1, end) if has_border(i))
        available = sum(sizes[start:end]) + borders
        if available < needed:
            log.debug(
                "Widening %ss %d-%d by %d for spanned cell %s",
                kind,
                start,
                end - 1,
                needed - available,
                pos,
            )
            inc_range(sizes, needed - available, start, end)


def _fold_widths(cfg: GridConfig, shape: Shape, cells: list[CellSize]) -> list[int]:
    widths = [0] * shape.cols
    pending = []
    for pos, width, _height in cells:
        if not cfg.is_cell_visible(pos, shape):
            continue
        span = cfg.get_column_span(pos, shape)
        if span is not None and span > 1:
            pending.append(_Pending(span, pos, width))
        else:
            widths[pos.col] = max(widths[pos.col], width)
    _reconcile(
        pending,
        widths,
        lambda pos: pos.col,
        lambda col: cfg.has_vertical(col, shape.cols),
        "column",
    )
    return widths


def _fold_heights(cfg: GridConfig, shape: Shape, cells: list[CellSize]) -> list[int]:
    heights = [0] * shape.rows
    pending = []
    for pos, _width, height in cells:
        if not cfg.is_cell_visible(pos, shape):
            continue
        span = cfg.get_row_span(pos, shape)
        if span is not None and span > 1:
            pending.append(_Pending(span, pos, height))
        else:
            heights[pos.row] = max(heights[pos.row], height)
    _reconcile(
        pending,
        heights,
        lambda pos: pos.row,
        lambda row: cfg.has_horizontal(row, shape.rows),
        "row",
    )
    return heights


def estimate_widths(records: Records, cfg: GridConfig) -> list[int]:
    """Calculate the width of every column."""
    shape, cells = measure(records, cfg)
    return _fold_widths(cfg, shape, cells)


def estimate_heights(records: Records, cfg: GridConfig) -> list[int]:
    """Calculate the height of every row."""
    shape, cells = measure(records, cfg)
    return _fold_heights(cfg, shape, cells)


def dimensions(records: Records, cfg: GridConfig) -> tuple[list[int], list[int]]:
    """Calculate the widths of the columns and heights of the rows of a grid.

    Args:
        records: The cell text of the grid
        cfg: The grid configuration providing spans, padding and borders

    Returns:
        A tuple of the column widths and the row heights

    """
    shape, cells = measure(records, cfg)
    return _fold_widths(cfg, shape, cells), _fold_heights(cfg, shape, cells)


def total_width(cfg: GridConfig, widths: list[int]) -> int:
    """Calculate the full width of a grid, including its vertical borders."""
    return sum(widths) + cfg.count_vertical(len(widths))


def total_height(cfg: GridConfig, heights: list[int]) -> int:
    """Calculate the full height of a grid, including its horizontal borders."""
    return sum(heights) + cfg.count_horizontal(len(heights))


class SpannedGridDimension:
    """Column widths and row heights estimated for a grid with spanned cells."""

    def __init__(self) -> None:
        """Create an empty set of dimensions; call :meth:`estimate` to fill it."""
        self.width: list[int] = []
        self.height: list[int] = []

    def estimate(self, records: Records, cfg: GridConfig) -> None:
        """Estimate the dimensions of a grid, replacing any previous estimate."""
        self.width, self.height = dimensions(records, cfg)

    def get_width(self, col: int) -> int:
        """Return the width of a column.

        Raises:
            IndexError: If the column was not part of the last estimate

        """
        return self.width[col]

    def get_height(self, row: int) -> int:
        """Return the height of a row.

        Raises:
            IndexError: If the row was not part of the last estimate

        """
        return self.height[row]

    def get_values(self) -> tuple[list[int], list[int]]:
        """Return the column widths and row heights."""
        return self.width, self.height
