"""Track cell spans and answer visibility queries over a grid."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridframe.data_structures import Position

if TYPE_CHECKING:
    from gridframe.data_structures import Shape

log = logging.getLogger(__name__)


def _check_span(span: int) -> None:
    if span < 0:
        raise ValueError(f"Span length cannot be negative: {span}")


class GridTopology:
    """The column and row spans declared on a grid.

    A span is stored by the position of the cell it originates from. Queries
    which accept a ``shape`` only consider spans which fit within it; spans
    which overflow the grid are treated as if they were not set. Without a
    shape, every stored span is trusted.
    """

    def __init__(self) -> None:
        """Create an empty span map."""
        self._column_spans: dict[Position, int] = {}
        self._row_spans: dict[Position, int] = {}

    def set_column_span(self, pos: tuple[int, int], span: int) -> None:
        """Declare that the cell at ``pos`` covers ``span`` columns.

        A span of ``0`` is ignored and a span of ``1`` clears any previous span.

        Raises:
            ValueError: If the span is negative

        """
        _check_span(span)
        pos = Position(*pos)
        if span == 0:
            return
        if span == 1:
            self._column_spans.pop(pos, None)
            return
        self._column_spans[pos] = span

    def set_row_span(self, pos: tuple[int, int], span: int) -> None:
        """Declare that the cell at ``pos`` covers ``span`` rows.

        A span of ``0`` is ignored and a span of ``1`` clears any previous span.

        Raises:
            ValueError: If the span is negative

        """
        _check_span(span)
        pos = Position(*pos)
        if span == 0:
            return
        if span == 1:
            self._row_spans.pop(pos, None)
            return
        self._row_spans[pos] = span

    def remove_column_spans(self) -> None:
        """Remove every column span."""
        self._column_spans.clear()

    def remove_row_spans(self) -> None:
        """Remove every row span."""
        self._row_spans.clear()

    def has_column_spans(self) -> bool:
        """Determine if any column span is declared."""
        return bool(self._column_spans)

    def has_row_spans(self) -> bool:
        """Determine if any row span is declared."""
        return bool(self._row_spans)

    def get_column_spans(self) -> dict[Position, int]:
        """Return a copy of the declared column spans."""
        return dict(self._column_spans)

    def get_row_spans(self) -> dict[Position, int]:
        """Return a copy of the declared row spans."""
        return dict(self._row_spans)

    @staticmethod
    def is_column_span_valid(pos: Position, span: int, shape: Shape) -> bool:
        """Determine if a column span fits within a grid."""
        return pos in shape and pos.col + span <= shape.cols

    @staticmethod
    def is_row_span_valid(pos: Position, span: int, shape: Shape) -> bool:
        """Determine if a row span fits within a grid."""
        return pos in shape and pos.row + span <= shape.rows

    def _column_spans_in(self, shape: Shape | None) -> dict[Position, int]:
        if shape is None:
            return self._column_spans
        return {
            pos: span
            for pos, span in self._column_spans.items()
            if self.is_column_span_valid(pos, span, shape)
        }

    def _row_spans_in(self, shape: Shape | None) -> dict[Position, int]:
        if shape is None:
            return self._row_spans
        return {
            pos: span
            for pos, span in self._row_spans.items()
            if self.is_row_span_valid(pos, span, shape)
        }

    def get_column_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> int | None:
        """Return the column span originating at a cell, if a valid one is set.

        Args:
            pos: The position of the cell
            shape: The grid shape against which the span is validated

        Returns:
            The span length, or :const:`None` if no span applies

        """
        pos = Position(*pos)
        span = self._column_spans.get(pos)
        if span is None:
            return None
        if shape is not None and not self.is_column_span_valid(pos, span, shape):
            log.debug("Ignoring column span %d at %s outside %s", span, pos, shape)
            return None
        return span

    def get_row_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> int | None:
        """Return the row span originating at a cell, if a valid one is set.

        Args:
            pos: The position of the cell
            shape: The grid shape against which the span is validated

        Returns:
            The span length, or :const:`None` if no span applies

        """
        pos = Position(*pos)
        span = self._row_spans.get(pos)
        if span is None:
            return None
        if shape is not None and not self.is_row_span_valid(pos, span, shape):
            log.debug("Ignoring row span %d at %s outside %s", span, pos, shape)
            return None
        return span

    def is_cell_covered_by_column_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> bool:
        """Determine if a cell is hidden by a column span to its left."""
        row, col = pos
        return any(
            origin.row == row and origin.col < col < origin.col + span
            for origin, span in self._column_spans_in(shape).items()
        )

    def is_cell_covered_by_row_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> bool:
        """Determine if a cell is hidden by a row span above it."""
        row, col = pos
        return any(
            origin.col == col and origin.row < row < origin.row + span
            for origin, span in self._row_spans_in(shape).items()
        )

    def is_cell_covered_by_both_spans(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> bool:
        """Determine if a cell is hidden diagonally by a cell spanning both ways."""
        column_spans = self._column_spans_in(shape)
        row_spans = self._row_spans_in(shape)
        if not column_spans or not row_spans:
            return False
        row, col = pos
        for origin, row_span in row_spans.items():
            col_span = column_spans.get(origin)
            if (
                col_span is not None
                and origin.row < row < origin.row + row_span
                and origin.col < col < origin.col + col_span
            ):
                return True
        return False

    def is_visible(self, pos: tuple[int, int], shape: Shape | None = None) -> bool:
        """Determine if a cell is rendered, rather than hidden behind a span."""
        return not (
            self.is_cell_covered_by_column_span(pos, shape)
            or self.is_cell_covered_by_row_span(pos, shape)
            or self.is_cell_covered_by_both_spans(pos, shape)
        )
