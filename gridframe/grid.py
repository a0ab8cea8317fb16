"""Render records into a framed grid of formatted text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from prompt_toolkit.formatted_text.utils import to_plain_text

from gridframe.data_structures import Position, Shape
from gridframe.dimension import SpannedGridDimension
from gridframe.records import ListRecords, iter_grid_rows
from gridframe.utils import align_line, text_lines, top_indent

if TYPE_CHECKING:
    from collections.abc import Iterator

    from prompt_toolkit.formatted_text.base import StyleAndTextTuples

    from gridframe.config import GridConfig
    from gridframe.records import Records

log = logging.getLogger(__name__)


class _Block(NamedTuple):
    """The rendered lines of a visible cell, consumed as the grid is drawn."""

    lines: Iterator[StyleAndTextTuples]
    col_span: int
    last_row: int


def join_lines(lines: list[StyleAndTextTuples]) -> StyleAndTextTuples:
    """Join a list of lines of formatted text."""
    ft: StyleAndTextTuples = []
    for i, line in enumerate(lines):
        if i:
            ft.append(("", "\n"))
        ft.extend(line)
    return ft


class Grid:
    """A grid of cells, framed by borders.

    Column widths and row heights come from a :class:`SpannedGridDimension`,
    which is estimated from the records if one is not supplied. A supplied
    dimension must have been estimated from the same records and
    configuration.
    """

    def __init__(
        self,
        records: Records,
        cfg: GridConfig,
        dimension: SpannedGridDimension | None = None,
    ) -> None:
        """Create a new grid.

        Args:
            records: The cell text of the grid
            cfg: The grid configuration
            dimension: Pre-computed column widths and row heights

        """
        self.cfg = cfg
        self.records = ListRecords(
            iter_grid_rows(records), count_columns=records.count_columns()
        )
        if dimension is None:
            dimension = SpannedGridDimension()
            dimension.estimate(self.records, cfg)
        self.dimension = dimension

    @property
    def shape(self) -> Shape:
        """The number of rows and columns in the grid."""
        return Shape(self.records.count_rows(), self.records.count_columns())

    def range_width(self, start: int, end: int) -> int:
        """Calculate the width of columns ``start`` to ``end``, with the borders between."""
        cols = self.shape.cols
        borders = sum(
            1 for col in range(start + 1, end) if self.cfg.has_vertical(col, cols)
        )
        return sum(self.dimension.get_width(col) for col in range(start, end)) + borders

    def range_height(self, start: int, end: int) -> int:
        """Calculate the height of rows ``start`` to ``end``, with the borders between."""
        rows = self.shape.rows
        borders = sum(
            1 for row in range(start + 1, end) if self.cfg.has_horizontal(row, rows)
        )
        return sum(self.dimension.get_height(row) for row in range(start, end)) + borders

    def render_cell(self, pos: Position, width: int, height: int) -> StyleAndTextTuples:
        """Draw the padded and aligned text of a cell as lines of a fixed size."""
        cfg = self.cfg
        pad = cfg.get_padding(pos)
        inner_width = max(width - pad.horizontal, 0)
        inner_height = max(height - pad.vertical, 0)
        text = text_lines(self.records.get_text(pos))
        indent = top_indent(len(text), inner_height, cfg.get_alignment_vertical(pos))
        how = cfg.get_alignment_horizontal(pos)

        blank: StyleAndTextTuples = [("", " " * width)] if width else []
        lines = [blank] * pad.top
        for i in range(inner_height):
            index = i - indent
            content = text[index] if 0 <= index < len(text) else []
            line: StyleAndTextTuples = []
            if pad.left:
                line.append(("", " " * pad.left))
            line.extend(align_line(content, inner_width, how))
            if pad.right:
                line.append(("", " " * pad.right))
            lines.append(line)
        lines.extend([blank] * pad.bottom)
        return lines

    def _open_block(self, pos: Position) -> _Block:
        shape = self.shape
        col_span = self.cfg.get_column_span(pos, shape) or 1
        row_span = self.cfg.get_row_span(pos, shape) or 1
        width = self.range_width(pos.col, pos.col + col_span)
        height = self.range_height(pos.row, pos.row + row_span)
        lines = self.render_cell(pos, width, height)
        return _Block(iter(lines), col_span, pos.row + row_span - 1)

    def _border(self, char: str | None, style: str | None) -> StyleAndTextTuples:
        if char is None:
            return []
        return [(f"class:border {style or ''}".rstrip(), char)]

    def _horizontal_segment(self, pos: Position) -> StyleAndTextTuples:
        """Draw the horizontal border above the cell at ``pos``."""
        cfg = self.cfg
        rows = self.shape.rows
        width = self.dimension.get_width(pos.col)
        char = cfg.get_horizontal(pos, rows)
        if char is None:
            return [("", " " * width)]
        style = cfg.get_horizontal_color(pos, rows)
        if not (
            cfg.is_overridden_horizontal(pos)
            or cfg.is_overridden_horizontal_color(pos)
        ):
            return self._border(char * width, style) if width else []
        ft: StyleAndTextTuples = []
        for i in range(width):
            ft.extend(
                self._border(
                    cfg.lookup_horizontal_char(pos, i, width) or char,
                    cfg.lookup_horizontal_color(pos, i, width) or style,
                )
            )
        return ft

    def _vertical_char(self, pos: Position, index: int) -> StyleAndTextTuples:
        """Draw one line of the vertical border left of the cell at ``pos``."""
        cfg = self.cfg
        cols = self.shape.cols
        char = cfg.get_vertical(pos, cols)
        if char is None:
            return []
        height = self.dimension.get_height(pos.row)
        return self._border(
            cfg.lookup_vertical_char(pos, index, height) or char,
            cfg.lookup_vertical_color(pos, index, height)
            or cfg.get_vertical_color(pos, cols),
        )

    def _split_line(self, row: int, blocks: dict[int, _Block]) -> StyleAndTextTuples:
        """Draw the horizontal border line above ``row``."""
        cfg = self.cfg
        shape = self.shape
        line = self._border(
            cfg.get_intersection((row, 0), shape),
            cfg.get_intersection_color((row, 0), shape),
        )
        col = 0
        while col < shape.cols:
            block = blocks.get(col)
            if block is not None and block.last_row >= row:
                # A row-spanned cell continues across this line
                line.extend(next(block.lines))
                col += block.col_span
            else:
                line.extend(self._horizontal_segment(Position(row, col)))
                col += 1
            line.extend(
                self._border(
                    cfg.get_intersection((row, col), shape),
                    cfg.get_intersection_color((row, col), shape),
                )
            )
        return line

    def _text_lines(self, row: int, blocks: dict[int, _Block]) -> list[StyleAndTextTuples]:
        """Draw the lines of text of a row."""
        shape = self.shape
        lines = []
        for index in range(self.dimension.get_height(row)):
            line: StyleAndTextTuples = []
            col = 0
            while col < shape.cols:
                line.extend(self._vertical_char(Position(row, col), index))
                block = blocks.get(col)
                if block is None:
                    # Covered by a span whose own origin is hidden
                    line.append(("", " " * self.dimension.get_width(col)))
                    col += 1
                    continue
                line.extend(next(block.lines))
                col += block.col_span
            line.extend(self._vertical_char(Position(row, shape.cols), index))
            lines.append(line)
        return lines

    def render(self) -> StyleAndTextTuples:
        """Draw the grid as formatted text."""
        cfg = self.cfg
        shape = self.shape
        if shape.rows == 0 or shape.cols == 0:
            return []
        log.debug("Rendering grid of shape %s", shape)

        blocks: dict[int, _Block] = {}
        lines: list[StyleAndTextTuples] = []
        for row in range(shape.rows):
            if cfg.has_horizontal(row, shape.rows):
                lines.append(self._split_line(row, blocks))
            blocks = {col: b for col, b in blocks.items() if b.last_row >= row}
            for col in range(shape.cols):
                pos = Position(row, col)
                if col not in blocks and cfg.is_cell_visible(pos, shape):
                    blocks[col] = self._open_block(pos)
            lines.extend(self._text_lines(row, blocks))
        if cfg.has_horizontal(shape.rows, shape.rows):
            lines.append(self._split_line(shape.rows, blocks))
        return join_lines(lines)

    def __pt_formatted_text__(self) -> StyleAndTextTuples:
        """Render the grid as formatted text."""
        return self.render()

    def __str__(self) -> str:
        """Render the grid as plain text."""
        return to_plain_text(self.render())
