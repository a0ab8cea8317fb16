"""The configuration of a grid: spans, borders, padding and alignment."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from gridframe.border import Border, Borders
from gridframe.borders_config import BordersConfig
from gridframe.data_structures import DiInt, Offset, Position, Shape
from gridframe.entity import EntityMap
from gridframe.topology import GridTopology
from gridframe.utils import AlignmentHorizontal, AlignmentVertical

if TYPE_CHECKING:
    from gridframe.border import HorizontalLine, VerticalLine
    from gridframe.entity import Entity

T = TypeVar("T")

DEFAULT_BORDERS_MISSING = " "
DEFAULT_PADDING = DiInt(0, 1, 0, 1)


def _set_offset(
    overrides: dict[Position, dict[Offset, T]],
    pos: tuple[int, int],
    value: T,
    offset: Offset,
) -> None:
    if offset.value < 0:
        raise ValueError(f"Border offset cannot be negative: {offset}")
    overrides.setdefault(Position(*pos), {})[offset] = value


def _lookup_offset(
    overrides: dict[Position, dict[Offset, T]],
    pos: tuple[int, int],
    offset: int,
    end: int,
) -> T | None:
    """Find the override for the character at ``offset`` of an ``end`` long segment.

    An offset from the start of the segment takes precedence over one counted
    from its end.
    """
    chars = overrides.get(Position(*pos))
    if not chars:
        return None
    if (value := chars.get(Offset.begin(offset))) is not None:
        return value
    if end > offset:
        return chars.get(Offset.end(end - offset - 1))
    return None


class GridConfig:
    """Everything needed to lay out and frame a grid, apart from its content.

    Border characters and border styles are kept in two independent
    :class:`BordersConfig` layers. Where a border line exists but no character
    is configured for one of its positions, the *missing* character is drawn
    so the frame has no gaps.
    """

    def __init__(
        self,
        borders: Borders | None = None,
        padding: DiInt | int = DEFAULT_PADDING,
        missing: str = DEFAULT_BORDERS_MISSING,
    ) -> None:
        """Create a new grid configuration.

        Args:
            borders: The global frame and split characters
            padding: The padding applied to every cell
            missing: The character drawn at border positions which exist but
                have no character configured

        """
        self.topology = GridTopology()
        self.borders: BordersConfig[str] = BordersConfig()
        self.borders_colors: BordersConfig[str] = BordersConfig()
        self.borders_missing = missing
        self.horizontal_chars: dict[Position, dict[Offset, str]] = {}
        self.vertical_chars: dict[Position, dict[Offset, str]] = {}
        self.horizontal_colors: dict[Position, dict[Offset, str]] = {}
        self.vertical_colors: dict[Position, dict[Offset, str]] = {}
        self.padding: EntityMap[DiInt] = EntityMap(DiInt.coerce(padding))
        self.alignment_horizontal: EntityMap[AlignmentHorizontal] = EntityMap(
            AlignmentHorizontal.LEFT
        )
        self.alignment_vertical: EntityMap[AlignmentVertical] = EntityMap(
            AlignmentVertical.TOP
        )
        if borders is not None:
            self.borders.set_borders(borders)

    # Spans

    def set_column_span(self, pos: tuple[int, int], span: int) -> None:
        """Make the cell at ``pos`` cover ``span`` columns."""
        self.topology.set_column_span(pos, span)

    def set_row_span(self, pos: tuple[int, int], span: int) -> None:
        """Make the cell at ``pos`` cover ``span`` rows."""
        self.topology.set_row_span(pos, span)

    def get_column_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> int | None:
        """Return the valid column span of a cell, if any."""
        return self.topology.get_column_span(pos, shape)

    def get_row_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> int | None:
        """Return the valid row span of a cell, if any."""
        return self.topology.get_row_span(pos, shape)

    def get_column_spans(self) -> dict[Position, int]:
        """Return a copy of the declared column spans."""
        return self.topology.get_column_spans()

    def get_row_spans(self) -> dict[Position, int]:
        """Return a copy of the declared row spans."""
        return self.topology.get_row_spans()

    def has_column_spans(self) -> bool:
        """Determine if any column span is declared."""
        return self.topology.has_column_spans()

    def has_row_spans(self) -> bool:
        """Determine if any row span is declared."""
        return self.topology.has_row_spans()

    def remove_column_spans(self) -> None:
        """Remove every column span."""
        self.topology.remove_column_spans()

    def remove_row_spans(self) -> None:
        """Remove every row span."""
        self.topology.remove_row_spans()

    def is_cell_visible(self, pos: tuple[int, int], shape: Shape | None = None) -> bool:
        """Determine if a cell is rendered, rather than hidden behind a span."""
        return self.topology.is_visible(pos, shape)

    def is_cell_covered_by_column_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> bool:
        """Determine if a cell is hidden by a column span."""
        return self.topology.is_cell_covered_by_column_span(pos, shape)

    def is_cell_covered_by_row_span(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> bool:
        """Determine if a cell is hidden by a row span."""
        return self.topology.is_cell_covered_by_row_span(pos, shape)

    def is_cell_covered_by_both_spans(
        self, pos: tuple[int, int], shape: Shape | None = None
    ) -> bool:
        """Determine if a cell is hidden by a cell spanning rows and columns."""
        return self.topology.is_cell_covered_by_both_spans(pos, shape)

    # Cell settings

    def set_padding(self, entity: Entity, padding: DiInt | int) -> None:
        """Set the padding of the cells an entity addresses.

        Raises:
            ValueError: If any side of the padding is negative

        """
        self.padding.set(entity, DiInt.coerce(padding))

    def get_padding(self, pos: tuple[int, int]) -> DiInt:
        """Return the padding of a cell."""
        return self.padding.get(pos)

    def set_alignment_horizontal(
        self, entity: Entity, alignment: AlignmentHorizontal
    ) -> None:
        """Set the horizontal alignment of the cells an entity addresses."""
        self.alignment_horizontal.set(entity, alignment)

    def get_alignment_horizontal(self, pos: tuple[int, int]) -> AlignmentHorizontal:
        """Return the horizontal alignment of a cell."""
        return self.alignment_horizontal.get(pos)

    def set_alignment_vertical(self, entity: Entity, alignment: AlignmentVertical) -> None:
        """Set the vertical alignment of the cells an entity addresses."""
        self.alignment_vertical.set(entity, alignment)

    def get_alignment_vertical(self, pos: tuple[int, int]) -> AlignmentVertical:
        """Return the vertical alignment of a cell."""
        return self.alignment_vertical.get(pos)

    # Border characters

    def set_borders(self, borders: Borders) -> None:
        """Set the global frame and split characters."""
        self.borders.set_borders(borders)

    def get_borders(self) -> Borders:
        """Return the global frame and split characters."""
        return self.borders.get_borders()

    def set_global_border(self, char: str) -> None:
        """Draw every border position, using ``char`` where nothing else is set."""
        self.borders.set_global(char)

    def get_global_border(self) -> str | None:
        """Return the character used for every border position, if set."""
        return self.borders.get_global()

    def set_borders_missing(self, char: str) -> None:
        """Set the character drawn where a border exists but has no character."""
        self.borders_missing = char

    def get_borders_missing(self) -> str:
        """Return the character drawn where a border exists but has no character."""
        return self.borders_missing

    def remove_borders(self) -> None:
        """Remove every border character, at every level."""
        self.borders = BordersConfig()
        self.horizontal_chars.clear()
        self.vertical_chars.clear()

    def set_border(self, pos: tuple[int, int], border: Border) -> None:
        """Override the border characters around a single cell."""
        self.borders.insert_border(pos, border)

    def remove_border(self, pos: tuple[int, int], shape: Shape) -> None:
        """Remove the border character overrides around a single cell."""
        self.borders.remove_border(pos, shape)

    def insert_horizontal_line(self, row: int, line: HorizontalLine) -> None:
        """Override the characters of a whole horizontal line."""
        self.borders.insert_horizontal_line(row, line)

    def remove_horizontal_line(self, row: int, count_rows: int) -> None:
        """Remove a horizontal line override."""
        self.borders.remove_horizontal_line(row, count_rows)

    def get_horizontal_line(self, row: int) -> HorizontalLine | None:
        """Return the override for a horizontal line, if any."""
        return self.borders.get_horizontal_line(row)

    def get_horizontal_lines(self) -> dict[int, HorizontalLine]:
        """Return a copy of every horizontal line override."""
        return self.borders.get_horizontal_lines()

    def insert_vertical_line(self, col: int, line: VerticalLine) -> None:
        """Override the characters of a whole vertical line."""
        self.borders.insert_vertical_line(col, line)

    def remove_vertical_line(self, col: int, count_cols: int) -> None:
        """Remove a vertical line override."""
        self.borders.remove_vertical_line(col, count_cols)

    def get_vertical_line(self, col: int) -> VerticalLine | None:
        """Return the override for a vertical line, if any."""
        return self.borders.get_vertical_line(col)

    def get_vertical_lines(self) -> dict[int, VerticalLine]:
        """Return a copy of every vertical line override."""
        return self.borders.get_vertical_lines()

    # Border styles

    def set_border_color(self, pos: tuple[int, int], border: Border) -> None:
        """Override the border styles around a single cell."""
        self.borders_colors.insert_border(pos, border)

    def remove_border_color(self, pos: tuple[int, int], shape: Shape) -> None:
        """Remove the border style overrides around a single cell."""
        self.borders_colors.remove_border(pos, shape)

    def get_border_color(self, pos: tuple[int, int], shape: Shape) -> Border:
        """Return the border styles of the eight facets of a cell."""
        return self.borders_colors.get_border(pos, shape)

    def set_borders_color(self, borders: Borders) -> None:
        """Set the global frame and split styles."""
        self.borders_colors.set_borders(borders)

    def get_borders_color(self) -> Borders:
        """Return the global frame and split styles."""
        return self.borders_colors.get_borders()

    def set_border_color_default(self, style: str) -> None:
        """Apply one style to every border, discarding other style settings."""
        self.borders_colors = BordersConfig()
        self.borders_colors.set_global(style)
        self.horizontal_colors.clear()
        self.vertical_colors.clear()

    def get_border_color_default(self) -> str | None:
        """Return the style applied to every border, if set."""
        return self.borders_colors.get_global()

    def has_border_colors(self) -> bool:
        """Determine if any border style is configured."""
        return bool(
            not self.borders_colors.is_empty()
            or self.horizontal_colors
            or self.vertical_colors
        )

    def get_horizontal_color(self, pos: tuple[int, int], count_rows: int) -> str | None:
        """Return the style of the horizontal border segment above ``pos``."""
        return self.borders_colors.get_horizontal(pos, count_rows)

    def get_vertical_color(self, pos: tuple[int, int], count_cols: int) -> str | None:
        """Return the style of the vertical border segment left of ``pos``."""
        return self.borders_colors.get_vertical(pos, count_cols)

    def get_intersection_color(self, pos: tuple[int, int], shape: Shape) -> str | None:
        """Return the style of the border intersection at the top left of ``pos``."""
        return self.borders_colors.get_intersection(pos, shape)

    # Characters within a border segment

    def set_horizontal_char(
        self, pos: tuple[int, int], char: str, offset: Offset
    ) -> None:
        """Override one character of the horizontal border segment above ``pos``.

        The override only shows where the segment is drawn at all. ``pos`` is
        a line and a column, so its row may equal the number of rows.

        Raises:
            ValueError: If the offset is negative

        """
        _set_offset(self.horizontal_chars, pos, char, offset)

    def lookup_horizontal_char(
        self, pos: tuple[int, int], offset: int, end: int
    ) -> str | None:
        """Return the override for a character of a horizontal segment ``end`` wide."""
        return _lookup_offset(self.horizontal_chars, pos, offset, end)

    def is_overridden_horizontal(self, pos: tuple[int, int]) -> bool:
        """Determine if any character of a horizontal segment is overridden."""
        return Position(*pos) in self.horizontal_chars

    def remove_overridden_horizontal(self, pos: tuple[int, int]) -> None:
        """Remove the character overrides of a horizontal segment."""
        self.horizontal_chars.pop(Position(*pos), None)

    def set_vertical_char(self, pos: tuple[int, int], char: str, offset: Offset) -> None:
        """Override one line of the vertical border segment left of ``pos``.

        The offset counts lines of the row, so it runs from ``0`` to the row's
        height. ``pos`` is a row and a line, so its column may equal the number
        of columns.

        Raises:
            ValueError: If the offset is negative

        """
        _set_offset(self.vertical_chars, pos, char, offset)

    def lookup_vertical_char(
        self, pos: tuple[int, int], offset: int, end: int
    ) -> str | None:
        """Return the override for a line of a vertical segment ``end`` tall."""
        return _lookup_offset(self.vertical_chars, pos, offset, end)

    def is_overridden_vertical(self, pos: tuple[int, int]) -> bool:
        """Determine if any line of a vertical segment is overridden."""
        return Position(*pos) in self.vertical_chars

    def remove_overridden_vertical(self, pos: tuple[int, int]) -> None:
        """Remove the character overrides of a vertical segment."""
        self.vertical_chars.pop(Position(*pos), None)

    def set_horizontal_color(
        self, pos: tuple[int, int], style: str, offset: Offset
    ) -> None:
        """Override the style of one character of a horizontal segment."""
        _set_offset(self.horizontal_colors, pos, style, offset)

    def lookup_horizontal_color(
        self, pos: tuple[int, int], offset: int, end: int
    ) -> str | None:
        """Return the style override for a character of a horizontal segment."""
        return _lookup_offset(self.horizontal_colors, pos, offset, end)

    def is_overridden_horizontal_color(self, pos: tuple[int, int]) -> bool:
        """Determine if the style of any character of a horizontal segment is overridden."""
        return Position(*pos) in self.horizontal_colors

    def set_vertical_color(self, pos: tuple[int, int], style: str, offset: Offset) -> None:
        """Override the style of one line of a vertical segment."""
        _set_offset(self.vertical_colors, pos, style, offset)

    def lookup_vertical_color(
        self, pos: tuple[int, int], offset: int, end: int
    ) -> str | None:
        """Return the style override for a line of a vertical segment."""
        return _lookup_offset(self.vertical_colors, pos, offset, end)

    def is_overridden_vertical_color(self, pos: tuple[int, int]) -> bool:
        """Determine if the style of any line of a vertical segment is overridden."""
        return Position(*pos) in self.vertical_colors

    # Border resolution

    def has_horizontal(self, row: int, count_rows: int) -> bool:
        """Determine if a horizontal border line exists at ``row``."""
        return self.borders.has_horizontal(row, count_rows)

    def has_vertical(self, col: int, count_cols: int) -> bool:
        """Determine if a vertical border line exists at ``col``."""
        return self.borders.has_vertical(col, count_cols)

    def count_horizontal(self, count_rows: int) -> int:
        """Count the horizontal border lines which exist in a grid."""
        return sum(
            self.has_horizontal(row, count_rows) for row in range(count_rows + 1)
        )

    def count_vertical(self, count_cols: int) -> int:
        """Count the vertical border lines which exist in a grid."""
        return sum(self.has_vertical(col, count_cols) for col in range(count_cols + 1))

    def get_horizontal(self, pos: tuple[int, int], count_rows: int) -> str | None:
        """Return the character drawn on the horizontal border above ``pos``.

        Returns:
            The configured character, the missing-border character if the line
            exists without one, or :const:`None` if no border is drawn there

        """
        char = self.borders.get_horizontal(pos, count_rows)
        if char is not None:
            return char
        if self.has_horizontal(pos[0], count_rows):
            return self.borders_missing
        return None

    def get_vertical(self, pos: tuple[int, int], count_cols: int) -> str | None:
        """Return the character drawn on the vertical border left of ``pos``.

        Returns:
            The configured character, the missing-border character if the line
            exists without one, or :const:`None` if no border is drawn there

        """
        char = self.borders.get_vertical(pos, count_cols)
        if char is not None:
            return char
        if self.has_vertical(pos[1], count_cols):
            return self.borders_missing
        return None

    def get_intersection(self, pos: tuple[int, int], shape: Shape) -> str | None:
        """Return the character drawn where border lines meet at the top left of ``pos``.

        The missing-border character is only used where both a horizontal and
        a vertical line exist.
        """
        char = self.borders.get_intersection(pos, shape)
        if char is not None:
            return char
        row, col = pos
        if self.has_horizontal(row, shape.rows) and self.has_vertical(col, shape.cols):
            return self.borders_missing
        return None

    def get_border(self, pos: tuple[int, int], shape: tuple[int, int]) -> Border:
        """Return the characters drawn on the eight facets of a cell.

        Each facet is resolved on its own, so a cell may take one edge from a
        per-cell override and another from the global frame.
        """
        shape = Shape(*shape)
        row, col = pos
        return Border(
            top=self.get_horizontal((row, col), shape.rows),
            bottom=self.get_horizontal((row + 1, col), shape.rows),
            left=self.get_vertical((row, col), shape.cols),
            right=self.get_vertical((row, col + 1), shape.cols),
            top_left=self.get_intersection((row, col), shape),
            top_right=self.get_intersection((row, col + 1), shape),
            bottom_left=self.get_intersection((row + 1, col), shape),
            bottom_right=self.get_intersection((row + 1, col + 1), shape),
        )
