"""Store border glyph layers and resolve the glyph at each border position."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from gridframe.border import Border, Borders, HorizontalLine, VerticalLine
from gridframe.data_structures import Position

if TYPE_CHECKING:
    from gridframe.data_structures import Shape

T = TypeVar("T")


class _Layout:
    """Records which border lines have been explicitly requested."""

    def __init__(self) -> None:
        self.top = False
        self.bottom = False
        self.left = False
        self.right = False
        self.horizontals: set[int] = set()
        self.verticals: set[int] = set()


class BordersConfig(Generic[T]):
    """Layered border glyph lookups for a grid.

    Border positions are addressed on the lines between cells: horizontal line
    ``row`` runs above the cells of ``row``, and vertical line ``col`` runs to
    the left of the cells of ``col``. Line ``count`` is the closing frame line.

    Glyphs are looked up in the following order:

    1. Per-cell overrides set with :meth:`insert_border`
    2. Whole-line overrides set with :meth:`insert_horizontal_line` and
       :meth:`insert_vertical_line`
    3. The global frame and split glyphs set with :meth:`set_borders`
    4. The global glyph set with :meth:`set_global`

    The glyph type is generic, so the same structure stores border characters
    and border styles.
    """

    def __init__(self) -> None:
        """Create a configuration without any borders."""
        self._global: T | None = None
        self._borders: Borders = Borders()
        self._horizontal_cells: dict[Position, T] = {}
        self._vertical_cells: dict[Position, T] = {}
        self._intersection_cells: dict[Position, T] = {}
        self._horizontals: dict[int, HorizontalLine] = {}
        self._verticals: dict[int, VerticalLine] = {}
        self._layout = _Layout()

    def is_empty(self) -> bool:
        """Determine if no border is configured at any level."""
        return (
            self._global is None
            and self._borders.is_empty()
            and not self._horizontal_cells
            and not self._vertical_cells
            and not self._intersection_cells
            and not self._horizontals
            and not self._verticals
        )

    # Cell overrides

    def insert_border(self, pos: tuple[int, int], border: Border) -> None:
        """Override the border glyphs around a single cell.

        Only the facets of ``border`` which are set are stored. Neighbouring
        cells share border positions, so the last override written wins.
        """
        row, col = pos
        layout = self._layout
        if border.top is not None:
            self._horizontal_cells[Position(row, col)] = border.top
            layout.horizontals.add(row)
        if border.bottom is not None:
            self._horizontal_cells[Position(row + 1, col)] = border.bottom
            layout.horizontals.add(row + 1)
        if border.left is not None:
            self._vertical_cells[Position(row, col)] = border.left
            layout.verticals.add(col)
        if border.right is not None:
            self._vertical_cells[Position(row, col + 1)] = border.right
            layout.verticals.add(col + 1)
        corners = (
            (border.top_left, 0, 0),
            (border.top_right, 0, 1),
            (border.bottom_left, 1, 0),
            (border.bottom_right, 1, 1),
        )
        for glyph, drow, dcol in corners:
            if glyph is not None:
                self._intersection_cells[Position(row + drow, col + dcol)] = glyph
                layout.horizontals.add(row + drow)
                layout.verticals.add(col + dcol)

    def remove_border(self, pos: tuple[int, int], shape: Shape) -> None:
        """Remove every per-cell override touching a cell.

        Whether the adjacent lines still carry a border is worked out again from
        the overrides which remain, as other cells may share the same lines.
        """
        row, col = pos
        for key in ((row, col), (row + 1, col)):
            self._horizontal_cells.pop(Position(*key), None)
        for key in ((row, col), (row, col + 1)):
            self._vertical_cells.pop(Position(*key), None)
        for key in ((row, col), (row + 1, col), (row, col + 1), (row + 1, col + 1)):
            self._intersection_cells.pop(Position(*key), None)

        for line in (row, row + 1):
            if not self._scan_horizontal_set(line, shape.rows):
                self._layout.horizontals.discard(line)
        for line in (col, col + 1):
            if not self._scan_vertical_set(line, shape.cols):
                self._layout.verticals.discard(line)

    def get_border(self, pos: tuple[int, int], shape: Shape) -> Border:
        """Return the glyphs resolved for the eight facets of a cell."""
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

    # Line overrides

    def insert_horizontal_line(self, row: int, line: HorizontalLine) -> None:
        """Override the glyphs of a whole horizontal line."""
        if line.left is not None:
            self._layout.left = True
        if line.right is not None:
            self._layout.right = True
        self._horizontals[row] = line
        self._layout.horizontals.add(row)

    def remove_horizontal_line(self, row: int, count_rows: int) -> None:
        """Remove a horizontal line override."""
        self._horizontals.pop(row, None)
        self._layout.horizontals.discard(row)
        if self._scan_horizontal_set(row, count_rows):
            self._layout.horizontals.add(row)

    def get_horizontal_line(self, row: int) -> HorizontalLine | None:
        """Return the override for a horizontal line, if one is set."""
        return self._horizontals.get(row)

    def get_horizontal_lines(self) -> dict[int, HorizontalLine]:
        """Return a copy of every horizontal line override."""
        return dict(self._horizontals)

    def insert_vertical_line(self, col: int, line: VerticalLine) -> None:
        """Override the glyphs of a whole vertical line."""
        if line.top is not None:
            self._layout.top = True
        if line.bottom is not None:
            self._layout.bottom = True
        self._verticals[col] = line
        self._layout.verticals.add(col)

    def remove_vertical_line(self, col: int, count_cols: int) -> None:
        """Remove a vertical line override."""
        self._verticals.pop(col, None)
        self._layout.verticals.discard(col)
        if self._scan_vertical_set(col, count_cols):
            self._layout.verticals.add(col)

    def get_vertical_line(self, col: int) -> VerticalLine | None:
        """Return the override for a vertical line, if one is set."""
        return self._verticals.get(col)

    def get_vertical_lines(self) -> dict[int, VerticalLine]:
        """Return a copy of every vertical line override."""
        return dict(self._verticals)

    # Global settings

    def set_borders(self, borders: Borders) -> None:
        """Set the global frame and split glyphs."""
        self._borders = borders

    def get_borders(self) -> Borders:
        """Return the global frame and split glyphs."""
        return self._borders

    def set_global(self, value: T) -> None:
        """Set a glyph for every border position, making every border exist."""
        self._global = value

    def get_global(self) -> T | None:
        """Return the glyph used for every border position, if set."""
        return self._global

    # Lookups

    def get_horizontal(self, pos: tuple[int, int], count_rows: int) -> T | None:
        """Return the glyph for the horizontal border segment above ``pos``."""
        pos = Position(*pos)
        if (value := self._horizontal_cells.get(pos)) is not None:
            return value
        line = self._horizontals.get(pos.row)
        if line is not None and line.main is not None:
            return line.main
        if pos.row == 0:
            value = self._borders.top
        elif pos.row == count_rows:
            value = self._borders.bottom
        else:
            value = self._borders.horizontal
        if value is not None:
            return value
        return self._global

    def get_vertical(self, pos: tuple[int, int], count_cols: int) -> T | None:
        """Return the glyph for the vertical border segment left of ``pos``."""
        pos = Position(*pos)
        if (value := self._vertical_cells.get(pos)) is not None:
            return value
        line = self._verticals.get(pos.col)
        if line is not None and line.main is not None:
            return line.main
        if pos.col == count_cols:
            value = self._borders.right
        elif pos.col == 0:
            value = self._borders.left
        else:
            value = self._borders.vertical
        if value is not None:
            return value
        return self._global

    def get_intersection(self, pos: tuple[int, int], shape: Shape) -> T | None:
        """Return the glyph where the border lines at the top left of ``pos`` meet."""
        pos = Position(*pos)
        if (value := self._intersection_cells.get(pos)) is not None:
            return value

        on_top = pos.row == 0
        on_bottom = pos.row == shape.rows
        on_left = pos.col == 0
        on_right = pos.col == shape.cols

        hline = self._horizontals.get(pos.row)
        if hline is not None:
            if on_left and hline.left is not None:
                return hline.left
            if on_right and hline.right is not None:
                return hline.right
            if not on_left and not on_right and hline.intersection is not None:
                return hline.intersection

        vline = self._verticals.get(pos.col)
        if vline is not None:
            if on_top and vline.top is not None:
                return vline.top
            if on_bottom and vline.bottom is not None:
                return vline.bottom
            if not on_top and not on_bottom and vline.intersection is not None:
                return vline.intersection

        borders = self._borders
        if on_top and on_left:
            value = borders.top_left
        elif on_top and on_right:
            value = borders.top_right
        elif on_bottom and on_left:
            value = borders.bottom_left
        elif on_bottom and on_right:
            value = borders.bottom_right
        elif on_top:
            value = borders.top_intersection
        elif on_bottom:
            value = borders.bottom_intersection
        elif on_left:
            value = borders.left_intersection
        elif on_right:
            value = borders.right_intersection
        else:
            value = borders.intersection
        if value is not None:
            return value
        return self._global

    # Line existence

    def has_horizontal(self, row: int, count_rows: int) -> bool:
        """Determine if a horizontal border line exists at ``row``."""
        borders = self._borders
        return (
            self._global is not None
            or (row == 0 and borders.has_top())
            or (row == count_rows and borders.has_bottom())
            or (0 < row < count_rows and borders.has_horizontal())
            or self.is_horizontal_set(row, count_rows)
        )

    def has_vertical(self, col: int, count_cols: int) -> bool:
        """Determine if a vertical border line exists at ``col``."""
        borders = self._borders
        return (
            self._global is not None
            or (col == 0 and borders.has_left())
            or (col == count_cols and borders.has_right())
            or (0 < col < count_cols and borders.has_vertical())
            or self.is_vertical_set(col, count_cols)
        )

    def is_horizontal_set(self, row: int, count_rows: int) -> bool:
        """Determine if an override requests a horizontal line at ``row``."""
        layout = self._layout
        return (
            (row == 0 and layout.top)
            or (row == count_rows and layout.bottom)
            or row in layout.horizontals
        )

    def is_vertical_set(self, col: int, count_cols: int) -> bool:
        """Determine if an override requests a vertical line at ``col``."""
        layout = self._layout
        return (
            (col == 0 and layout.left)
            or (col == count_cols and layout.right)
            or col in layout.verticals
        )

    def _scan_horizontal_set(self, row: int, count_rows: int) -> bool:
        layout = self._layout
        return (
            (row == 0 and layout.top)
            or (row == count_rows and layout.bottom)
            or any(pos.row == row for pos in self._horizontal_cells)
            or any(pos.row == row for pos in self._intersection_cells)
            or row in self._horizontals
        )

    def _scan_vertical_set(self, col: int, count_cols: int) -> bool:
        layout = self._layout
        return (
            (col == 0 and layout.left)
            or (col == count_cols and layout.right)
            or any(pos.col == col for pos in self._vertical_cells)
            or any(pos.col == col for pos in self._intersection_cells)
            or col in self._verticals
        )
