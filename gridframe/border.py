"""Define the border glyph containers used to frame a grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from gridframe.style import (
    AsciiLine,
    DoubleLine,
    GridPart,
    RoundedLine,
    ThickLine,
    ThinLine,
)

if TYPE_CHECKING:
    from gridframe.style import GridStyle


class Border(NamedTuple):
    """The glyphs for the eight facets of a single cell.

    Each facet is optional - a value of :const:`None` means the facet is not
    set at this level and should be resolved from a lower precedence layer.

    ::

        top_left ┈> ┌──────┐ <┈ top_right
                    │ cell │
     bottom_left ┈> └──────┘ <┈ bottom_right

    """

    top: str | None = None
    bottom: str | None = None
    left: str | None = None
    right: str | None = None
    top_left: str | None = None
    top_right: str | None = None
    bottom_left: str | None = None
    bottom_right: str | None = None

    @classmethod
    def empty(cls) -> Border:
        """Return a border with no facets set."""
        return cls()

    @classmethod
    def filled(cls, glyph: str) -> Border:
        """Return a border with every facet set to the same glyph."""
        return cls(*(glyph,) * 8)

    @classmethod
    def full(
        cls,
        top: str,
        bottom: str,
        left: str,
        right: str,
        top_left: str,
        top_right: str,
        bottom_left: str,
        bottom_right: str,
    ) -> Border:
        """Return a border with every facet given explicitly."""
        return cls(
            top, bottom, left, right, top_left, top_right, bottom_left, bottom_right
        )

    def is_empty(self) -> bool:
        """Determine if no facet is set."""
        return all(glyph is None for glyph in self)


class HorizontalLine(NamedTuple):
    """An override for a whole horizontal border line."""

    main: str | None = None
    intersection: str | None = None
    left: str | None = None
    right: str | None = None

    @classmethod
    def filled(cls, glyph: str) -> HorizontalLine:
        """Return a line with every part set to the same glyph."""
        return cls(glyph, glyph, glyph, glyph)


class VerticalLine(NamedTuple):
    """An override for a whole vertical border line."""

    main: str | None = None
    intersection: str | None = None
    top: str | None = None
    bottom: str | None = None

    @classmethod
    def filled(cls, glyph: str) -> VerticalLine:
        """Return a line with every part set to the same glyph."""
        return cls(glyph, glyph, glyph, glyph)


class Borders(NamedTuple):
    """The global frame and split glyphs of a grid.

    Glyph naming works as follows:

    ::

         top_left┈┈> ┌───┬───┐ <┈┈top_right
                     │   │   │
        left_inter┈> ├───┼───┤ <┈right_inter
                     │   │   │
      bottom_left┈┈> └───┴───┘ <┈┈bottom_right

    The interior lines use :attr:`horizontal` and :attr:`vertical`, meeting at
    :attr:`intersection`. Where the vertical splits meet the top and bottom
    frame lines :attr:`top_intersection` and :attr:`bottom_intersection` are
    used.
    """

    top: str | None = None
    bottom: str | None = None
    left: str | None = None
    right: str | None = None
    horizontal: str | None = None
    vertical: str | None = None
    top_left: str | None = None
    top_right: str | None = None
    bottom_left: str | None = None
    bottom_right: str | None = None
    top_intersection: str | None = None
    bottom_intersection: str | None = None
    left_intersection: str | None = None
    right_intersection: str | None = None
    intersection: str | None = None

    @classmethod
    def filled(cls, glyph: str) -> Borders:
        """Return a frame with every glyph set to the same value."""
        return cls(*(glyph,) * len(cls._fields))

    @classmethod
    def from_grid_style(cls, grid: GridStyle) -> Borders:
        """Create a frame from the characters of a :class:`GridStyle`.

        Grid parts which resolve to a blank character are left unset, so that
        no border line is implied by them.
        """

        def _char(part: GridPart) -> str | None:
            char = grid.char(part)
            return None if char == " " else char

        return cls(
            top=_char(GridPart.TOP_MID),
            bottom=_char(GridPart.BOTTOM_MID),
            left=_char(GridPart.MID_LEFT),
            right=_char(GridPart.MID_RIGHT),
            horizontal=_char(GridPart.SPLIT_MID),
            vertical=_char(GridPart.MID_SPLIT),
            top_left=_char(GridPart.TOP_LEFT),
            top_right=_char(GridPart.TOP_RIGHT),
            bottom_left=_char(GridPart.BOTTOM_LEFT),
            bottom_right=_char(GridPart.BOTTOM_RIGHT),
            top_intersection=_char(GridPart.TOP_SPLIT),
            bottom_intersection=_char(GridPart.BOTTOM_SPLIT),
            left_intersection=_char(GridPart.SPLIT_LEFT),
            right_intersection=_char(GridPart.SPLIT_RIGHT),
            intersection=_char(GridPart.SPLIT_SPLIT),
        )

    def is_empty(self) -> bool:
        """Determine if no glyph is set."""
        return all(glyph is None for glyph in self)

    def has_top(self) -> bool:
        """Determine if the top frame line is implied."""
        return any(
            x is not None
            for x in (self.top, self.top_intersection, self.top_left, self.top_right)
        )

    def has_bottom(self) -> bool:
        """Determine if the bottom frame line is implied."""
        return any(
            x is not None
            for x in (
                self.bottom,
                self.bottom_intersection,
                self.bottom_left,
                self.bottom_right,
            )
        )

    def has_left(self) -> bool:
        """Determine if the left frame line is implied."""
        return any(
            x is not None
            for x in (
                self.left,
                self.left_intersection,
                self.top_left,
                self.bottom_left,
            )
        )

    def has_right(self) -> bool:
        """Determine if the right frame line is implied."""
        return any(
            x is not None
            for x in (
                self.right,
                self.right_intersection,
                self.top_right,
                self.bottom_right,
            )
        )

    def has_horizontal(self) -> bool:
        """Determine if interior horizontal split lines are implied."""
        return any(
            x is not None
            for x in (
                self.horizontal,
                self.left_intersection,
                self.right_intersection,
                self.intersection,
            )
        )

    def has_vertical(self) -> bool:
        """Determine if interior vertical split lines are implied."""
        return any(
            x is not None
            for x in (
                self.vertical,
                self.intersection,
                self.top_intersection,
                self.bottom_intersection,
            )
        )


# Frame presets

ASCII = Borders.from_grid_style(AsciiLine.grid)
THIN = Borders.from_grid_style(ThinLine.grid)
ROUNDED = Borders.from_grid_style(RoundedLine.grid)
THICK = Borders.from_grid_style(ThickLine.grid)
DOUBLE = Borders.from_grid_style(DoubleLine.grid)
