"""Define line styles which can be combined into grid frame presets."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache, total_ordering
from typing import NamedTuple

from prompt_toolkit.cache import FastDictCache


class GridPart(Enum):
    """Name the component characters of a grid.

    Character naming works as follows:

                ╭┈┈┈┈┈┈┈┈LEFT
                ┊ ╭┈┈┈┈┈┈MID
                ┊ ┊ ╭┈┈┈┈SPLIT
                ┊ ┊ ┊ ╭┈┈RIGHT
                ∨ ∨ ∨ v
          TOP┈> ┌ ─ ┬ ┐
          MID┈> │   │ │
        SPLIT┈> ├ ─ ┼ ┤
       BOTTOM┈> └ ─ ┴ ┘

    """  # noqa: RUF002

    TOP_LEFT = 0
    TOP_MID = 1
    TOP_SPLIT = 2
    TOP_RIGHT = 3
    MID_LEFT = 4
    MID_MID = 5
    MID_SPLIT = 6
    MID_RIGHT = 7
    SPLIT_LEFT = 8
    SPLIT_MID = 9
    SPLIT_SPLIT = 10
    SPLIT_RIGHT = 11
    BOTTOM_LEFT = 12
    BOTTOM_MID = 13
    BOTTOM_SPLIT = 14
    BOTTOM_RIGHT = 15


class DirectionFlags(NamedTuple):
    """Flags which indicate the connections of a grid node."""

    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False


class Mask:
    """Select the connections of each grid part which should be drawn."""

    def __init__(self, mask: dict[GridPart, DirectionFlags]) -> None:
        """Create a new grid mask.

        Args:
            mask: Maps grid parts to the directions they connect in. Parts which
                are missing connect in no direction.

        """
        self.mask = {part: mask.get(part, DirectionFlags()) for part in GridPart}

    def __add__(self, other: Mask) -> Mask:
        """Combine the connections of two masks."""
        return Mask(
            {
                part: DirectionFlags(
                    *(a or b for a, b in zip(self.mask[part], other.mask[part]))
                )
                for part in GridPart
            }
        )


_E = DirectionFlags(east=True)
_W = DirectionFlags(west=True)
_EW = DirectionFlags(east=True, west=True)
_N = DirectionFlags(north=True)
_S = DirectionFlags(south=True)
_NS = DirectionFlags(north=True, south=True)


class Masks:
    """A collection of default masks."""

    top_edge = Mask(
        {
            GridPart.TOP_LEFT: _E,
            GridPart.TOP_MID: _EW,
            GridPart.TOP_SPLIT: _EW,
            GridPart.TOP_RIGHT: _W,
        }
    )
    middle_edge = Mask(
        {
            GridPart.SPLIT_LEFT: _E,
            GridPart.SPLIT_MID: _EW,
            GridPart.SPLIT_SPLIT: _EW,
            GridPart.SPLIT_RIGHT: _W,
        }
    )
    bottom_edge = Mask(
        {
            GridPart.BOTTOM_LEFT: _E,
            GridPart.BOTTOM_MID: _EW,
            GridPart.BOTTOM_SPLIT: _EW,
            GridPart.BOTTOM_RIGHT: _W,
        }
    )
    left_edge = Mask(
        {
            GridPart.TOP_LEFT: _S,
            GridPart.MID_LEFT: _NS,
            GridPart.SPLIT_LEFT: _NS,
            GridPart.BOTTOM_LEFT: _N,
        }
    )
    center_edge = Mask(
        {
            GridPart.TOP_SPLIT: _S,
            GridPart.MID_SPLIT: _NS,
            GridPart.SPLIT_SPLIT: _NS,
            GridPart.BOTTOM_SPLIT: _N,
        }
    )
    right_edge = Mask(
        {
            GridPart.TOP_RIGHT: _S,
            GridPart.MID_RIGHT: _NS,
            GridPart.SPLIT_RIGHT: _NS,
            GridPart.BOTTOM_RIGHT: _N,
        }
    )

    inner = center_edge + middle_edge
    outer = top_edge + right_edge + bottom_edge + left_edge
    grid = inner + outer


def _line_to_grid(line: LineStyle, mask: Mask) -> GridStyle:
    """Get a grid from a line and a mask."""
    return GridStyle(line, mask)


@total_ordering
class LineStyle:
    """A style of line which can be used to draw grids.

    Accessing an attribute named after one of the :class:`Masks` returns the
    :class:`GridStyle` drawn with this line, e.g. ``ThinLine.outer``.
    """

    _grid_cache: FastDictCache[tuple[LineStyle, Mask], GridStyle] = FastDictCache(
        get_value=_line_to_grid
    )

    def __init__(
        self,
        name: str,
        rank: tuple[int, int],
        parent: LineStyle | None = None,
        visible: bool = True,
    ) -> None:
        """Create a new :class:`LineStyle`.

        Args:
            name: The name of the line style
            rank: Used to decide which style wins where two styles meet: a
                tuple of line weight and fanciness
            parent: The style to fall back to where no character is defined
                for a combination involving this style
            visible: Whether the line is drawn at all

        """
        self.name = name
        self.rank = rank
        self.parent = parent
        self.visible = visible

    def __getattr__(self, value: str) -> GridStyle:
        """Create a :class:`GridStyle` from a named mask.

        Raises:
            AttributeError: If there is no mask with the given name

        """
        if not value.startswith("_") and hasattr(Masks, value):
            return self._grid_cache[self, getattr(Masks, value)]
        raise AttributeError(f"No such attribute `{value}`")

    def __lt__(self, other: LineStyle) -> bool:
        """Order line styles by rank."""
        if isinstance(other, LineStyle):
            return self.rank < other.rank
        return NotImplemented

    def __repr__(self) -> str:
        """Represent the line style as a string."""
        return f"LineStyle({self.name})"


NoLine = LineStyle("None", rank=(0, 0), visible=False)
AsciiLine = LineStyle("Ascii", rank=(1, 0))
ThinLine = LineStyle("Thin", rank=(1, 4), parent=AsciiLine)
RoundedLine = LineStyle("Rounded", rank=(1, 5), parent=ThinLine)
AsciiThickLine = LineStyle("AsciiDouble", rank=(3, 0), parent=AsciiLine)
ThickLine = LineStyle("Thick", rank=(3, 4), parent=ThinLine)
DoubleLine = LineStyle("Double", rank=(3, 5), parent=ThickLine)


class GridChar(NamedTuple):
    """The line styles meeting at a grid node, by compass direction."""

    north: LineStyle
    east: LineStyle
    south: LineStyle
    west: LineStyle


def _box_chars(line: LineStyle, chars: str) -> dict[GridChar, str]:
    """Map the eleven joined combinations of a single line style to characters.

    ``chars`` lists the vertical, horizontal, four corners (clockwise from the
    top left), four tees (left, top, right, bottom) and the cross.
    """
    x, o = line, NoLine
    keys = (
        GridChar(x, o, x, o),
        GridChar(o, x, o, x),
        GridChar(o, x, x, o),
        GridChar(o, o, x, x),
        GridChar(x, o, o, x),
        GridChar(x, x, o, o),
        GridChar(x, x, x, o),
        GridChar(o, x, x, x),
        GridChar(x, o, x, x),
        GridChar(x, x, o, x),
        GridChar(x, x, x, x),
    )
    return dict(zip(keys, chars))


_GRID_CHARS: dict[GridChar, str] = {
    GridChar(NoLine, NoLine, NoLine, NoLine): " ",
    **_box_chars(AsciiLine, "|-+++++++++"),
    GridChar(NoLine, AsciiThickLine, NoLine, AsciiThickLine): "=",
    **_box_chars(ThinLine, "│─┌┐┘└├┬┤┴┼"),
    **_box_chars(RoundedLine, "│─╭╮╯╰├┬┤┴┼"),
    **_box_chars(ThickLine, "┃━┏┓┛┗┣┳┫┻╋"),
    **_box_chars(DoubleLine, "║═╔╗╝╚╠╦╣╩╬"),
    # Line ends
    GridChar(ThinLine, NoLine, NoLine, NoLine): "╵",
    GridChar(NoLine, ThinLine, NoLine, NoLine): "╶",
    GridChar(NoLine, NoLine, ThinLine, NoLine): "╷",
    GridChar(NoLine, NoLine, NoLine, ThinLine): "╴",
    GridChar(ThickLine, NoLine, NoLine, NoLine): "╹",
    GridChar(NoLine, ThickLine, NoLine, NoLine): "╺",
    GridChar(NoLine, NoLine, ThickLine, NoLine): "╻",
    GridChar(NoLine, NoLine, NoLine, ThickLine): "╸",
    # Double / Thin junctions
    GridChar(ThinLine, DoubleLine, ThinLine, DoubleLine): "╪",
    GridChar(DoubleLine, ThinLine, DoubleLine, ThinLine): "╫",
    GridChar(NoLine, DoubleLine, ThinLine, DoubleLine): "╤",
    GridChar(ThinLine, DoubleLine, NoLine, DoubleLine): "╧",
    GridChar(DoubleLine, ThinLine, DoubleLine, NoLine): "╟",
    GridChar(DoubleLine, NoLine, DoubleLine, ThinLine): "╢",
    # Thick / Thin junctions
    GridChar(ThinLine, ThickLine, ThinLine, ThickLine): "┿",
    GridChar(ThickLine, ThinLine, ThickLine, ThinLine): "╂",
    GridChar(NoLine, ThickLine, ThinLine, ThickLine): "┯",
    GridChar(ThinLine, ThickLine, NoLine, ThickLine): "┷",
    GridChar(ThickLine, ThinLine, ThickLine, NoLine): "┠",
    GridChar(ThickLine, NoLine, ThickLine, ThinLine): "┨",
}


@lru_cache
def get_grid_char(key: GridChar) -> str:
    """Return the character drawn for a combination of line styles.

    Where no character exists for the exact combination, the line style whose
    parent ranks highest is replaced with its parent until a character is
    found. A space is returned if no substitution succeeds.
    """
    if key in _GRID_CHARS:
        return _GRID_CHARS[key]
    lines = list(key)
    while any(line.parent for line in lines):
        parent_ranks = {
            line.parent.rank: i for i, line in enumerate(lines) if line.parent
        }
        idx = parent_ranks[max(parent_ranks)]
        if parent := lines[idx].parent:
            lines[idx] = parent
        if char := _GRID_CHARS.get(GridChar(*lines)):
            return char
    return " "


class GridStyle:
    """A collection of characters which can be used to draw a grid."""

    def __init__(self, line_style: LineStyle = NoLine, mask: Mask = Masks.grid) -> None:
        """Create a new :class:`GridStyle` instance.

        Args:
            line_style: The line style to use to construct the grid
            mask: Selects which connections of the grid are drawn

        """
        self.grid = {
            part: GridChar(*((line_style if x else NoLine) for x in mask.mask[part]))
            for part in GridPart
        }

    def char(self, part: GridPart) -> str:
        """Return the character for a part of the grid."""
        return get_grid_char(self.grid[part])

    def __add__(self, other: GridStyle) -> GridStyle:
        """Overlay two grid styles, keeping the higher ranked line in each direction."""
        result = GridStyle()
        result.grid = {
            part: GridChar(*map(max, self.grid[part], other.grid[part]))
            for part in GridPart
        }
        return result

    def __repr__(self) -> str:
        """Draw the grid's characters as a 4x4 block."""
        chars = [self.char(part) for part in GridPart]
        return "\n".join("".join(chars[i : i + 4]) for i in range(0, 16, 4))
