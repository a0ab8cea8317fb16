"""Test line styles and the grid characters they produce."""

from __future__ import annotations

from gridframe.style import (
    AsciiLine,
    DoubleLine,
    GridChar,
    GridPart,
    NoLine,
    RoundedLine,
    ThickLine,
    ThinLine,
    get_grid_char,
)


def test_get_grid_char_exact() -> None:
    """Characters defined for a combination of lines are returned directly."""
    assert get_grid_char(GridChar(NoLine, NoLine, NoLine, NoLine)) == " "
    assert get_grid_char(GridChar(ThinLine, ThinLine, ThinLine, ThinLine)) == "┼"
    assert get_grid_char(GridChar(NoLine, AsciiLine, AsciiLine, NoLine)) == "+"
    assert get_grid_char(GridChar(DoubleLine, NoLine, DoubleLine, NoLine)) == "║"


def test_get_grid_char_falls_back_to_parent() -> None:
    """Missing combinations fall back to the parent line styles."""
    # Rounded lines only round the corners, so mixed joins use thin lines
    assert get_grid_char(GridChar(RoundedLine, ThinLine, NoLine, NoLine)) == "└"
    # Thick lines fall back to thin, and thin to ASCII
    assert get_grid_char(GridChar(ThickLine, NoLine, AsciiLine, NoLine)) == "|"


def test_line_style_ordering() -> None:
    """Line styles are ordered by rank."""
    assert NoLine < AsciiLine < ThinLine < ThickLine
    assert max(ThinLine, DoubleLine) is DoubleLine


def test_grid_style_chars() -> None:
    """Grid styles built from a line style expose each part's character."""
    grid = ThinLine.grid
    assert grid.char(GridPart.TOP_LEFT) == "┌"
    assert grid.char(GridPart.TOP_SPLIT) == "┬"
    assert grid.char(GridPart.SPLIT_SPLIT) == "┼"
    assert grid.char(GridPart.MID_MID) == " "
    assert repr(grid) == "┌─┬┐\n│ ││\n├─┼┤\n└─┴┘"


def test_grid_style_masks() -> None:
    """Masks restrict which parts of a grid are drawn."""
    outer = ThinLine.outer
    assert outer.char(GridPart.TOP_LEFT) == "┌"
    assert outer.char(GridPart.TOP_SPLIT) == "─"
    assert outer.char(GridPart.SPLIT_SPLIT) == " "
    assert ThinLine.grid is ThinLine.grid


def test_grid_style_add() -> None:
    """Adding grid styles keeps the heavier line in each direction."""
    grid = ThinLine.inner + ThickLine.outer
    assert grid.char(GridPart.TOP_LEFT) == "┏"
    assert grid.char(GridPart.SPLIT_SPLIT) == "┼"
    assert grid.char(GridPart.TOP_SPLIT) == "┯"
