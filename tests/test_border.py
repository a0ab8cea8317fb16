"""Test border glyph containers and frame presets."""

from __future__ import annotations

from gridframe.border import (
    ASCII,
    ROUNDED,
    THIN,
    Border,
    Borders,
    HorizontalLine,
    VerticalLine,
)


def test_border_constructors() -> None:
    """Borders can be created empty, filled or fully specified."""
    assert Border.empty().is_empty()
    assert Border.filled("x") == Border("x", "x", "x", "x", "x", "x", "x", "x")
    border = Border.full("t", "b", "l", "r", "1", "2", "3", "4")
    assert border.top == "t"
    assert border.bottom_right == "4"
    assert not border.is_empty()


def test_lines_filled() -> None:
    """Line overrides can set every part at once."""
    assert HorizontalLine.filled("-") == HorizontalLine("-", "-", "-", "-")
    assert VerticalLine.filled("|").top == "|"


def test_borders_predicates() -> None:
    """Frame lines are implied by any glyph which touches them."""
    assert Borders().is_empty()
    borders = Borders(top_left="+")
    assert borders.has_top()
    assert borders.has_left()
    assert not borders.has_bottom()
    assert not borders.has_right()
    assert not borders.has_horizontal()
    assert not borders.has_vertical()

    borders = Borders(intersection="+")
    assert borders.has_horizontal()
    assert borders.has_vertical()
    assert not borders.has_top()

    assert Borders.filled("*").has_bottom()


def test_ascii_preset() -> None:
    """The ASCII preset uses the classic characters."""
    assert ASCII.top == "-"
    assert ASCII.horizontal == "-"
    assert ASCII.left == "|"
    assert ASCII.vertical == "|"
    assert ASCII.top_left == "+"
    assert ASCII.intersection == "+"
    assert ASCII.bottom_intersection == "+"


def test_unicode_presets() -> None:
    """Presets built from line styles pick the matching box drawing characters."""
    assert THIN.top_left == "┌"
    assert THIN.left_intersection == "├"
    assert THIN.intersection == "┼"
    assert ROUNDED.top_left == "╭"
    assert ROUNDED.bottom_right == "╯"
    assert ROUNDED.top == "─"
