"""Test outlining of highlighted cells."""

from __future__ import annotations

from gridframe.border import Border
from gridframe.config import GridConfig
from gridframe.data_structures import Position, Shape
from gridframe.entity import Entity
from gridframe.outline import build_cell_border, highlight, outline, split_segments

FRAME = Border.full("-", "=", "[", "]", "1", "2", "3", "4")


def test_split_segments() -> None:
    """Cells sharing an edge are grouped; diagonal neighbours are not."""
    segments = split_segments([(0, 0), (0, 2), (0, 1), (5, 5)])
    assert segments == [{(0, 0), (0, 1), (0, 2)}, {(5, 5)}]
    assert len(split_segments([(0, 0), (1, 1)])) == 2
    assert split_segments([]) == []


def test_split_segments_merges_late_joins() -> None:
    """Groups found separately are merged when a later cell connects them."""
    segments = split_segments([(0, 0), (0, 2), (1, 2), (1, 0), (1, 1)])
    assert segments == [{(0, 0), (0, 2), (1, 0), (1, 1), (1, 2)}]


def test_outline_block() -> None:
    """A 2x2 block gets one rectangular outline and no inner edges."""
    overrides = outline([(0, 0), (0, 1), (1, 0), (1, 1)], FRAME)
    assert overrides == {
        Position(0, 0): Border(
            top="-", left="[", top_left="1", top_right="-", bottom_left="["
        ),
        Position(0, 1): Border(
            top="-", right="]", top_right="2", bottom_right="]"
        ),
        Position(1, 0): Border(
            bottom="=", left="[", bottom_left="3", bottom_right="="
        ),
        Position(1, 1): Border(bottom="=", right="]", bottom_right="4"),
    }


def test_outline_single_cell() -> None:
    """A lone cell is fully framed."""
    assert outline([(2, 3)], FRAME) == {Position(2, 3): FRAME}


def test_outline_concave_corner() -> None:
    """The inside corner of an L shape borrows the opposite corner glyph."""
    segment = {Position(0, 0), Position(1, 0), Position(1, 1)}
    corner = build_cell_border(segment, (1, 1), FRAME)
    assert corner.top_left == "3"
    assert corner.top == "-"
    assert corner.left is None
    above = build_cell_border(segment, (0, 0), FRAME)
    assert above.bottom_right == "3"
    assert above.right == "]"
    assert above.bottom is None


def test_outline_closure() -> None:
    """Every edge between a segment cell and a non-segment cell is drawn once."""
    targets = [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2), (2, 3), (4, 0)]
    overrides = outline(targets, Border.filled("x"))
    cells = set(overrides)
    for (row, col), border in overrides.items():
        assert (border.top is None) == ((row - 1, col) in cells)
        assert (border.bottom is None) == ((row + 1, col) in cells)
        assert (border.left is None) == ((row, col - 1) in cells)
        assert (border.right is None) == ((row, col + 1) in cells)


def test_outline_partial_border() -> None:
    """Only the glyphs given in the border are emitted."""
    overrides = outline([(0, 0), (0, 1)], Border(top="-"))
    assert overrides[Position(0, 0)] == Border(top="-", top_right="-")
    assert overrides[Position(0, 1)] == Border(top="-")


def test_highlight() -> None:
    """Highlighting writes overrides into the configuration."""
    cfg = GridConfig()
    shape = Shape(3, 3)
    highlight(cfg, [Entity.of_row(0), (9, 9)], shape, border=Border.filled("*"))
    assert cfg.get_border((0, 0), shape).top == "*"
    assert cfg.get_border((0, 0), shape).left == "*"
    assert cfg.get_border((0, 2), shape).right == "*"
    # The shared edges are not drawn, but the missing glyph fills the line
    assert cfg.get_border((0, 0), shape).right == " "
    assert cfg.get_border((2, 2), shape).bottom is None


def test_highlight_color() -> None:
    """Highlighting can set border styles without changing characters."""
    cfg = GridConfig()
    shape = Shape(2, 2)
    highlight(cfg, [(0, 0)], shape, color=Border.filled("fg:red"))
    assert cfg.get_border_color((0, 0), shape) == Border.filled("fg:red")
    assert cfg.get_border((0, 0), shape) == Border.empty()
