"""Test the grid configuration and its border fallback."""

from __future__ import annotations

import pytest

from gridframe.border import ASCII, Border, Borders, HorizontalLine
from gridframe.config import DEFAULT_PADDING, GridConfig
from gridframe.data_structures import DiInt, Offset, Shape
from gridframe.entity import Entity
from gridframe.utils import AlignmentHorizontal, AlignmentVertical


def test_defaults() -> None:
    """A new configuration has default padding and no borders."""
    cfg = GridConfig()
    assert cfg.get_padding((3, 4)) == DEFAULT_PADDING == DiInt(0, 1, 0, 1)
    assert cfg.get_borders_missing() == " "
    assert cfg.get_border((0, 0), (2, 2)) == Border.empty()
    assert cfg.count_horizontal(2) == 0
    assert cfg.count_vertical(2) == 0
    assert cfg.get_alignment_horizontal((0, 0)) == AlignmentHorizontal.LEFT
    assert cfg.get_alignment_vertical((0, 0)) == AlignmentVertical.TOP


def test_padding() -> None:
    """Padding can be set for any entity, and negative padding is rejected."""
    cfg = GridConfig(padding=0)
    cfg.set_padding(Entity.of_column(1), 2)
    assert cfg.get_padding((0, 0)) == DiInt(0, 0, 0, 0)
    assert cfg.get_padding((0, 1)) == DiInt(2, 2, 2, 2)
    with pytest.raises(ValueError):
        cfg.set_padding(Entity.grid(), DiInt(0, -1, 0, 0))


def test_full_frame() -> None:
    """An ASCII frame resolves every facet of every cell."""
    cfg = GridConfig(borders=ASCII)
    assert cfg.get_border((0, 0), (2, 2)) == Border.full(
        "-", "-", "|", "|", "+", "+", "+", "+"
    )
    assert cfg.count_horizontal(2) == 3
    assert cfg.count_vertical(2) == 3


def test_missing_glyph_fills_implied_borders() -> None:
    """Border positions on existing lines without a glyph use the missing glyph."""
    cfg = GridConfig(borders=Borders(top="-", left="|"))
    cfg.set_borders_missing("?")
    shape = Shape(2, 2)
    border = cfg.get_border((0, 0), shape)
    assert border.top == "-"
    assert border.left == "|"
    # The top and left lines exist, so their corner does too
    assert border.top_left == "?"
    # No interior or closing lines are implied
    assert border.bottom is None
    assert border.right is None
    assert border.top_right is None
    assert border.bottom_left is None


def test_facets_resolve_independently() -> None:
    """Each facet comes from the most specific layer which sets it."""
    cfg = GridConfig(borders=ASCII)
    cfg.insert_horizontal_line(1, HorizontalLine(main="="))
    cfg.set_border((1, 1), Border(left="#"))
    border = cfg.get_border((1, 1), (3, 3))
    assert border.top == "="
    assert border.left == "#"
    assert border.right == "|"
    assert border.bottom == "-"
    assert border.top_left == "+"


def test_global_border() -> None:
    """A global glyph makes every border exist."""
    cfg = GridConfig()
    cfg.set_global_border("*")
    assert cfg.get_global_border() == "*"
    assert cfg.get_border((1, 1), (3, 3)) == Border.filled("*")
    assert cfg.count_horizontal(3) == 4
    cfg.remove_borders()
    assert cfg.get_global_border() is None
    assert cfg.count_horizontal(3) == 0


def test_cell_override_adds_lines() -> None:
    """A per-cell override makes its lines exist across the grid."""
    cfg = GridConfig()
    cfg.set_border((0, 0), Border(bottom="-"))
    shape = Shape(2, 2)
    assert cfg.has_horizontal(1, 2)
    assert cfg.get_horizontal((1, 0), 2) == "-"
    # Elsewhere on the same line the missing glyph fills in
    assert cfg.get_horizontal((1, 1), 2) == " "
    # No vertical line exists, so there is no intersection
    assert cfg.get_intersection((1, 1), shape) is None

    cfg.remove_border((0, 0), shape)
    assert not cfg.has_horizontal(1, 2)


def test_border_colors() -> None:
    """Border styles are kept separately from border characters."""
    cfg = GridConfig(borders=ASCII)
    cfg.set_border_color((0, 0), Border(top="fg:red"))
    shape = Shape(1, 1)
    assert cfg.has_border_colors()
    assert cfg.get_border_color((0, 0), shape).top == "fg:red"
    assert cfg.get_horizontal_color((0, 0), 1) == "fg:red"
    assert cfg.get_vertical_color((0, 0), 1) is None
    assert cfg.get_border((0, 0), shape).top == "-"

    cfg.set_borders_color(Borders(left="fg:blue"))
    assert cfg.get_borders_color().left == "fg:blue"
    assert cfg.get_vertical_color((0, 0), 1) == "fg:blue"

    cfg.remove_border_color((0, 0), shape)
    assert cfg.get_horizontal_color((0, 0), 1) is None

    cfg.set_border_color_default("bold")
    assert cfg.get_border_color_default() == "bold"
    assert cfg.get_intersection_color((0, 0), shape) == "bold"
    assert cfg.get_vertical_color((0, 0), 1) == "bold"


def test_segment_char_overrides() -> None:
    """Offsets from the start of a segment win over offsets from its end."""
    cfg = GridConfig(borders=ASCII)
    cfg.set_horizontal_char((1, 0), "a", Offset.begin(2))
    cfg.set_horizontal_char((1, 0), "b", Offset.end(0))
    assert cfg.is_overridden_horizontal((1, 0))
    assert not cfg.is_overridden_horizontal((0, 0))
    assert cfg.lookup_horizontal_char((1, 0), 0, 5) is None
    assert cfg.lookup_horizontal_char((1, 0), 2, 5) == "a"
    assert cfg.lookup_horizontal_char((1, 0), 4, 5) == "b"
    # The start offset is taken when both name the same character
    assert cfg.lookup_horizontal_char((1, 0), 2, 3) == "a"
    # Nothing is counted from the end past the segment
    assert cfg.lookup_horizontal_char((1, 0), 5, 5) is None

    cfg.remove_overridden_horizontal((1, 0))
    assert not cfg.is_overridden_horizontal((1, 0))
    assert cfg.lookup_horizontal_char((1, 0), 2, 5) is None

    cfg.set_vertical_char((0, 1), "c", Offset.end(1))
    assert cfg.lookup_vertical_char((0, 1), 1, 3) == "c"
    assert cfg.lookup_vertical_char((0, 1), 0, 3) is None
    cfg.remove_borders()
    assert not cfg.is_overridden_vertical((0, 1))

    with pytest.raises(ValueError):
        cfg.set_vertical_char((0, 0), "x", Offset.begin(-1))


def test_segment_color_overrides() -> None:
    """Styles of single border characters are kept with the other styles."""
    cfg = GridConfig()
    assert not cfg.has_border_colors()
    cfg.set_horizontal_color((0, 0), "fg:red", Offset.begin(0))
    cfg.set_vertical_color((0, 0), "fg:blue", Offset.end(0))
    assert cfg.has_border_colors()
    assert cfg.is_overridden_horizontal_color((0, 0))
    assert cfg.lookup_horizontal_color((0, 0), 0, 3) == "fg:red"
    assert cfg.lookup_vertical_color((0, 0), 1, 2) == "fg:blue"

    cfg.set_border_color_default("bold")
    assert not cfg.is_overridden_horizontal_color((0, 0))
    assert not cfg.is_overridden_vertical_color((0, 0))


def test_spans() -> None:
    """Span settings are delegated to the grid topology."""
    cfg = GridConfig()
    cfg.set_column_span((0, 0), 2)
    cfg.set_row_span((0, 0), 2)
    assert cfg.has_column_spans()
    assert cfg.has_row_spans()
    assert cfg.get_column_span((0, 0), Shape(2, 2)) == 2
    assert cfg.get_row_span((0, 0), Shape(1, 2)) is None
    assert not cfg.is_cell_visible((1, 1))
    assert cfg.is_cell_covered_by_both_spans((1, 1))
    assert cfg.is_cell_covered_by_column_span((0, 1))
    assert cfg.is_cell_covered_by_row_span((1, 0))
    cfg.remove_column_spans()
    cfg.remove_row_spans()
    assert cfg.get_column_spans() == {}
    assert cfg.get_row_spans() == {}
    assert cfg.is_cell_visible((1, 1))


def test_alignment() -> None:
    """Alignment can be set per entity."""
    cfg = GridConfig()
    cfg.set_alignment_horizontal(Entity.of_row(0), AlignmentHorizontal.RIGHT)
    cfg.set_alignment_vertical(Entity.of_cell(1, 1), AlignmentVertical.BOTTOM)
    assert cfg.get_alignment_horizontal((0, 5)) == AlignmentHorizontal.RIGHT
    assert cfg.get_alignment_horizontal((1, 5)) == AlignmentHorizontal.LEFT
    assert cfg.get_alignment_vertical((1, 1)) == AlignmentVertical.BOTTOM
