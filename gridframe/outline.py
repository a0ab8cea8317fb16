"""Outline groups of highlighted cells with a border.

Highlighted cells are split into connected segments, and each segment is
framed as one shape: edges shared by two cells of the same segment are left
undrawn, and corners are chosen so the outline stays closed where it turns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridframe.border import Border
from gridframe.data_structures import Position, Shape
from gridframe.entity import Entity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gridframe.config import GridConfig

log = logging.getLogger(__name__)

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def split_segments(positions: Iterable[tuple[int, int]]) -> list[set[Position]]:
    """Group positions into maximal sets of edge-connected cells.

    Two cells are connected if they share an edge. Segments are returned in
    the order their first cell appears in ``positions``.
    """
    ordered = list(dict.fromkeys(Position(*pos) for pos in positions))
    remaining = set(ordered)
    segments = []
    for start in ordered:
        if start not in remaining:
            continue
        remaining.discard(start)
        segment = {start}
        todo = [start]
        while todo:
            pos = todo.pop()
            for drow, dcol in _NEIGHBOURS:
                neighbour = pos.shift(drow, dcol)
                if neighbour in remaining:
                    remaining.discard(neighbour)
                    segment.add(neighbour)
                    todo.append(neighbour)
        segments.append(segment)
    return segments


def build_cell_border(
    segment: set[Position], pos: tuple[int, int], border: Border
) -> Border:
    """Calculate the border facets a cell contributes to its segment's outline.

    An edge is drawn wherever the cell has no neighbour in the segment on that
    side. Where the outline turns, the corner glyph is taken from the border so
    the turn is drawn with the correct shape: an outward corner uses the
    matching corner, and an inward corner borrows the opposite one.

    Args:
        segment: The connected cells being outlined
        pos: The position of the cell within the segment
        border: The glyphs to outline the segment with

    Returns:
        The facets to override for the cell

    """
    row, col = pos

    def has(drow: int, dcol: int) -> bool:
        return (row + drow, col + dcol) in segment

    top, bottom = has(-1, 0), has(1, 0)
    left, right = has(0, -1), has(0, 1)
    top_left, top_right = has(-1, -1), has(-1, 1)
    bottom_left, bottom_right = has(1, -1), has(1, 1)

    facets = dict.fromkeys(Border._fields)

    if border.top is not None and not top:
        facets["top"] = border.top
        if right and not top_right:
            facets["top_right"] = border.top
    if border.bottom is not None and not bottom:
        facets["bottom"] = border.bottom
        if right and not bottom_right:
            facets["bottom_right"] = border.bottom
    if border.left is not None and not left:
        facets["left"] = border.left
        if bottom and not bottom_left:
            facets["bottom_left"] = border.left
    if border.right is not None and not right:
        facets["right"] = border.right
        if bottom and not bottom_right:
            facets["bottom_right"] = border.right

    if border.top_left is not None and not left and not top:
        facets["top_left"] = border.top_left
    if border.bottom_left is not None and not left and not bottom:
        facets["bottom_left"] = border.bottom_left
    if border.top_right is not None and not right and not top:
        facets["top_right"] = border.top_right
    if border.bottom_right is not None and not right and not bottom:
        facets["bottom_right"] = border.bottom_right

    # Inward corners, where the segment continues diagonally
    if not bottom:
        if not left and top_left and border.top_right is not None:
            facets["top_left"] = border.top_right
        if left and bottom_left and border.top_left is not None:
            facets["bottom_left"] = border.top_left
        if not right and top_right and border.top_left is not None:
            facets["top_right"] = border.top_left
        if right and bottom_right and border.top_right is not None:
            facets["bottom_right"] = border.top_right
    if not top:
        if not left and bottom_left and border.bottom_right is not None:
            facets["bottom_left"] = border.bottom_right
        if left and top_left and border.bottom_left is not None:
            facets["top_left"] = border.bottom_left
        if not right and bottom_right and border.bottom_left is not None:
            facets["bottom_right"] = border.bottom_left
        if right and top_right and border.bottom_right is not None:
            facets["top_right"] = border.bottom_right

    return Border(**facets)


def outline(
    targets: Iterable[tuple[int, int]], border: Border
) -> dict[Position, Border]:
    """Calculate per-cell border overrides which outline a set of cells.

    Args:
        targets: The positions of the cells to outline. They need not be
            connected; each connected group is outlined separately.
        border: The glyphs to outline the cells with

    Returns:
        A mapping of cell positions to the border facets to override

    """
    overrides = {}
    segments = split_segments(targets)
    log.debug("Outlining %d segment(s)", len(segments))
    for segment in segments:
        for pos in segment:
            overrides[pos] = build_cell_border(segment, pos, border)
    return overrides


def highlight(
    cfg: GridConfig,
    targets: Iterable[Entity | tuple[int, int]],
    shape: tuple[int, int],
    border: Border | None = None,
    color: Border | None = None,
) -> None:
    """Outline cells of a grid by adding border overrides to its configuration.

    Args:
        cfg: The grid configuration to update
        targets: Entities or cell positions to highlight. Positions outside the
            grid are ignored.
        shape: The shape of the grid
        border: The characters to outline the cells with
        color: The styles to outline the cells with

    """
    shape = Shape(*shape)
    positions = []
    for target in targets:
        if not isinstance(target, Entity):
            target = Entity.of_cell(*target)
        positions.extend(pos for pos in target.iter(shape) if pos in shape)

    if border is not None:
        for pos, cell_border in outline(positions, border).items():
            cfg.set_border(pos, cell_border)
    if color is not None:
        for pos, cell_border in outline(positions, color).items():
            cfg.set_border_color(pos, cell_border)
