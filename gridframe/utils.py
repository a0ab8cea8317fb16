"""Utilities for measuring and aligning cell text."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from prompt_toolkit.formatted_text.utils import fragment_list_width, split_lines
from prompt_toolkit.utils import get_cwidth

if TYPE_CHECKING:
    from prompt_toolkit.formatted_text.base import StyleAndTextTuples


class AlignmentHorizontal(Enum):
    """Horizontal alignment of text within a cell."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class AlignmentVertical(Enum):
    """Vertical alignment of text within a cell."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


def string_width(text: str) -> int:
    """Return the display width of a single line of text.

    Wide characters count as two columns; combining and control characters
    count as none.
    """
    return get_cwidth(text)


def count_lines(text: str) -> int:
    """Count the lines in some text.

    Empty text still occupies a single line, and a trailing newline begins a
    new, empty line.
    """
    return text.count("\n") + 1


def string_width_multiline(text: str) -> int:
    """Return the display width of the widest line in some text."""
    return max(string_width(line) for line in text.split("\n"))


def string_dimension(text: str) -> tuple[int, int]:
    """Return the number of lines and the maximum line width of some text."""
    return count_lines(text), string_width_multiline(text)


def align_line(
    line: StyleAndTextTuples,
    width: int,
    how: AlignmentHorizontal = AlignmentHorizontal.LEFT,
    style: str = "",
) -> StyleAndTextTuples:
    """Pad a line of formatted text to a given width.

    Lines wider than ``width`` are returned unchanged.

    Args:
        line: The line of formatted text to align
        width: The width to which the line should be padded
        how: The alignment direction
        style: The style to apply to the padding

    Returns:
        The aligned line

    """
    line_width = fragment_list_width(line)
    pad_left = pad_right = 0
    remaining = max(width - line_width, 0)
    if how == AlignmentHorizontal.CENTER:
        pad_left = remaining // 2
        pad_right = remaining - pad_left
    elif how == AlignmentHorizontal.LEFT:
        pad_right = remaining
    else:
        pad_left = remaining
    result: StyleAndTextTuples = []
    if pad_left:
        result.append((style, " " * pad_left))
    result.extend(line)
    if pad_right:
        result.append((style, " " * pad_right))
    return result


def top_indent(
    count: int,
    height: int,
    how: AlignmentVertical = AlignmentVertical.TOP,
) -> int:
    """Calculate how many blank lines should precede ``count`` lines of text."""
    remaining = max(height - count, 0)
    if how == AlignmentVertical.TOP:
        return 0
    if how == AlignmentVertical.MIDDLE:
        return remaining // 2
    return remaining


def text_lines(text: str, style: str = "") -> list[StyleAndTextTuples]:
    """Split text into lines of formatted text."""
    return list(split_lines([(style, text)]))
