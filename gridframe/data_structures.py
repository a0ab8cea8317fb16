"""Contains commonly used data structures."""

from typing import NamedTuple


class Position(NamedTuple):
    """A zero-based ``(row, col)`` coordinate on the grid."""

    row: "int"
    col: "int"

    def shift(self, rows: "int" = 0, cols: "int" = 0) -> "Position":
        """Return the position offset by a number of rows and columns."""
        return Position(self.row + rows, self.col + cols)


class Shape(NamedTuple):
    """The number of rows and columns in a grid."""

    rows: "int"
    cols: "int"

    def __contains__(self, pos: "object") -> "bool":
        """Determine if a position lies within the grid's bounds."""
        if not isinstance(pos, tuple) or len(pos) != 2:
            return False
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols


class Offset(NamedTuple):
    """A distance along a border segment, counted from its start or its end."""

    value: "int"
    from_end: "bool" = False

    @classmethod
    def begin(cls, value: "int") -> "Offset":
        """Count ``value`` characters from the start of a segment."""
        return cls(value, False)

    @classmethod
    def end(cls, value: "int") -> "Offset":
        """Count ``value`` characters back from the end of a segment."""
        return cls(value, True)


class DiInt(NamedTuple):
    """A tuple of four integers with directions."""

    top: "int" = 0
    right: "int" = 0
    bottom: "int" = 0
    left: "int" = 0

    @classmethod
    def from_value(cls, value: "int") -> "DiInt":
        """Construct an instance from a single value."""
        return cls(top=value, right=value, bottom=value, left=value)

    @classmethod
    def coerce(cls, value: "DiInt | int") -> "DiInt":
        """Convert a single integer or a directional tuple to a :class:`DiInt`.

        Raises:
            ValueError: If any of the values is negative

        """
        result = cls.from_value(value) if isinstance(value, int) else cls(*value)
        if any(x < 0 for x in result):
            raise ValueError(f"Padding cannot be negative: {result}")
        return result

    @property
    def horizontal(self) -> "int":
        """The combined size of the left and right sides."""
        return self.left + self.right

    @property
    def vertical(self) -> "int":
        """The combined size of the top and bottom sides."""
        return self.top + self.bottom
