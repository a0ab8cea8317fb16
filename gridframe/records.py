"""Sources of cell text which a grid can be built from."""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


class Records(Protocol):
    """The cell text of a grid, read row by row."""

    def iter_rows(self) -> Iterable[Iterable[str]]:
        """Iterate over the rows, each an iterable of cell texts."""
        ...

    def count_columns(self) -> int:
        """Return the number of columns in the grid."""
        ...

    def hint_count_rows(self) -> int | None:
        """Return the number of rows, if it is known in advance."""
        ...


def iter_grid_rows(records: Records) -> Iterator[list[str]]:
    """Iterate over the rows of some records, each exactly one grid wide.

    Cells beyond the column count are dropped and short rows are filled out
    with empty cells.
    """
    count = records.count_columns()
    for row in records.iter_rows():
        cells = list(islice(row, count))
        if len(cells) < count:
            cells.extend([""] * (count - len(cells)))
        yield cells


class ListRecords:
    """Records held in memory as a list of rows."""

    def __init__(
        self, rows: Iterable[Sequence[str]], count_columns: int | None = None
    ) -> None:
        """Create records from a list of rows.

        Args:
            rows: The rows of cell text
            count_columns: The number of columns. If :py:const:`None`, the length
                of the longest row is used

        """
        self.rows = [list(row) for row in rows]
        if count_columns is None:
            count_columns = max((len(row) for row in self.rows), default=0)
        self._count_columns = count_columns

    def iter_rows(self) -> Iterator[list[str]]:
        """Iterate over the rows."""
        return iter(self.rows)

    def count_columns(self) -> int:
        """Return the number of columns."""
        return self._count_columns

    def hint_count_rows(self) -> int | None:
        """Return the number of rows."""
        return len(self.rows)

    def count_rows(self) -> int:
        """Return the number of rows."""
        return len(self.rows)

    def get_text(self, pos: tuple[int, int]) -> str:
        """Return the text of a cell, or an empty string if the cell is missing."""
        row, col = pos
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return ""

    def __repr__(self) -> str:
        """Represent the records as a string."""
        return f"ListRecords({self.rows!r})"


class IterRecords:
    """Records read once from an iterable of rows."""

    def __init__(
        self,
        rows: Iterable[Iterable[str]],
        count_columns: int,
        count_rows: int | None = None,
    ) -> None:
        """Create records from an iterable.

        Args:
            rows: An iterable of rows of cell text
            count_columns: The number of columns
            count_rows: The number of rows, if known in advance

        """
        self.rows = rows
        self._count_columns = count_columns
        self._count_rows = count_rows

    def iter_rows(self) -> Iterable[Iterable[str]]:
        """Iterate over the rows."""
        return self.rows

    def count_columns(self) -> int:
        """Return the number of columns."""
        return self._count_columns

    def hint_count_rows(self) -> int | None:
        """Return the number of rows, if it was given."""
        return self._count_rows
