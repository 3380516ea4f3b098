"""Bingo grid state: cell values, marked positions and win detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple


Coord = Tuple[int, int]


@dataclass
class Grid:
    """A rectangular grid of integer cells subject to marking.

    Rows and columns are tracked independently, so a row is complete when it
    holds ``width`` marks and a column when it holds ``height`` marks.
    """

    cells: List[List[int]]
    marked: List[Coord] = field(default_factory=list)
    winning_number: Optional[int] = None
    # number of marks present when the grid won; later marks never reach the score
    _marks_at_win: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("Grid must have at least one row and one column")
        width = len(self.cells[0])
        for i, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Grid rows must have equal length: row {i} has {len(row)}, expected {width}"
                )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        return cls(cells=[list(row) for row in rows])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def won(self) -> bool:
        return self.winning_number is not None

    def find(self, value: int) -> Optional[Coord]:
        """Return the first coordinate holding ``value`` in row-major order."""
        for i, row in enumerate(self.cells):
            for j, cell in enumerate(row):
                if cell == value:
                    return (i, j)
        return None

    def mark(self, value: int) -> None:
        coord = self.find(value)
        if coord is not None and coord not in self.marked:
            self.marked.append(coord)

    def check_and_mark(self, value: int) -> bool:
        """Mark ``value`` and report whether the grid has completed a line.

        Once won, the grid short-circuits: it returns True without marking or
        changing its winning number.
        """
        if self.won:
            return True
        self.mark(value)
        if len(self.marked) < min(self.width, self.height):
            return False
        for idx in range(max(self.width, self.height)):
            in_row = sum(1 for r, _ in self.marked if r == idx)
            if in_row == self.width:
                self._record_win(value)
                return True
            in_col = sum(1 for _, c in self.marked if c == idx)
            if in_col == self.height:
                self._record_win(value)
                return True
        return False

    def _record_win(self, value: int) -> None:
        self.winning_number = value
        self._marks_at_win = len(self.marked)

    def scored_marks(self) -> List[Coord]:
        if self.won:
            return self.marked[: self._marks_at_win]
        return list(self.marked)

    def unmarked(self) -> List[int]:
        taken = set(self.scored_marks())
        return [
            cell
            for i, row in enumerate(self.cells)
            for j, cell in enumerate(row)
            if (i, j) not in taken
        ]

    def score(self) -> int:
        if self.winning_number is None:
            return 0
        return sum(self.unmarked()) * self.winning_number
