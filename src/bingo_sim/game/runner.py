"""Game runner applying a draw sequence to a collection of grids."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from .grid import Grid

logger = logging.getLogger(__name__)


class UnresolvedGameError(RuntimeError):
    """Raised when the draws run out before the requested winner exists."""


@dataclass
class WinEvent:
    """A grid's transition from not-won to won."""

    grid_index: int
    draw_index: int
    number: int
    score: int


@dataclass
class GameResult:
    """Outcome of a run in either winner mode."""

    grid: Grid
    grid_index: int
    winning_number: int
    score: int
    wins: List[WinEvent] = field(default_factory=list)


class GameRunner:
    """Owns the draws and grids of one game.

    Both modes mutate the grids, so a runner is meant for a single run.
    """

    def __init__(self, draws: Sequence[int], grids: Sequence[Grid]):
        self.draws = list(draws)
        self.grids = list(grids)
        self.wins: List[WinEvent] = []

    def _record(self, grid_index: int, draw_index: int, number: int) -> WinEvent:
        grid = self.grids[grid_index]
        event = WinEvent(
            grid_index=grid_index, draw_index=draw_index, number=number, score=grid.score()
        )
        self.wins.append(event)
        logger.info("Found winner for number: %d (grid %d)", number, grid_index)
        return event

    def _result(self, grid_index: int, number: int) -> GameResult:
        grid = self.grids[grid_index]
        return GameResult(
            grid=grid,
            grid_index=grid_index,
            winning_number=number,
            score=grid.score(),
            wins=list(self.wins),
        )

    def first_winner(self) -> GameResult:
        """Stop at the first grid to complete a line; ties go to collection order."""
        for draw_index, number in enumerate(self.draws):
            logger.debug("Draw #%d: %d", draw_index, number)
            for grid_index, grid in enumerate(self.grids):
                was_won = grid.won
                if grid.check_and_mark(number) and not was_won:
                    self._record(grid_index, draw_index, number)
                    return self._result(grid_index, number)
        raise UnresolvedGameError(
            f"No grid won after {len(self.draws)} draws across {len(self.grids)} grids"
        )

    def last_winner(self) -> GameResult:
        """Consume every draw and return the grid that completed the winners set.

        When several grids win on the final draw, the last one in collection
        order is reported. Winners are tracked by position, so grids with
        identical cells count as separate winners.
        """
        winners: Set[int] = set()
        last: Optional[Tuple[int, int]] = None
        for draw_index, number in enumerate(self.draws):
            logger.debug("Draw #%d: %d", draw_index, number)
            for grid_index, grid in enumerate(self.grids):
                if grid_index in winners:
                    continue
                if grid.check_and_mark(number):
                    winners.add(grid_index)
                    self._record(grid_index, draw_index, number)
                    if len(winners) == len(self.grids):
                        last = (grid_index, number)
        if last is None:
            raise UnresolvedGameError(
                f"Only {len(winners)} of {len(self.grids)} grids won after {len(self.draws)} draws"
            )
        return self._result(*last)
