"""Puzzle registry: maps a day and part to the function that solves it."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Tuple

from .game import GameRunner
from .parse import parse_input


class Part(str, Enum):
    ONE = "part1"
    TWO = "part2"


class UnknownPuzzleError(KeyError):
    """No solver registered for the requested day and part."""


def day4_part1(text: str) -> str:
    draws, grids = parse_input(text)
    result = GameRunner(draws, grids).first_winner()
    return f"Winner found with number {result.winning_number} and score {result.score}"


def day4_part2(text: str) -> str:
    draws, grids = parse_input(text)
    result = GameRunner(draws, grids).last_winner()
    return (
        f"Last winner is board with winning number {result.winning_number} "
        f"and score {result.score}"
    )


PUZZLES: Dict[Tuple[int, Part], Callable[[str], str]] = {
    (4, Part.ONE): day4_part1,
    (4, Part.TWO): day4_part2,
}


def get_solver(day: int, part: Part) -> Callable[[str], str]:
    try:
        return PUZZLES[(day, Part(part))]
    except (KeyError, ValueError):
        label = part.value if isinstance(part, Part) else part
        raise UnknownPuzzleError(f"Day {day} {label} not implemented") from None


def input_path(day: int, *, input_dir: str, input_pattern: str) -> Path:
    return Path(input_dir) / input_pattern.format(day=day)
