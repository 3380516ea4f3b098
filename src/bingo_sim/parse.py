from __future__ import annotations

import re
from typing import List, Tuple

from .game import Grid

_BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


class InputFormatError(ValueError):
    """Puzzle input that cannot be turned into draws and grids."""


def _parse_int(token: str, where: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(f"Invalid integer {token!r} in {where}") from None


def split_blocks(text: str) -> List[str]:
    normalized = text.replace("\r\n", "\n").strip()
    if not normalized:
        return []
    return [block.strip() for block in _BLOCK_SEPARATOR.split(normalized) if block.strip()]


def parse_draws(block: str) -> List[int]:
    """Parse comma-separated draws; a line break also separates two draws."""
    tokens: List[str] = []
    for line in block.splitlines():
        line = line.strip().rstrip(",")
        if line:
            tokens.extend(tok.strip() for tok in line.split(","))
    if not tokens:
        raise InputFormatError("Draw sequence is empty")
    return [_parse_int(tok, "draw sequence") for tok in tokens]


def parse_grid(block: str, index: int = 0) -> Grid:
    rows = [
        [_parse_int(tok, f"grid {index}") for tok in line.split()]
        for line in block.splitlines()
        if line.strip()
    ]
    try:
        return Grid.from_rows(rows)
    except ValueError as exc:
        raise InputFormatError(f"Grid {index}: {exc}") from exc


def parse_input(text: str) -> Tuple[List[int], List[Grid]]:
    """Parse puzzle text into the draw sequence and the grids in file order.

    The first blank-line separated block holds comma-separated draws; every
    following block is one grid of whitespace-separated integers.
    """
    blocks = split_blocks(text)
    if not blocks:
        raise InputFormatError("Input is empty")
    draws = parse_draws(blocks[0])
    if len(blocks) < 2:
        raise InputFormatError("Input has no grid blocks after the draw sequence")
    grids = [parse_grid(block, i) for i, block in enumerate(blocks[1:])]
    return draws, grids
