"""Bingo game state and winner selection."""

from .grid import Grid
from .runner import GameResult, GameRunner, UnresolvedGameError, WinEvent

__all__ = ["Grid", "GameRunner", "GameResult", "WinEvent", "UnresolvedGameError"]
