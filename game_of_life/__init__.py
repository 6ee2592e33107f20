"""Conway's Game of Life on a bounded board."""

from .board import Board, Cell
from .engine import Engine, count_neighbors, step
from .exceptions import BoardError, BoardErrorKind, EngineError, EngineErrorKind, LifeError
from .game import Game, GameConfig, run_history

__all__ = [
    "Board",
    "Cell",
    "Engine",
    "count_neighbors",
    "step",
    "BoardError",
    "BoardErrorKind",
    "EngineError",
    "EngineErrorKind",
    "LifeError",
    "Game",
    "GameConfig",
    "run_history",
]
