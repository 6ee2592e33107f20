"""Game orchestration: choose how the board is built, take turns and record the run."""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Sequence

import numpy as np
import pandas as pd

from .board import Board
from .engine import Engine

HISTORY_COLUMNS = ["generation", "population", "density", "births", "deaths"]

DEFAULT_SIZE = 8


@dataclass
class GameConfig:
    """How to set up a game.

    The first source present wins: ``grid``, then ``filename``, then ``text``,
    otherwise a random board of ``width`` x ``height``.
    """
    width: int | None = None
    height: int | None = None
    grid: Sequence[Sequence[int]] | np.ndarray | None = field(default=None, repr=False)
    filename: str | Path | None = None
    text: str | None = field(default=None, repr=False)
    seed: int | None = None
    p_alive: float = 0.5


class Game:
    """Wires a Board to an Engine and drives generations."""

    def __init__(self, config: GameConfig | None = None, **overrides):
        config = config or GameConfig()
        self.config = replace(config, **overrides) if overrides else config
        self._board: Board | None = None
        self._engine: Engine | None = None

    @property
    def board(self) -> Board:
        """Lazily build the board from the configured source."""
        if self._board is None:
            self._board = self._build_board()
        return self._board

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = Engine()
        return self._engine

    def _build_board(self) -> Board:
        config = self.config
        board = Board()
        if config.grid is not None:
            board.set_grid(config.grid)
        elif config.filename is not None:
            board.create_from_file(config.filename)
        elif config.text is not None:
            board.create_from_text(config.text)
        else:
            width = DEFAULT_SIZE if config.width is None else config.width
            height = DEFAULT_SIZE if config.height is None else config.height
            board.create_random(width, height, rng=config.seed, p_alive=config.p_alive)
        return board

    def take_turn(self) -> None:
        """Advance the board by one generation."""
        self.engine.update_generation(self.board)

    def run(
        self,
        generations: int,
        stop_when_dead: bool = True,
        on_turn: Callable[[int, Board], None] | None = None,
    ) -> pd.DataFrame:
        """
        Take up to ``generations`` turns and return the run history.

        The history includes the starting state as generation 0. With
        ``stop_when_dead`` the run ends on the first dead generation.
        ``on_turn(generation, board)`` is called after every turn taken.
        """
        if generations < 0:
            raise ValueError(f"generations must be non-negative, got {generations}")

        snapshots = [self.board.grid]
        for generation in range(1, generations + 1):
            if stop_when_dead and self.board.is_dead():
                break
            self.take_turn()
            snapshots.append(self.board.grid)
            if on_turn is not None:
                on_turn(generation, self.board)

        return run_history(snapshots)


def run_history(snapshots: Sequence[np.ndarray]) -> pd.DataFrame:
    """
    Summarise a sequence of grids, one row per generation.

    Columns: generation, population, density (live fraction), births and
    deaths relative to the previous generation (0 for the first).
    """
    records = []
    previous = None
    for generation, grid in enumerate(snapshots):
        grid = np.asarray(grid, dtype=bool)
        if previous is None:
            births = deaths = 0
        else:
            births = int((grid & ~previous).sum())
            deaths = int((previous & ~grid).sum())
        records.append({
            "generation": generation,
            "population": int(grid.sum()),
            "density": float(grid.mean()),
            "births": births,
            "deaths": deaths,
        })
        previous = grid

    return pd.DataFrame.from_records(records, columns=HISTORY_COLUMNS)
