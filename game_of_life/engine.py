"""Conway's Game of Life rule engine."""

import numpy as np

from .board import Board, Cell
from .exceptions import EngineError, EngineErrorKind


# Moore neighbourhood offsets as (dy, dx)
NEIGHBOUR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1)
]


def count_neighbors(grid: np.ndarray) -> np.ndarray:
    """Count living neighbors for each cell. Cells beyond the edge count as dead."""
    height, width = grid.shape

    # Pad with a ring of dead cells so every shifted window stays in range
    padded = np.pad(np.asarray(grid, dtype=np.uint8), 1, mode="constant", constant_values=0)

    neighbor_count = np.zeros((height, width), dtype=np.uint8)
    for dy, dx in NEIGHBOUR_OFFSETS:
        neighbor_count += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]

    return neighbor_count


def step(grid: np.ndarray) -> np.ndarray:
    """Compute one Game of Life step on a bounded grid and return the new grid."""
    grid = np.asarray(grid)
    neighbor_count = count_neighbors(grid)

    # 1. Any live cell with 2 or 3 live neighbors survives
    # 2. Any dead cell with exactly 3 live neighbors becomes alive
    # 3. All other cells die or remain dead
    survives = (grid == Cell.ALIVE) & ((neighbor_count == 2) | (neighbor_count == 3))
    born = (grid == Cell.DEAD) & (neighbor_count == 3)

    return (survives | born).astype(np.uint8)


class Engine:
    """Applies the Life rule to a Board one generation at a time."""

    def __init__(self):
        self.generations = 0

    def update_generation(self, board: Board) -> None:
        """
        Advance ``board`` by one generation.

        The next grid is computed in full from the current snapshot and then
        handed to ``board.set_grid``; the board never sees a half-updated grid.

        Raises:
            EngineError: if the board holds no grid
        """
        if board.height == 0:
            raise EngineError(
                "The supplied board must contain an initialized grid",
                EngineErrorKind.UNINITIALIZED_BOARD,
            )

        # a dead board is not going to come back to life
        if not board.is_dead():
            board.set_grid(step(board.grid))

        self.generations += 1

    @staticmethod
    def active_neighbours(board: Board, x: int, y: int) -> int:
        """Number of live cells around column ``x`` of row ``y``, read cell by cell."""
        return sum(
            board.cell(x + dx, y + dy) == Cell.ALIVE
            for dy, dx in NEIGHBOUR_OFFSETS
        )

    @staticmethod
    def next_state(cell: Cell, active_neighbours: int) -> Cell:
        """Outcome for one cell under B3/S23."""
        if cell == Cell.ALIVE:
            return Cell.ALIVE if active_neighbours in (2, 3) else Cell.DEAD
        return Cell.ALIVE if active_neighbours == 3 else Cell.DEAD
