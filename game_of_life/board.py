"""Board model for Conway's Game of Life: cell states, grid validation and parsing."""

from enum import IntEnum
from pathlib import Path
from typing import Iterable, Iterator, Sequence

import numpy as np

from .exceptions import BoardError, BoardErrorKind


MIN_SIZE = 3
ENCODED_CHARACTERS = frozenset("01")
LINE_TRAILING_BLANKS = " \t\r\n"


class Cell(IntEnum):
    """State of a single grid position."""

    DEAD = 0
    ALIVE = 1


def _to_cell(value) -> Cell | None:
    """Return the Cell for a valid raw value, or None if the value is not a cell state."""
    if isinstance(value, Cell):
        return value
    if isinstance(value, (bool, np.bool_, int, np.integer)) and value in (0, 1):
        return Cell(int(value))
    return None


def _split_lines(source: str | Iterable[str]) -> list[str]:
    """Split on line feeds only and trim trailing ASCII blanks; anything else stays row content."""
    if isinstance(source, str):
        lines = source.split("\n")
    else:
        lines = list(source)
    return [line.rstrip(LINE_TRAILING_BLANKS) for line in lines]


def _validate_line(line: str, line_number: int, expected: int) -> None:
    """Check one encoded line against the expected width and the 0/1 alphabet."""
    if len(line) != expected:
        raise BoardError(
            f"Line {line_number} length is {len(line)}, {expected} expected",
            BoardErrorKind.LINE_LENGTH_MISMATCH,
            line_number=line_number,
            expected=expected,
            actual=len(line),
        )
    for character in line:
        if character not in ENCODED_CHARACTERS:
            raise BoardError(
                f"Encountered unexpected character {character!r} on line {line_number}",
                BoardErrorKind.INVALID_CHARACTER,
                line_number=line_number,
                character=character,
            )


def decode_grid(source: str | Iterable[str]) -> list[list[Cell]]:
    """
    Decode ``0``/``1`` text into rows of cells.

    The first non-blank line sets the expected width; blank lines before the
    first row and after the last row are ignored. Line numbers in errors are
    1-based positions in the source.
    """
    lines = _split_lines(source)
    numbered = [(i + 1, line) for i, line in enumerate(lines)]

    # drop leading and trailing blank lines
    while numbered and not numbered[0][1]:
        numbered.pop(0)
    while numbered and not numbered[-1][1]:
        numbered.pop()

    if not numbered:
        raise BoardError("Source is empty", BoardErrorKind.EMPTY_INPUT)

    expected = len(numbered[0][1])
    grid = []
    for line_number, line in numbered:
        _validate_line(line, line_number, expected)
        grid.append([Cell(int(character)) for character in line])
    return grid


class Board:
    """
    Holds one validated rectangular grid of cells.

    The grid is only ever replaced as a whole through ``set_grid`` (or one of
    the ``create_*`` constructors). Rows are handed out as tuples and the
    array snapshot is read-only, so readers cannot change the board.
    """

    def __init__(self, grid=None):
        self._grid: np.ndarray | None = None
        if grid is not None:
            self.set_grid(grid)

    # ----------------------- Construction ----------------------- #

    def create_from_text(self, source: str | Iterable[str]) -> None:
        """Replace the grid with one decoded from ``0``/``1`` text."""
        try:
            self.set_grid(decode_grid(source))
        except BoardError as exc:
            raise BoardError(
                "Failed to create grid from source", BoardErrorKind.CONSTRUCTION_FAILED
            ) from exc

    def create_from_file(self, filename: str | Path) -> None:
        """Replace the grid with one read from a ``0``/``1`` text file."""
        try:
            source = Path(filename).read_text(encoding="utf-8")
            self.set_grid(decode_grid(source))
        except (OSError, UnicodeDecodeError, BoardError) as exc:
            raise BoardError(
                "Failed to create grid from file",
                BoardErrorKind.CONSTRUCTION_FAILED,
                filename=str(filename),
            ) from exc

    def create_random(
        self,
        width: int,
        height: int,
        rng: np.random.Generator | int | None = None,
        p_alive: float = 0.5,
    ) -> None:
        """Replace the grid with a (height x width) board, each cell alive with probability p_alive.

        ``rng`` may be a Generator or a seed; the same seed always yields the same grid.
        Without ``rng`` a fresh unseeded generator is used, so the result is not reproducible.
        """
        for which, value in (("width", width), ("height", height)):
            if not _is_valid_dimension(value):
                raise BoardError(
                    f"{which.capitalize()} must be an integer of {MIN_SIZE} or more, {value} provided",
                    BoardErrorKind.INVALID_DIMENSION,
                    which=which,
                    value=value,
                )
        if not 0.0 <= p_alive <= 1.0:
            raise ValueError(f"p_alive must be between 0 and 1, got {p_alive}")

        rng = np.random.default_rng(rng)
        self.set_grid(rng.random((int(height), int(width))) < p_alive)

    def set_grid(self, grid: Sequence[Sequence] | np.ndarray) -> None:
        """Validate ``grid`` and make it the current grid.

        Raises BoardError without touching the current grid if any check fails.
        """
        rows = grid.tolist() if isinstance(grid, np.ndarray) else list(grid)

        if len(rows) < MIN_SIZE:
            raise BoardError(
                f"Grid must have at least {MIN_SIZE} rows, {len(rows)} provided",
                BoardErrorKind.TOO_FEW_ROWS,
                rows=len(rows),
            )

        for row_index, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
                raise BoardError(
                    f"Unexpected content in row {row_index}",
                    BoardErrorKind.INVALID_CELL_VALUE,
                    row_index=row_index,
                )

        expected = len(rows[0])
        if expected < MIN_SIZE:
            raise BoardError(
                f"Grid must be at least {MIN_SIZE} cells wide, {expected} provided",
                BoardErrorKind.TOO_NARROW,
                width=expected,
            )

        for row_index, row in enumerate(rows):
            if len(row) != expected:
                raise BoardError(
                    f"The width of row {row_index} is {len(row)}, {expected} expected",
                    BoardErrorKind.ROW_WIDTH_MISMATCH,
                    row_index=row_index,
                    width=len(row),
                    expected=expected,
                )

        cells = np.zeros((len(rows), expected), dtype=np.uint8)
        for row_index, row in enumerate(rows):
            for x, value in enumerate(row):
                cell = _to_cell(value)
                if cell is None:
                    raise BoardError(
                        f"Unexpected content in row {row_index}",
                        BoardErrorKind.INVALID_CELL_VALUE,
                        row_index=row_index,
                    )
                cells[row_index, x] = cell

        cells.flags.writeable = False
        self._grid = cells

    # ----------------------- Read access ----------------------- #

    @property
    def grid(self) -> np.ndarray | None:
        """Read-only (height, width) uint8 snapshot of the grid, or None when unset."""
        return self._grid

    @property
    def width(self) -> int:
        return 0 if self._grid is None else int(self._grid.shape[1])

    @property
    def height(self) -> int:
        return 0 if self._grid is None else int(self._grid.shape[0])

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, y: int) -> tuple[Cell, ...]:
        if not isinstance(y, (int, np.integer)) or isinstance(y, bool):
            raise TypeError(f"Row index must be an integer, not {type(y).__name__}")
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} is out of range for a board of height {self.height}")
        return tuple(Cell(int(value)) for value in self._grid[y])

    def __setitem__(self, y, value):
        raise TypeError("Board rows are read-only; replace the whole grid with set_grid()")

    def __delitem__(self, y):
        raise TypeError("Board rows are read-only; replace the whole grid with set_grid()")

    def __iter__(self) -> Iterator[tuple[Cell, ...]]:
        for y in range(self.height):
            yield self[y]

    def row(self, y: int) -> tuple[Cell, ...] | None:
        """Return row ``y``, or None if it is outside the board."""
        try:
            return self[y]
        except IndexError:
            return None

    def cell(self, x: int, y: int) -> Cell | None:
        """Return the cell at column ``x`` of row ``y``, or None if outside the board."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return Cell(int(self._grid[y, x]))

    def is_dead(self) -> bool:
        """True when no cell is alive (including when there is no grid)."""
        return self._grid is None or not self._grid.any()

    def population(self) -> int:
        """Number of live cells."""
        return 0 if self._grid is None else int(self._grid.sum())

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        if self._grid is None or other._grid is None:
            return self._grid is None and other._grid is None
        return np.array_equal(self._grid, other._grid)

    __hash__ = None

    # ----------------------- Display ----------------------- #

    def to_string(self, delimiter: str = ", ") -> str:
        """Render each row's cell values joined by ``delimiter``, one row per line."""
        return "".join(
            delimiter.join(str(int(value)) for value in row) + "\n" for row in self
        )

    def to_text(self) -> str:
        """Encode the grid in the ``0``/``1`` format accepted by create_from_text."""
        return self.to_string(delimiter="")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, population={self.population()})"


def _is_valid_dimension(value) -> bool:
    return (
        isinstance(value, (int, np.integer))
        and not isinstance(value, (bool, np.bool_))
        and value >= MIN_SIZE
    )
