"""Error types raised by the board and the engine."""

from enum import Enum


class BoardErrorKind(Enum):
    EMPTY_INPUT = "empty_input"
    LINE_LENGTH_MISMATCH = "line_length_mismatch"
    INVALID_CHARACTER = "invalid_character"
    TOO_FEW_ROWS = "too_few_rows"
    TOO_NARROW = "too_narrow"
    ROW_WIDTH_MISMATCH = "row_width_mismatch"
    INVALID_CELL_VALUE = "invalid_cell_value"
    INVALID_DIMENSION = "invalid_dimension"
    CONSTRUCTION_FAILED = "construction_failed"


class EngineErrorKind(Enum):
    UNINITIALIZED_BOARD = "uninitialized_board"


class LifeError(Exception):
    """Base class for Game of Life errors.

    Every error carries a ``kind`` so callers can branch without matching on
    the message, plus the diagnostic fields for that kind, e.g.
    ``err.line_number`` for a line length mismatch.
    """

    def __init__(self, message: str, kind, **details):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.details = details

    def __getattr__(self, name):
        # only reached when normal lookup fails
        details = self.__dict__.get("details", {})
        if name in details:
            return details[name]
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    def __reduce__(self):
        return _rebuild_error, (type(self), self.message, self.kind, self.details)

    @property
    def previous(self) -> BaseException | None:
        """The lower-level error this one wraps, if any."""
        return self.__cause__


class BoardError(LifeError):
    """Invalid board content or construction arguments."""

    def __init__(self, message: str, kind: BoardErrorKind, **details):
        super().__init__(message, kind, **details)


class EngineError(LifeError):
    """The engine was handed a board it cannot update."""

    def __init__(self, message: str, kind: EngineErrorKind = EngineErrorKind.UNINITIALIZED_BOARD, **details):
        super().__init__(message, kind, **details)


def _rebuild_error(cls, message, kind, details):
    """Recreate an error from its message, kind and details (used by pickle and copy)."""
    return cls(message, kind, **details)
