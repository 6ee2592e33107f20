import copy
import pickle

import pytest

from game_of_life import BoardError, BoardErrorKind, EngineError, EngineErrorKind


def line_error():
    return BoardError(
        "Line 3 length is 7, 8 expected",
        BoardErrorKind.LINE_LENGTH_MISMATCH,
        line_number=3,
        expected=8,
        actual=7,
    )


def test_error_stores_message_kind_and_details():
    error = line_error()
    assert str(error) == "Line 3 length is 7, 8 expected"
    assert error.kind is BoardErrorKind.LINE_LENGTH_MISMATCH
    assert (error.line_number, error.expected, error.actual) == (3, 8, 7)
    with pytest.raises(AttributeError):
        error.character


def test_error_stores_previous_error():
    previous = ValueError("previous")
    try:
        raise BoardError("Failed to create grid from source", BoardErrorKind.CONSTRUCTION_FAILED) from previous
    except BoardError as error:
        assert error.previous is previous


@pytest.mark.parametrize("clone", [copy.copy, copy.deepcopy, lambda e: pickle.loads(pickle.dumps(e))])
def test_errors_can_be_copied_and_pickled(clone):
    error = clone(line_error())
    assert type(error) is BoardError
    assert str(error) == "Line 3 length is 7, 8 expected"
    assert error.kind is BoardErrorKind.LINE_LENGTH_MISMATCH
    assert error.details == {"line_number": 3, "expected": 8, "actual": 7}

    engine_error = clone(EngineError("The supplied board must contain an initialized grid"))
    assert engine_error.kind is EngineErrorKind.UNINITIALIZED_BOARD
