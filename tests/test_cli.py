import pandas as pd
import pytest

from game_of_life import Board
from game_of_life.cli import main


def test_runs_board_from_file(boards_dir, capsys):
    assert main(["-f", str(boards_dir / "valid.txt"), "-g", "2"]) == 0
    out = capsys.readouterr().out
    assert "Generation 0\n0, 0, 1, 0, 0, 0, 0, 0\n" in out
    assert "Generation 2" in out
    assert "2 generations" in out


def test_reports_board_errors(boards_dir, capsys):
    assert main(["-f", str(boards_dir / "short-length.txt")]) == 1
    err = capsys.readouterr().err
    assert "Failed to create grid from file" in err
    assert "Line 3 length is 7, 8 expected" in err


def test_reports_bad_dimensions(capsys):
    assert main(["--width", "2"]) == 1
    assert "Width must be an integer of 3 or more, 2 provided" in capsys.readouterr().err


def test_stops_when_board_dies(tmp_path, capsys):
    board_file = tmp_path / "pair.txt"
    board_file.write_text("000\n110\n000\n")
    assert main(["-f", str(board_file), "-g", "5"]) == 0
    assert "Board died out, stopping after generation 1" in capsys.readouterr().out


def test_writes_outputs(tmp_path, capsys):
    history_csv = tmp_path / "history.csv"
    figure = tmp_path / "run.png"
    output = tmp_path / "final.txt"
    code = main([
        "--width", "6", "--height", "5", "--seed", "4", "-g", "3", "-q",
        "--history_csv", str(history_csv),
        "--figure", str(figure),
        "--output", str(output),
    ])
    assert code == 0
    assert "Generation" not in capsys.readouterr().out

    history = pd.read_csv(history_csv)
    assert list(history.columns) == ["generation", "population", "density", "births", "deaths"]
    assert figure.exists()

    final = Board()
    final.create_from_file(output)
    assert (final.width, final.height) == (6, 5)
    assert final.population() == history["population"].iloc[-1]


def test_rejects_negative_generations(capsys):
    with pytest.raises(SystemExit):
        main(["-g", "-1"])
    assert "--generations must be 0 or more" in capsys.readouterr().err
