"""Command-line driver: build a board, run generations and report the result."""

import argparse
import sys
import time
from functools import partial
from pathlib import Path

from .exceptions import LifeError
from .game import Game, GameConfig
from .visualize import save_run_figure


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life on a bounded board.")
    parser.add_argument("-f", "--file", type=Path, default=None,
                        help="Board file of 0/1 lines. Overrides --width/--height.")
    parser.add_argument("--width", type=int, default=8, help="Random board width (>= 3).")
    parser.add_argument("--height", type=int, default=8, help="Random board height (>= 3).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random board.")
    parser.add_argument("--p_alive", type=float, default=0.5,
                        help="Probability that a random cell starts alive.")
    parser.add_argument("-g", "--generations", type=int, default=10)
    parser.add_argument("--delay", type=float, default=0.0,
                        help="Seconds to pause between printed generations.")
    parser.add_argument("--keep_dead", action="store_true",
                        help="Keep taking turns after the board dies.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print the summary.")
    parser.add_argument("--history_csv", type=Path, default=None,
                        help="Write per-generation statistics to this CSV file.")
    parser.add_argument("--figure", type=Path, default=None,
                        help="Save a board/population figure to this image file.")
    parser.add_argument("--output", type=Path, default=None,
                        help="Write the final board as 0/1 lines to this file.")
    return parser


def describe_error(error: BaseException) -> str:
    """Join an error and its causes into one line."""
    parts = []
    while error is not None:
        parts.append(str(error))
        error = error.__cause__
    return ": ".join(parts)


def print_turn(generation: int, board, delay: float = 0.0) -> None:
    if delay > 0:
        time.sleep(delay)
    print(f"\nGeneration {generation}")
    print(board, end="")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.generations < 0:
        parser.error("--generations must be 0 or more")

    config = GameConfig(
        width=args.width,
        height=args.height,
        filename=args.file,
        seed=args.seed,
        p_alive=args.p_alive,
    )
    game = Game(config)

    try:
        board = game.board
        if not args.quiet:
            print("Generation 0")
            print(board, end="")

        history = game.run(
            args.generations,
            stop_when_dead=not args.keep_dead,
            on_turn=None if args.quiet else partial(print_turn, delay=args.delay),
        )
    except LifeError as exc:
        print(f"Error: {describe_error(exc)}", file=sys.stderr)
        return 1

    completed = len(history) - 1
    if completed < args.generations and not args.quiet:
        print(f"Board died out, stopping after generation {completed}")

    print(f"\n{game.engine.generations} generations, population {board.population()} "
          f"({board.width}x{board.height})")

    if args.history_csv is not None:
        args.history_csv.parent.mkdir(parents=True, exist_ok=True)
        history.to_csv(args.history_csv, index=False)
        print(f"History saved to {args.history_csv}")

    if args.figure is not None:
        save_run_figure(board, history, args.figure)
        print(f"Figure saved to {args.figure}")

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(board.to_text(), encoding="utf-8")
        print(f"Final board saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
