#!/usr/bin/env python3
"""Star Collector: collect every star with one chess piece in as few moves as possible.

Usage::

    python main.py play                      # Rich terminal game, queen, 5 stars
    python main.py play -p knight -s 8 --timed
    python main.py solve board.txt           # optimal count + path for a board file
    python main.py solve -p rook -s 6 --seed 3
    python main.py scores                    # results, streak, timed bests
"""

import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine import NoSolution, solve as solve_puzzle  # noqa: E402
from backend.engine.gamegenerator import MAX_STARS, MIN_STARS, GameGenerator  # noqa: E402
from backend.errors import StarCollectorError  # noqa: E402
from backend.logging_config import setup_logging  # noqa: E402
from backend.models.board import Board, PieceKind  # noqa: E402
from backend.models.puzzle import Puzzle  # noqa: E402


class Piece(StrEnum):
    queen = "queen"
    knight = "knight"
    rook = "rook"


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver details to stderr.",
    ),
) -> None:
    """Star Collector."""
    setup_logging(verbose)


# -- commands -----------------------------------------------------------------


@app.command()
def play(
    piece: Piece = typer.Option(
        Piece.queen, "-p", "--piece", envvar="STAR_PIECE",
        help="Piece to play with.",
    ),
    stars: int = typer.Option(
        5, "-s", "--stars", envvar="STAR_COUNT",
        min=MIN_STARS, max=MAX_STARS,
        help=f"Number of stars ({MIN_STARS}-{MAX_STARS}).",
    ),
    timed: bool = typer.Option(
        False, "--timed",
        help="Start straight into a timed run.",
    ),
    seconds: int = typer.Option(
        120, "--seconds", envvar="STAR_TIMER_SECONDS",
        min=1, max=500,
        help="Length of a timed run in seconds.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir", envvar="STAR_DATA_DIR",
        help="Where scores are kept.",
    ),
) -> None:
    """Play in the terminal."""
    from frontend.cli.rich.app import run

    run(
        piece=PieceKind(piece.value),
        stars=stars,
        data_dir=data_dir,
        timed_seconds=seconds,
        start_timed=timed,
    )


@app.command()
def solve(
    board_file: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False,
        help="Board file: eight lines of '.', '*' and one piece letter.",
    ),
    piece: Piece = typer.Option(
        Piece.queen, "-p", "--piece", envvar="STAR_PIECE",
        help="Piece for a random puzzle.",
    ),
    stars: int = typer.Option(
        5, "-s", "--stars", envvar="STAR_COUNT",
        min=MIN_STARS, max=MAX_STARS,
        help="Stars for a random puzzle.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible random puzzle.",
    ),
) -> None:
    """Print the optimal move count and one optimal path."""
    if board_file is not None:
        try:
            puzzle = Puzzle.from_board(Board.from_text(board_file.read_text()))
            result = solve_puzzle(puzzle)
        except (ValueError, StarCollectorError) as exc:
            raise typer.BadParameter(str(exc), param_hint="BOARD_FILE") from exc
    else:
        puzzle = GameGenerator.generate(stars, PieceKind(piece.value), random.Random(seed))
        result = solve_puzzle(puzzle)

    typer.echo(puzzle.board.to_text())
    typer.echo()

    if isinstance(result, NoSolution):
        typer.echo(f"No solution ({result.explored} positions explored).")
        raise typer.Exit(code=1)

    typer.echo(f"Optimal: {result.moves}")
    for i, move in enumerate(result.path, 1):
        typer.echo(f"{i:>3}. {move}")


@app.command()
def scores(
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir", envvar="STAR_DATA_DIR",
        help="Where scores are kept.",
    ),
) -> None:
    """Show recorded results, streak and timed-run bests."""
    from backend.models.scorebook import ScoreBook
    from frontend.cli.rich.app import print_scores

    print_scores(ScoreBook(data_dir / "scores.json"))


if __name__ == "__main__":
    app()
