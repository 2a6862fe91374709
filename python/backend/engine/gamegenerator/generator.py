"""Generates random star collection puzzles."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver import Solution, Solver
from backend.models.board import BOARD_SIZE, Board, Cell, PieceKind, Position
from backend.models.puzzle import Puzzle

logger = logging.getLogger(__name__)

PLAYABLE_PIECES: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)
MIN_STARS = 1
MAX_STARS = 18


class GameGenerator:
    """Places one piece and a number of stars on distinct random squares."""

    @staticmethod
    def generate(
        star_count: int,
        piece: PieceKind = PieceKind.QUEEN,
        rng: random.Random | None = None,
    ) -> Puzzle:
        """Return a random puzzle. It may be unsolvable; see ``generate_solvable``."""
        GameGenerator._check(star_count, piece)
        rng = rng or random.Random()

        squares: list[Position] = [
            (r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
        ]
        start, *stars = rng.sample(squares, star_count + 1)

        board = Board.empty().with_cell(start, Cell.for_kind(piece))
        for pos in stars:
            board = board.with_cell(pos, Cell.STAR)
        return Puzzle(board=board, start=start, star_count=star_count)

    @staticmethod
    def generate_solvable(
        star_count: int,
        piece: PieceKind = PieceKind.QUEEN,
        rng: random.Random | None = None,
        max_attempts: int = 100,
    ) -> tuple[Puzzle, Solution]:
        """Return a puzzle the solver can finish, together with its solution."""
        rng = rng or random.Random()
        for attempt in range(1, max_attempts + 1):
            puzzle = GameGenerator.generate(star_count, piece, rng)
            result = Solver.solve(puzzle)
            if isinstance(result, Solution):
                return puzzle, result
            logger.info("Puzzle %d has no solution, regenerating", attempt)
        raise RuntimeError(
            f"No solvable {piece.value} puzzle with {star_count} stars "
            f"after {max_attempts} attempts."
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _check(star_count: int, piece: PieceKind) -> None:
        if piece not in PLAYABLE_PIECES:
            raise ValueError(
                f"{piece.value} is not playable; choose one of "
                f"{', '.join(p.value for p in PLAYABLE_PIECES)}."
            )
        if not MIN_STARS <= star_count <= MAX_STARS:
            raise ValueError(
                f"Star count must be between {MIN_STARS} and {MAX_STARS}, "
                f"got {star_count}."
            )
