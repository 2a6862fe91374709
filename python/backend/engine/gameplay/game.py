"""Core gameplay logic: processes moves and checks the win condition."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import NoSolution, Solution, Solver
from backend.engine.gamestate import GameState
from backend.engine.movevalidator import validate_move
from backend.models.board import Cell, Move, PieceKind, Position, Verdict
from backend.models.puzzle import Puzzle


class GamePlay:
    """Orchestrates a single round.

    The puzzle is solved once when the round starts; the result is kept
    for the whole round so the frontend can show the optimal count and
    draw hints.
    """

    def __init__(
        self,
        star_count: int,
        piece: PieceKind = PieceKind.QUEEN,
        rng: random.Random | None = None,
    ) -> None:
        puzzle, solution = GameGenerator.generate_solvable(star_count, piece, rng)
        self._start(puzzle, solution)

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "GamePlay":
        """Create a round from an existing puzzle (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj._start(puzzle, Solver.solve(puzzle))
        return obj

    def _start(self, puzzle: Puzzle, solution: Solution | NoSolution) -> None:
        self.puzzle = puzzle
        self.solution = solution
        self.piece: Position = puzzle.start
        self.state = GameState(puzzle.board)
        self.assisted = False
        # Rest of an optimal path from the current board; None once the
        # player leaves it.
        self._plan: list[Move] | None = (
            list(solution.path) if isinstance(solution, Solution) else None
        )

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> Verdict:
        """Apply *move* if it is legal for the piece; return the verdict.

        Only the mobile piece may move, and nothing moves once every
        star is collected.
        """
        if self.is_won or move.origin != self.piece:
            return Verdict.INVALID
        verdict = validate_move(self.state.board, move)
        if verdict.is_valid:
            captured = self.state.board.get(move.destination) is Cell.STAR
            self.state.record_move(self.state.board.apply(move), captured)
            self.piece = move.destination
            if self._plan and self._plan[0] == move:
                self._plan.pop(0)
            else:
                self._plan = None
            if self.is_won:
                self.state.pause()
        return verdict

    def hint(self) -> Move | None:
        """Next move of an optimal path from the current board.

        The round's solution is reused while the player follows it; the
        board is solved again only after a detour.
        """
        if self.is_won:
            return None
        if self._plan is None:
            result = Solver.solve(Puzzle.from_board(self.state.board))
            if isinstance(result, NoSolution):
                return None
            self._plan = list(result.path)
        return self._plan[0] if self._plan else None

    def apply_hint(self) -> Move | None:
        """Play the hinted move; the round then counts as assisted."""
        hint = self.hint()
        if hint is not None:
            self.assisted = True
            self.move(hint)
        return hint

    # -- queries --------------------------------------------------------------

    @property
    def optimal_moves(self) -> int | None:
        if isinstance(self.solution, Solution):
            return self.solution.moves
        return None

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    @property
    def is_optimal(self) -> bool:
        return self.is_won and self.state.moves == self.optimal_moves
