"""Game engine: move validation and the optimal path solver."""

from backend.engine.gamesolver import NoSolution, Solution, solve
from backend.engine.movevalidator import validate_move

__all__ = ["NoSolution", "Solution", "solve", "validate_move"]
