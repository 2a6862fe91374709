from backend.engine.gamesolver.solver import (
    NoSolution,
    Solution,
    Solver,
    legal_moves,
    solve,
)

__all__ = ["NoSolution", "Solution", "Solver", "legal_moves", "solve"]
