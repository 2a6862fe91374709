from backend.models.board import Board, Cell, Move, PieceKind, Position, Verdict
from backend.models.puzzle import Puzzle
from backend.models.scorebook import RoundResult, ScoreBook

__all__ = [
    "Board",
    "Cell",
    "Move",
    "PieceKind",
    "Position",
    "Puzzle",
    "RoundResult",
    "ScoreBook",
    "Verdict",
]
