"""Exceptions raised by the game backend."""

from __future__ import annotations


class StarCollectorError(Exception):
    """Base class for backend errors."""


class UnsupportedPieceError(StarCollectorError):
    """A pawn or king reached move validation.

    Puzzles only ever hold a rook, knight or queen (bishops are allowed
    on hand-made boards), so this points at a broken board, not at an
    illegal move.
    """

    def __init__(self, kind: str, square: str) -> None:
        super().__init__(f"Unsupported piece {kind} on {square}.")
        self.kind = kind
        self.square = square
