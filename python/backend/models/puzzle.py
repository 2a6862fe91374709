"""A single round's puzzle: one mobile piece and the stars it must collect."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board, Cell, PieceKind, Position


@dataclass(frozen=True)
class Puzzle:
    board: Board
    start: Position
    star_count: int

    def __post_init__(self) -> None:
        pieces = self.board.piece_positions()
        if len(pieces) != 1:
            raise ValueError(
                f"A puzzle needs exactly one piece, found {len(pieces)}."
            )
        if pieces[0] != self.start:
            raise ValueError(
                f"Start {self.start} does not hold the piece (found at {pieces[0]})."
            )
        if self.board.star_count != self.star_count:
            raise ValueError(
                f"Board holds {self.board.star_count} stars, "
                f"puzzle claims {self.star_count}."
            )

    @classmethod
    def from_board(cls, board: Board) -> Puzzle:
        """Derive start square and star count from *board*."""
        pieces = board.piece_positions()
        if len(pieces) != 1:
            raise ValueError(
                f"A puzzle needs exactly one piece, found {len(pieces)}."
            )
        return cls(board=board, start=pieces[0], star_count=board.star_count)

    @property
    def piece(self) -> Cell:
        return self.board.get(self.start)

    @property
    def kind(self) -> PieceKind:
        kind = self.piece.kind
        if kind is None:
            raise ValueError(f"No piece on {self.start}.")
        return kind
