"""Move legality for the single mobile piece."""

from __future__ import annotations

from backend.errors import UnsupportedPieceError
from backend.models.board import (
    Board,
    Cell,
    Move,
    PieceKind,
    Verdict,
    in_bounds,
    square_name,
)


def validate_move(board: Board, move: Move) -> Verdict:
    """Return whether the piece on ``move.origin`` may go to ``move.destination``.

    Out-of-board and no-op moves are ``INVALID`` before the piece is
    looked at. Pawns and kings raise :class:`UnsupportedPieceError`.
    """
    if move.origin == move.destination:
        return Verdict.INVALID
    if not (in_bounds(move.origin) and in_bounds(move.destination)):
        return Verdict.INVALID

    kind = board.get(move.origin).kind
    if kind is None:
        return Verdict.INVALID

    dr = move.destination[0] - move.origin[0]
    dc = move.destination[1] - move.origin[1]

    if kind is PieceKind.KNIGHT:
        ok = (abs(dr), abs(dc)) in ((2, 1), (1, 2))
    elif kind is PieceKind.ROOK:
        ok = _is_straight(dr, dc) and _path_is_clear(board, move)
    elif kind is PieceKind.BISHOP:
        ok = _is_diagonal(dr, dc) and _path_is_clear(board, move)
    elif kind is PieceKind.QUEEN:
        ok = (_is_straight(dr, dc) or _is_diagonal(dr, dc)) and _path_is_clear(
            board, move
        )
    else:
        raise UnsupportedPieceError(kind.value, square_name(move.origin))

    return Verdict.VALID if ok else Verdict.INVALID


# -- helpers ------------------------------------------------------------------


def _is_straight(dr: int, dc: int) -> bool:
    return dr == 0 or dc == 0


def _is_diagonal(dr: int, dc: int) -> bool:
    return abs(dr) == abs(dc)


def _path_is_clear(board: Board, move: Move) -> bool:
    """Walk from the square after the origin up to the destination.

    The first occupied square blocks, unless it is the destination and
    holds a star: landing on a star is allowed, passing over one is not.
    Only meaningful for straight or diagonal moves.
    """
    (r, c), dest = move.origin, move.destination
    step_r = (dest[0] > r) - (dest[0] < r)
    step_c = (dest[1] > c) - (dest[1] < c)

    while (r, c) != dest:
        r += step_r
        c += step_c
        cell = board.get((r, c))
        if cell is not Cell.EMPTY:
            return (r, c) == dest and cell is Cell.STAR
    return True
