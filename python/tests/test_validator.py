"""Move validation: geometry per piece kind and the occlusion rule."""

from __future__ import annotations

import pytest

from backend.engine.movevalidator import validate_move
from backend.errors import UnsupportedPieceError
from backend.models.board import Board, Cell, Move, Position, Verdict


def _board(*placements: tuple[Position, Cell]) -> Board:
    board = Board.empty()
    for pos, cell in placements:
        board = board.with_cell(pos, cell)
    return board


SLIDERS_AND_KNIGHT = [
    Cell.ROOK_WHITE,
    Cell.BISHOP_BLACK,
    Cell.QUEEN_WHITE,
    Cell.KNIGHT_BLACK,
]


# -- rejected before dispatch -------------------------------------------------


@pytest.mark.parametrize("piece", SLIDERS_AND_KNIGHT + [Cell.PAWN_WHITE, Cell.KING_BLACK])
def test_no_op_is_invalid(piece: Cell) -> None:
    board = _board(((3, 3), piece))
    assert validate_move(board, Move((3, 3), (3, 3))) is Verdict.INVALID


@pytest.mark.parametrize(
    "move",
    [
        Move((0, 0), (0, 8)),
        Move((0, 0), (8, 0)),
        Move((0, 0), (-1, 0)),
        Move((8, 0), (0, 0)),
        Move((0, 9), (0, 0)),
    ],
    ids=repr,
)
def test_out_of_bounds_is_invalid(move: Move) -> None:
    board = _board(((0, 0), Cell.QUEEN_WHITE))
    assert validate_move(board, move) is Verdict.INVALID


def test_empty_origin_is_invalid() -> None:
    board = _board(((0, 0), Cell.QUEEN_WHITE))
    assert validate_move(board, Move((4, 4), (4, 5))) is Verdict.INVALID


def test_star_cannot_move() -> None:
    board = _board(((0, 0), Cell.QUEEN_WHITE), ((4, 4), Cell.STAR))
    assert validate_move(board, Move((4, 4), (4, 5))) is Verdict.INVALID


# -- knight -------------------------------------------------------------------


def test_knight_jumps_over_everything() -> None:
    board = _board(
        ((0, 0), Cell.KNIGHT_WHITE),
        ((0, 1), Cell.STAR),
        ((1, 0), Cell.STAR),
        ((1, 1), Cell.ROOK_BLACK),
        ((2, 0), Cell.STAR),
    )
    assert validate_move(board, Move((0, 0), (2, 1))) is Verdict.VALID
    assert validate_move(board, Move((0, 0), (1, 2))) is Verdict.VALID


@pytest.mark.parametrize("dest", [(2, 2), (0, 2), (3, 1), (1, 1)])
def test_knight_rejects_non_l_shapes(dest: Position) -> None:
    board = _board(((0, 0), Cell.KNIGHT_WHITE))
    assert validate_move(board, Move((0, 0), dest)) is Verdict.INVALID


# -- rook ---------------------------------------------------------------------


def test_rook_blocked_by_piece() -> None:
    board = _board(((0, 0), Cell.ROOK_WHITE), ((0, 3), Cell.ROOK_BLACK))
    assert validate_move(board, Move((0, 0), (0, 6))) is Verdict.INVALID


def test_rook_may_land_on_star() -> None:
    board = _board(((0, 0), Cell.ROOK_WHITE), ((0, 3), Cell.STAR))
    assert validate_move(board, Move((0, 0), (0, 3))) is Verdict.VALID


def test_rook_may_not_pass_over_star() -> None:
    board = _board(((0, 0), Cell.ROOK_WHITE), ((0, 3), Cell.STAR))
    assert validate_move(board, Move((0, 0), (0, 6))) is Verdict.INVALID


def test_rook_may_not_land_on_piece() -> None:
    board = _board(((0, 0), Cell.ROOK_WHITE), ((0, 3), Cell.KNIGHT_BLACK))
    assert validate_move(board, Move((0, 0), (0, 3))) is Verdict.INVALID


@pytest.mark.parametrize("dest", [(7, 4), (0, 4), (4, 0), (4, 7)])
def test_rook_all_four_directions(dest: Position) -> None:
    board = _board(((4, 4), Cell.ROOK_BLACK))
    assert validate_move(board, Move((4, 4), dest)) is Verdict.VALID


def test_rook_rejects_diagonal() -> None:
    board = _board(((0, 0), Cell.ROOK_WHITE))
    assert validate_move(board, Move((0, 0), (3, 3))) is Verdict.INVALID


# -- bishop -------------------------------------------------------------------


def test_bishop_long_diagonal() -> None:
    board = _board(((7, 0), Cell.BISHOP_WHITE))
    assert validate_move(board, Move((7, 0), (0, 7))) is Verdict.VALID


def test_bishop_blocked_by_star_in_between() -> None:
    board = _board(((7, 0), Cell.BISHOP_WHITE), ((4, 3), Cell.STAR))
    assert validate_move(board, Move((7, 0), (0, 7))) is Verdict.INVALID
    assert validate_move(board, Move((7, 0), (4, 3))) is Verdict.VALID


def test_bishop_rejects_straight_lines() -> None:
    board = _board(((7, 0), Cell.BISHOP_WHITE))
    assert validate_move(board, Move((7, 0), (7, 5))) is Verdict.INVALID


# -- queen --------------------------------------------------------------------


@pytest.mark.parametrize(
    "dest",
    [(0, 3), (7, 3), (3, 0), (3, 7), (0, 0), (7, 7), (0, 6), (6, 0)],
)
def test_queen_all_eight_directions(dest: Position) -> None:
    board = _board(((3, 3), Cell.QUEEN_WHITE))
    assert validate_move(board, Move((3, 3), dest)) is Verdict.VALID


@pytest.mark.parametrize("dest", [(5, 4), (0, 1), (7, 2)])
def test_queen_rejects_off_line_squares(dest: Position) -> None:
    board = _board(((3, 3), Cell.QUEEN_WHITE))
    assert validate_move(board, Move((3, 3), dest)) is Verdict.INVALID


@pytest.mark.parametrize("blocker", [(1, 1), (2, 2)])
def test_queen_diagonal_blocked(blocker: Position) -> None:
    board = _board(((0, 0), Cell.QUEEN_WHITE), (blocker, Cell.STAR))
    assert validate_move(board, Move((0, 0), (7, 7))) is Verdict.INVALID


# -- unsupported pieces -------------------------------------------------------


@pytest.mark.parametrize("piece", [Cell.PAWN_WHITE, Cell.PAWN_BLACK, Cell.KING_WHITE])
def test_pawn_and_king_are_errors_not_invalid(piece: Cell) -> None:
    board = _board(((6, 0), piece))
    with pytest.raises(UnsupportedPieceError) as excinfo:
        validate_move(board, Move((6, 0), (5, 0)))
    assert excinfo.value.square == "a2"


# -- purity -------------------------------------------------------------------


def test_validation_is_deterministic_and_pure() -> None:
    board = _board(((0, 0), Cell.QUEEN_WHITE), ((0, 3), Cell.STAR))
    before = board.to_text()
    move = Move((0, 0), (0, 3))
    assert validate_move(board, move) is validate_move(board, move)
    assert board.to_text() == before


def test_verdict_is_valid() -> None:
    assert Verdict.VALID.is_valid
    assert not Verdict.INVALID.is_valid
