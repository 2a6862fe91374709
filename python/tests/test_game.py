"""Rounds in progress: moves, win detection, hints and timed runs."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import GamePlay, TimedRun
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Cell, Move, PieceKind, Verdict
from backend.models.puzzle import Puzzle


def _queen_game() -> GamePlay:
    """Queen on a8, one star on h1."""
    board = Board.empty().with_cell((0, 0), Cell.QUEEN_WHITE).with_cell((7, 7), Cell.STAR)
    return GamePlay.from_puzzle(Puzzle.from_board(board))


# -- moves --------------------------------------------------------------------


def test_optimal_win() -> None:
    game = _queen_game()
    assert game.optimal_moves == 1
    assert game.move(Move((0, 0), (7, 7))) is Verdict.VALID
    assert game.is_won
    assert game.is_optimal
    assert game.state.moves == 1
    assert game.state.stars_left == 0
    assert game.piece == (7, 7)


def test_non_optimal_win() -> None:
    game = _queen_game()
    assert game.move(Move((0, 0), (0, 7))).is_valid
    assert not game.is_won
    assert game.move(Move((0, 7), (7, 7))).is_valid
    assert game.is_won
    assert not game.is_optimal
    assert game.state.moves == 2


def test_illegal_move_changes_nothing() -> None:
    game = _queen_game()
    assert game.move(Move((0, 0), (2, 1))) is Verdict.INVALID
    assert game.state.moves == 0
    assert game.piece == (0, 0)
    assert game.state.board == game.puzzle.board


def test_only_the_piece_moves() -> None:
    game = _queen_game()
    assert game.move(Move((7, 7), (7, 6))) is Verdict.INVALID


def test_no_moves_after_win() -> None:
    game = _queen_game()
    game.move(Move((0, 0), (7, 7)))
    assert game.move(Move((7, 7), (7, 0))) is Verdict.INVALID
    assert game.state.moves == 1


def test_clock_stops_on_win() -> None:
    game = _queen_game()
    game.move(Move((0, 0), (7, 7)))
    first = game.state.elapsed_time
    assert game.state.elapsed_time == first


# -- hints --------------------------------------------------------------------


def test_hint_and_apply_hint() -> None:
    game = _queen_game()
    assert game.hint() == Move((0, 0), (7, 7))
    assert not game.assisted
    assert game.apply_hint() == Move((0, 0), (7, 7))
    assert game.assisted
    assert game.is_won
    assert game.hint() is None


def test_hints_play_out_optimally() -> None:
    game = GamePlay(4, PieceKind.QUEEN, random.Random(9))
    while not game.is_won:
        assert game.apply_hint() is not None
    assert game.is_optimal


def test_hints_reuse_the_round_solution(monkeypatch: pytest.MonkeyPatch) -> None:
    game = GamePlay(12, PieceKind.QUEEN, random.Random(3))

    def fail(puzzle: Puzzle) -> None:
        raise AssertionError("solved again while on the optimal path")

    monkeypatch.setattr(Solver, "solve", staticmethod(fail))
    while not game.is_won:
        assert game.apply_hint() is not None
    assert game.is_optimal


def test_hint_after_a_detour_solves_the_current_board() -> None:
    game = _queen_game()
    assert game.move(Move((0, 0), (0, 7))).is_valid
    assert game.hint() == Move((0, 7), (7, 7))
    game.apply_hint()
    assert game.is_won
    assert not game.is_optimal


def test_new_round_is_solvable() -> None:
    game = GamePlay(3, PieceKind.KNIGHT, random.Random(2))
    assert game.puzzle.kind is PieceKind.KNIGHT
    assert game.optimal_moves is not None
    assert game.state.stars_left == 3


def test_unsolvable_puzzle_has_no_optimal_count() -> None:
    board = Board.empty().with_cell((0, 0), Cell.BISHOP_WHITE).with_cell((0, 1), Cell.STAR)
    game = GamePlay.from_puzzle(Puzzle.from_board(board))
    assert game.optimal_moves is None
    assert game.hint() is None


# -- timed runs ---------------------------------------------------------------


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_timed_run_counts_optimal_unassisted_wins() -> None:
    clock = _Clock()
    run = TimedRun(60, clock=clock)

    optimal = _queen_game()
    optimal.move(Move((0, 0), (7, 7)))
    run.record(optimal)

    slow = _queen_game()
    slow.move(Move((0, 0), (0, 7)))
    slow.move(Move((0, 7), (7, 7)))
    run.record(slow)

    hinted = _queen_game()
    hinted.apply_hint()
    run.record(hinted)

    unfinished = _queen_game()
    run.record(unfinished)

    assert run.rounds == 3
    assert run.wins == 1


def test_timed_run_expires() -> None:
    clock = _Clock()
    run = TimedRun(30, clock=clock)
    assert run.remaining == 30
    assert run.progress == 0

    clock.now += 15
    assert run.remaining == 15
    assert run.progress == pytest.approx(0.5)

    clock.now += 20
    assert run.is_over
    assert run.remaining == 0

    late = _queen_game()
    late.move(Move((0, 0), (7, 7)))
    run.record(late)
    assert run.wins == 0


def test_timed_run_needs_positive_duration() -> None:
    with pytest.raises(ValueError):
        TimedRun(0)
