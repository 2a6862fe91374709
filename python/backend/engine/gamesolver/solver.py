"""Star collection solver: breadth-first search over piece square and remaining stars."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from backend.errors import UnsupportedPieceError
from backend.models.board import (
    BOARD_SIZE,
    Board,
    Move,
    PieceKind,
    Position,
    in_bounds,
    square_name,
)
from backend.models.puzzle import Puzzle

logger = logging.getLogger(__name__)

_ROOK_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_BISHOP_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_KNIGHT_JUMPS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)

# Squares are indexed row-major (0 = a8, 63 = h1); a set of stars is an
# int bitmask over those indices.
Rays = tuple[tuple[tuple[int, ...], ...], ...]


def _index(pos: Position) -> int:
    return pos[0] * BOARD_SIZE + pos[1]


def _position(index: int) -> Position:
    return divmod(index, BOARD_SIZE)


def _slides(steps: tuple[Position, ...]) -> Rays:
    table = []
    for index in range(BOARD_SIZE * BOARD_SIZE):
        r, c = _position(index)
        rays = []
        for dr, dc in steps:
            ray = []
            nr, nc = r + dr, c + dc
            while in_bounds((nr, nc)):
                ray.append(_index((nr, nc)))
                nr, nc = nr + dr, nc + dc
            if ray:
                rays.append(tuple(ray))
        table.append(tuple(rays))
    return tuple(table)


def _jumps(offsets: tuple[Position, ...]) -> Rays:
    # A knight ray is a single square, so the slide loop never stops early.
    table = []
    for index in range(BOARD_SIZE * BOARD_SIZE):
        r, c = _position(index)
        table.append(
            tuple(
                (_index((r + dr, c + dc)),)
                for dr, dc in offsets
                if in_bounds((r + dr, c + dc))
            )
        )
    return tuple(table)


_MOVE_TABLES: dict[PieceKind, Rays] = {
    PieceKind.ROOK: _slides(_ROOK_STEPS),
    PieceKind.BISHOP: _slides(_BISHOP_STEPS),
    PieceKind.QUEEN: _slides(_ROOK_STEPS + _BISHOP_STEPS),
    PieceKind.KNIGHT: _jumps(_KNIGHT_JUMPS),
}


def _rays_for(kind: PieceKind, square: int) -> Rays:
    try:
        return _MOVE_TABLES[kind]
    except KeyError:
        raise UnsupportedPieceError(kind.value, square_name(_position(square))) from None


def _targets(rays: Rays, square: int, stars: int) -> Iterator[tuple[int, int]]:
    """Yield ``(destination, captured_bit)`` for every legal move from *square*.

    A ray ends at its first star, which is itself a legal landing square.
    Puzzles hold a single piece, so stars are the only obstacles.
    """
    for ray in rays[square]:
        for dest in ray:
            bit = stars & (1 << dest)
            yield dest, bit
            if bit:
                break


def _star_mask(board: Board) -> int:
    mask = 0
    for pos in board.star_positions():
        mask |= 1 << _index(pos)
    return mask


def legal_moves(puzzle: Puzzle) -> list[Move]:
    """Every move the puzzle's piece can make from its start square."""
    square = _index(puzzle.start)
    rays = _rays_for(puzzle.kind, square)
    return [
        Move(puzzle.start, _position(dest))
        for dest, _ in _targets(rays, square, _star_mask(puzzle.board))
    ]


@dataclass(frozen=True)
class Solution:
    """Minimum move count and one path achieving it."""

    moves: int
    path: tuple[Move, ...]


@dataclass(frozen=True)
class NoSolution:
    """The search ran out of states without collecting every star."""

    explored: int


class _PathNode:
    """Append-only linked path; children share their parent's prefix."""

    __slots__ = ("origin", "destination", "parent")

    def __init__(self, origin: int, destination: int, parent: _PathNode | None) -> None:
        self.origin = origin
        self.destination = destination
        self.parent = parent

    def to_tuple(self) -> tuple[Move, ...]:
        moves: list[Move] = []
        node: _PathNode | None = self
        while node is not None:
            moves.append(Move(_position(node.origin), _position(node.destination)))
            node = node.parent
        return tuple(reversed(moves))


@dataclass(slots=True)
class _State:
    square: int
    stars: int
    moves: int
    path: _PathNode | None


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(puzzle: Puzzle) -> Solution | NoSolution:
        """Return the fewest moves that collect every star, with a witness path.

        A state is keyed on ``(piece square, remaining stars)``, which
        names exactly one board for a single-piece puzzle. Keys already
        dequeued are skipped.

        Each move collects at most one star, so ``moves + stars left``
        never drops along a path. Capturing moves keep it level and go to
        the front of the queue; every other move raises it by one and goes
        to the back. The queue therefore pops states in order of that
        bound, layer by layer, and the first state popped for a key
        carries its fewest moves.
        """
        start = _index(puzzle.start)
        queue: deque[_State] = deque(
            [_State(start, _star_mask(puzzle.board), 0, None)]
        )
        visited: dict[tuple[int, int], int] = {}
        rays: Rays | None = None

        while queue:
            state = queue.popleft()
            key = (state.square, state.stars)
            if key in visited:
                continue
            visited[key] = state.moves

            if not state.stars:
                logger.debug(
                    "Solved in %d moves after %d states", state.moves, len(visited)
                )
                path = state.path.to_tuple() if state.path is not None else ()
                return Solution(moves=state.moves, path=path)

            if rays is None:
                rays = _rays_for(puzzle.kind, start)

            for dest, bit in _targets(rays, state.square, state.stars):
                stars = state.stars ^ bit
                if (dest, stars) in visited:
                    continue
                nxt = _State(
                    square=dest,
                    stars=stars,
                    moves=state.moves + 1,
                    path=_PathNode(state.square, dest, state.path),
                )
                if bit:
                    queue.appendleft(nxt)
                else:
                    queue.append(nxt)

        logger.debug("No solution after %d states", len(visited))
        return NoSolution(explored=len(visited))

    @staticmethod
    def hint(puzzle: Puzzle) -> Move | None:
        """Return the first move of an optimal path, or ``None`` if done / stuck."""
        result = Solver.solve(puzzle)
        if isinstance(result, NoSolution) or not result.path:
            return None
        return result.path[0]

    @staticmethod
    def is_solvable(puzzle: Puzzle) -> bool:
        return isinstance(Solver.solve(puzzle), Solution)


def solve(puzzle: Puzzle) -> Solution | NoSolution:
    return Solver.solve(puzzle)
