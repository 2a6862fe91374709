"""Board model for the star collector game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum

BOARD_SIZE = 8

Position = tuple[int, int]


class PieceKind(StrEnum):
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    PAWN = "pawn"
    KING = "king"


class Cell(StrEnum):
    """Contents of a single square, keyed by its text symbol."""

    EMPTY = "."
    STAR = "*"
    ROOK_WHITE = "R"
    ROOK_BLACK = "r"
    KNIGHT_WHITE = "N"
    KNIGHT_BLACK = "n"
    BISHOP_WHITE = "B"
    BISHOP_BLACK = "b"
    QUEEN_WHITE = "Q"
    QUEEN_BLACK = "q"
    PAWN_WHITE = "P"
    PAWN_BLACK = "p"
    KING_WHITE = "K"
    KING_BLACK = "k"

    @property
    def is_piece(self) -> bool:
        return self not in (Cell.EMPTY, Cell.STAR)

    @property
    def kind(self) -> PieceKind | None:
        return _KINDS.get(self.value.lower())

    @classmethod
    def for_kind(cls, kind: PieceKind) -> Cell:
        """Return the white cell for *kind*."""
        for symbol, k in _KINDS.items():
            if k is kind:
                return cls(symbol.upper())
        raise ValueError(f"No cell for piece kind {kind!r}.")


_KINDS: dict[str, PieceKind] = {
    "r": PieceKind.ROOK,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "q": PieceKind.QUEEN,
    "p": PieceKind.PAWN,
    "k": PieceKind.KING,
}


class Verdict(Enum):
    """Outcome of move validation."""

    VALID = "valid"
    INVALID = "invalid"

    @property
    def is_valid(self) -> bool:
        return self is Verdict.VALID


# -- positions ----------------------------------------------------------------


def in_bounds(pos: Position) -> bool:
    row, col = pos
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(pos: Position) -> str:
    """Algebraic name of *pos*; row 0 is rank 8, column 0 is file a."""
    row, col = pos
    return f"{'abcdefgh'[col]}{BOARD_SIZE - row}"


def parse_square(name: str) -> Position:
    """Inverse of :func:`square_name`.

    Example::

        parse_square("a8")  # (0, 0)
    """
    name = name.strip().lower()
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Not a square name: {name!r}.")
    return BOARD_SIZE - int(name[1]), "abcdefgh".index(name[0])


@dataclass(frozen=True)
class Move:
    origin: Position
    destination: Position

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``"a8-h1"`` (or ``"a8 h1"``) into a move."""
        parts = text.replace("-", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Not a move: {text!r}.")
        return cls(parse_square(parts[0]), parse_square(parts[1]))

    def __str__(self) -> str:
        return f"{square_name(self.origin)}-{square_name(self.destination)}"


# -- board --------------------------------------------------------------------


@dataclass(frozen=True)
class Board:
    """Immutable 8×8 grid of cells.

    Boards compare and hash by value, so they can key the solver's
    visited map directly. Any number of pieces is allowed here; the
    single mobile piece rule belongs to :class:`Puzzle`.
    """

    cells: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE or any(
            len(row) != BOARD_SIZE for row in self.cells
        ):
            raise ValueError(f"A board needs {BOARD_SIZE}×{BOARD_SIZE} cells.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls(tuple((Cell.EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """Create a board from eight strings of cell symbols.

        Example::

            Board.from_rows([
                "Q.......",
                "........",
                "........",
                "........",
                "........",
                "..*.....",
                "........",
                ".......*",
            ])
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}.")
        cells: list[tuple[Cell, ...]] = []
        for r, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {BOARD_SIZE}."
                )
            try:
                cells.append(tuple(Cell(ch) for ch in row))
            except ValueError:
                raise ValueError(f"Unknown cell symbol in row {r}: {row!r}.") from None
        return cls(tuple(cells))

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse the board file format: eight symbol lines, ``#`` comments."""
        rows = [
            line.strip()
            for line in text.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]
        return cls.from_rows(rows)

    def with_cell(self, pos: Position, cell: Cell) -> Board:
        row, col = pos
        cells = [list(r) for r in self.cells]
        cells[row][col] = cell
        return Board(tuple(tuple(r) for r in cells))

    # -- queries --------------------------------------------------------------

    def get(self, pos: Position) -> Cell:
        return self.cells[pos[0]][pos[1]]

    def is_empty(self, pos: Position) -> bool:
        return self.cells[pos[0]][pos[1]] is Cell.EMPTY

    def piece_positions(self) -> list[Position]:
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell.is_piece
        ]

    def star_positions(self) -> list[Position]:
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell is Cell.STAR
        ]

    @property
    def star_count(self) -> int:
        return sum(row.count(Cell.STAR) for row in self.cells)

    # -- mutation -------------------------------------------------------------

    def apply(self, move: Move) -> Board:
        """Relocate whatever stands on the origin to the destination.

        Unchecked: callers validate first. Returns a new board.
        """
        (r0, c0), (r1, c1) = move.origin, move.destination
        cells = [list(r) for r in self.cells]
        cells[r1][c1] = cells[r0][c0]
        cells[r0][c0] = Cell.EMPTY
        return Board(tuple(tuple(r) for r in cells))

    def to_text(self) -> str:
        return "\n".join("".join(cell.value for cell in row) for row in self.cells)
