"""Rich terminal frontend: the board as a coloured table with a cursor.

A cursor stands in for drag and drop: Enter picks the piece up, Enter
on another square drops it there. Moves go through the same validator
the solver uses, so an illegal drop simply puts the piece back.
"""

from __future__ import annotations

import sys
import time
from datetime import datetime
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay, TimedRun
from backend.models.board import BOARD_SIZE, Cell, Move, PieceKind, Position
from backend.models.scorebook import RoundResult, ScoreBook
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_GLYPHS: dict[PieceKind, str] = {
    PieceKind.ROOK: "♜",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.QUEEN: "♛",
    PieceKind.PAWN: "♟",
    PieceKind.KING: "♚",
}
_LIGHT = "on #f2a7a7"
_DARK = "on #1e3a8a"
_CURSOR = "on #facc15"
_HELD = "on #22c55e"

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _cell_text(cell: Cell) -> tuple[str, str]:
    """Glyph and foreground style for one cell."""
    if cell is Cell.STAR:
        return "★", "bold yellow"
    if cell.kind is not None:
        return _GLYPHS[cell.kind], "bold white" if cell.value.isupper() else "bold black"
    return " ", ""


# -- board rendering ----------------------------------------------------------


def render_board(
    game: GamePlay,
    cursor: Position | None = None,
    held: Position | None = None,
) -> Table:
    """Return a Rich Table for the current board with rank/file labels."""
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.SQUARE,
        border_style="bright_blue",
        padding=0,
        collapse_padding=True,
    )
    table.add_column(width=2, justify="right", style="dim")
    for _ in range(BOARD_SIZE):
        table.add_column(width=3, justify="center")

    board = game.state.board
    for r in range(BOARD_SIZE):
        cells: list[Text] = [Text(f"{BOARD_SIZE - r} ")]
        for c in range(BOARD_SIZE):
            glyph, fg = _cell_text(board.get((r, c)))
            if (r, c) == held:
                bg = _HELD
            elif (r, c) == cursor:
                bg = _CURSOR
            else:
                bg = _LIGHT if (r + c) % 2 == 0 else _DARK
            cells.append(Text(f" {glyph} ", style=f"{fg} {bg}".strip()))
        table.add_row(*cells)
    table.add_row(Text(""), *(Text(f) for f in "abcdefgh"))
    return table


def _stats(game: GamePlay, book: ScoreBook, run: TimedRun | None) -> Group:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Optimal: ", style="dim")
    stats.append(str(game.optimal_moves), style="bold cyan")
    stats.append("    Stars: ", style="dim")
    stats.append(str(game.state.stars_left), style="bold yellow")
    stats.append("    \U0001f525 ", style="dim")
    stats.append(str(book.streak), style="bold red")

    parts: list[Text | ProgressBar] = [stats]
    if run is not None:
        timer = Text()
        timer.append("  Time left: ", style="dim")
        timer.append(_format_time(run.remaining), style="bold magenta")
        timer.append("    Wins: ", style="dim")
        timer.append(str(run.wins), style="bold green")
        parts.append(timer)
        parts.append(ProgressBar(total=1.0, completed=run.progress, width=40))
    else:
        timer = Text()
        timer.append("  Time: ", style="dim")
        timer.append(_format_time(game.state.elapsed_time), style="bold yellow")
        parts.append(timer)
    return Group(*(Align.center(p) for p in parts))


def _controls() -> Text:
    controls = Text()
    for key, label in (
        ("↑↓←→", "cursor"),
        ("Enter", "pick/drop"),
        ("N", "hint"),
        ("V", "solve"),
        ("R", "new round"),
        ("T", "timed"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")
    return controls


def _draw_game(
    game: GamePlay,
    book: ScoreBook,
    cursor: Position,
    held: Position | None,
    run: TimedRun | None,
    status: str = "",
) -> None:
    console.clear()
    title = (
        f"[bold cyan]{game.puzzle.kind.value.title()}  "
        f"★×{game.puzzle.star_count}[/bold cyan]"
    )
    panel = Panel(
        Align.center(render_board(game, cursor, held)),
        title=title,
        border_style="magenta" if run is not None else "bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(_stats(game, book, run))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _win_status(game: GamePlay) -> str:
    if game.is_optimal:
        return f"[bold green]★ Optimal! {game.state.moves} moves.[/bold green]"
    return (
        f"[yellow]Finished in {game.state.moves} moves "
        f"(optimal {game.optimal_moves}).[/yellow]"
    )


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = game.apply_hint()
    if hint is None:
        return "[yellow]No hint available.[/yellow]"
    return f"[cyan]Hint:[/cyan] played [bold]{hint}[/bold]"


def _auto_solve(game: GamePlay, book: ScoreBook) -> str:
    played = 0
    while not game.is_won:
        hint = game.apply_hint()
        if hint is None:
            return "[red]No solution from here.[/red]"
        played += 1
        _draw_game(game, book, game.piece, None, None, f"[cyan]Solving…[/cyan] {hint}")
        sys.stdout.flush()
        time.sleep(0.3)
    return f"[bold green]Solved with {played} more moves.[/bold green]"


# -- scores screen ------------------------------------------------------------


def print_scores(book: ScoreBook) -> None:
    """Print every recorded piece/star combination as a table."""
    keys = book.get_all_keys()
    if not keys:
        console.print(Align.center(Text("  No results yet.", style="dim")))
        return

    for piece, stars in keys:
        table = Table(
            title=f"{piece.value.title()}  ★×{stars}",
            title_style="bold cyan",
            box=rich.box.ROUNDED,
            border_style="dim",
        )
        table.add_column("#", justify="right", style="dim", width=3)
        table.add_column("Moves", justify="right", style="yellow")
        table.add_column("Optimal", justify="right", style="cyan")
        table.add_column("Time", justify="right", style="yellow")
        table.add_column("Date", style="dim")
        for i, e in enumerate(book.get_results(piece, stars)[:10], 1):
            table.add_row(str(i), str(e.moves), str(e.optimal), f"{e.time:.1f}s", e.date)
        console.print(Align.center(table))

        best = book.get_timed_best(piece, stars)
        if best is not None:
            console.print(Align.center(Text(f"Best timed run: {best} wins", style="green")))

    console.print(
        Align.center(Text(f"\nBest streak: {book.best_streak}\n", style="bold red"))
    )


# -- game loop ----------------------------------------------------------------


def _record_win(game: GamePlay, book: ScoreBook, run: TimedRun | None) -> None:
    if game.assisted:
        return
    if run is not None:
        run.record(game)
        return
    entry = RoundResult(
        moves=game.state.moves,
        optimal=game.optimal_moves or 0,
        time=round(game.state.elapsed_time, 2),
        date=datetime.now().strftime("%Y-%m-%d %H:%M"),
    )
    book.add_result(game.puzzle.kind, game.puzzle.star_count, entry)


def _play(
    piece: PieceKind,
    stars: int,
    book: ScoreBook,
    timed_seconds: float,
    start_timed: bool,
) -> None:
    game = GamePlay(stars, piece)
    cursor = game.piece
    held: Position | None = None
    run = TimedRun(timed_seconds) if start_timed else None
    status = ""

    while True:
        if run is not None and run.is_over:
            best = book.add_timed(piece, stars, run.wins)
            status = f"[bold magenta]Time! {run.wins} optimal rounds.[/bold magenta]"
            if best:
                status += " [bold green]New best![/bold green]"
            run = None
            game = GamePlay(stars, piece)
            cursor, held = game.piece, None

        _draw_game(game, book, cursor, held, run, status)
        status = ""

        key = get_key_timeout(0.5) if run is not None else get_key()
        if key is None:
            continue

        if key in _CURSOR_STEPS:
            dr, dc = _CURSOR_STEPS[key]
            cursor = (
                min(BOARD_SIZE - 1, max(0, cursor[0] + dr)),
                min(BOARD_SIZE - 1, max(0, cursor[1] + dc)),
            )
        elif key == "select":
            if held is None:
                if cursor == game.piece:
                    held = cursor
                continue
            verdict = game.move(Move(held, cursor))
            held = None
            if not verdict.is_valid:
                status = "[red]Illegal move.[/red]"
        elif key == "hint":
            held = None
            status = _apply_hint(game)
            cursor = game.piece
        elif key == "solve" and run is None:
            held = None
            status = _auto_solve(game, book)
            cursor = game.piece
        elif key == "restart":
            game = GamePlay(stars, piece)
            cursor, held = game.piece, None
        elif key == "timed" and run is None and timed_seconds > 0:
            run = TimedRun(timed_seconds)
            game = GamePlay(stars, piece)
            cursor, held = game.piece, None
        elif key == "quit":
            return

        if game.is_won:
            _record_win(game, book, run)
            if run is not None:
                game = GamePlay(stars, piece)
                cursor, held = game.piece, None
            else:
                _draw_game(game, book, cursor, None, None, _win_status(game))
                console.print(
                    Align.center(Text("\n  Press R for a new round, Q to quit.\n", style="dim"))
                )
                while True:
                    key = get_key()
                    if key == "restart":
                        break
                    if key == "quit":
                        return
                game = GamePlay(stars, piece)
                cursor, held = game.piece, None


# -- public entry point -------------------------------------------------------


def run(
    piece: PieceKind,
    stars: int,
    data_dir: Path,
    timed_seconds: float = 0,
    start_timed: bool = False,
) -> None:
    """Launch the Rich terminal game.

    ``T`` (or *start_timed*) begins a timed run of *timed_seconds*.
    """
    book = ScoreBook(data_dir / "scores.json")
    try:
        _play(piece, stars, book, timed_seconds, start_timed)
    finally:
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
