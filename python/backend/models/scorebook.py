"""Round results, optimal-solve streak and timed-run bests, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from backend.models.board import PieceKind


@dataclass
class RoundResult:
    moves: int
    optimal: int
    time: float
    date: str

    @property
    def extra_moves(self) -> int:
        return self.moves - self.optimal


def _key(piece: PieceKind, stars: int) -> str:
    return f"{piece.value}-{stars}"


class ScoreBook:
    """Loads, saves, and queries results from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._results: dict[str, list[RoundResult]] = {}
        self.streak: int = 0
        self.best_streak: int = 0
        self._timed_best: dict[str, int] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        data = json.loads(self.filepath.read_text())
        for key, entries in data.get("results", {}).items():
            self._results[key] = [RoundResult(**e) for e in entries]
        self.streak = data.get("streak", 0)
        self.best_streak = data.get("best_streak", 0)
        self._timed_best = dict(data.get("timed_best", {}))

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "results": {
                key: [asdict(e) for e in entries]
                for key, entries in self._results.items()
            },
            "streak": self.streak,
            "best_streak": self.best_streak,
            "timed_best": self._timed_best,
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- updates --------------------------------------------------------------

    def add_result(self, piece: PieceKind, stars: int, entry: RoundResult) -> None:
        """Record a won round; optimal wins extend the streak, others reset it."""
        entries = self._results.setdefault(_key(piece, stars), [])
        entries.append(entry)
        entries.sort(key=lambda e: (e.extra_moves, e.time))

        if entry.extra_moves == 0:
            self.streak += 1
            self.best_streak = max(self.best_streak, self.streak)
        else:
            self.streak = 0
        self.save()

    def add_timed(self, piece: PieceKind, stars: int, wins: int) -> bool:
        """Store a timed-run result; return True if it is a new best."""
        key = _key(piece, stars)
        if wins <= self._timed_best.get(key, -1):
            return False
        self._timed_best[key] = wins
        self.save()
        return True

    # -- queries --------------------------------------------------------------

    def get_results(self, piece: PieceKind, stars: int) -> list[RoundResult]:
        return self._results.get(_key(piece, stars), [])

    def get_timed_best(self, piece: PieceKind, stars: int) -> int | None:
        return self._timed_best.get(_key(piece, stars))

    def get_all_keys(self) -> list[tuple[PieceKind, int]]:
        keys: list[tuple[PieceKind, int]] = []
        for key in self._results:
            piece, stars = key.rsplit("-", 1)
            keys.append((PieceKind(piece), int(stars)))
        return sorted(keys, key=lambda k: (k[0].value, k[1]))
