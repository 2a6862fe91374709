"""Timed runs: how many rounds can be solved optimally before time is up."""

from __future__ import annotations

import time
from collections.abc import Callable

from backend.engine.gameplay.game import GamePlay


class TimedRun:
    def __init__(
        self,
        seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if seconds <= 0:
            raise ValueError(f"A timed run needs a positive duration, got {seconds}.")
        self.seconds = seconds
        self._clock = clock
        self._started = clock()
        self.wins: int = 0
        self.rounds: int = 0

    @property
    def remaining(self) -> float:
        return max(0.0, self.seconds - (self._clock() - self._started))

    @property
    def is_over(self) -> bool:
        return self.remaining == 0.0

    @property
    def progress(self) -> float:
        """Fraction of the time used, in ``[0, 1]``."""
        return 1.0 - self.remaining / self.seconds

    def record(self, game: GamePlay) -> None:
        """Count a finished round; only unassisted optimal solves are wins."""
        if self.is_over or not game.is_won:
            return
        self.rounds += 1
        if game.is_optimal and not game.assisted:
            self.wins += 1
