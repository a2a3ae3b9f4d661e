"""Finished-game results and the best-score record."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Optional


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M")


@dataclass(frozen=True)
class GameResult:
    size: int
    moves: int
    elapsed_seconds: int
    finished_at: str = ""

    @classmethod
    def finished_now(cls, size: int, moves: int, elapsed_seconds: int) -> GameResult:
        return cls(
            size=size,
            moves=moves,
            elapsed_seconds=elapsed_seconds,
            finished_at=_now(),
        )


class BestScores(NamedTuple):
    best_time: Optional[int]
    best_moves: Optional[int]


class BestRecord:
    """Lowest time and lowest move count seen across won games.

    Both values start unset (``None``, treated as infinite) and only ever
    go down.  Lives as long as the owning controller; nothing is written
    to disk.
    """

    def __init__(self) -> None:
        self.best_time: int | None = None
        self.best_moves: int | None = None
        self._lock = threading.Lock()

    def update(self, result: GameResult) -> bool:
        """Fold *result* into the record.  Returns True if anything improved."""
        improved = False
        with self._lock:
            if self.best_time is None or result.elapsed_seconds < self.best_time:
                self.best_time = result.elapsed_seconds
                improved = True
            if self.best_moves is None or result.moves < self.best_moves:
                self.best_moves = result.moves
                improved = True
        return improved

    def snapshot(self) -> BestScores:
        with self._lock:
            return BestScores(self.best_time, self.best_moves)
