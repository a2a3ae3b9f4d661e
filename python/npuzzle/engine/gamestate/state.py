"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from npuzzle.models.board import Board


class SessionStatus(StrEnum):
    ACTIVE = "active"
    WON = "won"
    ABANDONED = "abandoned"


class GameState:
    """Holds the current board, move counter, and tick count."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.elapsed_seconds: int = 0
        self.status: SessionStatus = SessionStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is SessionStatus.ACTIVE

    # -- counters -------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def increment_time(self) -> None:
        self.elapsed_seconds += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
