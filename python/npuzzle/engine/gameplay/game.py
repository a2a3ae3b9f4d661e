"""Core gameplay logic: processes moves and ticks, detects the win."""

from __future__ import annotations

import logging
import random
import threading

from npuzzle.engine.gamegenerator import Shuffler
from npuzzle.engine.gameplay.ticker import ManualTicker, TickSource
from npuzzle.engine.gamestate import GameState, SessionStatus
from npuzzle.models.board import Board, check_position
from npuzzle.models.records import BestRecord, GameResult

logger = logging.getLogger(__name__)


class PuzzleSession:
    """Orchestrates a single play-through.

    The session owns its tick source from creation until it leaves the
    ``ACTIVE`` state, at which point the source is cancelled.  Moves and
    ticks are serialized by a lock since an ``IntervalTicker`` calls
    ``on_tick`` from its own thread.
    """

    def __init__(
        self,
        size: int,
        ticker: TickSource | None = None,
        best_record: BestRecord | None = None,
        rng: random.Random | None = None,
        allow_solved: bool = False,
    ) -> None:
        board = Shuffler.generate(size, rng=rng, allow_solved=allow_solved)
        self._begin(board, ticker, best_record)

    @classmethod
    def from_board(
        cls,
        board: Board,
        ticker: TickSource | None = None,
        best_record: BestRecord | None = None,
    ) -> PuzzleSession:
        """Create a session from an existing board (e.g. a fixed test layout)."""
        obj = object.__new__(cls)
        obj._begin(board, ticker, best_record)
        return obj

    def _begin(
        self,
        board: Board,
        ticker: TickSource | None,
        best_record: BestRecord | None,
    ) -> None:
        self.size = board.size
        self.state = GameState(board)
        self.best_record = best_record if best_record is not None else BestRecord()
        self.result: GameResult | None = None
        self._lock = threading.RLock()
        self.ticker = ticker if ticker is not None else ManualTicker()
        self.ticker.start(self.on_tick)
        logger.debug("Started %dx%d session: %s", self.size, self.size, board.tiles)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def elapsed_seconds(self) -> int:
        return self.state.elapsed_seconds

    @property
    def is_active(self) -> bool:
        return self.state.is_active

    @property
    def is_won(self) -> bool:
        return self.state.status is SessionStatus.WON

    # -- events ---------------------------------------------------------------

    def on_move_attempt(self, pos: int) -> bool:
        """Slide the tile at *pos* into the empty slot if they are adjacent.

        Returns True if the move was accepted.  Non-adjacent cells and
        sessions that are no longer active are refused silently.
        """
        check_position(pos, self.size)
        with self._lock:
            if not self.state.is_active:
                return False
            if not self.state.board.move_tile(pos):
                return False

            self.state.increment_moves()
            if self.state.is_solved:
                self._win()
            return True

    def on_tick(self) -> None:
        with self._lock:
            if self.state.is_active:
                self.state.increment_time()

    def check_win(self) -> bool:
        """Report whether the board is complete.

        An active session whose board is complete is finished through the
        same path as the automatic check after a move.
        """
        with self._lock:
            if not self.state.is_solved:
                return False
            if self.state.is_active:
                self._win()
            return True

    def abandon(self) -> None:
        """Stop an active session that is being replaced by a new game."""
        with self._lock:
            if not self.state.is_active:
                return
            self.state.status = SessionStatus.ABANDONED
            self.ticker.cancel()
        logger.debug(
            "Abandoned %dx%d session after %d moves",
            self.size, self.size, self.state.moves,
        )

    # -- helpers --------------------------------------------------------------

    def _win(self) -> None:
        self.state.status = SessionStatus.WON
        self.ticker.cancel()
        self.result = GameResult.finished_now(
            size=self.size,
            moves=self.state.moves,
            elapsed_seconds=self.state.elapsed_seconds,
        )
        improved = self.best_record.update(self.result)
        logger.info(
            "Solved %dx%d in %d seconds and %d moves%s",
            self.size, self.size,
            self.result.elapsed_seconds, self.result.moves,
            " (new best)" if improved else "",
        )
