"""Entry point a UI talks to: new games, moves, ticks, and best scores."""

from __future__ import annotations

import logging
import random
from typing import NamedTuple

from npuzzle.config import PuzzleConfig
from npuzzle.engine.gameplay.game import PuzzleSession
from npuzzle.engine.gameplay.ticker import ManualTicker, TickerFactory
from npuzzle.errors import NoActiveGameError
from npuzzle.models.board import check_size
from npuzzle.models.records import BestRecord, BestScores, GameResult

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    accepted: bool
    won: bool
    moves: int
    elapsed_seconds: int


class TickResult(NamedTuple):
    elapsed_seconds: int


class GameController:
    """Owns the current session and the best record for its lifetime.

    Starting a new game always abandons the previous session first, so
    only one tick source is ever live per controller.

    By default sessions get a ``ManualTicker`` and the UI is expected to
    call ``tick()`` once per second.  Pass ``ticker_factory`` (e.g.
    ``lambda: IntervalTicker(1.0)``) to let the session keep time itself.
    """

    def __init__(
        self,
        config: PuzzleConfig | None = None,
        ticker_factory: TickerFactory | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.config.validate()
        self._ticker_factory = ticker_factory or ManualTicker
        self._rng = rng
        self._best = BestRecord()
        self._session: PuzzleSession | None = None
        self.results: list[GameResult] = []

    # -- lifecycle ------------------------------------------------------------

    def new_game(self, size: int | None = None) -> list[int]:
        """Start a fresh shuffled game and return its tile sequence."""
        size = self.config.size if size is None else size
        check_size(size)
        self.close()

        self._session = PuzzleSession(
            size,
            ticker=self._ticker_factory(),
            best_record=self._best,
            rng=self._rng,
            allow_solved=self.config.allow_solved,
        )
        logger.info("New %dx%d game", size, size)
        return self._session.board.as_list()

    def play_again(self) -> list[int]:
        """Start a new game with the current grid size."""
        return self.new_game(self.session.size)

    def close(self) -> None:
        """Abandon the current session, if any, stopping its clock."""
        if self._session is not None:
            self._session.abandon()

    # -- events ---------------------------------------------------------------

    def attempt_move(self, position: int) -> MoveResult:
        session = self.session
        accepted = session.on_move_attempt(position)
        if accepted and session.is_won:
            self.results.append(session.result)
        return MoveResult(
            accepted=accepted,
            won=session.is_won,
            moves=session.moves,
            elapsed_seconds=session.elapsed_seconds,
        )

    def tick(self) -> TickResult:
        session = self.session
        session.on_tick()
        return TickResult(elapsed_seconds=session.elapsed_seconds)

    def check_win(self) -> bool:
        session = self.session
        was_active = session.is_active
        won = session.check_win()
        if was_active and session.is_won:
            self.results.append(session.result)
        return won

    # -- queries --------------------------------------------------------------

    @property
    def session(self) -> PuzzleSession:
        if self._session is None:
            raise NoActiveGameError("No game started; call new_game() first.")
        return self._session

    @property
    def size(self) -> int:
        return self.session.size

    def current_state(self) -> list[int]:
        return self.session.board.as_list()

    def best_record(self) -> BestScores:
        return self._best.snapshot()
