from npuzzle.engine.gameplay.controller import GameController, MoveResult, TickResult
from npuzzle.engine.gameplay.game import PuzzleSession
from npuzzle.engine.gameplay.ticker import IntervalTicker, ManualTicker, TickSource

__all__ = [
    "GameController",
    "IntervalTicker",
    "ManualTicker",
    "MoveResult",
    "PuzzleSession",
    "TickResult",
    "TickSource",
]
