"""Sliding-tile puzzle engine: shuffling, moves, and win detection."""

import logging

from npuzzle.config import DIFFICULTIES, PuzzleConfig
from npuzzle.engine.gameplay import GameController, MoveResult, TickResult
from npuzzle.errors import (
    InvalidGridSizeError,
    InvalidPositionError,
    InvalidSequenceError,
    NoActiveGameError,
    PuzzleError,
)
from npuzzle.models import Board, BestScores, GameResult

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Board",
    "BestScores",
    "DIFFICULTIES",
    "GameController",
    "GameResult",
    "InvalidGridSizeError",
    "InvalidPositionError",
    "InvalidSequenceError",
    "MoveResult",
    "NoActiveGameError",
    "PuzzleConfig",
    "PuzzleError",
    "TickResult",
]
