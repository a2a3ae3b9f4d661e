from npuzzle.models.board import Board, is_adjacent
from npuzzle.models.records import BestRecord, BestScores, GameResult

__all__ = ["Board", "BestRecord", "BestScores", "GameResult", "is_adjacent"]
