"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.engine.gamesolver import is_solvable
from npuzzle.models.board import Board, check_size

logger = logging.getLogger(__name__)


class Shuffler:
    """Draws random arrangements until one passes the parity test."""

    @staticmethod
    def shuffled_sequence(size: int, rng: random.Random | None = None) -> list[int]:
        """Return a uniformly shuffled, solvable tile sequence.

        The movable tiles ``0 .. size*size - 2`` are permuted and the
        empty slot is appended last.  About half of all draws are
        solvable, so the loop rarely runs more than twice.
        """
        check_size(size)
        shuffle = rng.shuffle if rng is not None else random.shuffle
        empty = size * size - 1
        attempts = 0

        while True:
            attempts += 1
            labels = list(range(empty))
            shuffle(labels)
            labels.append(empty)
            if is_solvable(labels, size):
                logger.debug(
                    "Drew solvable %dx%d arrangement after %d attempt(s)",
                    size, size, attempts,
                )
                return labels

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        allow_solved: bool = False,
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        while True:
            board = Board.from_flat(size, Shuffler.shuffled_sequence(size, rng))
            # Ensure the board is not already solved
            if allow_solved or not board.is_solved():
                return board
            logger.debug("Shuffle produced the goal state, redrawing")
