"""Exceptions raised by the puzzle engine on malformed input."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the engine raises."""


class InvalidGridSizeError(PuzzleError, ValueError):
    pass


class InvalidPositionError(PuzzleError, ValueError):
    pass


class InvalidSequenceError(PuzzleError, ValueError):
    """A tile sequence is not a permutation of ``[0, size*size - 1]``."""


class NoActiveGameError(PuzzleError, RuntimeError):
    pass
