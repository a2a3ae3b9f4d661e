"""Inversion counting and the parity test for solvable arrangements."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections.abc import Sequence

from npuzzle.models.board import check_sequence


def count_inversions(sequence: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``sequence[i] > sequence[j]``."""
    inv = 0
    seen: list[int] = []
    for v in sequence:
        inv += len(seen) - bisect_right(seen, v)
        insort(seen, v)
    return inv


def is_solvable(sequence: Sequence[int], size: int) -> bool:
    """Return True if the arrangement can reach the goal through legal moves.

    *sequence* lists the tile identity at every cell, empty slot
    (``size * size - 1``) included.

    Odd widths: solvable iff the inversion count is even.  Even widths:
    solvable iff exactly one of "inversions even" and "empty row, counted
    from the bottom starting at 1, even" holds.
    """
    flat = list(sequence)
    check_sequence(size, flat)

    empty = size * size - 1
    inv = count_inversions([v for v in flat if v != empty])
    if size % 2 == 1:
        return inv % 2 == 0

    empty_row_from_bottom = size - flat.index(empty) // size
    return (inv % 2 == 0) != (empty_row_from_bottom % 2 == 0)
