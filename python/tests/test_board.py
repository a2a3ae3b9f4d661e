"""Board model: construction, adjacency, the move mutator, completion."""

from __future__ import annotations

import pytest

from npuzzle.errors import (
    InvalidGridSizeError,
    InvalidPositionError,
    InvalidSequenceError,
)
from npuzzle.models.board import Board, is_adjacent


# -- helpers ------------------------------------------------------------------


def _adjacent_pairs(size: int) -> list[tuple[int, int]]:
    pairs: list[tuple[int, int]] = []
    for pos in range(size * size):
        r, c = divmod(pos, size)
        if c + 1 < size:
            pairs.append((pos, pos + 1))
        if r + 1 < size:
            pairs.append((pos, pos + size))
    return pairs


# -- construction -------------------------------------------------------------


def test_solved_board_is_identity() -> None:
    board = Board.solved(3)
    assert board.tiles == list(range(9))
    assert board.blank_pos == 8
    assert board.empty_tile == 8
    assert board.cell_count == 9


def test_from_flat_finds_empty_slot() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 8, 4, 6, 7, 5])
    assert board.blank_pos == 4
    assert board.position_of(5) == 8


def test_from_flat_copies_input() -> None:
    flat = list(range(4))
    board = Board.from_flat(2, flat)
    board.move_tile(2)
    assert flat == [0, 1, 2, 3]


@pytest.mark.parametrize(
    "flat",
    [
        [0, 1, 2],
        [0, 0, 1, 2],
        [0, 1, 2, 4],
        [0.0, 1.0, 2.0, 3.0],
        [0, True, 2, 3],
    ],
    ids=["short", "duplicate", "out-of-range", "floats", "bool"],
)
def test_from_flat_rejects_bad_sequences(flat: list[int]) -> None:
    with pytest.raises(InvalidSequenceError):
        Board.from_flat(2, flat)


@pytest.mark.parametrize("size", [0, 1, -3, 9, 2000, "3", 2.0, True])
def test_rejects_bad_grid_sizes(size) -> None:
    with pytest.raises(InvalidGridSizeError):
        Board.solved(size)


# -- adjacency ----------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4])
def test_cell_is_never_adjacent_to_itself(size: int) -> None:
    for pos in range(size * size):
        assert not is_adjacent(pos, pos, size)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, 1, True),
        (0, 3, True),
        (4, 7, True),
        (2, 3, False),   # end of one row, start of the next
        (0, 4, False),   # diagonal
        (0, 2, False),
        (0, 6, False),
    ],
)
def test_is_adjacent_3x3(a: int, b: int, expected: bool) -> None:
    assert is_adjacent(a, b, 3) is expected
    assert is_adjacent(b, a, 3) is expected
    assert Board.solved(3).is_adjacent(a, b) is expected


def test_is_adjacent_validates_positions() -> None:
    with pytest.raises(InvalidPositionError):
        Board.solved(3).is_adjacent(0, 9)


# -- move_tile ----------------------------------------------------------------


def test_non_adjacent_move_is_refused_and_changes_nothing() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 8, 4, 6, 7, 5])
    before = board.copy()
    assert board.move_tile(0) is False
    assert board.move_tile(4) is False  # the empty slot itself
    assert board == before


def test_adjacent_move_swaps_with_empty_slot() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 8, 4, 6, 7, 5])
    assert board.move_tile(5) is True
    assert board.tiles == [0, 1, 2, 3, 4, 8, 6, 7, 5]
    assert board.blank_pos == 5


def test_swap_and_swap_back_restores_board() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 8, 4, 6, 7, 5])
    before = board.copy()
    assert board.move_tile(1)
    assert board.move_tile(4)
    assert board == before


@pytest.mark.parametrize("pos", [-1, 9, 100, True, "1", 1.0])
def test_move_rejects_invalid_positions(pos) -> None:
    board = Board.solved(3)
    with pytest.raises(InvalidPositionError):
        board.move_tile(pos)
    assert board == Board.solved(3)


# -- completion ---------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4])
def test_every_adjacent_swap_from_goal_is_incomplete(size: int) -> None:
    assert Board.solved(size).is_solved()
    for a, b in _adjacent_pairs(size):
        tiles = list(range(size * size))
        tiles[a], tiles[b] = tiles[b], tiles[a]
        assert not Board.from_flat(size, tiles).is_solved(), (a, b)


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 8, 4, 6, 7, 5])
    assert board.is_tile_correct(0)
    assert not board.is_tile_correct(4)
    assert not board.is_tile_correct(8)


def test_position_of_unknown_tile() -> None:
    with pytest.raises(InvalidSequenceError):
        Board.solved(2).position_of(4)


def test_board_reports_its_own_solvability() -> None:
    assert Board.solved(4).is_solvable()
    tiles = list(range(16))
    tiles[13], tiles[14] = tiles[14], tiles[13]
    assert not Board.from_flat(4, tiles).is_solvable()
