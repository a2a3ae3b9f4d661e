"""Board model for the sliding puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass

from npuzzle.errors import (
    InvalidGridSizeError,
    InvalidPositionError,
    InvalidSequenceError,
)

MIN_GRID_SIZE = 2
MAX_GRID_SIZE = 8


def check_size(size: int) -> None:
    """Raise ``InvalidGridSizeError`` unless *size* is an int in 2..8."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidGridSizeError(f"Grid size must be an int, got {size!r}.")
    if size < MIN_GRID_SIZE:
        raise InvalidGridSizeError(
            f"Grid size must be at least {MIN_GRID_SIZE}, got {size}."
        )
    if size > MAX_GRID_SIZE:
        raise InvalidGridSizeError(
            f"Grid size must be at most {MAX_GRID_SIZE}, got {size}."
        )


def check_position(pos: int, size: int) -> None:
    """Raise ``InvalidPositionError`` unless *pos* is a cell of a size×size grid."""
    if isinstance(pos, bool) or not isinstance(pos, int):
        raise InvalidPositionError(f"Position must be an int, got {pos!r}.")
    if not 0 <= pos < size * size:
        raise InvalidPositionError(
            f"Position {pos} is outside a {size}×{size} board "
            f"(expected 0..{size * size - 1})."
        )


def check_sequence(size: int, flat: list[int]) -> None:
    """Raise ``InvalidSequenceError`` unless *flat* is a permutation of the cells."""
    check_size(size)
    if len(flat) != size * size:
        raise InvalidSequenceError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(flat)}."
        )
    if any(isinstance(t, bool) or not isinstance(t, int) for t in flat):
        raise InvalidSequenceError(f"Tile identities must be ints, got {flat}.")
    if sorted(flat) != list(range(size * size)):
        raise InvalidSequenceError(
            f"Tiles must be a permutation of 0..{size * size - 1}, got {flat}."
        )


def is_adjacent(pos_a: int, pos_b: int, size: int) -> bool:
    """Return True if the two cells share an edge (Manhattan distance 1)."""
    row_a, col_a = divmod(pos_a, size)
    row_b, col_b = divmod(pos_b, size)
    return abs(row_a - row_b) + abs(col_a - col_b) == 1


@dataclass
class Board:
    """Represents the sliding puzzle board.

    ``tiles[pos]`` is the identity of the tile sitting at cell ``pos``
    (row-major).  Identity ``size * size - 1`` is the empty slot, and
    ``blank_pos`` is where it currently sits.  In the goal state every
    cell holds its own index.
    """

    size: int
    tiles: list[int]
    blank_pos: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (identity, empty slot bottom-right)."""
        check_size(size)
        cells = size * size
        return cls(size=size, tiles=list(range(cells)), blank_pos=cells - 1)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major list of tile identities.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 8, 4, 6, 7, 5])
        """
        tiles = list(flat)
        check_sequence(size, tiles)
        return cls(size=size, tiles=tiles, blank_pos=tiles.index(size * size - 1))

    # -- properties -----------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def empty_tile(self) -> int:
        return self.cell_count - 1

    # -- queries --------------------------------------------------------------

    def get_tile(self, pos: int) -> int:
        check_position(pos, self.size)
        return self.tiles[pos]

    def position_of(self, tile: int) -> int:
        """Return the cell currently holding *tile*."""
        if isinstance(tile, bool) or not isinstance(tile, int) or not (
            0 <= tile < self.cell_count
        ):
            raise InvalidSequenceError(
                f"Tile identity {tile!r} does not exist on a "
                f"{self.size}×{self.size} board."
            )
        return self.tiles.index(tile)

    def is_adjacent(self, pos_a: int, pos_b: int) -> bool:
        check_position(pos_a, self.size)
        check_position(pos_b, self.size)
        return is_adjacent(pos_a, pos_b, self.size)

    def is_solved(self) -> bool:
        """Check if every cell holds its own tile."""
        return all(tile == pos for pos, tile in enumerate(self.tiles))

    def is_tile_correct(self, pos: int) -> bool:
        """Check if the tile at *pos* is in its goal position."""
        return self.get_tile(pos) == pos

    def is_solvable(self) -> bool:
        from npuzzle.engine.gamesolver import is_solvable

        return is_solvable(self.tiles, self.size)

    def as_list(self) -> list[int]:
        return self.tiles[:]

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:], blank_pos=self.blank_pos)

    # -- mutation -------------------------------------------------------------

    def move_tile(self, pos: int) -> bool:
        """Slide the tile at *pos* into the adjacent empty slot.

        Returns False, leaving the board untouched, if *pos* does not
        share an edge with the empty slot.
        """
        check_position(pos, self.size)
        blank = self.blank_pos
        if not is_adjacent(pos, blank, self.size):
            return False

        self.tiles[blank], self.tiles[pos] = self.tiles[pos], self.tiles[blank]
        self.blank_pos = pos
        return True
