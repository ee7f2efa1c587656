"""Board model for the Game of Fifteen."""

from __future__ import annotations

from dataclasses import dataclass

DIM_MIN = 3
DIM_MAX = 9

Position = tuple[int, int]

NOT_FOUND: Position = (-1, -1)


@dataclass
class Board:
    """Represents a d×d fifteen-puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the empty slot.
    Positions are never cached; ``find`` scans the grid on demand.
    """

    size: int
    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [8, 7, 6, 5, 4, 3, 2, 1, 0])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        tiles = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        return cls(size=size, tiles=tiles)

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from nested rows, e.g. ``[[1, 2, 3], ...]``."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid.")
        return cls(size=size, tiles=[row[:] for row in rows])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def find(self, value: int) -> Position:
        """Return the (row, col) holding *value*, or ``NOT_FOUND``."""
        for r in range(self.size):
            for c in range(self.size):
                if self.tiles[r][c] == value:
                    return (r, c)
        return NOT_FOUND

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = self.size - 1
        if self.tiles[last][last] != 0:
            return False
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == last and c == last:
                    return True
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def is_solvable(self) -> bool:
        """Return True if legal slides can reach the goal arrangement.

        Odd widths need an even inversion count; even widths need the
        inversion count plus the blank's row (counted from the bottom)
        to be even.
        """
        flat = [v for v in self.flat() if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if self.size % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = self.size - 1 - self.find(0)[0]
        return (inversions + blank_row_from_bottom) % 2 == 0
