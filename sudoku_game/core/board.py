"""Numpy-backed 9x9 Sudoku grid."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Iterator

BLANK = 0
SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, SIZE + 1)


class SudokuBoard:
    """
    A 9x9 grid of digits where 0 marks an empty cell.

    Used for the solution grid of a game and as the plain integer view of a
    player grid. Rows, columns and 3x3 boxes are exposed as numpy views.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            if grid.min() < BLANK or grid.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.grid.copy())

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < BLANK or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        self.grid[row, col] = BLANK

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == BLANK

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = box_origin(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def is_safe(self, row: int, col: int, value: int) -> bool:
        """
        Check whether value can go at (row, col) without clashing with a digit
        already placed in the same row, column or box.

        The cell itself is expected to be empty.
        """
        if value in self.get_row(row):
            return False
        if value in self.get_col(col):
            return False
        if value in self.get_box(row, col):
            return False
        return True

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == BLANK)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == BLANK))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != BLANK))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check that no digit repeats within a row, column or box.
        Empty cells are ignored, so a partial board can be valid.
        """
        for unit in self.units():
            non_zero = unit[unit != BLANK]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the board is completely and correctly filled."""
        return self.is_complete() and self.is_valid()

    def units(self) -> Iterator[np.ndarray]:
        """Yield every row, column and box as a flat array."""
        for i in range(SIZE):
            yield self.get_row(i)
        for j in range(SIZE):
            yield self.get_col(j)
        for box_row in range(0, SIZE, BOX_SIZE):
            for box_col in range(0, SIZE, BOX_SIZE):
                yield self.get_box(box_row, box_col)

    def to_list(self) -> List[List[int]]:
        return self.grid.tolist()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(BLANK)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character in puzzle string: {c!r}")
        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        return cls(np.array(data, dtype=np.int32))

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == BLANK else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left coordinates of the box containing (row, col)."""
    return row - row % BOX_SIZE, col - col % BOX_SIZE


def same_box(r1: int, c1: int, r2: int, c2: int) -> bool:
    return box_origin(r1, c1) == box_origin(r2, c2)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE
