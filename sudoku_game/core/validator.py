"""Validation utilities for boards and puzzle/solution pairs."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .board import BLANK, SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard
    from .cell import Grid


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > SIZE:
        return False
    return board.is_safe(row, col, value)


def is_valid_solution(board: SudokuBoard) -> bool:
    """
    Check that every row, column and box is a permutation of 1-9.
    """
    expected = list(range(1, SIZE + 1))
    return all(sorted(unit.tolist()) == expected for unit in board.units())


def validate_puzzle(puzzle: Grid, solution: SudokuBoard) -> bool:
    """
    Check a freshly generated puzzle grid against its solution.

    Initial cells must carry the solution's digit and every other cell must
    start empty and error-free.

    Args:
        puzzle: The generated player grid.
        solution: The complete solution board.

    Returns:
        True if the pair is consistent.
    """
    if not is_valid_solution(solution):
        return False

    for row in puzzle:
        for cell in row:
            if cell.is_error or cell.notes:
                return False
            if cell.is_initial:
                if cell.value != solution.get(cell.row, cell.col):
                    return False
            elif cell.value != BLANK:
                return False
    return True
