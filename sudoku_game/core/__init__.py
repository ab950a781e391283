"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, BLANK, SIZE, BOX_SIZE
from .cell import Cell, Grid, cells_from_board, board_from_cells
from .validator import is_valid_placement, is_valid_solution, validate_puzzle

__all__ = [
    "SudokuBoard",
    "BLANK",
    "SIZE",
    "BOX_SIZE",
    "Cell",
    "Grid",
    "cells_from_board",
    "board_from_cells",
    "is_valid_placement",
    "is_valid_solution",
    "validate_puzzle",
]
