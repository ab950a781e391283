"""Sudoku puzzle generator and single-player game rules."""

from .core import SudokuBoard, Cell
from .generator import SudokuGenerator, Difficulty, GenerationError, generate
from .session import GameSession, GameState

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "Cell",
    "SudokuGenerator",
    "Difficulty",
    "GenerationError",
    "generate",
    "GameSession",
    "GameState",
]
