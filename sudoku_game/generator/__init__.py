"""Generator module for creating Sudoku puzzles."""

from .errors import GenerationError, SolverStepLimitExceeded
from .generator import SudokuGenerator, Difficulty, generate
from .solver import BacktrackingSolver, SolverStats

__all__ = [
    "SudokuGenerator",
    "Difficulty",
    "generate",
    "BacktrackingSolver",
    "SolverStats",
    "GenerationError",
    "SolverStepLimitExceeded",
]
