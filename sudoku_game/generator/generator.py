"""Sudoku puzzle generator with difficulty-driven cell removal."""

from __future__ import annotations
import logging
import random
from enum import Enum
from typing import List, Optional, Tuple

from ..core.board import BLANK, BOX_SIZE, SIZE, SudokuBoard
from ..core.cell import Grid, cells_from_board
from .errors import GenerationError, SolverStepLimitExceeded
from .solver import DEFAULT_MAX_STEPS, BacktrackingSolver

log = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_MAX_DRAWS = 10_000

Puzzle = Tuple[Grid, SudokuBoard]


class Difficulty(Enum):
    """Difficulty levels, each blanking a fixed number of cells."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def removal_count(self) -> int:
        """Number of cells left blank out of 81."""
        counts = {
            Difficulty.EASY: 30,
            Difficulty.MEDIUM: 40,
            Difficulty.HARD: 50,
            Difficulty.EXPERT: 60,
        }
        return counts[self]

    @property
    def clue_count(self) -> int:
        return SIZE * SIZE - self.removal_count

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_name(cls, name: str) -> Difficulty:
        """Look up a difficulty by value or label, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {name!r}, expected one of: {choices}") from None


class SudokuGenerator:
    """
    Generator for playable Sudoku puzzles.

    Algorithm:
    1. Fill the three diagonal boxes with random digits (they share no row,
       column or box, so any filling is consistent)
    2. Complete the grid with a deterministic backtracking solver
    3. Blank `difficulty.removal_count` random cells

    Removal does not check for a unique solution; the session judges moves
    against the stored solution only.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_steps: int = DEFAULT_MAX_STEPS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        max_draws: int = DEFAULT_MAX_DRAWS,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored when rng is given.
            rng: Random source to draw from.
            max_steps: Step bound handed to the backtracking solver.
            max_attempts: Full generation attempts before giving up.
            max_draws: Bound on each rejection-sampling loop.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_steps = max_steps
        self.max_attempts = max_attempts
        self.max_draws = max_draws

    def generate(self, difficulty: Difficulty = Difficulty.EASY) -> Puzzle:
        """
        Generate a puzzle along with its solution.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            Tuple of (puzzle cells, solution board). The solution is never
            shared with the puzzle.
        """
        solution = self.generate_solution()
        puzzle = self._remove_digits(solution.copy(), difficulty.removal_count)
        log.debug("Generated %s puzzle with %d clues",
                  difficulty.value, puzzle.count_filled())
        return cells_from_board(puzzle), solution

    def generate_batch(self, count: int, difficulty: Difficulty = Difficulty.EASY) -> List[Puzzle]:
        """Generate several independent puzzles of the same difficulty."""
        return [self.generate(difficulty) for _ in range(count)]

    def generate_solution(self) -> SudokuBoard:
        """
        Generate a complete, rule-valid board.

        A seeding that sends the solver past its step bound is discarded and
        retried with fresh random digits.

        Raises:
            GenerationError: every attempt failed.
        """
        last_error: Optional[GenerationError] = None
        for attempt in range(1, self.max_attempts + 1):
            board = SudokuBoard()
            self._fill_diagonal(board)

            solver = BacktrackingSolver(max_steps=self.max_steps)
            try:
                solution = solver.solve(board)
            except SolverStepLimitExceeded as e:
                log.warning("Generation attempt %d/%d abandoned: %s",
                            attempt, self.max_attempts, e)
                last_error = e
                continue

            if solution is None:
                log.warning("Generation attempt %d/%d: seeded board has no completion",
                            attempt, self.max_attempts)
                last_error = GenerationError("Seeded board has no completion")
                continue

            return solution

        raise GenerationError(
            f"Could not generate a solution in {self.max_attempts} attempts"
        ) from last_error

    def _fill_diagonal(self, board: SudokuBoard) -> None:
        """Fill the top-left, center and bottom-right boxes."""
        for start in range(0, SIZE, BOX_SIZE):
            self._fill_box(board, start, start)

    def _fill_box(self, board: SudokuBoard, start_row: int, start_col: int) -> None:
        """Fill one box cell by cell, redrawing digits already in the box."""
        for i in range(BOX_SIZE):
            for j in range(BOX_SIZE):
                used = board.get_box(start_row, start_col)
                value = self._draw(lambda: self.rng.randint(1, SIZE),
                                   lambda v: v not in used)
                board.set(start_row + i, start_col + j, value)

    def _remove_digits(self, board: SudokuBoard, count: int) -> SudokuBoard:
        """Blank count distinct filled cells chosen uniformly at random."""
        for _ in range(count):
            row, col = self._draw(
                lambda: (self.rng.randrange(SIZE), self.rng.randrange(SIZE)),
                lambda pos: board.get(*pos) != BLANK,
            )
            board.clear(row, col)
        return board

    def _draw(self, sample, accept):
        """Rejection sampling bounded by max_draws."""
        for _ in range(self.max_draws):
            value = sample()
            if accept(value):
                return value
        raise GenerationError(
            f"No acceptable random draw in {self.max_draws:,} tries"
        )


def generate(difficulty: Difficulty = Difficulty.EASY,
             rng: Optional[random.Random] = None) -> Puzzle:
    """Generate one (puzzle, solution) pair with a fresh generator."""
    return SudokuGenerator(rng=rng).generate(difficulty)
