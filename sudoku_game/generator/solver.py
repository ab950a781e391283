"""Backtracking solver used to complete a seeded grid."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.board import BLANK, BOX_SIZE, DIGITS, SIZE, SudokuBoard
from .errors import SolverStepLimitExceeded

log = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 2_000_000


@dataclass
class SolverStats:
    """Counters from a single completion run."""
    steps: int = 0
    backtracks: int = 0
    solved: bool = False


class BacktrackingSolver:
    """
    Depth-first completion of a partially filled board.

    Cells are visited in row-major order and digits are tried in ascending
    order, so for a given input the result is deterministic. All randomness
    lives in the seeding done before the solver runs.

    The search works on a private list buffer plus per-row, per-column and
    per-box digit sets. Every placement is paired with an undo of the same
    cell and the same three sets.
    """

    def __init__(self, max_steps: int = DEFAULT_MAX_STEPS):
        """
        Args:
            max_steps: Number of placement attempts after which the search is
                abandoned with SolverStepLimitExceeded.
        """
        self.max_steps = max_steps
        self.stats = SolverStats()

    def solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Complete a copy of board.

        Returns:
            The filled board, or None when the givens admit no completion.

        Raises:
            SolverStepLimitExceeded: the step bound was reached.
        """
        self.stats = SolverStats()
        self._cells = board.to_list()
        self._rows: List[Set[int]] = [set() for _ in range(SIZE)]
        self._cols: List[Set[int]] = [set() for _ in range(SIZE)]
        self._boxes: List[Set[int]] = [set() for _ in range(SIZE)]

        for r in range(SIZE):
            for c in range(SIZE):
                value = self._cells[r][c]
                if value == BLANK:
                    continue
                if not self._is_safe(r, c, value):
                    log.debug("Givens conflict at (%d, %d)", r, c)
                    return None
                self._place(r, c, value)

        empties = board.get_empty_cells()
        self.stats.solved = self._backtrack(empties, 0)
        log.debug("Solver finished: solved=%s steps=%d backtracks=%d",
                  self.stats.solved, self.stats.steps, self.stats.backtracks)
        if not self.stats.solved:
            return None
        return SudokuBoard.from_2d_list(self._cells)

    def _backtrack(self, empties: List[Tuple[int, int]], index: int) -> bool:
        if index == len(empties):
            return True

        row, col = empties[index]
        for value in DIGITS:
            if not self._is_safe(row, col, value):
                continue

            self.stats.steps += 1
            if self.stats.steps > self.max_steps:
                raise SolverStepLimitExceeded(self.max_steps)

            self._place(row, col, value)
            if self._backtrack(empties, index + 1):
                return True
            self._undo(row, col, value)

        self.stats.backtracks += 1
        return False

    def _is_safe(self, row: int, col: int, value: int) -> bool:
        return (value not in self._rows[row]
                and value not in self._cols[col]
                and value not in self._boxes[_box_index(row, col)])

    def _place(self, row: int, col: int, value: int) -> None:
        self._cells[row][col] = value
        self._rows[row].add(value)
        self._cols[col].add(value)
        self._boxes[_box_index(row, col)].add(value)

    def _undo(self, row: int, col: int, value: int) -> None:
        self._cells[row][col] = BLANK
        self._rows[row].discard(value)
        self._cols[col].discard(value)
        self._boxes[_box_index(row, col)].discard(value)


def _box_index(row: int, col: int) -> int:
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE
