"""Read-only views derived from a session snapshot."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.board import BLANK, DIGITS, SIZE, same_box
from ..core.cell import Cell

Position = Tuple[int, int]


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable copy of everything a session holds."""
    cells: Tuple[Tuple[Cell, ...], ...]
    solution: Tuple[Tuple[int, ...], ...]
    selected: Optional[Position]
    mistakes: int
    is_game_over: bool
    is_won: bool

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    @property
    def selected_value(self) -> int:
        if self.selected is None:
            return BLANK
        return self.cell(*self.selected).value


@dataclass(frozen=True)
class CellHighlight:
    """How a cell relates to the current selection."""
    selected: bool = False
    related: bool = False
    same_value: bool = False


def digit_counts(snapshot: SessionSnapshot) -> Dict[int, int]:
    """
    Count how many cells hold each digit 1-9.

    Wrong placements are counted too; the figure is what the board shows.
    """
    counts = {digit: 0 for digit in DIGITS}
    for row in snapshot.cells:
        for cell in row:
            if cell.value != BLANK:
                counts[cell.value] += 1
    return counts


def remaining_digits(snapshot: SessionSnapshot) -> Dict[int, int]:
    """How many more of each digit the board can take, never below zero."""
    return {digit: max(0, SIZE - count)
            for digit, count in digit_counts(snapshot).items()}


def classify_cell(snapshot: SessionSnapshot, row: int, col: int) -> CellHighlight:
    """
    Classify a cell against the selection.

    related covers the selected cell's row, column and box, the selected
    cell included. same_value needs a non-empty selected cell.
    """
    if snapshot.selected is None:
        return CellHighlight()

    sel_row, sel_col = snapshot.selected
    selected_value = snapshot.selected_value
    return CellHighlight(
        selected=(row, col) == (sel_row, sel_col),
        related=(row == sel_row or col == sel_col
                 or same_box(row, col, sel_row, sel_col)),
        same_value=(selected_value != BLANK
                    and snapshot.cell(row, col).value == selected_value),
    )


def highlight_grid(snapshot: SessionSnapshot) -> Tuple[Tuple[CellHighlight, ...], ...]:
    return tuple(
        tuple(classify_cell(snapshot, r, c) for c in range(SIZE))
        for r in range(SIZE)
    )
