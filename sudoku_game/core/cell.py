"""Cell records making up a player grid."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Tuple

from .board import BLANK, SudokuBoard

Grid = List[List["Cell"]]


@dataclass(frozen=True)
class Cell:
    """
    One square of the player grid.

    Attributes:
        row, col: Position on the board (0-8).
        value: Current digit, 0 when empty.
        is_initial: Pre-filled by the generator; never editable.
        is_error: The current value disagrees with the solution.
        notes: Candidate digits. Reserved, always empty for now.
    """
    row: int
    col: int
    value: int = BLANK
    is_initial: bool = False
    is_error: bool = False
    notes: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return self.value == BLANK

    def with_value(self, value: int, is_error: bool) -> Cell:
        return replace(self, value=value, is_error=is_error)

    def cleared(self) -> Cell:
        return replace(self, value=BLANK, is_error=False)


def cells_from_board(board: SudokuBoard) -> Grid:
    """Materialize a puzzle grid: every non-empty square becomes an initial cell."""
    return [
        [
            Cell(row=r, col=c, value=v, is_initial=v != BLANK)
            for c, v in enumerate(row)
        ]
        for r, row in enumerate(board.to_list())
    ]


def board_from_cells(cells: Grid) -> SudokuBoard:
    """Plain integer view of a player grid."""
    return SudokuBoard.from_2d_list([[cell.value for cell in row] for row in cells])


def freeze_grid(cells: Grid) -> Tuple[Tuple[Cell, ...], ...]:
    return tuple(tuple(row) for row in cells)


def is_filled(cells: Grid) -> bool:
    """True when every cell holds a digit."""
    return all(not cell.is_empty for row in cells for cell in row)
