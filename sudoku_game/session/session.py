"""Game session: the board a player works on and the rules that judge it."""

from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from ..core.board import SIZE, SudokuBoard, in_bounds
from ..core.cell import Cell, Grid, freeze_grid, is_filled
from ..generator import Difficulty, SudokuGenerator
from .views import CellHighlight, SessionSnapshot, classify_cell, digit_counts

log = logging.getLogger(__name__)

MAX_MISTAKES = 3


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    One game in progress.

    Holds the player grid, the solution it is judged against, the selected
    cell and the mistake counter. Moves that the rules do not allow (editing
    a given, acting with nothing selected, acting after the game ended) are
    ignored rather than reported.

    The generator is called once per new_game; moves only ever compare
    against the stored solution.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.EASY,
                 generator: Optional[SudokuGenerator] = None):
        """
        Create a session and start its first game.

        Args:
            difficulty: Difficulty of the first game.
            generator: Puzzle source. A fresh unseeded one if None.
        """
        self.generator = generator if generator is not None else SudokuGenerator()
        self.new_game(difficulty)

    def new_game(self, difficulty: Optional[Difficulty] = None) -> None:
        """
        Replace the current game with a freshly generated one.

        Allowed in any state. None keeps the current difficulty. If generation
        fails the current game is left as it was.
        """
        target = difficulty if difficulty is not None else self.difficulty
        puzzle, solution = self.generator.generate(target)
        self.difficulty = target
        self._cells: Grid = puzzle
        self._solution: SudokuBoard = solution
        self._selected: Optional[Tuple[int, int]] = None
        self._mistakes = 0
        self._state = GameState.PLAYING
        log.debug("New %s game", self.difficulty.value)

    def select_cell(self, row: int, col: int) -> None:
        """
        Point the selection at (row, col). Ignored once the game has ended.

        Off-board coordinates raise ValueError in every state.
        """
        if not in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is off the board")
        if not self.is_playing:
            return
        self._selected = (row, col)

    def place_digit(self, digit: int) -> None:
        """
        Write digit into the selected cell and judge it against the solution.

        A wrong digit stays on the board marked as an error and costs a
        mistake; the third mistake loses the game. A right digit that
        completes the board wins it.

        A digit outside 1-9 raises ValueError in every state, ended games
        included; every other refused move is silently ignored.
        """
        if digit < 1 or digit > SIZE:
            raise ValueError(f"Digit must be 1-{SIZE}, got {digit}")

        cell = self._editable_cell()
        if cell is None:
            return

        expected = self._solution.get(cell.row, cell.col)
        is_error = digit != expected
        self._cells[cell.row][cell.col] = cell.with_value(digit, is_error)

        if is_error:
            self._mistakes += 1
            log.debug("Wrong digit %d at (%d, %d), mistakes=%d",
                      digit, cell.row, cell.col, self._mistakes)
            if self._mistakes >= MAX_MISTAKES:
                self._state = GameState.LOST
                log.debug("Game lost")
        elif is_filled(self._cells):
            self._state = GameState.WON
            log.debug("Game won")

    def clear_cell(self) -> None:
        """Empty the selected cell. Mistakes already made still count."""
        cell = self._editable_cell()
        if cell is None:
            return
        self._cells[cell.row][cell.col] = cell.cleared()

    def _editable_cell(self) -> Optional[Cell]:
        if not self.is_playing or self._selected is None:
            return None
        cell = self.cell(*self._selected)
        if cell.is_initial:
            return None
        return cell

    # Read accessors

    @property
    def board(self) -> Tuple[Tuple[Cell, ...], ...]:
        return freeze_grid(self._cells)

    @property
    def solution(self) -> SudokuBoard:
        return self._solution.copy()

    @property
    def selected(self) -> Optional[Tuple[int, int]]:
        return self._selected

    @property
    def mistakes(self) -> int:
        return self._mistakes

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is GameState.PLAYING

    @property
    def is_game_over(self) -> bool:
        return self._state is GameState.LOST

    @property
    def is_won(self) -> bool:
        return self._state is GameState.WON

    def cell(self, row: int, col: int) -> Cell:
        return self._cells[row][col]

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            cells=freeze_grid(self._cells),
            solution=tuple(tuple(row) for row in self._solution.to_list()),
            selected=self._selected,
            mistakes=self._mistakes,
            is_game_over=self.is_game_over,
            is_won=self.is_won,
        )

    def digit_counts(self) -> Dict[int, int]:
        return digit_counts(self.snapshot())

    def highlight(self, row: int, col: int) -> CellHighlight:
        return classify_cell(self.snapshot(), row, col)

    def __repr__(self) -> str:
        return (f"GameSession(difficulty={self.difficulty.value}, "
                f"state={self._state.value}, mistakes={self._mistakes})")
