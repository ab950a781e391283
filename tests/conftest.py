"""Shared fixtures for session and CLI tests."""

import pytest

from sudoku_game.core.board import SudokuBoard
from sudoku_game.core.cell import cells_from_board
from sudoku_game.generator import Difficulty, SudokuGenerator
from sudoku_game.session import GameSession

# A known puzzle with a unique solution (30 clues, 51 blanks)
KNOWN_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

KNOWN_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class FixedGenerator(SudokuGenerator):
    """Hands out the known puzzle whatever the difficulty."""

    def __init__(self):
        super().__init__(seed=0)
        self.calls = []

    def generate(self, difficulty=Difficulty.EASY):
        self.calls.append(difficulty)
        puzzle = SudokuBoard.from_string(KNOWN_PUZZLE)
        return cells_from_board(puzzle), SudokuBoard.from_string(KNOWN_SOLUTION)


def empty_cells(session):
    return [(cell.row, cell.col) for row in session.board for cell in row
            if cell.value == 0]


def wrong_digit(session, row, col):
    right = session.solution.get(row, col)
    return right % 9 + 1


@pytest.fixture
def fixed_session():
    return GameSession(Difficulty.EASY, FixedGenerator())


@pytest.fixture
def seeded_session():
    return GameSession(Difficulty.EASY, SudokuGenerator(seed=42))
