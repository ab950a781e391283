"""Session module: game rules and the views a front end renders."""

from .session import GameSession, GameState, MAX_MISTAKES
from .views import (
    CellHighlight,
    SessionSnapshot,
    classify_cell,
    digit_counts,
    highlight_grid,
    remaining_digits,
)

__all__ = [
    "GameSession",
    "GameState",
    "MAX_MISTAKES",
    "CellHighlight",
    "SessionSnapshot",
    "classify_cell",
    "digit_counts",
    "highlight_grid",
    "remaining_digits",
]
