"""Game orchestration."""

from unotable.orchestration.controller import (
    Verdict,
    advance_one_opponent,
    advance_opponents,
    draw_one,
    is_terminal,
    new_session,
    play_selection,
    review_selection,
)
from unotable.orchestration.game_runner import GameRunner, GameResult
from unotable.orchestration.table import GameTable, OpponentActivation, Selection
from unotable.orchestration.tournament import run_tournament

__all__ = [
    "Verdict",
    "advance_one_opponent",
    "advance_opponents",
    "draw_one",
    "is_terminal",
    "new_session",
    "play_selection",
    "review_selection",
    "GameRunner",
    "GameResult",
    "GameTable",
    "OpponentActivation",
    "Selection",
    "run_tournament",
]
