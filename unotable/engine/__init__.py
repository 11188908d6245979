"""Game engine for UNO."""

from unotable.engine.card import Card, CardKind, Color
from unotable.engine.deck import DECK_SIZE, create_deck
from unotable.engine.game_state import GameState, Phase, SessionView
from unotable.engine.rules import (
    Action,
    PlayCards,
    DrawCard,
    apply_action,
    draw_cards,
    init_game,
    is_multi_playable,
    is_playable,
    next_seat,
    playable_cards,
)

__all__ = [
    "Card",
    "CardKind",
    "Color",
    "DECK_SIZE",
    "create_deck",
    "GameState",
    "Phase",
    "SessionView",
    "Action",
    "PlayCards",
    "DrawCard",
    "apply_action",
    "draw_cards",
    "init_game",
    "is_multi_playable",
    "is_playable",
    "next_seat",
    "playable_cards",
]
