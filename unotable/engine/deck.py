"""Deck creation and shuffling."""

import random
from typing import List, Optional, Sequence

from unotable.engine.card import (
    ACTION_RANKS,
    NUMBER_RANKS,
    WILD_RANKS,
    Card,
    Color,
    action_card,
    number_card,
    wild_card,
)

DECK_SIZE = 108


def shuffled(cards: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Return a shuffled copy of ``cards``; the input is left untouched."""
    out = list(cards)
    (rng or random).shuffle(out)
    return out


def _card_ids(rng: random.Random, count: int) -> List[str]:
    ids: List[str] = []
    seen = set()
    while len(ids) < count:
        card_id = f"{rng.getrandbits(48):012x}"
        if card_id not in seen:
            seen.add(card_id)
            ids.append(card_id)
    return ids


def create_deck(
    seed: int | None = None,
    rng: Optional[random.Random] = None,
) -> List[Card]:
    """Create a standard 108-card UNO deck in random order.

    - 4 colors × (one 0, two each of 1-9): 76 cards
    - 4 colors × two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards

    Card ids and order both come from ``rng``, so the same seed gives the
    same deck. ``rng`` wins over ``seed`` when both are given.
    """
    if rng is None:
        rng = random.Random(seed)

    ids = iter(_card_ids(rng, DECK_SIZE))
    cards: List[Card] = []

    for color in Color:
        # One zero per color
        cards.append(number_card(color, 0, next(ids)))
        for rank in NUMBER_RANKS[1:]:
            cards.append(number_card(color, rank, next(ids)))
            cards.append(number_card(color, rank, next(ids)))
        for rank in ACTION_RANKS:
            cards.append(action_card(color, rank, next(ids)))
            cards.append(action_card(color, rank, next(ids)))

    for _ in range(4):
        for rank in WILD_RANKS:
            cards.append(wild_card(rank, next(ids)))

    return shuffled(cards, rng)
