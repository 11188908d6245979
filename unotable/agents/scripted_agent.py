"""Scripted opponent: the policy every non-human seat follows."""

import random

from unotable.engine import Action, Color, DrawCard, PlayCards, SessionView, playable_cards


class ScriptedAgent:
    """Plays the first playable card, stacked with any playable cards of the same rank.

    With nothing playable it draws one card. A wild on top of the play gets a
    uniformly random color.
    """

    def __init__(self, name: str = "scripted"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        view: SessionView,
        seat: int,
        rng: random.Random,
    ) -> Action:
        valid = playable_cards(view.my_hand, view.top_discard, view.active_color)
        if not valid:
            return DrawCard()

        first = valid[0]
        matching = [c for c in valid if c.rank == first.rank]
        to_play = matching if len(matching) > 1 else [first]

        chosen_color = None
        if to_play[-1].is_wild:
            chosen_color = rng.choice(list(Color))
        return PlayCards(cards=tuple(to_play), chosen_color=chosen_color)
