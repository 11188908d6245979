"""Shared fixtures for building hand-crafted sessions."""

from typing import Optional, Sequence

import pytest

from unotable.engine import Card, Color, GameState


@pytest.fixture
def make_state():
    def _make(
        hands: Sequence[Sequence[Card]],
        discard: Sequence[Card],
        draw: Sequence[Card] = (),
        active_color: Optional[Color] = None,
        current_seat: int = 0,
        direction: int = 1,
    ) -> GameState:
        hands = [tuple(h) for h in hands]
        while len(hands) < 4:
            hands.append(())
        if active_color is None:
            active_color = discard[-1].color
        return GameState(
            hands=tuple(hands),
            discard_pile=tuple(discard),
            draw_pile=tuple(draw),
            active_color=active_color,
            current_seat=current_seat,
            direction=direction,
        )

    return _make
