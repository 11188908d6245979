"""Session controller: the human-facing operations on a session.

Every function takes a session and returns a session. Requests that are not
acceptable right now come back as the unchanged session; nothing here raises
for bad user input.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

from unotable.agents.scripted_agent import ScriptedAgent
from unotable.engine import (
    Card,
    Color,
    DrawCard,
    GameState,
    Phase,
    PlayCards,
    SessionView,
    apply_action,
    init_game,
    is_playable,
)
from unotable.engine.game_state import HUMAN_SEAT

if TYPE_CHECKING:
    from unotable.agent.protocol import AgentProtocol

# Upper bound on opponent activations in one advance_opponents call
MAX_OPPONENT_STEPS = 1000

_default_agent = ScriptedAgent()


class Verdict(str, Enum):
    """Outcome of checking a human selection."""

    IGNORED = "ignored"  # not the human's turn, or game over
    REJECTED = "rejected"
    NEEDS_COLOR = "needs_color"
    ACCEPTED = "accepted"


def new_session(
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    generation: int = 0,
) -> GameState:
    """Fresh shuffled session; seat 0 to play, clockwise."""
    return init_game(seed=seed, rng=rng, generation=generation)


def is_terminal(session: GameState) -> tuple[bool, Optional[int]]:
    return session.winner is not None, session.winner


def resolve_indices(session: GameState, indices: Sequence[int]) -> tuple[Card, ...]:
    """Human hand cards for ``indices``, in selection order.

    Out-of-range and repeated indices are dropped.
    """
    hand = session.hands[HUMAN_SEAT]
    seen = set()
    cards = []
    for i in indices:
        if 0 <= i < len(hand) and i not in seen:
            seen.add(i)
            cards.append(hand[i])
    return tuple(cards)


def review_selection(
    session: GameState,
    indices: Sequence[int],
    chosen_color: Optional[Color] = None,
) -> tuple[Verdict, tuple[Card, ...]]:
    """Decide what playing ``indices`` would do, without doing it."""
    if session.phase != Phase.AWAITING_HUMAN:
        return Verdict.IGNORED, ()

    cards = resolve_indices(session, indices)
    if not cards:
        return Verdict.REJECTED, ()

    first = cards[0]
    if any(c.rank != first.rank for c in cards):
        return Verdict.REJECTED, cards
    if not is_playable(first, session.top_discard(), session.active_color):
        return Verdict.REJECTED, cards
    if first.is_wild and chosen_color is None:
        return Verdict.NEEDS_COLOR, cards
    return Verdict.ACCEPTED, cards


def play_selection(
    session: GameState,
    indices: Sequence[int],
    chosen_color: Optional[Color] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Play the selected human cards, or return the session unchanged."""
    verdict, cards = review_selection(session, indices, chosen_color)
    if verdict != Verdict.ACCEPTED:
        return session
    color = chosen_color if cards[-1].is_wild else None
    return apply_action(session, HUMAN_SEAT, PlayCards(cards=cards, chosen_color=color), rng)


def draw_one(session: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Human draws one card and the turn passes; no-op when it isn't their turn."""
    if session.phase != Phase.AWAITING_HUMAN:
        return session
    return apply_action(session, HUMAN_SEAT, DrawCard(), rng)


def advance_one_opponent(
    session: GameState,
    agent: Optional["AgentProtocol"] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Let the current opponent seat act once."""
    if session.phase != Phase.AWAITING_OPPONENT:
        return session
    if rng is None:
        rng = random.Random()
    agent = agent or _default_agent
    seat = session.current_seat
    action = agent.get_action(SessionView.from_state(session, seat), seat, rng)
    return apply_action(session, seat, action, rng)


def advance_opponents(
    session: GameState,
    agent: Optional["AgentProtocol"] = None,
    rng: Optional[random.Random] = None,
    max_steps: int = MAX_OPPONENT_STEPS,
) -> GameState:
    """Run opponent seats until it is the human's turn or the game is over."""
    if rng is None:
        rng = random.Random()
    steps = 0
    while session.phase == Phase.AWAITING_OPPONENT and steps < max_steps:
        session = advance_one_opponent(session, agent, rng)
        steps += 1
    return session
