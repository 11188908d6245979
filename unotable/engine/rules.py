"""UNO rules: legality, drawing and turn resolution."""

import random
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple, Union

from unotable.engine.card import DRAW_TWO, REVERSE, SKIP, WILD_DRAW_FOUR, Card, Color
from unotable.engine.deck import create_deck, shuffled
from unotable.engine.game_state import (
    HAND_SIZE,
    HUMAN_SEAT,
    NUM_SEATS,
    GameState,
    seat_name,
)

# Table layout: 0 bottom (human), 3 left, 1 top, 2 right.
CLOCKWISE_SEATS = (0, 3, 1, 2)

# Cards the next seat draws per penalty card in the play
DRAW_PENALTY = {DRAW_TWO: 2, WILD_DRAW_FOUR: 4}


@dataclass(frozen=True)
class PlayCards:
    """Action: play one card or a same-rank stack, in order.

    The last card ends up on top of the discard pile. If it is wild,
    chosen_color is required.
    """

    cards: tuple[Card, ...]
    chosen_color: Optional[Color] = None


@dataclass(frozen=True)
class DrawCard:
    """Action: draw one card and pass the turn."""

    pass


Action = Union[PlayCards, DrawCard]


def next_seat(current: int, direction: int) -> int:
    """Seat that acts after ``current`` when moving ``direction`` around the table."""
    if current not in CLOCKWISE_SEATS:
        raise ValueError(f"Invalid seat: {current}")
    if direction not in (1, -1):
        raise ValueError(f"Invalid direction: {direction}")
    position = CLOCKWISE_SEATS.index(current)
    return CLOCKWISE_SEATS[(position + direction) % NUM_SEATS]


def is_playable(card: Card, top_card: Optional[Card], active_color: Optional[Color]) -> bool:
    """Check if a card can be played on the current discard pile."""
    if top_card is None:
        return False
    # Wild can always be played
    if card.is_wild:
        return True
    # Match by active color
    if card.color == active_color:
        return True
    # Match by rank, whatever the active color is
    return card.rank == top_card.rank


def is_multi_playable(
    cards: Sequence[Card],
    top_card: Optional[Card],
    active_color: Optional[Color],
) -> bool:
    """Check a stack play: one rank throughout, and the first card must be playable."""
    if not cards:
        return False
    if len(cards) == 1:
        return is_playable(cards[0], top_card, active_color)
    first_rank = cards[0].rank
    if any(card.rank != first_rank for card in cards):
        return False
    return is_playable(cards[0], top_card, active_color)


def playable_cards(
    hand: Sequence[Card],
    top_card: Optional[Card],
    active_color: Optional[Color],
) -> List[Card]:
    """Cards of ``hand`` that could be played on their own, in hand order."""
    return [card for card in hand if is_playable(card, top_card, active_color)]


def draw_cards(
    count: int,
    draw_pile: Sequence[Card],
    discard_pile: Sequence[Card],
    rng: Optional[random.Random] = None,
) -> Tuple[List[Card], List[Card], List[Card]]:
    """Draw up to ``count`` cards.

    When the draw pile runs out, every discard card except the face-up one
    is shuffled into a new draw pile. With nothing left to recycle the draw
    stops early, so fewer than ``count`` cards may come back.

    Returns (drawn, new draw pile, new discard pile). The inputs are not
    modified; the discard pile only shrinks to its top card after a recycle.
    """
    draw = list(draw_pile)
    discard = list(discard_pile)
    drawn: List[Card] = []

    for _ in range(count):
        if not draw:
            if len(discard) <= 1:
                break
            # Reshuffle discard (except top) into draw pile
            draw = shuffled(discard[:-1], rng)
            discard = discard[-1:]
        drawn.append(draw.pop())

    return drawn, draw, discard


def init_game(
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    generation: int = 0,
) -> GameState:
    """Create initial session: one card on discard, 7 cards to each seat."""
    if rng is None:
        rng = random.Random(seed)

    deck = create_deck(rng=rng)
    starter = deck.pop()
    hands = []
    for _ in range(NUM_SEATS):
        hands.append(tuple(deck[-HAND_SIZE:]))
        del deck[-HAND_SIZE:]

    # A wild starter has no color of its own
    active_color = starter.color if starter.color is not None else Color.RED
    return GameState(
        hands=tuple(hands),
        discard_pile=(starter,),
        draw_pile=tuple(deck),
        active_color=active_color,
        current_seat=HUMAN_SEAT,
        direction=1,
        generation=generation,
        message=_turn_message(HUMAN_SEAT),
    )


def _turn_message(seat: int) -> str:
    if seat == HUMAN_SEAT:
        return "Your turn!"
    return f"{seat_name(seat)} is thinking..."


def _describe(cards: Sequence[Card]) -> str:
    return ", ".join(str(c) for c in cards)


def apply_action(
    state: GameState,
    seat: int,
    action: Action,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Apply an action for ``seat`` and return the new session state.

    Raises ValueError for actions that are not legal here; callers facing
    user input are expected to check first.
    """
    if state.winner is not None:
        return state
    if seat != state.current_seat:
        raise ValueError(f"Not {seat_name(seat)}'s turn")

    if isinstance(action, DrawCard):
        return _apply_draw(state, seat, rng)
    return _apply_play(state, seat, action, rng)


def _apply_draw(state: GameState, seat: int, rng: Optional[random.Random]) -> GameState:
    drawn, draw, discard = draw_cards(1, state.draw_pile, state.discard_pile, rng)
    hands = list(state.hands)
    hands[seat] = hands[seat] + tuple(drawn)

    if drawn:
        event = f"{seat_name(seat)} drew a card"
    else:
        event = f"{seat_name(seat)} could not draw, no cards left"

    nxt = next_seat(seat, state.direction)
    return replace(
        state,
        hands=tuple(hands),
        draw_pile=tuple(draw),
        discard_pile=tuple(discard),
        current_seat=nxt,
        history=state.history + (event,),
        message=_turn_message(nxt),
    )


def _apply_play(
    state: GameState,
    seat: int,
    play: PlayCards,
    rng: Optional[random.Random],
) -> GameState:
    cards = tuple(play.cards)
    if not is_multi_playable(cards, state.top_discard(), state.active_color):
        raise ValueError(f"Illegal play: {_describe(cards)}")
    last = cards[-1]
    if last.is_wild and play.chosen_color is None:
        raise ValueError("Wild card requires chosen_color")

    hand = list(state.hands[seat])
    for card in cards:
        # Remove this exact card, not an equal-looking copy
        for i, c in enumerate(hand):
            if c.id == card.id:
                hand.pop(i)
                break
        else:
            raise ValueError(f"Card {card} not in hand")

    hands = list(state.hands)
    hands[seat] = tuple(hand)
    discard: Sequence[Card] = state.discard_pile + cards
    draw: Sequence[Card] = state.draw_pile
    active_color = play.chosen_color if last.is_wild else last.color

    name = seat_name(seat)
    action_desc = f"{name} played {_describe(cards)}"
    if last.is_wild:
        action_desc += f" (chose {play.chosen_color.value})"
    history = [action_desc]

    # Check win; effects of the winning card are not applied
    if not hand:
        message = "You won!" if seat == HUMAN_SEAT else f"{name} won!"
        history.append(message)
        return replace(
            state,
            hands=tuple(hands),
            discard_pile=tuple(discard),
            active_color=active_color,
            winner=seat,
            history=state.history + tuple(history),
            message=message,
        )

    direction = state.direction
    nxt = next_seat(seat, direction)
    message = None

    if last.rank == REVERSE:
        direction = -direction
        nxt = next_seat(seat, direction)
    elif last.rank == SKIP:
        skipped = nxt
        nxt = next_seat(skipped, direction)
        message = f"{name} played skip! {seat_name(skipped)} is skipped"
        history.append(f"{seat_name(skipped)} is skipped")
    elif last.rank in DRAW_PENALTY:
        # Next seat draws for every penalty card in the stack and loses its turn
        victim = nxt
        count = DRAW_PENALTY[last.rank] * sum(1 for c in cards if c.rank == last.rank)
        drawn, draw, discard = draw_cards(count, draw, discard, rng)
        hands[victim] = hands[victim] + tuple(drawn)
        history.append(f"{seat_name(victim)} drew {len(drawn)} cards (penalty)")
        nxt = next_seat(victim, direction)

    return replace(
        state,
        hands=tuple(hands),
        discard_pile=tuple(discard),
        draw_pile=tuple(draw),
        active_color=active_color,
        current_seat=nxt,
        direction=direction,
        history=state.history + tuple(history),
        message=message or _turn_message(nxt),
    )
