"""Game state for UNO."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from unotable.engine.card import Card, Color

NUM_SEATS = 4
HUMAN_SEAT = 0
HAND_SIZE = 7
SEAT_NAMES = ("Player 1", "Bot 2", "Bot 3", "Bot 4")


class Phase(str, Enum):
    """Turn-order state machine states."""

    AWAITING_HUMAN = "awaiting_human"
    AWAITING_OPPONENT = "awaiting_opponent"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """Immutable UNO session snapshot."""

    hands: tuple[tuple[Card, ...], ...]  # indexed by seat
    discard_pile: tuple[Card, ...]  # top is last
    draw_pile: tuple[Card, ...]  # top is last
    active_color: Color
    current_seat: int = HUMAN_SEAT
    direction: int = 1  # 1 = clockwise, -1 = counter-clockwise
    winner: Optional[int] = None
    generation: int = 0  # bumped on every new game
    history: tuple[str, ...] = field(default_factory=tuple)  # Log of events
    message: str = ""

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def game_over(self) -> bool:
        return self.winner is not None

    @property
    def phase(self) -> Phase:
        if self.winner is not None:
            return Phase.GAME_OVER
        if self.current_seat == HUMAN_SEAT:
            return Phase.AWAITING_HUMAN
        return Phase.AWAITING_OPPONENT

    def card_count(self) -> int:
        """Cards across every pile and hand; 108 for a well-formed session."""
        return (
            len(self.draw_pile)
            + len(self.discard_pile)
            + sum(len(hand) for hand in self.hands)
        )


def seat_name(seat: int) -> str:
    return SEAT_NAMES[seat]


@dataclass
class SessionView:
    """Read-only projection of a session for one seat.

    Contains only that seat's hand and public info.
    """

    seat: int
    my_hand: List[Card]
    discard_top: List[Card]  # oldest first, last is the face-up card
    top_discard: Optional[Card]
    draw_pile_count: int
    active_color: Color
    current_seat: int
    direction: int
    phase: Phase
    winner: Optional[int]
    num_cards_per_seat: Dict[int, int]
    history: List[str]  # Recent game events
    message: str

    @classmethod
    def from_state(
        cls,
        state: GameState,
        seat: int = HUMAN_SEAT,
        discard_preview: int = 5,
    ) -> "SessionView":
        """Create a view from full session state, hiding other seats' hands."""
        return cls(
            seat=seat,
            my_hand=list(state.hands[seat]),
            discard_top=list(state.discard_pile[-discard_preview:]) if discard_preview > 0 else [],
            top_discard=state.top_discard(),
            draw_pile_count=len(state.draw_pile),
            active_color=state.active_color,
            current_seat=state.current_seat,
            direction=state.direction,
            phase=state.phase,
            winner=state.winner,
            num_cards_per_seat={s: len(hand) for s, hand in enumerate(state.hands)},
            history=list(state.history[-10:]),  # Last 10 events
            message=state.message,
        )
