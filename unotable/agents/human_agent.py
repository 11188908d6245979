"""Human seat - reads moves from the terminal."""

from dataclasses import dataclass
from typing import Optional

from unotable.engine import Color, SessionView
from unotable.engine.game_state import seat_name


@dataclass(frozen=True)
class HumanMove:
    """What the human typed: a draw, or hand indices to play."""

    draw: bool = False
    indices: tuple[int, ...] = ()


def _parse_color(raw: str) -> Optional[Color]:
    raw = raw.strip().lower()
    for color in Color:
        if raw in (color.value, color.value[0]):
            return color
    return None


def format_view(view: SessionView) -> str:
    """Render the human's view of the table as text."""
    others = ", ".join(
        f"{seat_name(s)}: {n}" for s, n in view.num_cards_per_seat.items() if s != view.seat
    )
    lines = [
        f"Top discard: {view.top_discard}  (color to match: {view.active_color.value})",
        f"Recent discards: {' '.join(str(c) for c in view.discard_top)}",
        f"Draw pile: {view.draw_pile_count} cards | {others}",
        f"Direction: {'clockwise' if view.direction == 1 else 'counter-clockwise'}",
        "Your hand:",
    ]
    for i, card in enumerate(view.my_hand):
        lines.append(f"  {i}: {card}")
    return "\n".join(lines)


class HumanAgent:
    """Prompts the human for a move via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_move(self, view: SessionView) -> HumanMove:
        print("\n--- Your turn ---")
        print(format_view(view))

        while True:
            try:
                raw = input("Cards to play (e.g. '0 3'), or 'd' to draw: ").strip().lower()
            except EOFError:
                return HumanMove(draw=True)
            if raw in ("d", "draw"):
                return HumanMove(draw=True)
            try:
                indices = tuple(int(part) for part in raw.replace(",", " ").split())
            except ValueError:
                indices = ()
            if indices:
                return HumanMove(indices=indices)
            print("Invalid. Try again.")

    def get_color(self) -> Color:
        while True:
            try:
                raw = input("Choose a color (red/blue/green/yellow): ")
            except EOFError:
                return Color.RED
            color = _parse_color(raw)
            if color is not None:
                return color
            print("Invalid. Try again.")
