"""Stateful table the presentation layer drives.

Holds the current session, the human's tentative selection and at most one
pending opponent activation. The presentation layer asks for an activation,
waits out its think delay, then hands the activation back to be run.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unotable.engine import Color, GameState, Phase, SessionView
from unotable.orchestration import controller
from unotable.orchestration.controller import Verdict

if TYPE_CHECKING:
    from unotable.agent.protocol import AgentProtocol


@dataclass(frozen=True)
class Selection:
    """Hand indices the human has picked, in pick order, and the wild color if any."""

    indices: tuple[int, ...] = ()
    chosen_color: Optional[Color] = None

    def toggled(self, index: int) -> "Selection":
        if index in self.indices:
            return Selection(tuple(i for i in self.indices if i != index), self.chosen_color)
        return Selection(self.indices + (index,), self.chosen_color)

    def with_color(self, color: Color) -> "Selection":
        return Selection(self.indices, color)


@dataclass(frozen=True)
class OpponentActivation:
    """Ticket for one scheduled opponent turn."""

    generation: int
    seat: int
    serial: int


class GameTable:
    """One human against three scripted seats."""

    def __init__(
        self,
        seed: Optional[int] = None,
        agent: Optional["AgentProtocol"] = None,
        discard_preview: int = 5,
    ):
        self._rng = random.Random(seed)
        self._agent = agent
        self._discard_preview = discard_preview
        self._generation = 0
        self._serial = 0
        self._pending: Optional[OpponentActivation] = None
        self.selection = Selection()
        self.session = controller.new_session(rng=self._rng, generation=self._generation)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending(self) -> Optional[OpponentActivation]:
        return self._pending

    def new_game(self) -> GameState:
        """Replace the session; any pending activation becomes stale."""
        self._generation += 1
        self._pending = None
        self.selection = Selection()
        self.session = controller.new_session(rng=self._rng, generation=self._generation)
        return self.session

    def view(self) -> SessionView:
        return SessionView.from_state(self.session, discard_preview=self._discard_preview)

    def _accepting_human_input(self) -> bool:
        return self._pending is None and self.session.phase == Phase.AWAITING_HUMAN

    def toggle(self, index: int) -> Selection:
        if self._accepting_human_input():
            self.selection = self.selection.toggled(index)
        return self.selection

    def choose_color(self, color: Color) -> Selection:
        if self._accepting_human_input():
            self.selection = self.selection.with_color(color)
        return self.selection

    def play(self) -> Verdict:
        """Submit the current selection.

        NEEDS_COLOR keeps the selection so the color can be added; every
        other outcome clears it.
        """
        if not self._accepting_human_input():
            return Verdict.IGNORED
        verdict, _ = controller.review_selection(
            self.session, self.selection.indices, self.selection.chosen_color
        )
        if verdict == Verdict.NEEDS_COLOR:
            return verdict
        if verdict == Verdict.ACCEPTED:
            self.session = controller.play_selection(
                self.session,
                self.selection.indices,
                self.selection.chosen_color,
                rng=self._rng,
            )
        self.selection = Selection()
        return verdict

    def draw(self) -> bool:
        if not self._accepting_human_input():
            return False
        self.session = controller.draw_one(self.session, rng=self._rng)
        self.selection = Selection()
        return True

    def schedule_opponent(self) -> Optional[OpponentActivation]:
        """Book the current opponent's turn, or return the one already booked."""
        if self._pending is not None:
            return self._pending
        if self.session.phase != Phase.AWAITING_OPPONENT:
            return None
        self._serial += 1
        self._pending = OpponentActivation(
            generation=self._generation,
            seat=self.session.current_seat,
            serial=self._serial,
        )
        return self._pending

    def run_activation(self, activation: OpponentActivation) -> bool:
        """Run a booked opponent turn; stale tickets are dropped without effect."""
        if activation != self._pending or activation.generation != self._generation:
            return False
        self._pending = None
        self.session = controller.advance_one_opponent(self.session, self._agent, self._rng)
        return True
