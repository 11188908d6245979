"""Agent protocol - interface that scripted opponents implement."""

import random
from typing import Protocol

from unotable.engine import Action, SessionView


class AgentProtocol(Protocol):
    """Interface for automated UNO seats."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        view: SessionView,
        seat: int,
        rng: random.Random,
    ) -> Action:
        """Choose an action for ``seat``.

        Args:
            view: Filtered view with only this seat's hand and public info.
            seat: The seat being played.
            rng: Random source for any choice that is left to chance.

        Returns:
            A PlayCards that is legal for the view, or DrawCard.
        """
        ...
