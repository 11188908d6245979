"""Single game runner with every seat scripted."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unotable.agents.scripted_agent import ScriptedAgent
from unotable.engine import GameState, SessionView, apply_action, init_game
from unotable.engine.game_state import NUM_SEATS

if TYPE_CHECKING:
    from unotable.agent.protocol import AgentProtocol


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]
    num_turns: int
    history: tuple[str, ...]


class GameRunner:
    """Runs a single UNO game to completion, human seat included."""

    def __init__(
        self,
        agents: Optional[dict[int, "AgentProtocol"]] = None,
        seed: Optional[int] = None,
        max_turns: int = 1000,
    ):
        agents = dict(agents or {})
        for seat in range(NUM_SEATS):
            agents.setdefault(seat, ScriptedAgent(name=f"scripted-{seat}"))
        self._agents = agents
        self._seed = seed
        self._max_turns = max_turns
        self.last_state: Optional[GameState] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        rng = random.Random(self._seed)
        state = init_game(rng=rng)
        num_turns = 0

        while state.winner is None and num_turns < self._max_turns:
            seat = state.current_seat
            view = SessionView.from_state(state, seat)
            action = self._agents[seat].get_action(view, seat, rng)
            state = apply_action(state, seat, action, rng)
            num_turns += 1

        self.last_state = state
        return GameResult(
            winner=state.winner,
            num_turns=num_turns,
            history=state.history,
        )
