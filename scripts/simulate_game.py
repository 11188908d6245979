"""Simulate a game with every seat scripted, printing the event log."""

import random

from unotable.agents.scripted_agent import ScriptedAgent
from unotable.engine import Action, SessionView
from unotable.engine.game_state import seat_name
from unotable.orchestration.game_runner import GameRunner


class LoggingAgent(ScriptedAgent):
    def get_action(self, view: SessionView, seat: int, rng: random.Random) -> Action:
        # Log the last move from history to see the game progress
        if view.history:
            print(f"> {view.history[-1]}")
        return super().get_action(view, seat, rng)


def main():
    agents = {seat: LoggingAgent(f"Bot{seat}") for seat in range(4)}

    runner = GameRunner(agents, seed=42)
    result = runner.run()

    winner = seat_name(result.winner) if result.winner is not None else "nobody"
    print(f"Game finished! Winner: {winner}")
    print(f"Turns: {result.num_turns}")
    if runner.last_state is not None:
        print(f"Cards accounted for: {runner.last_state.card_count()}")


if __name__ == "__main__":
    main()
