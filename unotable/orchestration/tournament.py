"""Tournament - run many scripted games and aggregate results."""

import random
from collections import defaultdict

from unotable.orchestration.game_runner import GameRunner


def run_tournament(
    num_games: int = 100,
    seed: int | None = None,
    max_turns: int = 1000,
) -> dict[int, int]:
    """Run ``num_games`` all-scripted games.

    Every seat plays the same policy, so the tally shows how much the seat
    order alone is worth.

    Returns:
        Dict mapping seat to number of wins. Games that hit ``max_turns``
        count under key -1.
    """
    wins: dict[int, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        runner = GameRunner(seed=rng.randint(0, 2**31 - 1), max_turns=max_turns)
        result = runner.run()
        wins[result.winner if result.winner is not None else -1] += 1

    return dict(wins)
