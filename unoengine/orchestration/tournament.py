"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Sequence

from unoengine.orchestration.game_runner import GameRunner


def run_tournament(
    agents: Sequence[tuple[str, Any]],
    num_games: int = 100,
    seed: int | None = None,
    max_turns: int = 1000,
) -> dict[str, int]:
    """Run a tournament of num_games between the same agents.

    Seating alternates between the given order and its reverse so no one
    always leads.

    Returns:
        Dict mapping player name to number of wins. Names must be unique.
        Unfinished games count for no one.
    """
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        order = list(agents) if g % 2 == 0 else list(reversed(agents))
        runner = GameRunner(order, seed=rng.randint(0, 2**31 - 1), max_turns=max_turns)
        result = runner.run()
        if result.winner is not None:
            wins[result.winner] += 1

    return dict(wins)
