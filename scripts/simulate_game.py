"""Simulate a game with random agents."""

import random

from unoengine.engine import Action, ChooseColor, PlayCard, PlayerView
from unoengine.orchestration.game_runner import GameRunner


class RandomAgent:
    def __init__(self, name):
        self.name = name

    def get_action(self, view: PlayerView, actions: list[Action], player_index: int) -> Action | None:
        if not actions:
            return None

        # Log the last move from history to see the game progress
        if view.history:
            print(f"> {view.history[-1]}")

        if isinstance(actions[0], ChooseColor):
            return random.choice(actions)
        # Prefer playing over drawing to make game progress
        play_actions = [a for a in actions if isinstance(a, PlayCard)]
        if play_actions:
            return random.choice(play_actions)
        return random.choice(actions)


def main():
    agents = [
        ("Bot1", RandomAgent("Bot1")),
        ("Bot2", RandomAgent("Bot2")),
        ("Bot3", RandomAgent("Bot3")),
        ("Bot4", RandomAgent("Bot4")),
    ]

    runner = GameRunner(agents, seed=42)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(f"Cards accounted for: {result.final_state.card_count()}")


if __name__ == "__main__":
    main()
