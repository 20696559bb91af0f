"""Human agent - reads actions from terminal."""

from unoengine.engine import Action, ChooseColor, DrawCard, PlayerView


def describe_action(action: Action, player_view: PlayerView) -> str:
    if isinstance(action, DrawCard):
        return "DRAW"
    if isinstance(action, ChooseColor):
        return f"CHOOSE {action.color.value.upper()}"
    return f"PLAY {player_view.my_hand[action.hand_index]}"


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_index: int,
    ) -> Action | None:
        if not legal_actions:
            return None

        print(f"\n--- Your turn ({self._name}) ---")
        print("Your hand:", " ".join(str(c) for c in player_view.my_hand))
        print("Top discard:", player_view.top_discard)
        print("Color to match:", player_view.current_color.value.upper())
        for name, count in zip(player_view.player_names, player_view.cards_per_player):
            if count == 1:
                print(f"  {name} has UNO!")
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a, player_view)}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            except EOFError:
                return None
            print("Invalid. Try again.")
