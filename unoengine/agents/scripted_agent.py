"""Scripted agent - a simple rule-based opponent."""

from collections import Counter

from unoengine.engine import Action, ChooseColor, Color, DrawCard, PlayCard, PlayerView


def pick_color(hand) -> Color:
    """Color the hand holds most of, ignoring wilds. Ties go to the earlier color, RED by default."""
    counts = Counter(c.color for c in hand if not c.is_wild)
    best = Color.RED
    for color in Color.playable():
        if counts[color] > counts[best]:
            best = color
    return best


class ScriptedAgent:
    """Plays the first legal card in hand order, otherwise draws.

    After a wild it picks the color it holds most of.
    """

    def __init__(self, name: str = "scripted"):
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

        if isinstance(legal_actions[0], ChooseColor):
            return ChooseColor(pick_color(player_view.my_hand))

        for a in legal_actions:
            if isinstance(a, PlayCard):
                return a
        return next((a for a in legal_actions if isinstance(a, DrawCard)), legal_actions[0])
