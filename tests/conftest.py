"""Shared fixtures for building hand-made game states."""

import pytest

from unoengine.engine import ActionRequired, Color, Direction, GameState, Player, build_deck


def _remaining_deck(used):
    """Full deck minus the given cards, so card totals stay at 108."""
    remaining = list(build_deck())
    for card in used:
        remaining.remove(card)
    return tuple(remaining)


@pytest.fixture
def make_state():
    def _make(
        hands,
        discard,
        current_color=None,
        current=0,
        direction=Direction.CLOCKWISE,
        action=ActionRequired.PLAY,
        deck=None,
    ) -> GameState:
        discard = tuple(discard)
        if deck is None:
            deck = _remaining_deck([c for h in hands for c in h] + list(discard))
        if current_color is None:
            top = discard[-1]
            current_color = top.color if top.color is not Color.WILD else Color.RED
        players = tuple(
            Player(id=f"player-{i + 1}", name=f"P{i + 1}", hand=tuple(h))
            for i, h in enumerate(hands)
        )
        return GameState(
            players=players,
            deck=tuple(deck),
            discard_pile=discard,
            current_player_index=current,
            direction=direction,
            current_color=current_color,
            action_required=action,
        )

    return _make
