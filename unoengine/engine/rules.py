"""UNO rules: card playability and the legal action menu."""

from dataclasses import dataclass
from typing import List, Sequence, Union

from unoengine.engine.card import Card, CardType, Color
from unoengine.engine.game_state import ActionRequired, GameState


@dataclass(frozen=True)
class PlayCard:
    """Action: play the card at hand_index."""

    hand_index: int


@dataclass(frozen=True)
class DrawCard:
    """Action: draw one card."""

    pass


@dataclass(frozen=True)
class ChooseColor:
    """Action: pick the color to match after a wild."""

    color: Color


Action = Union[PlayCard, DrawCard, ChooseColor]


def is_playable(card: Card, top: Card, current_color: Color) -> bool:
    """Check if a card can be played on top given the color to match.

    Color is checked against current_color, not the top card's own color,
    so a wild's chosen color is honored.
    """
    # Wild can always be played
    if card.color is Color.WILD:
        return True
    # Match by color
    if card.color is current_color:
        return True
    # Match by symbol
    if card.type is not CardType.NUMBER and card.type is top.type:
        return True
    # Match by number
    return card.type is CardType.NUMBER and top.type is CardType.NUMBER and card.value == top.value


def valid_moves(hand: Sequence[Card], top: Card, current_color: Color) -> List[Card]:
    """Return the playable cards of hand, in hand order."""
    return [c for c in hand if is_playable(c, top, current_color)]


def legal_actions(state: GameState, strict_draw: bool = False) -> List[Action]:
    """Return all legal actions for the current player.

    The engine lets a player draw even when holding a playable card. With
    strict_draw=True, DrawCard is only offered when nothing can be played.
    """
    if state.action_required is ActionRequired.GAME_OVER:
        return []

    if state.action_required is ActionRequired.CHOOSE_COLOR:
        return [ChooseColor(color) for color in Color.playable()]

    hand = state.current_player().hand
    top = state.top_discard()
    actions: List[Action] = [
        PlayCard(i) for i, card in enumerate(hand) if is_playable(card, top, state.current_color)
    ]
    if not (strict_draw and actions):
        actions.append(DrawCard())
    return actions
