"""Game engine for UNO."""

from unoengine.engine.card import Card, CardType, Color
from unoengine.engine.deck import build_deck, deal, draw, shuffle
from unoengine.engine.effects import apply_effect, next_index
from unoengine.engine.errors import (
    ActionMismatch,
    InvalidSelection,
    SetupFailure,
    TurnViolation,
    UnoError,
)
from unoengine.engine.game import choose_color, handle_draw, initialize_game, play_card
from unoengine.engine.game_state import ActionRequired, Direction, GameState, Player, PlayerView
from unoengine.engine.rules import (
    Action,
    ChooseColor,
    DrawCard,
    PlayCard,
    is_playable,
    legal_actions,
    valid_moves,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "build_deck",
    "shuffle",
    "deal",
    "draw",
    "next_index",
    "apply_effect",
    "UnoError",
    "SetupFailure",
    "TurnViolation",
    "ActionMismatch",
    "InvalidSelection",
    "initialize_game",
    "play_card",
    "choose_color",
    "handle_draw",
    "ActionRequired",
    "Direction",
    "GameState",
    "Player",
    "PlayerView",
    "Action",
    "PlayCard",
    "DrawCard",
    "ChooseColor",
    "is_playable",
    "valid_moves",
    "legal_actions",
]
