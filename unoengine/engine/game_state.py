"""Game state for UNO."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from unoengine.engine.card import Card, Color


class Direction(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    @property
    def step(self) -> int:
        return 1 if self is Direction.CLOCKWISE else -1

    def flipped(self) -> "Direction":
        if self is Direction.CLOCKWISE:
            return Direction.COUNTER_CLOCKWISE
        return Direction.CLOCKWISE


class ActionRequired(str, Enum):
    """What the current player must do next."""

    PLAY = "play"
    CHOOSE_COLOR = "choose_color"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Player:
    """A seat at the table. Order in GameState.players is the turn order."""

    id: str
    name: str
    hand: Tuple[Card, ...] = ()


@dataclass(frozen=True)
class GameState:
    """Immutable UNO game state."""

    players: Tuple[Player, ...]
    deck: Tuple[Card, ...]  # top is last
    discard_pile: Tuple[Card, ...]  # top is last
    current_player_index: int
    direction: Direction
    current_color: Color  # never WILD
    action_required: ActionRequired
    winner: Optional[int] = None
    history: Tuple[str, ...] = field(default_factory=tuple)  # Log of events

    def top_discard(self) -> Card:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1]

    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def card_count(self) -> int:
        """Cards across deck, discard pile and hands; 108 in any valid game."""
        return len(self.deck) + len(self.discard_pile) + sum(len(p.hand) for p in self.players)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player_index: int
    my_hand: Tuple[Card, ...]
    top_discard: Card
    current_color: Color
    current_player_index: int
    direction: Direction
    action_required: ActionRequired
    player_names: Tuple[str, ...]
    cards_per_player: Tuple[int, ...]  # hand size per seat
    deck_size: int
    winner: Optional[int]
    history: Tuple[str, ...]  # Recent game events

    @property
    def next_player_name(self) -> str:
        n = len(self.player_names)
        return self.player_names[(self.player_index + self.direction.step + n) % n]

    @classmethod
    def from_state(cls, state: GameState, player_index: int) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        return cls(
            player_index=player_index,
            my_hand=state.players[player_index].hand,
            top_discard=state.top_discard(),
            current_color=state.current_color,
            current_player_index=state.current_player_index,
            direction=state.direction,
            action_required=state.action_required,
            player_names=tuple(p.name for p in state.players),
            cards_per_player=tuple(len(p.hand) for p in state.players),
            deck_size=len(state.deck),
            winner=state.winner,
            history=state.history[-10:],  # Last 10 events
        )
