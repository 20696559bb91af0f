"""Turn order and special card effects."""

import random
from dataclasses import replace
from typing import List, Optional

from unoengine.engine.card import Card, CardType, Color
from unoengine.engine.deck import draw
from unoengine.engine.game_state import ActionRequired, Direction, GameState, Player


def next_index(current: int, num_players: int, direction: Direction) -> int:
    """Index of the seat after current, going in direction."""
    return (current + direction.step + num_players) % num_players


def _penalty_draw(
    state: GameState,
    played: Card,
    target: int,
    count: int,
    rng: Optional[random.Random],
) -> GameState:
    """Make target draw count cards.

    The just-played card is lifted off the discard pile while drawing so a
    reshuffle cannot recycle it, then put back on top.
    """
    drawn, deck, discard = draw(state.deck, state.discard_pile[:-1], count, rng)
    players: List[Player] = list(state.players)
    victim = players[target]
    players[target] = replace(victim, hand=victim.hand + drawn)
    return replace(
        state,
        players=tuple(players),
        deck=deck,
        discard_pile=discard + (played,),
        history=state.history + (f"{victim.name} draws {len(drawn)} cards and is skipped",),
    )


def apply_effect(
    card: Card,
    state: GameState,
    player_index: int,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Resolve the card just played by player_index.

    The card must already be on top of the discard pile. Returns the state
    with the next player, direction, color and required action settled.
    """
    n = len(state.players)
    direction = state.direction
    target = next_index(player_index, n, direction)
    action_required = ActionRequired.PLAY

    if card.type is CardType.NUMBER:
        next_player = target
    elif card.type is CardType.SKIP:
        state = replace(state, history=state.history + (f"{state.players[target].name} is skipped",))
        next_player = next_index(target, n, direction)
    elif card.type is CardType.REVERSE:
        direction = direction.flipped()
        if n == 2:
            # Two players: reverse acts as skip
            next_player = next_index(target, n, direction)
            event = f"Direction reversed, {state.players[target].name} is skipped"
        else:
            next_player = next_index(player_index, n, direction)
            event = "Direction reversed"
        state = replace(state, history=state.history + (event,))
    elif card.type is CardType.DRAW_TWO:
        state = _penalty_draw(state, card, target, 2, rng)
        next_player = next_index(target, n, direction)
    elif card.type is CardType.WILD:
        action_required = ActionRequired.CHOOSE_COLOR
        next_player = player_index
    elif card.type is CardType.WILD_DRAW_FOUR:
        state = _penalty_draw(state, card, target, 4, rng)
        action_required = ActionRequired.CHOOSE_COLOR
        next_player = player_index
    else:
        raise ValueError(f"Unhandled card type: {card.type}")

    current_color = state.current_color if card.color is Color.WILD else card.color
    return replace(
        state,
        current_player_index=next_player,
        direction=direction,
        current_color=current_color,
        action_required=action_required,
    )
