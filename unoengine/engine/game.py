"""Game setup and the three state-changing operations.

play_card, choose_color and handle_draw each take the current state and
return a new one, or raise an UnoError leaving the input untouched. Which
one to call next is given by GameState.action_required.
"""

import logging
import random
from dataclasses import replace
from typing import List, Optional, Sequence

from unoengine.engine.card import CardType, Color
from unoengine.engine.deck import HAND_SIZE, build_deck, deal, draw, shuffle
from unoengine.engine.effects import apply_effect, next_index
from unoengine.engine.errors import ActionMismatch, InvalidSelection, SetupFailure, TurnViolation
from unoengine.engine.game_state import ActionRequired, Direction, GameState, Player
from unoengine.engine.rules import is_playable

logger = logging.getLogger(__name__)


def initialize_game(
    player_names: Sequence[str],
    rng: Optional[random.Random] = None,
    hand_size: int = HAND_SIZE,
) -> GameState:
    """Create initial game state: deal 7 cards each, flip a start card.

    A Wild Draw Four never starts the game; it stays in the discard pile and
    the next card is flipped. A plain Wild start leaves player 0 to choose a
    color. Any other start card takes effect as if player 0 had played it.
    """
    if len(player_names) < 2:
        raise SetupFailure("Uno requires at least 2 players.")

    deck = shuffle(build_deck(), rng)
    hands, deck = deal(deck, len(player_names), hand_size)
    players = tuple(
        Player(id=f"player-{i + 1}", name=name, hand=hand)
        for i, (name, hand) in enumerate(zip(player_names, hands))
    )

    discard: tuple = ()
    while True:
        if not deck:
            raise SetupFailure("Could not start game: deck exhausted before a start card was found.")
        first_card, deck = deck[-1], deck[:-1]
        discard += (first_card,)
        if first_card.type is not CardType.WILD_DRAW_FOUR:
            break
        logger.info("Wild Draw Four cannot start the game, flipping again")

    state = GameState(
        players=players,
        deck=deck,
        discard_pile=discard,
        current_player_index=0,
        direction=Direction.CLOCKWISE,
        current_color=Color.RED,  # placeholder until the start card or a choice sets it
        action_required=ActionRequired.PLAY,
        history=(f"Game started with {first_card}",),
    )

    if first_card.type is CardType.WILD:
        return replace(state, action_required=ActionRequired.CHOOSE_COLOR)
    return apply_effect(first_card, state, 0, rng)


def _check_turn(state: GameState, player_index: int, expected: ActionRequired) -> None:
    if player_index != state.current_player_index:
        raise TurnViolation(player_index, state.current_player_index)
    if state.action_required is not expected:
        raise ActionMismatch(expected, state.action_required)


def _with_hand(state: GameState, player_index: int, hand: tuple) -> tuple:
    players: List[Player] = list(state.players)
    players[player_index] = replace(players[player_index], hand=hand)
    return tuple(players)


def play_card(
    state: GameState,
    player_index: int,
    hand_index: int,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Play the card at hand_index from player_index's hand."""
    _check_turn(state, player_index, ActionRequired.PLAY)

    player = state.players[player_index]
    if not 0 <= hand_index < len(player.hand):
        raise InvalidSelection(f"Invalid card index: {hand_index}")

    card = player.hand[hand_index]
    top = state.top_discard()
    if not is_playable(card, top, state.current_color):
        raise InvalidSelection(
            f"Card {card} cannot be played on {top} with current color {state.current_color.value}."
        )

    hand = player.hand[:hand_index] + player.hand[hand_index + 1:]
    history = state.history + (f"{player.name} played {card}",)
    state = replace(
        state,
        players=_with_hand(state, player_index, hand),
        discard_pile=state.discard_pile + (card,),
    )

    # Check win before resolving the card's effect
    if not hand:
        logger.info("%s wins", player.name)
        return replace(
            state,
            current_player_index=player_index,
            action_required=ActionRequired.GAME_OVER,
            winner=player_index,
            history=history + (f"{player.name} WON!",),
        )

    if len(hand) == 1:
        history += (f"{player.name} says UNO!",)

    return apply_effect(card, replace(state, history=history), player_index, rng)


def choose_color(state: GameState, player_index: int, color: Color) -> GameState:
    """Set the color to match after a wild and pass the turn."""
    _check_turn(state, player_index, ActionRequired.CHOOSE_COLOR)
    try:
        color = Color(color)
    except ValueError:
        raise InvalidSelection(f"Unknown color: {color!r}") from None
    if color is Color.WILD:
        raise InvalidSelection("Cannot choose 'wild' as the color.")

    n = len(state.players)
    next_player = next_index(player_index, n, state.direction)
    if state.top_discard().type is CardType.WILD_DRAW_FOUR:
        # Target already drew and is skipped
        next_player = next_index(next_player, n, state.direction)

    return replace(
        state,
        current_color=color,
        current_player_index=next_player,
        action_required=ActionRequired.PLAY,
        history=state.history + (f"{state.players[player_index].name} chose {color.value}",),
    )


def handle_draw(
    state: GameState,
    player_index: int,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Draw one card for player_index.

    If the drawn card is playable the same player stays on turn and may
    play it; otherwise the turn passes. Drawing is allowed even when the
    player holds a playable card.
    """
    _check_turn(state, player_index, ActionRequired.PLAY)

    player = state.players[player_index]
    drawn, deck, discard = draw(state.deck, state.discard_pile, 1, rng)
    next_player = next_index(player_index, len(state.players), state.direction)

    if not drawn:
        logger.warning("%s could not draw: deck and discard pile are empty", player.name)
        return replace(
            state,
            deck=deck,
            discard_pile=discard,
            current_player_index=next_player,
            history=state.history + (f"{player.name} could not draw and passes",),
        )

    card = drawn[0]
    state = replace(
        state,
        players=_with_hand(state, player_index, player.hand + drawn),
        deck=deck,
        discard_pile=discard,
        history=state.history + (f"{player.name} drew a card",),
    )
    if is_playable(card, state.top_discard(), state.current_color):
        return state
    return replace(state, current_player_index=next_player)
