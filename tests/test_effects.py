"""Unit tests for turn order and card effects."""

import random

import pytest

from unoengine.engine import (
    ActionRequired,
    Card,
    CardType,
    Color,
    Direction,
    apply_effect,
    next_index,
)


def num(color: Color, value: int) -> Card:
    return Card(color, CardType.NUMBER, value)


HANDS3 = [[num(Color.RED, 1)], [num(Color.BLUE, 2)], [num(Color.GREEN, 3)]]


@pytest.mark.parametrize(
    "current, n, direction, expected",
    [
        (0, 4, Direction.CLOCKWISE, 1),
        (3, 4, Direction.CLOCKWISE, 0),
        (0, 4, Direction.COUNTER_CLOCKWISE, 3),
        (2, 4, Direction.COUNTER_CLOCKWISE, 1),
        (1, 2, Direction.CLOCKWISE, 0),
    ],
)
def test_next_index(current, n, direction, expected) -> None:
    assert next_index(current, n, direction) == expected


def test_number_passes_turn_and_sets_color(make_state) -> None:
    card = num(Color.YELLOW, 4)
    state = make_state(HANDS3, [num(Color.RED, 4), card], current_color=Color.RED)
    new_state = apply_effect(card, state, 0)
    assert new_state.current_player_index == 1
    assert new_state.current_color is Color.YELLOW
    assert new_state.action_required is ActionRequired.PLAY


def test_skip(make_state) -> None:
    card = Card(Color.RED, CardType.SKIP)
    state = make_state(HANDS3, [num(Color.RED, 4), card])
    new_state = apply_effect(card, state, 0)
    assert new_state.current_player_index == 2
    assert "P2 is skipped" in new_state.history


def test_skip_counter_clockwise(make_state) -> None:
    card = Card(Color.RED, CardType.SKIP)
    state = make_state(HANDS3, [num(Color.RED, 4), card], direction=Direction.COUNTER_CLOCKWISE)
    assert apply_effect(card, state, 0).current_player_index == 1


def test_reverse_three_players(make_state) -> None:
    card = Card(Color.RED, CardType.REVERSE)
    state = make_state(HANDS3, [num(Color.RED, 4), card])
    new_state = apply_effect(card, state, 0)
    assert new_state.direction is Direction.COUNTER_CLOCKWISE
    assert new_state.current_player_index == 2


def test_reverse_two_players_acts_as_skip(make_state) -> None:
    card = Card(Color.RED, CardType.REVERSE)
    state = make_state(HANDS3[:2], [num(Color.RED, 4), card])
    new_state = apply_effect(card, state, 0)
    assert new_state.direction is Direction.COUNTER_CLOCKWISE
    assert new_state.current_player_index == 0


def test_draw_two(make_state) -> None:
    card = Card(Color.BLUE, CardType.DRAW_TWO)
    state = make_state(HANDS3, [num(Color.BLUE, 4), card])
    new_state = apply_effect(card, state, 0)
    assert len(new_state.players[1].hand) == 3
    assert new_state.players[1].hand[1:] == (state.deck[-1], state.deck[-2])
    assert new_state.current_player_index == 2
    assert new_state.current_color is Color.BLUE
    assert new_state.top_discard() == card
    assert new_state.card_count() == 108


def test_draw_two_reshuffle_excludes_played_card(make_state) -> None:
    card = Card(Color.BLUE, CardType.DRAW_TWO)
    old1, old2 = num(Color.RED, 4), num(Color.BLUE, 4)
    state = make_state(HANDS3, [old1, old2, card], deck=())
    new_state = apply_effect(card, state, 0, random.Random(3))
    # old2 is kept as the top of the recycled pile, so only old1 can be drawn
    assert new_state.players[1].hand[1:] == (old1,)
    assert new_state.discard_pile == (old2, card)
    assert new_state.deck == ()
    assert new_state.current_player_index == 2


def test_wild_waits_for_color(make_state) -> None:
    card = Card(Color.WILD, CardType.WILD)
    state = make_state(HANDS3, [num(Color.GREEN, 4), card], current_color=Color.GREEN, current=1)
    new_state = apply_effect(card, state, 1)
    assert new_state.action_required is ActionRequired.CHOOSE_COLOR
    assert new_state.current_player_index == 1
    assert new_state.current_color is Color.GREEN


def test_wild_draw_four(make_state) -> None:
    card = Card(Color.WILD, CardType.WILD_DRAW_FOUR)
    state = make_state(HANDS3, [num(Color.GREEN, 4), card], current_color=Color.GREEN)
    new_state = apply_effect(card, state, 0)
    assert len(new_state.players[1].hand) == 5
    assert new_state.action_required is ActionRequired.CHOOSE_COLOR
    assert new_state.current_player_index == 0
    assert new_state.current_color is Color.GREEN
    assert new_state.top_discard() == card
    assert new_state.card_count() == 108


def test_apply_effect_leaves_input_untouched(make_state) -> None:
    card = Card(Color.BLUE, CardType.DRAW_TWO)
    state = make_state(HANDS3, [num(Color.BLUE, 4), card])
    before = state.players
    apply_effect(card, state, 0)
    assert state.players == before
    assert len(state.players[1].hand) == 1
