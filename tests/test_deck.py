"""Unit tests for deck building, shuffling, dealing and drawing."""

import random
from collections import Counter

import pytest

from unoengine.engine import Card, CardType, Color, SetupFailure, build_deck, deal, draw, shuffle


def num(color: Color, value: int) -> Card:
    return Card(color, CardType.NUMBER, value)


def test_build_deck_size() -> None:
    assert len(build_deck()) == 108


def test_build_deck_composition() -> None:
    deck = build_deck()
    types = Counter(c.type for c in deck)
    assert types[CardType.NUMBER] == 76
    assert types[CardType.SKIP] + types[CardType.REVERSE] + types[CardType.DRAW_TWO] == 24
    assert types[CardType.WILD] == 4
    assert types[CardType.WILD_DRAW_FOUR] == 4

    counts = Counter(deck)
    for color in Color.playable():
        assert counts[num(color, 0)] == 1
        for value in range(1, 10):
            assert counts[num(color, value)] == 2
        for card_type in (CardType.SKIP, CardType.REVERSE, CardType.DRAW_TWO):
            assert counts[Card(color, card_type)] == 2


def test_build_deck_is_deterministic() -> None:
    assert build_deck() == build_deck()
    assert build_deck()[0] == num(Color.RED, 0)
    assert build_deck()[-1] == Card(Color.WILD, CardType.WILD_DRAW_FOUR)


def test_card_validation() -> None:
    with pytest.raises(ValueError):
        Card(Color.RED, CardType.NUMBER)
    with pytest.raises(ValueError):
        Card(Color.RED, CardType.NUMBER, 10)
    with pytest.raises(ValueError):
        Card(Color.RED, CardType.SKIP, 3)
    with pytest.raises(ValueError):
        Card(Color.BLUE, CardType.WILD)
    with pytest.raises(ValueError):
        Card(Color.WILD, CardType.NUMBER, 4)


def test_shuffle_keeps_cards() -> None:
    deck = build_deck()
    shuffled = shuffle(deck, random.Random(7))
    assert Counter(shuffled) == Counter(deck)
    assert shuffled != deck


def test_shuffle_does_not_modify_input() -> None:
    cards = list(build_deck())
    before = list(cards)
    shuffle(cards, random.Random(1))
    assert cards == before


def test_shuffle_reproducible() -> None:
    d1 = shuffle(build_deck(), random.Random(123))
    d2 = shuffle(build_deck(), random.Random(123))
    d3 = shuffle(build_deck(), random.Random(124))
    assert d1 == d2
    assert d1 != d3


def test_shuffle_reaches_every_permutation_evenly() -> None:
    cards = (num(Color.RED, 1), num(Color.RED, 2), num(Color.RED, 3))
    rng = random.Random(2024)
    seen = Counter(shuffle(cards, rng) for _ in range(6000))
    assert len(seen) == 6
    for count in seen.values():
        assert 800 < count < 1200


def test_shuffle_small_inputs() -> None:
    assert shuffle(()) == ()
    assert shuffle((num(Color.BLUE, 5),)) == (num(Color.BLUE, 5),)


def test_deal_round_robin() -> None:
    deck = build_deck()
    hands, remaining = deal(deck, 3)
    assert [len(h) for h in hands] == [7, 7, 7]
    assert len(remaining) == 108 - 21
    assert hands[0][0] == deck[-1]
    assert hands[1][0] == deck[-2]
    assert hands[2][0] == deck[-3]
    assert hands[0][1] == deck[-4]
    assert remaining == deck[:-21]


def test_deal_custom_hand_size() -> None:
    hands, remaining = deal(build_deck(), 2, hand_size=3)
    assert [len(h) for h in hands] == [3, 3]
    assert len(remaining) == 102


def test_deal_short_deck_fails() -> None:
    with pytest.raises(SetupFailure):
        deal(build_deck()[:10], 2)


def test_draw_from_top() -> None:
    deck = build_deck()
    discard = (num(Color.RED, 5),)
    drawn, new_deck, new_discard = draw(deck, discard, 2)
    assert drawn == (deck[-1], deck[-2])
    assert new_deck == deck[:-2]
    assert new_discard == discard


def test_draw_reshuffles_discard_keeping_top() -> None:
    a, x, y, top = num(Color.RED, 1), num(Color.BLUE, 2), num(Color.GREEN, 3), num(Color.YELLOW, 4)
    drawn, deck, discard = draw((a,), (x, y, top), 3, random.Random(0))
    assert drawn[0] == a
    assert Counter(drawn) == Counter([a, x, y])
    assert deck == ()
    assert discard == (top,)


def test_draw_stops_when_exhausted() -> None:
    a, top = num(Color.RED, 1), num(Color.YELLOW, 4)
    drawn, deck, discard = draw((a,), (top,), 3)
    assert drawn == (a,)
    assert deck == ()
    assert discard == (top,)

    drawn, deck, discard = draw((), (top,), 2)
    assert drawn == ()
    assert discard == (top,)
