"""Deck creation, shuffling, dealing and drawing.

Decks and discard piles are tuples with the top card last. Functions here
never modify their inputs; they return new tuples.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from unoengine.engine.card import Card, CardType, Color
from unoengine.engine.errors import SetupFailure

logger = logging.getLogger(__name__)

ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW_TWO)
WILD_TYPES = (CardType.WILD, CardType.WILD_DRAW_FOUR)
HAND_SIZE = 7


def build_deck() -> Tuple[Card, ...]:
    """Create a standard 108-card UNO deck, unshuffled.

    - 4 colors x (one 0, two each of 1-9): 76 cards
    - 4 colors x two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color.playable():
        cards.append(Card(color, CardType.NUMBER, 0))
        for value in range(1, 10):
            cards.append(Card(color, CardType.NUMBER, value))
            cards.append(Card(color, CardType.NUMBER, value))

    for color in Color.playable():
        for card_type in ACTION_TYPES:
            cards.append(Card(color, card_type))
            cards.append(Card(color, card_type))

    for card_type in WILD_TYPES:
        for _ in range(4):
            cards.append(Card(Color.WILD, card_type))

    return tuple(cards)


def shuffle(cards: Sequence[Card], rng: Optional[random.Random] = None) -> Tuple[Card, ...]:
    """Return a uniformly random permutation of cards (Fisher-Yates)."""
    rng = rng or random
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)


def deal(
    deck: Sequence[Card],
    num_players: int,
    hand_size: int = HAND_SIZE,
) -> Tuple[List[Tuple[Card, ...]], Tuple[Card, ...]]:
    """Deal hand_size cards to each player, one at a time, from the top.

    Returns (hands, remaining_deck). Raises SetupFailure if the deck cannot
    cover a full deal.
    """
    remaining = list(deck)
    hands: List[List[Card]] = [[] for _ in range(num_players)]
    for _ in range(hand_size):
        for hand in hands:
            if not remaining:
                logger.error(
                    "Deck ran out during the deal (%d players x %d cards, deck of %d)",
                    num_players, hand_size, len(deck),
                )
                raise SetupFailure("Deck ran out of cards during the initial deal")
            hand.append(remaining.pop())
    return [tuple(h) for h in hands], tuple(remaining)


def draw(
    deck: Sequence[Card],
    discard_pile: Sequence[Card],
    n: int,
    rng: Optional[random.Random] = None,
) -> Tuple[Tuple[Card, ...], Tuple[Card, ...], Tuple[Card, ...]]:
    """Draw up to n cards, recycling the discard pile when the deck runs dry.

    When the deck is empty and the discard pile holds more than one card,
    the top discard is kept and the rest is shuffled into a new deck.
    Returns (drawn, deck, discard_pile); drawn may be shorter than n when
    both piles are exhausted.
    """
    current_deck = list(deck)
    current_discard = list(discard_pile)
    drawn: List[Card] = []

    for _ in range(n):
        if not current_deck:
            if len(current_discard) <= 1:
                logger.warning(
                    "Cannot draw: deck and discard pile are exhausted (%d of %d drawn)",
                    len(drawn), n,
                )
                break
            top = current_discard.pop()
            current_deck = list(shuffle(current_discard, rng))
            current_discard = [top]
            logger.info("Reshuffled %d discarded cards into the deck", len(current_deck))
        drawn.append(current_deck.pop())

    return tuple(drawn), tuple(current_deck), tuple(current_discard)
