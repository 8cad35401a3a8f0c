"""Hand evaluation for Texas Hold'em poker.

Every hand is scored as a single integer. Higher is better. The thousands
digit holds the category and the remainder encodes the tie-break cards using
fixed multipliers of 16 and 4.
"""

from collections import Counter
from enum import IntEnum
from itertools import combinations
from typing import Iterator, Sequence

from poker.cards import Card, Suit
from poker.errors import InvalidHandError

HAND_SIZE = 5

PRIMARY = 16
SECONDARY = 4


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest.

    The value matches the thousands digit of the integer hand rank.
    """

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def base(self) -> int:
        return self.value * 1000

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def category_of(rank: int) -> HandCategory:
    """Category encoded in a hand rank."""
    return HandCategory(rank // 1000)


def describe(rank: int) -> str:
    """Human-readable label for a hand rank, e.g. 'Full House (6041)'."""
    return f"{category_of(rank)!s} ({rank})"


def hand_combinations(cards: Sequence[Card], size: int = HAND_SIZE) -> Iterator[tuple[Card, ...]]:
    """Lazily yield every ``size``-card subset once, in lexicographic index order."""
    for indices in combinations(range(len(cards)), size):
        yield tuple(cards[i] for i in indices)


def is_flush(suits: Sequence[Suit]) -> bool:
    return len(set(suits)) == 1


def straight_high(values: Sequence[int]) -> int | None:
    """High card of a 5-card straight, or None.

    The wheel (A-2-3-4-5) plays the ace low and reports 5.
    """
    unique = sorted(set(values))
    if len(unique) != HAND_SIZE:
        return None
    if unique[-1] - unique[0] == 4:
        return unique[-1]
    if unique == [2, 3, 4, 5, 14]:
        return 5
    return None


def find_n_of_a_kind(values: Sequence[int], n: int, excluding: int | None = None) -> int | None:
    """Highest value appearing exactly ``n`` times, skipping ``excluding``."""
    matches = [value for value, count in Counter(values).items() if count == n and value != excluding]
    return max(matches) if matches else None


def evaluate_five(cards: Sequence[Card]) -> int:
    """Score exactly 5 cards.

    Categories are checked strongest first and the first match wins.
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandError(f"Expected 5 cards, got {len(cards)}")

    values = sorted(card.value for card in cards)
    suits = [card.suit for card in cards]
    flush = is_flush(suits)
    high = straight_high(values)

    if flush and high is not None:
        return HandCategory.STRAIGHT_FLUSH.base + high

    quad = find_n_of_a_kind(values, 4)
    if quad is not None:
        kicker = max(v for v in values if v != quad)
        return HandCategory.FOUR_OF_A_KIND.base + PRIMARY * quad + kicker

    triple = find_n_of_a_kind(values, 3)
    if triple is not None:
        pair = find_n_of_a_kind(values, 2, excluding=triple)
        if pair is not None:
            return HandCategory.FULL_HOUSE.base + PRIMARY * triple + pair

    if flush:
        return HandCategory.FLUSH.base + values[-1]

    if high is not None:
        return HandCategory.STRAIGHT.base + high

    if triple is not None:
        kickers = sorted((v for v in values if v != triple), reverse=True)
        return HandCategory.THREE_OF_A_KIND.base + PRIMARY * triple + SECONDARY * kickers[0] + kickers[1]

    first_pair = find_n_of_a_kind(values, 2)
    if first_pair is not None:
        second_pair = find_n_of_a_kind(values, 2, excluding=first_pair)
        if second_pair is not None:
            top, bottom = max(first_pair, second_pair), min(first_pair, second_pair)
            kicker = max(v for v in values if v not in (top, bottom))
            return HandCategory.TWO_PAIR.base + PRIMARY * top + SECONDARY * bottom + kicker

        kickers = sorted((v for v in values if v != first_pair), reverse=True)
        return HandCategory.PAIR.base + PRIMARY * first_pair + SECONDARY * kickers[0] + kickers[1]

    top3 = values[::-1][:3]
    return PRIMARY * top3[0] + SECONDARY * top3[1] + top3[2]


def evaluate(cards: Sequence[Card]) -> int:
    """Best 5-card hand rank from 5 or more distinct cards.

    Every 5-card subset is scored and the maximum kept, so the result does
    not depend on input order.

    Raises:
        InvalidHandError: fewer than 5 cards, or the same card twice.
    """
    cards = tuple(cards)
    if len(cards) < HAND_SIZE:
        raise InvalidHandError(f"Need at least 5 cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        dupes = sorted(str(c) for c, n in Counter(cards).items() if n > 1)
        raise InvalidHandError(f"Duplicate cards: {' '.join(dupes)}")

    return max(evaluate_five(combo) for combo in hand_combinations(cards))


def evaluate_player(hole_cards: Sequence[Card], community: Sequence[Card]) -> int:
    """Evaluate a player's best hand from hole cards + community cards."""
    return evaluate(list(hole_cards) + list(community))
