"""Card, Deck, Suit, and Rank definitions for equity calculation."""

from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterable, Iterator


class Suit(IntEnum):
    """Card suits. All four are distinct for flush purposes."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        symbols = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}
        return symbols[self.value]

    @property
    def letter(self) -> str:
        return "cdhs"[self.value]


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return RANK_CHARS[self.value]


RANK_CHARS = {2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
              10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}
_RANK_BY_CHAR = {char: Rank(value) for value, char in RANK_CHARS.items()}
_SUIT_BY_CHAR = {"c": Suit.CLUBS, "d": Suit.DIAMONDS, "h": Suit.HEARTS, "s": Suit.SPADES}


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank!s}{self.suit!s}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Numeric rank used for comparisons (2-14, ace high)."""
        return int(self.rank)

    @property
    def code(self) -> str:
        """Two-character ASCII form, e.g. 'As' or 'Td'."""
        return f"{self.rank!s}{self.suit.letter}"

    def to_index(self) -> int:
        """Convert to 0-51 index.

        Index = suit * 13 + (rank - 2)
        """
        return self.suit * 13 + (self.rank - 2)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Create card from 0-51 index."""
        if not 0 <= index < 52:
            raise ValueError(f"Invalid card index: {index}")
        suit = Suit(index // 13)
        rank = Rank((index % 13) + 2)
        return cls(rank=rank, suit=suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '2c', 'Td'."""
        s = s.strip()
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()
        if rank_char not in _RANK_BY_CHAR:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in _SUIT_BY_CHAR:
            raise ValueError(f"Invalid suit: {suit_char}")
        return cls(rank=_RANK_BY_CHAR[rank_char], suit=_SUIT_BY_CHAR[suit_char])


def parse_cards(text: str | Iterable[str]) -> list[Card]:
    """Parse a run of card codes.

    Accepts either an iterable of codes (``["As", "Kd"]``) or a single
    string, with or without separators (``"AsKd"``, ``"As Kd"``, ``"As,Kd"``).
    """
    if isinstance(text, str):
        compact = "".join(ch for ch in text if not ch.isspace() and ch != ",")
        if len(compact) % 2:
            raise ValueError(f"Invalid card string: {text}")
        codes = [compact[i : i + 2] for i in range(0, len(compact), 2)]
    else:
        codes = list(text)
    return [Card.from_string(code) for code in codes]


def full_deck() -> list[Card]:
    """All 52 cards in index order."""
    return [Card.from_index(i) for i in range(52)]


class Deck:
    """A standard 52-card deck that tracks which cards are still undealt."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self._cards = full_deck()

    def shuffle(self) -> None:
        """Shuffle the deck."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n > len(self._cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self._cards)} remaining")
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        return dealt

    def remove(self, card: Card) -> None:
        """Take a specific card out of the deck."""
        self._cards.remove(card)

    def add(self, card: Card) -> None:
        """Return a card to the deck."""
        if card in self._cards:
            raise ValueError(f"Card already in deck: {card}")
        self._cards.append(card)

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
