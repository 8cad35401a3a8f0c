"""Hand ranking and table state for Texas Hold'em equity calculation."""

from poker.cards import Card, Deck, Rank, Suit, parse_cards
from poker.hand_evaluator import HandCategory, evaluate
from poker.showdown import TrialOutcome, resolve_showdown

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "parse_cards",
    "HandCategory",
    "evaluate",
    "TrialOutcome",
    "resolve_showdown",
]
