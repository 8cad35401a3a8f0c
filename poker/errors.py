"""Exceptions raised by the hand evaluator, simulator, and table."""


class PokerError(Exception):
    """Base class for equity calculator errors."""


class InvalidHandError(PokerError, ValueError):
    """Cards handed to the evaluator or simulator break a precondition."""


class DeckExhaustedError(PokerError, RuntimeError):
    """Not enough undealt cards to complete the board."""


class CardNotInDeckError(PokerError, ValueError):
    """The requested card has already been dealt."""

    def __init__(self, card: object) -> None:
        super().__init__(f"Card not in deck: {card}")
        self.card = card


class InvalidPlayerError(PokerError, LookupError):
    """No player with the given id is seated."""

    def __init__(self, player_id: int) -> None:
        super().__init__(f"No player with id {player_id}")
        self.player_id = player_id
