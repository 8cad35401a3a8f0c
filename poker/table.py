"""Table state: players, board, and the undealt deck."""

import logging
from dataclasses import dataclass, field
from random import Random

from config.settings import Config, EquityConfig
from poker.cards import Card, Deck
from poker.errors import CardNotInDeckError, InvalidPlayerError
from simulation.equity import BOARD_SIZE, MAX_HOLE_CARDS, simulate_equity
from simulation.results import EquityResult

logger = logging.getLogger(__name__)


@dataclass
class Player:
    """A seat and its hole cards."""

    id: int
    hand: list[Card] = field(default_factory=list)


@dataclass(frozen=True)
class TableSnapshot:
    """Read-only copy of the table handed to the simulator."""

    players: tuple[tuple[Card, ...], ...]
    community: tuple[Card, ...]
    deck: tuple[Card, ...]


class PokerTable:
    """Owns the deck, players, and community cards.

    Every card is in exactly one place: the deck, a player's hand, or the board.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.players: list[Player] = []
        self.community_cards: list[Card] = []
        self.deck = Deck()
        self.results: EquityResult | None = None
        for _ in range(self.config.table.initial_players):
            self.add_player()

    def reset_deck(self) -> None:
        """Return every card to the deck and clear hands and board."""
        self.deck.reset()
        for player in self.players:
            player.hand.clear()
        self.community_cards.clear()
        self.results = None

    def add_player(self) -> Player:
        player = Player(id=len(self.players) + 1)
        self.players.append(player)
        return player

    def get_player(self, player_id: int) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise InvalidPlayerError(player_id)

    def add_card(self, player_id: int, card: Card) -> bool:
        """Deal a specific card to a player.

        Returns False (and changes nothing) when the hand is already full.
        """
        player = self.get_player(player_id)
        if card not in self.deck:
            raise CardNotInDeckError(card)
        if len(player.hand) >= MAX_HOLE_CARDS:
            return False
        self.deck.remove(card)
        player.hand.append(card)
        return True

    def add_community_card(self, card: Card) -> bool:
        """Put a specific card on the board. Returns False if the board is full."""
        if card not in self.deck:
            raise CardNotInDeckError(card)
        if len(self.community_cards) >= BOARD_SIZE:
            return False
        self.deck.remove(card)
        self.community_cards.append(card)
        return True

    def remove_card(self, player_id: int, card: Card) -> None:
        """Take a card out of a player's hand and put it back in the deck."""
        player = self.get_player(player_id)
        if card in player.hand:
            player.hand.remove(card)
            self.deck.add(card)

    def remove_community_card(self, card: Card) -> None:
        if card in self.community_cards:
            self.community_cards.remove(card)
            self.deck.add(card)

    def snapshot(self) -> TableSnapshot:
        return TableSnapshot(
            players=tuple(tuple(p.hand) for p in self.players),
            community=tuple(self.community_cards),
            deck=tuple(self.deck),
        )

    def calculate_odds(
        self,
        config: EquityConfig | None = None,
        rng: Random | None = None,
    ) -> EquityResult | None:
        """Run the equity simulation on the current table.

        Before the flop this returns None and leaves ``results`` as it was.
        """
        config = config or self.config.equity
        snap = self.snapshot()
        result = simulate_equity(snap.players, snap.community, snap.deck, config=config, rng=rng)
        if result is None:
            logger.debug("Board has %d cards; keeping previous results", len(snap.community))
            return None
        self.results = result
        return result
