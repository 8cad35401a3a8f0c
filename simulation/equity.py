"""Monte Carlo equity estimation.

Trials are split into one batch per worker. Each batch runs with its own RNG
and its own counters, and the counters are merged once every batch is done.
"""

import logging
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from itertools import chain
from random import Random
from typing import Sequence

from tqdm import tqdm

from config.settings import EquityConfig
from poker.cards import Card
from poker.errors import DeckExhaustedError, InvalidHandError
from poker.hand_evaluator import evaluate
from poker.showdown import resolve_showdown
from simulation.results import EquityRecord, EquityResult, aggregate

logger = logging.getLogger(__name__)

BOARD_SIZE = 5
MIN_BOARD = 3  # Equity is only reported from the flop onward
MAX_HOLE_CARDS = 2


def split_trials(trials: int, workers: int, distribute_remainder: bool = False) -> list[int]:
    """Trials per worker.

    Without ``distribute_remainder`` the ``trials % workers`` leftover is
    dropped, so the batches may sum to slightly less than ``trials``.
    """
    if workers < 1:
        raise ValueError(f"workers must be positive, got {workers}")
    share, remainder = divmod(trials, workers)
    if not distribute_remainder:
        return [share] * workers
    return [share + 1 if i < remainder else share for i in range(workers)]


def _check_snapshot(
    players: Sequence[Sequence[Card]],
    community: Sequence[Card],
    deck: Sequence[Card],
) -> None:
    if not players:
        raise InvalidHandError("At least one player is required")
    if len(community) > BOARD_SIZE:
        raise InvalidHandError(f"Board has {len(community)} cards, at most {BOARD_SIZE} allowed")
    for seat, hole in enumerate(players):
        if len(hole) > MAX_HOLE_CARDS:
            raise InvalidHandError(f"Player {seat + 1} has {len(hole)} hole cards")

    seen: set[Card] = set()
    for card in chain(chain.from_iterable(players), community, deck):
        if card in seen:
            raise InvalidHandError(f"Card {card} appears more than once")
        seen.add(card)

    missing = BOARD_SIZE - len(community)
    if len(deck) < missing:
        raise DeckExhaustedError(f"Need {missing} cards to complete the board, deck has {len(deck)}")


def run_batch(
    players: tuple[tuple[Card, ...], ...],
    community: tuple[Card, ...],
    deck: tuple[Card, ...],
    trials: int,
    seed: int | None,
) -> EquityRecord:
    """Run ``trials`` playouts sequentially into a fresh record."""
    rng = Random(seed)
    record = EquityRecord.empty(len(players))
    missing = BOARD_SIZE - len(community)

    for _ in range(trials):
        board = community + tuple(rng.sample(deck, missing))
        ranks = [evaluate(hole + board) for hole in players]
        record.add(resolve_showdown(ranks))

    return record


class EquitySimulator:
    """Estimate each player's share of the pot by random board runouts."""

    def __init__(self, config: EquityConfig | None = None, rng: Random | None = None) -> None:
        self.config = config or EquityConfig()
        self.rng = rng if rng is not None else Random(self.config.seed)

    def _executor(self, workers: int) -> Executor:
        if self.config.executor == "thread":
            return ThreadPoolExecutor(max_workers=workers)
        return ProcessPoolExecutor(max_workers=workers)

    def run(
        self,
        players: Sequence[Sequence[Card]],
        community: Sequence[Card],
        deck: Sequence[Card],
        trials: int | None = None,
    ) -> EquityResult | None:
        """Simulate ``trials`` runouts.

        Returns None without touching anything when fewer than three
        community cards are known.

        Raises:
            InvalidHandError: bad snapshot (duplicate cards, too many cards).
            DeckExhaustedError: deck cannot fill the board.
        """
        if len(community) < MIN_BOARD:
            logger.debug("Skipping equity: %d community cards, need %d", len(community), MIN_BOARD)
            return None

        trials = self.config.trials if trials is None else trials
        if trials < 1:
            raise ValueError(f"trials must be positive, got {trials}")

        # Private copies so the caller's state is never touched
        hands = tuple(tuple(hole) for hole in players)
        board = tuple(community)
        remaining = tuple(deck)
        _check_snapshot(hands, board, remaining)

        workers = self.config.resolved_workers()
        batches = split_trials(trials, workers, self.config.distribute_remainder)
        seeds = [self.rng.getrandbits(64) for _ in batches]
        if sum(batches) < trials:
            logger.debug("Dropping %d trial(s) that do not divide across %d workers", trials - sum(batches), workers)

        start = time.perf_counter()
        records = self._run_batches(hands, board, remaining, batches, seeds)

        total = EquityRecord.empty(len(hands))
        for record in records:
            total = total + record

        elapsed = time.perf_counter() - start
        logger.info(
            "Simulated %d trials for %d players on %d workers in %.2fs",
            total.trials_run, len(hands), workers, elapsed,
        )
        return aggregate(total, trials, len(hands), workers=workers)

    def _run_batches(
        self,
        hands: tuple[tuple[Card, ...], ...],
        board: tuple[Card, ...],
        deck: tuple[Card, ...],
        batches: list[int],
        seeds: list[int],
    ) -> list[EquityRecord]:
        jobs = [(count, seed) for count, seed in zip(batches, seeds) if count > 0]
        if not jobs:
            return []
        if len(jobs) == 1:
            count, seed = jobs[0]
            return [run_batch(hands, board, deck, count, seed)]

        with self._executor(len(jobs)) as pool:
            futures = [pool.submit(run_batch, hands, board, deck, count, seed) for count, seed in jobs]
            iterator = as_completed(futures)
            if self.config.show_progress:
                iterator = tqdm(iterator, total=len(futures), desc="Simulating", unit="batch")
            finished = {future: future.result() for future in iterator}

        # Merge in submission order so a fixed seed gives identical sums
        return [finished[future] for future in futures]


def simulate_equity(
    players: Sequence[Sequence[Card]],
    community: Sequence[Card],
    deck: Sequence[Card],
    trials: int | None = None,
    *,
    config: EquityConfig | None = None,
    rng: Random | None = None,
) -> EquityResult | None:
    """Estimate win, tie, and equity percentages for each player.

    Args:
        players: Hole cards per player (0-2 each)
        community: Known board cards (0-5); fewer than 3 is a no-op
        deck: Undealt cards the board is completed from
        trials: Total playouts requested (default ``config.trials``)
        config: Worker count, executor, remainder handling, seed
        rng: Deterministic random source, overrides ``config.seed``

    Returns:
        EquityResult, or None when the board is not yet at the flop
    """
    return EquitySimulator(config, rng=rng).run(players, community, deck, trials)
