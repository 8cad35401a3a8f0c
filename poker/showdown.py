"""Showdown resolution: who wins a single dealt-out board."""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class TrialOutcome:
    """Result of one simulated deal."""

    ranks: tuple[int, ...]  # Best hand rank per player, in seat order
    winners: tuple[int, ...]  # Indices of every player holding the top rank

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    def shares(self) -> list[float]:
        """Win-units per player: 1 for a sole winner, 1/N each for an N-way tie."""
        portion = 1.0 / len(self.winners)
        credit = [0.0] * len(self.ranks)
        for idx in self.winners:
            credit[idx] = portion
        return credit


def resolve_showdown(ranks: Sequence[int]) -> TrialOutcome:
    """Find the winner(s) among per-player hand ranks.

    Ties are exact integer equality.
    """
    if not ranks:
        raise ValueError("Cannot resolve a showdown with no players")

    best = max(ranks)
    winners = tuple(i for i, rank in enumerate(ranks) if rank == best)
    return TrialOutcome(ranks=tuple(ranks), winners=winners)
