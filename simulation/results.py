"""Win/tie accumulation and conversion to percentages."""

from dataclasses import dataclass, field

import numpy as np

from poker.showdown import TrialOutcome


@dataclass(eq=False)
class EquityRecord:
    """Counters for one batch of trials.

    Each worker owns one record; records are merged after the join.
    """

    win_units: np.ndarray
    tie_trials: int = 0
    trials_run: int = 0

    @classmethod
    def empty(cls, num_players: int) -> "EquityRecord":
        return cls(win_units=np.zeros(num_players, dtype=np.float64))

    @property
    def num_players(self) -> int:
        return len(self.win_units)

    def add(self, outcome: TrialOutcome) -> None:
        """Credit one trial's outcome."""
        portion = 1.0 / len(outcome.winners)
        for idx in outcome.winners:
            self.win_units[idx] += portion
        if outcome.is_tie:
            self.tie_trials += 1
        self.trials_run += 1

    def merge(self, other: "EquityRecord") -> "EquityRecord":
        if other.num_players != self.num_players:
            raise ValueError(
                f"Cannot merge records for {self.num_players} and {other.num_players} players"
            )
        return EquityRecord(
            win_units=self.win_units + other.win_units,
            tie_trials=self.tie_trials + other.tie_trials,
            trials_run=self.trials_run + other.trials_run,
        )

    __add__ = merge


@dataclass(frozen=True)
class PlayerEquity:
    """Final numbers for one seat."""

    win_pct: float
    equity_pct: float


@dataclass(frozen=True)
class EquityResult:
    """Outcome of a simulation run."""

    players: tuple[PlayerEquity, ...]
    tie_pct: float
    requested_trials: int
    executed_trials: int
    workers: int = 1
    record: EquityRecord | None = field(default=None, compare=False, repr=False)

    @property
    def win_pcts(self) -> list[float]:
        return [p.win_pct for p in self.players]

    @property
    def equity_pcts(self) -> list[float]:
        return [p.equity_pct for p in self.players]

    def summary_lines(self) -> list[str]:
        """One line per player plus a trailing tie line."""
        lines = [
            f"Player {i + 1}: Win {p.win_pct:.2f}%, Equity {p.equity_pct:.2f}%"
            for i, p in enumerate(self.players)
        ]
        lines.append(f"Tie: {self.tie_pct:.2f}%")
        return lines


def aggregate(record: EquityRecord, trials: int, num_players: int | None = None, workers: int = 1) -> EquityResult:
    """Convert raw counts into percentages.

    ``trials`` is the requested trial count and is the denominator even when
    fewer trials ran. The tie percentage is shared across every seat, not
    only the seats that tied.
    """
    if trials < 1:
        raise ValueError(f"trials must be positive, got {trials}")
    if num_players is None:
        num_players = record.num_players

    tie_pct = 100.0 * record.tie_trials / trials
    players = []
    for units in record.win_units:
        win_pct = 100.0 * float(units) / trials
        players.append(PlayerEquity(win_pct=win_pct, equity_pct=win_pct + tie_pct / num_players))

    return EquityResult(
        players=tuple(players),
        tie_pct=tie_pct,
        requested_trials=trials,
        executed_trials=record.trials_run,
        workers=workers,
        record=record,
    )
