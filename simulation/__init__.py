"""Monte Carlo equity simulation."""

from simulation.equity import EquitySimulator, simulate_equity, split_trials
from simulation.results import EquityRecord, EquityResult, PlayerEquity, aggregate

__all__ = [
    "EquitySimulator",
    "simulate_equity",
    "split_trials",
    "EquityRecord",
    "EquityResult",
    "PlayerEquity",
    "aggregate",
]
