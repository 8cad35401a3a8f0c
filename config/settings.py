"""Configuration settings for equity simulation."""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

EXECUTORS = ("process", "thread")


@dataclass
class EquityConfig:
    """Monte Carlo simulation configuration."""

    trials: int = 15000
    workers: int | None = None  # None = one per CPU
    executor: str = "process"  # process or thread
    distribute_remainder: bool = False  # False drops trials % workers
    seed: int | None = None
    show_progress: bool = False

    def __post_init__(self) -> None:
        if self.trials < 1:
            raise ValueError(f"trials must be positive, got {self.trials}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.executor not in EXECUTORS:
            raise ValueError(f"Unknown executor {self.executor!r}, expected one of {EXECUTORS}")

    def resolved_workers(self) -> int:
        """Worker count, falling back to the number of CPUs."""
        if self.workers is not None:
            return self.workers
        return os.cpu_count() or 1


@dataclass
class TableConfig:
    """Table configuration."""

    initial_players: int = 2

    def __post_init__(self) -> None:
        if self.initial_players < 0:
            raise ValueError(f"initial_players cannot be negative, got {self.initial_players}")


@dataclass
class Config:
    """Complete configuration."""

    equity: EquityConfig = field(default_factory=EquityConfig)
    table: TableConfig = field(default_factory=TableConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "equity" in data:
        config.equity = EquityConfig(**data["equity"])
    if "table" in data:
        config.table = TableConfig(**data["table"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "equity": asdict(config.equity),
        "table": asdict(config.table),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
