"""Texas Hold'em equity calculator."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from config.settings import Config, load_config
from poker.cards import Card, parse_cards
from poker.errors import PokerError
from poker.hand_evaluator import category_of, evaluate
from poker.table import PokerTable

app = typer.Typer(
    name="holdem-equity",
    help="Texas Hold'em hand ranking and Monte Carlo equity.",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    return load_config(config_path)


def _render(cards: list[Card]) -> str:
    return " ".join(str(c) for c in cards) if cards else "-"


@app.command()
def equity(
    player: list[str] = typer.Option(..., "--player", "-p", help="Hole cards per player, e.g. AsAd (repeat)"),
    board: str = typer.Option("", "--board", "-b", help="Community cards, e.g. 2c7d9h"),
    trials: Optional[int] = typer.Option(None, "--trials", "-n", help="Number of simulated runouts"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Parallel workers (default: CPU count)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    progress: bool = typer.Option(False, "--progress", help="Show a progress bar"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Estimate win and equity percentages from the flop onward."""
    _setup_logging(verbose)

    try:
        config = _load(config_path)
        overrides = {"trials": trials, "workers": workers, "seed": seed}
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if progress:
            overrides["show_progress"] = True
        config.equity = replace(config.equity, **overrides)

        config.table.initial_players = 0
        table = PokerTable(config)
        for hand in player:
            seat = table.add_player()
            for card in parse_cards(hand):
                if not table.add_card(seat.id, card):
                    raise ValueError(f"Player {seat.id} has more than two hole cards")
        for card in parse_cards(board):
            if not table.add_community_card(card):
                raise ValueError("Board has more than five cards")

        result = table.calculate_odds()
    except (PokerError, ValueError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if result is None:
        console.print("[yellow]Equity needs at least three community cards (the flop).[/yellow]")
        raise typer.Exit(0)

    out = Table(title=f"Equity ({result.executed_trials:,} trials, {result.workers} workers)")
    out.add_column("Player", style="cyan")
    out.add_column("Hand", style="white")
    out.add_column("Win %", style="green")
    out.add_column("Equity %", style="bold green")

    for p, stats in zip(table.players, result.players):
        out.add_row(f"Player {p.id}", _render(p.hand), f"{stats.win_pct:.2f}", f"{stats.equity_pct:.2f}")

    console.print(f"Board: {_render(table.community_cards)}")
    console.print(out)
    console.print(f"Tie: [yellow]{result.tie_pct:.2f}%[/yellow]")


@app.command(name="evaluate")
def evaluate_cmd(
    cards: list[str] = typer.Argument(..., help="Five to seven cards, e.g. As Ks Qs Js Ts"),
) -> None:
    """Rank the best five-card hand among the given cards."""
    try:
        parsed = parse_cards(cards)
        rank = evaluate(parsed)
    except (PokerError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"{_render(parsed)}: [bold]{category_of(rank)!s}[/bold] (rank {rank})")


@app.command()
def info(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show the effective configuration."""
    try:
        config = _load(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Equity", "Trials", str(config.equity.trials))
    table.add_row("Equity", "Workers", str(config.equity.resolved_workers()))
    table.add_row("Equity", "Executor", config.equity.executor)
    table.add_row("Equity", "Distribute remainder", str(config.equity.distribute_remainder))
    table.add_row("Equity", "Seed", str(config.equity.seed))
    table.add_row("Table", "Initial players", str(config.table.initial_players))

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
