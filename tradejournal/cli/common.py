"""Shared helpers for TradeJournal CLI commands."""

import asyncio
import math
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.panel import Panel

from tradejournal.config import JournalConfig, load_config
from tradejournal.loaders import ImportFailedError
from tradejournal.models import StatisticsBundle
from tradejournal.session import StatisticsFacade

console = Console()


def import_options(func: Callable) -> Callable:
    """Add the --summary and --trades source options to a command."""
    func = click.option(
        "--trades",
        "trades_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Delimited trade fills file.",
    )(func)
    func = click.option(
        "--summary",
        "summary_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Performance report export (label;value lines).",
    )(func)
    return func


def _error(message: str) -> None:
    console.print(Panel(
        f"[red]{message}[/red]",
        title="[bold red]Import Failed[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def load_bundle(
    summary_path: Optional[Path],
    trades_path: Optional[Path],
) -> tuple[StatisticsBundle, JournalConfig]:
    """Import the given sources and return the statistics with the config used."""
    if summary_path is None and trades_path is None:
        _error("Nothing to import.\n\nPass [cyan]--summary[/cyan] and/or [cyan]--trades[/cyan].")

    config = load_config()
    facade = StatisticsFacade(config=config)
    try:
        bundle = asyncio.run(facade.import_files(summary_path, trades_path))
    except ImportFailedError as e:
        _error(str(e))

    return bundle, config


def format_money(value: float, symbol: str = "$", signed: bool = True) -> str:
    """Format an amount as ``+$1,234.50`` with a colour tag."""
    if math.isnan(value):
        return "[dim]n/a[/dim]"
    if math.isinf(value):
        return "[green]+∞[/green]" if value > 0 else "[red]-∞[/red]"

    color = "green" if value >= 0 else "red"
    sign = ("+" if value >= 0 else "-") if signed else ("-" if value < 0 else "")
    return f"[{color}]{sign}{symbol}{abs(value):,.2f}[/{color}]"


def format_ratio(value: float) -> str:
    """Format a ratio, showing undefined values explicitly."""
    if math.isnan(value):
        return "n/a"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return f"{value:.2f}"
