"""Trade list command for TradeJournal CLI."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics.views import filter_trades, list_instruments
from tradejournal.cli.common import format_money, import_options, load_bundle
from tradejournal.models import Side

console = Console()


@click.command(name="trades")
@import_options
@click.option("--instrument", type=str, default=None, help="Only show this instrument.")
@click.option("--from", "start", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="First date to show (YYYY-MM-DD).")
@click.option("--to", "end", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Last date to show (YYYY-MM-DD).")
def trades_command(
    summary_path: Optional[Path],
    trades_path: Optional[Path],
    instrument: Optional[str],
    start: Optional[datetime],
    end: Optional[datetime],
) -> None:
    """Display imported trades with optional filters.

    \b
    Examples:
      tradejournal trades --trades fills.csv
      tradejournal trades --trades fills.csv --instrument EURUSD
      tradejournal trades --trades fills.csv --from 2024-01-01 --to 2024-01-31
    """
    bundle, config = load_bundle(summary_path, trades_path)
    shown = filter_trades(
        bundle.trades,
        instrument=instrument,
        start=start.date() if start else None,
        end=end.date() if end else None,
    )

    if not shown:
        instruments = ", ".join(list_instruments(bundle.trades)) or "none"
        console.print(Panel(
            f"[dim]No trades match the filters.[/dim]\n\nInstruments: {instruments}",
            title="[bold]Trades[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title=f"Trades ({len(shown)})", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Time")
    table.add_column("Instrument")
    table.add_column("Side")
    table.add_column("Size", justify="right")
    table.add_column("Entry", justify="right")
    table.add_column("Exit", justify="right")
    table.add_column("P&L", justify="right")
    table.add_column("Chart", overflow="fold")

    for trade in shown:
        side_color = "green" if trade.side == Side.LONG else "red"
        table.add_row(
            trade.date.isoformat(),
            trade.time.strftime("%H:%M:%S"),
            trade.instrument,
            f"[{side_color}]{trade.side.value}[/{side_color}]",
            f"{trade.size:g}",
            f"{trade.entry_price:.5f}",
            f"{trade.exit_price:.5f}",
            format_money(trade.pnl, config.currency_symbol),
            trade.chart_link or "-",
        )

    console.print(table)
