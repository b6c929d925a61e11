"""Report commands for TradeJournal CLI.

Handles the overview, advanced analytics, daily results and monthly
calendar displays.
"""

from datetime import date
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tradejournal.analytics.views import instrument_breakdown, month_days, shift_month
from tradejournal.cli.common import format_money, format_ratio, import_options, load_bundle

console = Console()


@click.command()
@import_options
def overview(summary_path: Optional[Path], trades_path: Optional[Path]) -> None:
    """Display performance, trade counts and average trade.

    \b
    Examples:
      tradejournal overview --summary report.csv
      tradejournal overview --trades fills.csv
    """
    bundle, config = load_bundle(summary_path, trades_path)
    stats = bundle.basic_stats
    advanced = bundle.advanced_stats
    cur = config.currency_symbol

    console.print(Panel(
        f"[bold]Net P&L:[/bold] {format_money(stats.total_net_profit, cur)}\n"
        f"[bold]Win Rate:[/bold] {stats.win_rate:.2f}%\n"
        f"[bold]Profit Factor:[/bold] {stats.profit_factor:.2f}",
        title="[bold]Performance[/bold]",
        border_style="cyan",
    ))

    outcomes = stats.outcome_counts()
    console.print(Panel(
        f"[bold]Total Trades:[/bold] {stats.total_trades}\n"
        f"[green]Winning:[/green] {outcomes['winning']}  "
        f"[red]Losing:[/red] {outcomes['losing']}  "
        f"[dim]Even:[/dim] {outcomes['even']}",
        title="[bold]Statistics[/bold]",
        border_style="cyan",
    ))

    console.print(Panel(
        f"[bold]Avg Win:[/bold] {format_money(stats.avg_winning_trade, cur, signed=False)}\n"
        f"[bold]Avg Loss:[/bold] {format_money(-abs(stats.avg_losing_trade), cur, signed=False)}\n"
        f"[bold]R/R Ratio:[/bold] {format_ratio(advanced.avg_risk_reward_ratio)}\n"
        f"[bold]Expectancy:[/bold] {format_money(advanced.expectancy, cur)}",
        title="[bold]Average Trade[/bold]",
        border_style="cyan",
    ))


@click.command()
@import_options
def analytics(summary_path: Optional[Path], trades_path: Optional[Path]) -> None:
    """Display advanced statistics, hourly distribution and instruments.

    \b
    Examples:
      tradejournal analytics --summary report.csv --trades fills.csv
    """
    bundle, config = load_bundle(summary_path, trades_path)
    stats = bundle.basic_stats
    advanced = bundle.advanced_stats
    cur = config.currency_symbol

    console.print(Panel(
        f"[bold]Best Day:[/bold] {advanced.best_day_of_week or '-'}\n"
        f"[bold]Worst Day:[/bold] {advanced.worst_day_of_week or '-'}\n"
        f"[bold]Best Hour:[/bold] {advanced.best_time_of_day or '-'}\n"
        f"[bold]Worst Hour:[/bold] {advanced.worst_time_of_day or '-'}\n"
        f"[bold]Max Consecutive Wins:[/bold] {advanced.consecutive_wins}\n"
        f"[bold]Max Consecutive Losses:[/bold] {advanced.consecutive_losses}\n"
        f"[bold]Profit per Day:[/bold] {format_money(advanced.profit_per_day, cur)}",
        title="[bold]Advanced Statistics[/bold]",
        border_style="cyan",
    ))

    console.print(Panel(
        f"[bold]Max Drawdown:[/bold] {format_money(stats.max_drawdown, cur)}\n"
        f"[bold]Largest Win:[/bold] {format_money(stats.largest_win, cur)}\n"
        f"[bold]Largest Loss:[/bold] {format_money(stats.largest_loss, cur)}\n"
        f"[bold]Sharpe Ratio:[/bold] {stats.sharpe_ratio:.2f}\n"
        f"[bold]Sortino Ratio:[/bold] {stats.sortino_ratio:.2f}",
        title="[bold]Risk[/bold]",
        border_style="cyan",
    ))

    if not bundle.trades:
        console.print("[dim]No trades imported; pass --trades for hourly and instrument breakdowns.[/dim]")
        return

    hourly = Table(title="Hourly Distribution", show_header=True, header_style="bold cyan")
    hourly.add_column("Hour", style="bold")
    hourly.add_column("Trades", justify="right")
    hourly.add_column("Win Rate", justify="right")
    for stat in bundle.hourly_stats:
        if stat.trades:
            hourly.add_row(stat.label, str(stat.trades), f"{stat.win_rate:.1f}%")
    console.print(hourly)

    table = Table(title="Performance by Instrument", show_header=True, header_style="bold cyan")
    table.add_column("Instrument", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("Win Rate", justify="right")
    table.add_column("Total P&L", justify="right")
    table.add_column("Avg P&L", justify="right")
    table.add_column("Best Trade", justify="right")
    table.add_column("Worst Trade", justify="right")
    for row in instrument_breakdown(bundle.trades, bundle.instrument_stats):
        table.add_row(
            row.instrument,
            str(row.trades),
            f"{row.win_rate:.2f}%",
            format_money(row.pnl, cur),
            format_money(row.avg_pnl, cur),
            format_money(row.best_trade, cur),
            format_money(row.worst_trade, cur),
        )
    console.print(table)


@click.command()
@import_options
def daily(summary_path: Optional[Path], trades_path: Optional[Path]) -> None:
    """Display P&L per trading day.

    \b
    Examples:
      tradejournal daily --trades fills.csv
    """
    bundle, config = load_bundle(summary_path, trades_path)

    if not bundle.daily_stats:
        console.print(Panel(
            "[dim]No trades imported[/dim]",
            title="[bold]Daily P&L[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title="Daily P&L", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("P&L", justify="right")
    table.add_column("Win Rate", justify="right")

    total_pnl = 0.0
    for stat in bundle.daily_stats:
        table.add_row(
            stat.date.strftime("%Y-%m-%d"),
            str(stat.trades),
            format_money(stat.pnl, config.currency_symbol),
            f"{stat.win_rate:.1f}%",
        )
        total_pnl += stat.pnl

    console.print(table)
    console.print(f"\n[bold]Total P&L:[/bold] {format_money(total_pnl, config.currency_symbol)}")


def _parse_month(value: Optional[str]) -> tuple[int, int]:
    if value is None:
        today = date.today()
        return today.year, today.month
    try:
        year, month = (int(part) for part in value.split("-"))
    except ValueError:
        raise click.BadParameter("expected YYYY-MM", param_hint="--month")
    if not 1 <= month <= 12:
        raise click.BadParameter("month must be 01-12", param_hint="--month")
    return year, month


@click.command()
@import_options
@click.option("--month", type=str, default=None, help="Month to show as YYYY-MM (default: current).")
def calendar(summary_path: Optional[Path], trades_path: Optional[Path], month: Optional[str]) -> None:
    """Display one month of daily results.

    \b
    Examples:
      tradejournal calendar --trades fills.csv --month 2024-01
    """
    year, month_number = _parse_month(month)
    bundle, config = load_bundle(summary_path, trades_path)
    days = month_days(bundle.daily_stats, year, month_number)

    title = date(year, month_number, 1).strftime("%B %Y")
    prev_year, prev_month = shift_month(year, month_number, -1)
    next_year, next_month = shift_month(year, month_number, 1)

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Date", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("P&L", justify="right")
    for stat in days:
        table.add_row(
            stat.date.strftime("%a %d"),
            str(stat.trades),
            format_money(stat.pnl, config.currency_symbol),
        )

    if days:
        console.print(table)
    else:
        console.print(f"[dim]No trades in {title}[/dim]")
    console.print(
        f"[dim]Previous: --month {prev_year:04d}-{prev_month:02d}  "
        f"Next: --month {next_year:04d}-{next_month:02d}[/dim]"
    )
