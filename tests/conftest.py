"""Shared fixtures for TradeJournal tests."""

import random
from datetime import date, timedelta

import pytest

from tradejournal.models import Side, Trade


def make_trade(
    pnl: float = 0.0,
    day: str = "2024-01-08",
    at: str = "10:30:00",
    instrument: str = "EURUSD",
    side: Side = Side.LONG,
    **kwargs,
) -> Trade:
    """Build a trade with sensible defaults for everything but P&L."""
    fields = {
        "date": day,
        "time": at,
        "instrument": instrument,
        "side": side,
        "size": 1,
        "entry_price": 1.1,
        "exit_price": 1.1,
        "pnl": pnl,
        "commission": 0.0,
    }
    fields.update(kwargs)
    return Trade(**fields)


def generate_sample_trades(count: int = 50, seed: int = 7) -> list[Trade]:
    """Randomized demonstration trades, one per day between 08:00 and 16:59."""
    rng = random.Random(seed)
    instruments = ["EURUSD", "GBPUSD", "USDJPY"]
    start = date(2024, 1, 1)
    trades = []

    for i in range(count):
        pnl = rng.random() * 200 - 100
        entry = 1.1 + rng.random() * 0.1
        exit_ = entry + (0.005 if pnl > 0 else -0.005) * rng.random()
        trades.append(Trade(
            date=start + timedelta(days=i),
            time=f"{rng.randint(8, 16):02d}:{rng.randint(0, 59):02d}:00",
            instrument=rng.choice(instruments),
            side=rng.choice([Side.LONG, Side.SHORT]),
            size=rng.randint(1, 5),
            entry_price=entry,
            exit_price=max(exit_, 0.0001),
            pnl=pnl,
            commission=rng.random() * 10,
            chart_link="https://www.tradingview.com/chart",
        ))
    return trades


@pytest.fixture(scope="session")
def trade_factory():
    """Factory for single trades."""
    return make_trade


@pytest.fixture(scope="session")
def sample_trades() -> list[Trade]:
    """Fifty seeded sample trades."""
    return generate_sample_trades()


SAMPLE_REPORT = """Performance;All trades;Long trades;Short trades
Total net profit;$1,234.50;$800.00;$434.50
Gross profit;$3,000.00;$1,800.00;$1,200.00
Gross loss;($1,765.50);($1,000.00);($765.50)
Commission;$45.00;$20.00;$25.00
Profit factor;1.70;1.80;1.57
Max. drawdown;($600.25);($400.00);($300.00)
Total # of trades;50;30;20
# of winning trades;30;18;12
# of losing trades;18;11;7
# of even trades;2;1;1
Percent profitable;60.00%;60.00%;60.00%
Avg. winning trade;$100.00;$100.00;$100.00
Avg. losing trade;($98.08);($90.91);($109.36)
Largest winning trade;$350.00;$350.00;$200.00
Largest losing trade;($275.00);($275.00);($150.00)
Sharpe ratio;1.25;1.30;1.10
Sortino ratio;2.10;2.20;1.90
"""


@pytest.fixture(scope="session")
def sample_report() -> str:
    """A full performance report export."""
    return SAMPLE_REPORT
