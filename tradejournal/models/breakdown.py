"""Grouped statistics data models."""

from datetime import date as date_type

from pydantic import BaseModel, Field


class DailyStat(BaseModel):
    """Aggregated results for one trading date."""

    date: date_type = Field(..., description="Trading date")
    pnl: float = Field(..., description="Sum of trade P&L")
    trades: int = Field(..., ge=0, description="Number of trades")
    win_rate: float = Field(..., ge=0, le=100, description="100 if the day closed positive, else 0")

    model_config = {"frozen": True}


class InstrumentStat(BaseModel):
    """Aggregated results for one instrument."""

    instrument: str = Field(..., min_length=1, description="Instrument symbol")
    pnl: float = Field(..., description="Sum of trade P&L")
    trades: int = Field(..., ge=0, description="Number of trades")
    win_rate: float = Field(..., ge=0, le=100, description="100 if the instrument is net positive, else 0")

    model_config = {"frozen": True}


class TimeBucket(BaseModel):
    """Trade count and P&L sum for one weekday or hour slot."""

    count: int = Field(default=0, ge=0, description="Number of trades")
    pnl_sum: float = Field(default=0.0, description="Sum of trade P&L")

    model_config = {"frozen": True}


class HourlyStat(BaseModel):
    """Trade distribution for one hour of the day."""

    hour: int = Field(..., ge=0, le=23, description="Hour of day")
    label: str = Field(..., description="Display label, e.g. 09h")
    trades: int = Field(..., ge=0, description="Number of trades")
    win_rate: float = Field(..., ge=0, le=100, description="Share of winning trades")

    model_config = {"frozen": True}


class InstrumentSummary(BaseModel):
    """Instrument results with per-trade extremes."""

    instrument: str = Field(..., min_length=1, description="Instrument symbol")
    trades: int = Field(..., ge=0, description="Number of trades")
    win_rate: float = Field(..., ge=0, le=100, description="Group win rate")
    pnl: float = Field(..., description="Total P&L")
    avg_pnl: float = Field(..., description="Average P&L per trade")
    best_trade: float = Field(..., description="Best single trade P&L")
    worst_trade: float = Field(..., description="Worst single trade P&L")

    model_config = {"frozen": True}
