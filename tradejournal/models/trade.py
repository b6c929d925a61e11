"""Trade data model."""

from datetime import date as date_type
from datetime import datetime
from datetime import time as time_type
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Side(str, Enum):
    """Direction of a trade."""

    LONG = "LONG"
    SHORT = "SHORT"


class Trade(BaseModel):
    """Represents a closed trade from the execution history.

    The ``pnl`` field is taken as supplied; it is not checked against
    the entry/exit prices.
    """

    date: date_type = Field(..., description="Trade date")
    time: time_type = Field(..., description="Local time of day")
    instrument: str = Field(..., min_length=1, description="Instrument symbol")
    side: Side = Field(..., description="Trade side (LONG/SHORT)")
    size: float = Field(..., gt=0, description="Trade quantity")
    entry_price: float = Field(..., gt=0, allow_inf_nan=False, description="Entry price")
    exit_price: float = Field(..., gt=0, allow_inf_nan=False, description="Exit price")
    pnl: float = Field(..., allow_inf_nan=False, description="Realized P&L")
    commission: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Commission paid")
    notes: Optional[str] = Field(default=None, description="User notes")
    setup: Optional[str] = Field(default=None, description="Setup tag")
    chart_link: Optional[str] = Field(default=None, description="External chart URL")

    model_config = {"frozen": True}

    @property
    def timestamp(self) -> datetime:
        """Date and time combined into one local instant."""
        return datetime.combine(self.date, self.time)
