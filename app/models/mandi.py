from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class QuoteTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ArrivalVolume(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PriceQuote(BaseModel):
    crop: str
    variety: str = ""
    market: str
    price: int = Field(..., description="Modal price in Rs/quintal")
    change: float = Field(default=0.0, description="Percent change since last session")
    trend: QuoteTrend = QuoteTrend.STABLE
    arrival_volume: ArrivalVolume = ArrivalVolume.MEDIUM
    date: str = Field(default_factory=lambda: date.today().isoformat())
