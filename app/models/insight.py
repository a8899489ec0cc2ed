from enum import Enum

from pydantic import BaseModel, Field


class DecisionAction(str, Enum):
    SELL = "SELL"
    HOLD = "HOLD"
    HARVEST = "HARVEST"
    PROTECT = "PROTECT"


class DecisionColor(str, Enum):
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"


class PriceTrend(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PriceOutlook(BaseModel):
    yesterday: int = Field(..., description="Modal price yesterday, Rs/quintal")
    today: int = Field(..., description="Modal price today, Rs/quintal")
    tomorrow_low: int = Field(..., description="Forecast low for tomorrow")
    tomorrow_high: int = Field(..., description="Forecast high for tomorrow")
    trend: PriceTrend = PriceTrend.STABLE
    confidence: Confidence = Confidence.MEDIUM


class Insight(BaseModel):
    decision: str = Field(..., min_length=1, description="Display label, e.g. 'SELL NOW'")
    decision_color: DecisionColor = DecisionColor.YELLOW
    main_reason: str
    price_outlook: PriceOutlook
    weather_impact: str
    news_headline: str = ""

    @property
    def action(self) -> DecisionAction:
        words = self.decision.strip().upper().split()
        if words:
            for action in DecisionAction:
                if words[0].startswith(action.value):
                    return action
        return DecisionAction.HOLD
