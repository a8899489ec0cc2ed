from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.core.config import settings


class Language(str, Enum):
    ENGLISH = "en"
    HINDI = "hi"
    KANNADA = "kn"


class TaskKind(str, Enum):
    CHAT = "chat"
    CROP_DIAGNOSIS = "crop_diagnosis"
    DASHBOARD_INSIGHT = "dashboard_insight"
    MANDI_PRICES = "mandi_prices"
    WEATHER = "weather"
    SCHEME_RECOMMENDATION = "scheme_recommendation"
    MARKET_ADVISORY = "market_advisory"


class RequestContext(BaseModel):
    """Everything a single request needs to know about the farmer's selection."""

    language: Language = Field(default=Language.ENGLISH)
    district: Optional[str] = Field(default=None, description="District name, e.g. Mandya")
    crop: Optional[str] = Field(default=None, description="Crop name, e.g. Sugarcane")
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    def coordinates(self) -> tuple[float, float]:
        if self.latitude is None or self.longitude is None:
            return settings.FALLBACK_LATITUDE, settings.FALLBACK_LONGITUDE
        return self.latitude, self.longitude


class CropImage(BaseModel):
    data: str = Field(..., description="Base64 encoded image bytes, without data-url prefix")
    mime_type: str = Field(default="image/jpeg")
