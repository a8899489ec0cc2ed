from app.core.i18n import t
from app.models.common import Language
from app.models.insight import (
    Confidence,
    DecisionColor,
    Insight,
    PriceOutlook,
    PriceTrend,
)
from app.models.mandi import ArrivalVolume, PriceQuote, QuoteTrend
from app.models.scheme import Scheme, SchemeCategory
from app.models.weather import WeatherSnapshot


def default_insight(language: Language) -> Insight:
    """Generic low-confidence advice shown when no usable insight came back."""
    return Insight(
        decision=t("default_decision", language),
        decision_color=DecisionColor.YELLOW,
        main_reason=t("default_reason", language),
        price_outlook=PriceOutlook(
            yesterday=0,
            today=0,
            tomorrow_low=0,
            tomorrow_high=0,
            trend=PriceTrend.STABLE,
            confidence=Confidence.LOW,
        ),
        weather_impact=t("default_weather_impact", language),
        news_headline=t("default_news", language),
    )


def placeholder_insight(language: Language) -> Insight:
    """Shown by the dashboard before the first fetch resolves."""
    return Insight(
        decision=t("default_decision", language),
        decision_color=DecisionColor.YELLOW,
        main_reason=t("checking_markets", language),
        price_outlook=PriceOutlook(
            yesterday=0,
            today=0,
            tomorrow_low=0,
            tomorrow_high=0,
            trend=PriceTrend.STABLE,
            confidence=Confidence.LOW,
        ),
        weather_impact=t("checking_weather", language),
        news_headline="",
    )


def default_weather(language: Language) -> WeatherSnapshot:
    return WeatherSnapshot(
        temp=30,
        condition=t("default_condition", language),
        humidity=60,
        wind_speed=10,
        advisory=t("default_weather_advisory", language),
    )


def mock_prices() -> list[PriceQuote]:
    return [
        PriceQuote(
            crop="Onion", variety="Red", market="Lasalgaon", price=2400, change=5.2,
            trend=QuoteTrend.UP, arrival_volume=ArrivalVolume.HIGH, date="2023-10-24",
        ),
        PriceQuote(
            crop="Soybean", variety="Yellow", market="Latur", price=4800, change=-1.5,
            trend=QuoteTrend.DOWN, arrival_volume=ArrivalVolume.MEDIUM, date="2023-10-24",
        ),
        PriceQuote(
            crop="Cotton", variety="Medium Staple", market="Akola", price=6900, change=0.8,
            trend=QuoteTrend.UP, arrival_volume=ArrivalVolume.LOW, date="2023-10-24",
        ),
        PriceQuote(
            crop="Wheat", variety="Lokwan", market="Indore", price=2150, change=-0.5,
            trend=QuoteTrend.DOWN, arrival_volume=ArrivalVolume.MEDIUM, date="2023-10-24",
        ),
    ]


SCHEMES: list[Scheme] = [
    Scheme(
        id="pm-kisan",
        title="PM-KISAN Samman Nidhi",
        category=SchemeCategory.SUBSIDY,
        description="₹6000 per year income support for farmers.",
        eligibility=["Landholding farmer", "Bank account linked to Aadhaar"],
        deadline="Always Open",
    ),
    Scheme(
        id="pmfby",
        title="Pradhan Mantri Fasal Bima Yojana",
        category=SchemeCategory.INSURANCE,
        description="Crop insurance against non-preventable natural risks.",
        eligibility=["Sharecroppers", "Tenant farmers"],
        deadline="31st July",
    ),
    Scheme(
        id="kcc",
        title="Kisan Credit Card (KCC)",
        category=SchemeCategory.LOAN,
        description="Low interest loans (4%) for farming needs.",
        eligibility=["Age 18-75", "Owner cultivator"],
    ),
    Scheme(
        id="raitha-siri",
        title="Raitha Siri",
        category=SchemeCategory.SUBSIDY,
        description="₹10,000 per hectare incentive for millet growers in Karnataka.",
        eligibility=["Karnataka farmer", "Growing millets such as ragi or jowar"],
    ),
]
