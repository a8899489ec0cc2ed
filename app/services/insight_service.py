import logging
from typing import Any, Optional

from pydantic import ValidationError

from app.core.errors import InsightError, ParseError
from app.core.i18n import t
from app.models.common import CropImage, RequestContext, TaskKind
from app.models.insight import Insight
from app.models.mandi import PriceQuote
from app.models.scheme import SchemeProfile
from app.models.weather import WeatherSnapshot
from app.services.fallbacks import default_insight, default_weather
from app.services.model_client import generate_text
from app.services.prompt_builder import build_prompt
from app.services.response_parser import (
    INSIGHT_SCHEMA,
    PRICE_QUOTE_SCHEMA,
    WEATHER_SCHEMA,
    parse_record,
    parse_records,
)

logger = logging.getLogger(__name__)


def _present(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


def insight_from_fields(fields: dict[str, Any]) -> Insight:
    try:
        return Insight.model_validate(
            {
                "decision": fields["decision"],
                "decision_color": fields["decision_color"],
                "main_reason": fields["main_reason"],
                "price_outlook": {
                    "yesterday": fields["yesterday"],
                    "today": fields["today"],
                    "tomorrow_low": fields["tomorrow_low"],
                    "tomorrow_high": fields["tomorrow_high"],
                    "trend": fields["trend"],
                    "confidence": fields["confidence"],
                },
                "weather_impact": fields["weather_impact"],
                "news_headline": fields["news_headline"],
            }
        )
    except (KeyError, ValidationError) as e:
        raise ParseError(f"Insight fields failed validation: {e}") from e


def weather_from_fields(fields: dict[str, Any]) -> WeatherSnapshot:
    try:
        return WeatherSnapshot.model_validate(_present(fields))
    except ValidationError as e:
        raise ParseError(f"Weather fields failed validation: {e}") from e


def quotes_from_records(records: list[dict[str, Any]]) -> list[PriceQuote]:
    quotes = []
    for record in records:
        try:
            quotes.append(PriceQuote.model_validate(_present(record)))
        except ValidationError:
            logger.debug("Dropping price line that failed validation: %s", record)
    return quotes


async def _free_text(
    task: TaskKind,
    context: RequestContext,
    fallback_key: str,
    params: Optional[dict[str, Any]] = None,
    image: Optional[CropImage] = None,
) -> str:
    try:
        return await generate_text(build_prompt(task, context, params, image))
    except InsightError as e:
        logger.warning("%s degraded to static reply: %s", task.value, e)
    except Exception:
        logger.exception("Unexpected failure in %s", task.value)
    return t(fallback_key, context.language)


async def chat_reply(message: str, context: RequestContext) -> str:
    """Answer one chat message, or return the connectivity-error string."""
    return await _free_text(
        TaskKind.CHAT, context, "connectivity_error", params={"message": message}
    )


async def diagnose_crop(image: CropImage, context: RequestContext) -> str:
    """Identify disease or pest from a crop photo and suggest remedies."""
    return await _free_text(
        TaskKind.CROP_DIAGNOSIS, context, "connectivity_error", image=image
    )


async def scheme_recommendation(profile: SchemeProfile, context: RequestContext) -> str:
    params = profile.model_dump(mode="json")
    if profile.annual_income is not None:
        params["annual_income"] = f"₹{profile.annual_income:,} per year"
    return await _free_text(
        TaskKind.SCHEME_RECOMMENDATION, context, "apology", params=params
    )


async def market_advisory(context: RequestContext) -> str:
    return await _free_text(TaskKind.MARKET_ADVISORY, context, "apology")


async def dashboard_insight(context: RequestContext) -> Insight:
    """
    Fetch the sell/hold verdict for the selected crop and district.

    Any transport, model or parse failure yields the complete default insight for the
    context language; a partially parsed insight is never returned.
    """
    try:
        text = await generate_text(build_prompt(TaskKind.DASHBOARD_INSIGHT, context))
        return insight_from_fields(parse_record(text, INSIGHT_SCHEMA))
    except InsightError as e:
        logger.warning("dashboard_insight degraded to default: %s", e)
    except Exception:
        logger.exception("Unexpected failure in dashboard_insight")
    return default_insight(context.language)


async def weather_snapshot(context: RequestContext) -> WeatherSnapshot:
    try:
        text = await generate_text(build_prompt(TaskKind.WEATHER, context))
        return weather_from_fields(parse_record(text, WEATHER_SCHEMA))
    except InsightError as e:
        logger.warning("weather_snapshot degraded to default: %s", e)
    except Exception:
        logger.exception("Unexpected failure in weather_snapshot")
    return default_weather(context.language)


async def mandi_prices(context: RequestContext, limit: int = 8) -> list[PriceQuote]:
    """
    Fetch the latest mandi price list.

    Lines with too few fields are dropped and the rest keep their order. An empty list
    means nothing usable came back; callers keep their own fallback list in that case.
    """
    try:
        text = await generate_text(
            build_prompt(TaskKind.MANDI_PRICES, context, params={"limit": limit})
        )
    except InsightError as e:
        logger.warning("mandi_prices degraded to empty list: %s", e)
        return []
    except Exception:
        logger.exception("Unexpected failure in mandi_prices")
        return []
    return quotes_from_records(parse_records(text, PRICE_QUOTE_SCHEMA))
