import unittest
from unittest.mock import AsyncMock, patch

from app.core.errors import ModelError, TransportError
from app.core.i18n import t
from app.models.common import CropImage, Language, RequestContext
from app.models.insight import Confidence, DecisionAction, DecisionColor, PriceTrend
from app.models.mandi import QuoteTrend
from app.models.scheme import SchemeProfile
from app.services import insight_service
from app.services.fallbacks import default_insight, default_weather

DASHBOARD_REPLY = (
    "SELL NOW|green|Prices peaking|2100|2200|2150|2300|rising|high|Clear skies|Good demand"
)


class InsightServiceTests(unittest.IsolatedAsyncioTestCase):
    def _reply(self, text=None, error=None) -> AsyncMock:
        mock = AsyncMock(return_value=text, side_effect=error)
        patcher = patch("app.services.insight_service.generate_text", mock)
        patcher.start()
        self.addCleanup(patcher.stop)
        return mock

    async def test_dashboard_scenario(self) -> None:
        self._reply(DASHBOARD_REPLY)
        insight = await insight_service.dashboard_insight(
            RequestContext(district="Mandya", crop="Sugarcane")
        )
        self.assertEqual(insight.decision, "SELL NOW")
        self.assertEqual(insight.action, DecisionAction.SELL)
        self.assertEqual(insight.decision_color, DecisionColor.GREEN)
        self.assertEqual(insight.main_reason, "Prices peaking")
        self.assertEqual(insight.price_outlook.yesterday, 2100)
        self.assertEqual(insight.price_outlook.today, 2200)
        self.assertEqual(insight.price_outlook.tomorrow_high, 2300)
        self.assertEqual(insight.price_outlook.trend, PriceTrend.RISING)
        self.assertEqual(insight.price_outlook.confidence, Confidence.HIGH)
        self.assertEqual(insight.weather_impact, "Clear skies")
        self.assertEqual(insight.news_headline, "Good demand")

    async def test_dashboard_reply_with_echoed_header(self) -> None:
        self._reply(
            "DECISION|COLOR|REASON|YESTERDAY_PRICE|TODAY_PRICE|TOMORROW_LOW|TOMORROW_HIGH|"
            f"TREND|CONFIDENCE|WEATHER_IMPACT|NEWS_HEADLINE\n{DASHBOARD_REPLY}"
        )
        insight = await insight_service.dashboard_insight(RequestContext())
        self.assertEqual(insight.decision, "SELL NOW")
        self.assertEqual(insight.price_outlook.today, 2200)

    async def test_malformed_dashboard_reply_gives_exact_default(self) -> None:
        for reply in (
            "SELL NOW|green|Prices peaking",
            "Prices look good, sell soon.",
            "|green|Prices peaking|2100|2200|2150|2300|rising|high|Clear skies|Good demand",
        ):
            with self.subTest(reply=reply):
                self._reply(reply)
                insight = await insight_service.dashboard_insight(
                    RequestContext(language=Language.HINDI)
                )
                self.assertEqual(insight, default_insight(Language.HINDI))

    async def test_dashboard_failures_give_default(self) -> None:
        for error in (TransportError("offline"), ModelError("quota"), RuntimeError("bug")):
            with self.subTest(error=error):
                self._reply(error=error)
                insight = await insight_service.dashboard_insight(RequestContext())
                self.assertEqual(insight, default_insight(Language.ENGLISH))
                self.assertEqual(insight.action, DecisionAction.HOLD)

    async def test_weather_snapshot(self) -> None:
        self._reply("28|Light Rain|82|15|Delay urea application|70")
        weather = await insight_service.weather_snapshot(RequestContext())
        self.assertEqual(weather.temp, 28)
        self.assertEqual(weather.condition, "Light Rain")
        self.assertEqual(weather.humidity, 82)
        self.assertEqual(weather.wind_speed, 15)
        self.assertEqual(weather.rain_chance, 70)

    async def test_weather_malformed_gives_default(self) -> None:
        self._reply("28|Light Rain")
        weather = await insight_service.weather_snapshot(
            RequestContext(language=Language.KANNADA)
        )
        self.assertEqual(weather, default_weather(Language.KANNADA))

    async def test_mandi_round_trip(self) -> None:
        self._reply("Onion|Red|Lasalgaon|2400|5|up")
        quotes = await insight_service.mandi_prices(RequestContext())
        self.assertEqual(len(quotes), 1)
        quote = quotes[0]
        self.assertEqual(
            (quote.crop, quote.variety, quote.market, quote.price, quote.change, quote.trend),
            ("Onion", "Red", "Lasalgaon", 2400, 5, QuoteTrend.UP),
        )

    async def test_mandi_partial_list_is_kept_in_order(self) -> None:
        self._reply(
            "Tomato|Hybrid|Kolar|1800|-4|down|high|2024-10-24\n"
            "Ragi|Local\n"
            "Maize|Yellow|Davanagere|2150|1.2|up"
        )
        quotes = await insight_service.mandi_prices(RequestContext(district="Kolar"), limit=3)
        self.assertEqual([q.crop for q in quotes], ["Tomato", "Maize"])
        self.assertEqual(quotes[0].date, "2024-10-24")

    async def test_mandi_failure_gives_empty_list(self) -> None:
        self._reply(error=TransportError("offline"))
        self.assertEqual(await insight_service.mandi_prices(RequestContext()), [])

    async def test_chat_reply_passthrough(self) -> None:
        generate = self._reply("Use neem oil spray.")
        reply = await insight_service.chat_reply("Aphids on chilli", RequestContext())
        self.assertEqual(reply, "Use neem oil spray.")
        payload = generate.await_args.args[0]
        self.assertIn("Aphids on chilli", payload.text)

    async def test_chat_transport_failure_gives_connectivity_string(self) -> None:
        self._reply(error=TransportError("offline"))
        reply = await insight_service.chat_reply("hello", RequestContext(language=Language.HINDI))
        self.assertEqual(reply, t("connectivity_error", Language.HINDI))

    async def test_diagnosis_sends_image(self) -> None:
        generate = self._reply("Early blight. Spray mancozeb.")
        image = CropImage(data="aGVsbG8=")
        reply = await insight_service.diagnose_crop(image, RequestContext(crop="Tomato"))
        self.assertEqual(reply, "Early blight. Spray mancozeb.")
        payload = generate.await_args.args[0]
        self.assertEqual(payload.parts[0].inline_data.data, "aGVsbG8=")

    async def test_scheme_recommendation_and_apology(self) -> None:
        generate = self._reply("You qualify for PM-KISAN.")
        profile = SchemeProfile(district="Mandya", land_acres=2, annual_income=120000)
        reply = await insight_service.scheme_recommendation(profile, RequestContext())
        self.assertEqual(reply, "You qualify for PM-KISAN.")
        self.assertIn("₹120,000 per year", generate.await_args.args[0].text)

        self._reply(error=ModelError("quota"))
        reply = await insight_service.scheme_recommendation(profile, RequestContext())
        self.assertEqual(reply, t("apology", Language.ENGLISH))

    async def test_market_advisory_apology(self) -> None:
        self._reply(error=TransportError("offline"))
        reply = await insight_service.market_advisory(RequestContext(language=Language.KANNADA))
        self.assertEqual(reply, t("apology", Language.KANNADA))


if __name__ == "__main__":
    unittest.main()
