import unittest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from app.collections.chat_session import clear_chat_sessions
from app.core.config import settings
from app.core.errors import TransportError
from app.core.i18n import t
from app.main import app
from app.models.common import Language

DASHBOARD_REPLY = (
    "SELL NOW|green|Prices peaking|2100|2200|2150|2300|rising|high|Clear skies|Good demand"
)


class ApiTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)
        clear_chat_sessions()
        self.addCleanup(clear_chat_sessions)

    def _reply(self, text=None, error=None) -> AsyncMock:
        mock = AsyncMock(return_value=text, side_effect=error)
        patcher = patch("app.services.insight_service.generate_text", mock)
        patcher.start()
        self.addCleanup(patcher.stop)
        return mock

    def test_root(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("KisanSathi", response.json()["message"])

    def test_ui_strings(self) -> None:
        response = self.client.get("/ui/strings", params={"language": "kn"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["speech_locale"], "kn-IN")
        self.assertEqual(body["strings"]["greeting"], t("greeting", Language.KANNADA))

    def test_dashboard_insight(self) -> None:
        self._reply(DASHBOARD_REPLY)
        response = self.client.post(
            "/insights/dashboard", json={"district": "Mandya", "crop": "Sugarcane"}
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["action"], "SELL")
        self.assertEqual(body["insight"]["decision"], "SELL NOW")
        self.assertEqual(body["insight"]["price_outlook"]["today"], 2200)

    def test_dashboard_insight_never_errors(self) -> None:
        self._reply(error=TransportError("offline"))
        response = self.client.post("/insights/dashboard", json={"language": "hi"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["action"], "HOLD")
        self.assertEqual(body["insight"]["decision"], t("default_decision", Language.HINDI))

    def test_mandi_prices_fall_back_to_sample_list(self) -> None:
        self._reply("nothing useful")
        response = self.client.post("/mandi/prices", json={})
        body = response.json()
        self.assertTrue(body["fallback"])
        self.assertEqual(body["prices"][0]["crop"], "Onion")

    def test_mandi_prices(self) -> None:
        self._reply("Onion|Red|Lasalgaon|2400|5|up")
        response = self.client.post("/mandi/prices", json={"limit": 3})
        body = response.json()
        self.assertFalse(body["fallback"])
        self.assertEqual(body["prices"][0]["market"], "Lasalgaon")
        self.assertEqual(body["prices"][0]["price"], 2400)

    def test_weather_snapshot(self) -> None:
        self._reply("31|Partly Cloudy|64|12|Good day to spray")
        response = self.client.post("/weather/snapshot", json={"latitude": 13.0, "longitude": 77.5})
        body = response.json()
        self.assertEqual(body["temp"], 31)
        self.assertNotIn("rain_chance", body)

    def test_schemes(self) -> None:
        response = self.client.get("/schemes/")
        titles = [scheme["title"] for scheme in response.json()]
        self.assertIn("PM-KISAN Samman Nidhi", titles)
        self.assertIn("Kisan Credit Card (KCC)", titles)

        self._reply(error=TransportError("offline"))
        response = self.client.post(
            "/schemes/recommendation", json={"profile": {"land_acres": 1.5}}
        )
        self.assertEqual(response.json()["recommendation"], t("apology", Language.ENGLISH))

    def test_crop_doctor_rejects_non_images(self) -> None:
        response = self.client.post(
            "/crop-doctor/diagnose",
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )
        self.assertEqual(response.status_code, 400)

    def test_crop_doctor(self) -> None:
        generate = self._reply("Healthy plant.")
        response = self.client.post(
            "/crop-doctor/diagnose",
            files={"file": ("leaf.jpg", b"\xff\xd8fakejpeg", "image/jpeg")},
            data={"language": "hi", "crop": "Tomato"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["analysis"], "Healthy plant.")
        payload = generate.await_args.args[0]
        self.assertEqual(payload.parts[0].inline_data.mime_type, "image/jpeg")

    def test_chat_session_flow(self) -> None:
        created = self.client.post("/chats/", json={"language": "en"})
        self.assertEqual(created.status_code, 201)
        chat_id = created.json()["id"]

        self._reply(error=TransportError("offline"))
        sent = self.client.post(f"/chats/{chat_id}/messages", json={"text": "Hello"})
        self.assertEqual(sent.status_code, 200)
        self.assertEqual(
            sent.json()["model_message"]["text"], t("connectivity_error", Language.ENGLISH)
        )

        messages = self.client.get(f"/chats/{chat_id}/messages").json()
        self.assertEqual([m["role"] for m in messages], ["assistant", "user", "assistant"])

        blank = self.client.post(f"/chats/{chat_id}/messages", json={"text": "  "})
        self.assertEqual(blank.status_code, 400)

        self.assertEqual(self.client.delete(f"/chats/{chat_id}").status_code, 204)
        self.assertEqual(self.client.get(f"/chats/{chat_id}").status_code, 404)

    def test_least_recently_used_chat_session_is_evicted(self) -> None:
        with patch.object(settings, "MAX_CHAT_SESSIONS", 2):
            first = self.client.post("/chats/", json={}).json()["id"]
            second = self.client.post("/chats/", json={}).json()["id"]
            self.assertEqual(self.client.get(f"/chats/{first}").status_code, 200)
            third = self.client.post("/chats/", json={}).json()["id"]

        self.assertEqual(self.client.get(f"/chats/{second}").status_code, 404)
        self.assertEqual(self.client.get(f"/chats/{first}").status_code, 200)
        self.assertEqual(self.client.get(f"/chats/{third}").status_code, 200)


if __name__ == "__main__":
    unittest.main()
