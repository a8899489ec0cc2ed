import unittest

from app.models.common import CropImage, Language, RequestContext, TaskKind
from app.prompts.assistant_system_prompt import ASSISTANT_SYSTEM_PROMPT
from app.services.prompt_builder import NOT_SPECIFIED, build_prompt


class PromptBuilderTests(unittest.TestCase):
    def test_dashboard_prompt_names_field_order(self) -> None:
        context = RequestContext(district="Mandya", crop="Sugarcane", latitude=12.52, longitude=76.9)
        payload = build_prompt(TaskKind.DASHBOARD_INSIGHT, context)
        self.assertEqual(payload.system_instruction, ASSISTANT_SYSTEM_PROMPT.strip())
        self.assertIn("Mandya", payload.text)
        self.assertIn("Sugarcane", payload.text)
        self.assertIn("12.52", payload.text)
        self.assertIn(
            "DECISION|COLOR|REASON|YESTERDAY_PRICE|TODAY_PRICE|TOMORROW_LOW|TOMORROW_HIGH"
            "|TREND|CONFIDENCE|WEATHER_IMPACT|NEWS_HEADLINE",
            payload.text,
        )
        self.assertTrue(payload.use_search)
        self.assertLessEqual(payload.temperature, 0.2)

    def test_chat_is_more_creative_than_structured_tasks(self) -> None:
        chat = build_prompt(TaskKind.CHAT, RequestContext(), {"message": "hello"})
        weather = build_prompt(TaskKind.WEATHER, RequestContext())
        self.assertGreater(chat.temperature, weather.temperature)
        self.assertFalse(chat.use_search)

    def test_missing_coordinates_use_fallback(self) -> None:
        payload = build_prompt(TaskKind.WEATHER, RequestContext(district="Kolar"))
        self.assertIn("12.97", payload.text)
        self.assertIn("77.59", payload.text)

    def test_missing_parameters_do_not_fail(self) -> None:
        payload = build_prompt(TaskKind.MARKET_ADVISORY, RequestContext())
        self.assertIn(NOT_SPECIFIED, payload.text)

    def test_language_instruction(self) -> None:
        hindi = build_prompt(TaskKind.CHAT, RequestContext(language=Language.HINDI), {"message": "?"})
        kannada = build_prompt(
            TaskKind.CHAT, RequestContext(language=Language.KANNADA), {"message": "?"}
        )
        self.assertIn("Hindi (Devanagari script)", hindi.text)
        self.assertIn("Kannada", kannada.text)

    def test_structured_prompts_keep_keywords_in_english(self) -> None:
        payload = build_prompt(
            TaskKind.MANDI_PRICES, RequestContext(language=Language.KANNADA), {"limit": 5}
        )
        self.assertIn("keywords", payload.text)
        self.assertIn("up to 5 entries", payload.text)

    def test_chat_carries_message_and_context(self) -> None:
        context = RequestContext(district="Hassan", crop="Potato")
        payload = build_prompt(TaskKind.CHAT, context, {"message": "  Leaves are yellow  "})
        self.assertIn("Leaves are yellow", payload.text)
        self.assertIn("district: Hassan", payload.text)
        self.assertIn("crop: Potato", payload.text)

    def test_diagnosis_includes_inline_image_first(self) -> None:
        image = CropImage(data="aGVsbG8=", mime_type="image/png")
        payload = build_prompt(
            TaskKind.CROP_DIAGNOSIS, RequestContext(crop="Tomato"), image=image
        )
        self.assertEqual(len(payload.parts), 2)
        self.assertEqual(payload.parts[0].inline_data.mime_type, "image/png")
        self.assertEqual(payload.parts[0].inline_data.data, "aGVsbG8=")
        self.assertIn("Tomato plant", payload.parts[1].text)

    def test_scheme_profile_fields(self) -> None:
        payload = build_prompt(
            TaskKind.SCHEME_RECOMMENDATION,
            RequestContext(district="Tumakuru"),
            {"state": "Karnataka", "land_acres": 2.5, "crop": "Ragi", "district": None},
        )
        self.assertIn("Land holding: 2.5 acres", payload.text)
        self.assertIn("District: Tumakuru", payload.text)
        self.assertIn("Raitha Siri", payload.text)


if __name__ == "__main__":
    unittest.main()
