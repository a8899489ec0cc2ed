from dataclasses import dataclass
from typing import Any, Optional

from langchain_core.prompts import PromptTemplate

from app.core.i18n import LANGUAGE_NAMES, language_instruction
from app.models.common import CropImage, Language, RequestContext, TaskKind
from app.models.prompt import InlineData, PromptPart, PromptPayload
from app.prompts.assistant_system_prompt import ASSISTANT_SYSTEM_PROMPT
from app.prompts.crop_diagnosis_prompt import CROP_DIAGNOSIS_PROMPT
from app.prompts.dashboard_insight_prompt import DASHBOARD_INSIGHT_PROMPT
from app.prompts.mandi_prices_prompt import MANDI_PRICES_PROMPT
from app.prompts.market_advisory_prompt import MARKET_ADVISORY_PROMPT
from app.prompts.scheme_recommendation_prompt import SCHEME_RECOMMENDATION_PROMPT
from app.prompts.weather_snapshot_prompt import WEATHER_SNAPSHOT_PROMPT

NOT_SPECIFIED = "not specified"


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float
    max_output_tokens: int
    use_search: bool = False


# Structured tasks run cold; open chat is allowed more freedom.
GENERATION_CONFIGS: dict[TaskKind, GenerationConfig] = {
    TaskKind.CHAT: GenerationConfig(temperature=0.7, max_output_tokens=500),
    TaskKind.CROP_DIAGNOSIS: GenerationConfig(temperature=0.4, max_output_tokens=500),
    TaskKind.DASHBOARD_INSIGHT: GenerationConfig(
        temperature=0.2, max_output_tokens=400, use_search=True
    ),
    TaskKind.MANDI_PRICES: GenerationConfig(
        temperature=0.2, max_output_tokens=600, use_search=True
    ),
    TaskKind.WEATHER: GenerationConfig(
        temperature=0.2, max_output_tokens=300, use_search=True
    ),
    TaskKind.SCHEME_RECOMMENDATION: GenerationConfig(
        temperature=0.4, max_output_tokens=600
    ),
    TaskKind.MARKET_ADVISORY: GenerationConfig(
        temperature=0.4, max_output_tokens=500, use_search=True
    ),
}

TASK_TEMPLATES: dict[TaskKind, str] = {
    TaskKind.CROP_DIAGNOSIS: CROP_DIAGNOSIS_PROMPT,
    TaskKind.DASHBOARD_INSIGHT: DASHBOARD_INSIGHT_PROMPT,
    TaskKind.MANDI_PRICES: MANDI_PRICES_PROMPT,
    TaskKind.WEATHER: WEATHER_SNAPSHOT_PROMPT,
    TaskKind.SCHEME_RECOMMENDATION: SCHEME_RECOMMENDATION_PROMPT,
    TaskKind.MARKET_ADVISORY: MARKET_ADVISORY_PROMPT,
}

STRUCTURED_TASKS = {
    TaskKind.DASHBOARD_INSIGHT,
    TaskKind.MANDI_PRICES,
    TaskKind.WEATHER,
}


def _structured_language_instruction(language: Language) -> str:
    if language == Language.ENGLISH:
        return "Write the sentences in simple English."
    return (
        f"Write the sentences in {LANGUAGE_NAMES[language]}, but keep numbers and "
        "the fixed keywords (colors, trends, confidence, volumes, decisions) in English."
    )


def _context_values(context: RequestContext) -> dict[str, Any]:
    latitude, longitude = context.coordinates()
    return {
        "district": context.district or NOT_SPECIFIED,
        "crop": context.crop or NOT_SPECIFIED,
        "latitude": f"{latitude:.2f}",
        "longitude": f"{longitude:.2f}",
    }


def _render(template: str, values: dict[str, Any]) -> str:
    prompt = PromptTemplate.from_template(template.strip())
    filled = {
        name: NOT_SPECIFIED if values.get(name) is None else values[name]
        for name in prompt.input_variables
    }
    return prompt.format(**filled)


def _chat_text(message: str, context: RequestContext) -> str:
    details = []
    if context.district:
        details.append(f"district: {context.district}")
    if context.crop:
        details.append(f"crop: {context.crop}")
    if details:
        return f"(Farmer context - {', '.join(details)})\n{message}"
    return message


def build_prompt(
    task: TaskKind,
    context: RequestContext,
    params: Optional[dict[str, Any]] = None,
    image: Optional[CropImage] = None,
) -> PromptPayload:
    """
    Compose the full instruction payload for one model call.

    Args:
        task: Which request kind the payload is for.
        context: Language, district, crop and coordinates of the farmer.
        params: Task specific values, e.g. ``message`` for chat or the scheme profile
            fields for scheme recommendation. Missing values render as "not specified".
        image: Crop photo, only used for crop diagnosis.

    Returns:
        A PromptPayload with the persona system instruction, ordered content parts and
        the generation settings tuned for the task.
    """
    params = params or {}
    config = GENERATION_CONFIGS[task]

    if task in STRUCTURED_TASKS:
        language_line = _structured_language_instruction(context.language)
    else:
        language_line = language_instruction(context.language)

    if task == TaskKind.CHAT:
        body = _chat_text(str(params.get("message", "")).strip(), context)
    else:
        values = _context_values(context)
        values.update({k: v for k, v in params.items() if v is not None})
        if task == TaskKind.CROP_DIAGNOSIS:
            values["crop_hint"] = f" of a {context.crop} plant" if context.crop else ""
        if task == TaskKind.MANDI_PRICES:
            values.setdefault("limit", 8)
        body = _render(TASK_TEMPLATES[task], values)

    parts = []
    if image is not None and task == TaskKind.CROP_DIAGNOSIS:
        parts.append(
            PromptPart(inline_data=InlineData(data=image.data, mime_type=image.mime_type))
        )
    parts.append(PromptPart(text=f"{language_line} {body}"))

    return PromptPayload(
        task=task,
        system_instruction=ASSISTANT_SYSTEM_PROMPT.strip(),
        parts=parts,
        temperature=config.temperature,
        max_output_tokens=config.max_output_tokens,
        use_search=config.use_search,
    )
