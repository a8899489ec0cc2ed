import logging

import httpx
from google.api_core import exceptions as api_core_exceptions
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from app.core.errors import ModelError, TransportError
from app.core.genai_client import get_chat_model
from app.models.prompt import PromptPayload

logger = logging.getLogger(__name__)

_TRANSPORT_EXCEPTIONS = (
    httpx.TransportError,
    api_core_exceptions.ServiceUnavailable,
    api_core_exceptions.DeadlineExceeded,
    api_core_exceptions.RetryError,
    ConnectionError,
    TimeoutError,
)


def _is_transport_failure(exc: BaseException) -> bool:
    seen = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, _TRANSPORT_EXCEPTIONS):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


def _extract_ai_text(message: AIMessage) -> str:
    if isinstance(message.content, str):
        return message.content.strip()

    if isinstance(message.content, list):
        text_values = []
        for block in message.content:
            if isinstance(block, str):
                text_values.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                text_values.append(block.get("text") or "")
        return "\n".join([text for text in text_values if text]).strip()

    return ""


def build_messages(payload: PromptPayload) -> list:
    content = []
    for part in payload.parts:
        if part.inline_data is not None:
            content.append(
                {
                    "type": "image_url",
                    "image_url": {
                        "url": f"data:{part.inline_data.mime_type};base64,{part.inline_data.data}"
                    },
                }
            )
        elif part.text:
            content.append({"type": "text", "text": part.text})
    return [
        SystemMessage(content=payload.system_instruction),
        HumanMessage(content=content),
    ]


async def generate_text(payload: PromptPayload) -> str:
    """
    Send one prompt payload to the hosted model and return its reply text.

    Raises:
        TransportError: the endpoint could not be reached.
        ModelError: the endpoint rejected the call or returned an empty reply.
    """
    try:
        model = get_chat_model(
            temperature=payload.temperature,
            max_output_tokens=payload.max_output_tokens,
        )
        if payload.use_search:
            model = model.bind_tools([{"google_search": {}}])
        response = await model.ainvoke(build_messages(payload))
    except Exception as e:
        if _is_transport_failure(e):
            logger.warning("Model endpoint unreachable for task=%s: %s", payload.task.value, e)
            raise TransportError(str(e)) from e
        logger.warning("Model call failed for task=%s: %s", payload.task.value, e)
        raise ModelError(str(e)) from e

    text = _extract_ai_text(response) if isinstance(response, AIMessage) else ""
    if not text:
        logger.warning("Model returned an empty reply for task=%s", payload.task.value)
        raise ModelError("Empty response from model")
    return text
