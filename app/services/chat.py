from app.core.i18n import t
from app.models.chat_session import ChatMessage, ChatSession, Role
from app.models.common import Language, RequestContext
from app.services.insight_service import chat_reply


def start_chat_session(language: Language) -> ChatSession:
    """New conversation opened with the assistant greeting in the active language."""
    chat = ChatSession(language=language)
    chat.append(Role.ASSISTANT, t("chat_greeting", language))
    return chat


async def send_chat_message(
    chat: ChatSession, text: str, context: RequestContext
) -> tuple[ChatMessage, ChatMessage] | None:
    """
    Append the user's message and the assistant's reply to the session.

    Blank input is ignored and returns None. The reply is the connectivity-error
    string when the model cannot be reached; this never raises.
    """
    text = text.strip()
    if not text:
        return None
    user_message = chat.append(Role.USER, text)
    reply = await chat_reply(text, context)
    model_message = chat.append(Role.ASSISTANT, reply)
    return user_message, model_message
