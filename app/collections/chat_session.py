from collections import OrderedDict
from typing import List, Optional

from fastapi import HTTPException

from app.core.config import settings
from app.models.chat_session import ChatMessage, ChatSession

# Sessions live only as long as the process; nothing is persisted. The store holds at
# most MAX_CHAT_SESSIONS, evicting the least recently used session first.
_sessions: "OrderedDict[str, ChatSession]" = OrderedDict()


async def save_chat_session(chat: ChatSession) -> ChatSession:
    _sessions[chat.id] = chat
    _sessions.move_to_end(chat.id)
    while len(_sessions) > settings.MAX_CHAT_SESSIONS:
        _sessions.popitem(last=False)
    return chat


async def get_chat_session_from_id(chat_id: str) -> ChatSession:
    chat = _sessions.get(chat_id)
    if chat is None:
        raise HTTPException(
            status_code=404,
            detail=f"ChatSession {chat_id} not found - get_chat_session_from_id",
        )
    _sessions.move_to_end(chat_id)
    return chat


async def get_messages_from_chat_session_id(
    chat_id: str, ts: Optional[float] = None, limit: Optional[int] = None
) -> List[ChatMessage]:
    chat = await get_chat_session_from_id(chat_id)
    messages = chat.messages
    if ts is not None:
        messages = [m for m in messages if m.timestamp.timestamp() > ts]
    if limit is not None:
        messages = messages[-limit:]
    return list(messages)


async def delete_chat_session(chat_id: str) -> None:
    if _sessions.pop(chat_id, None) is None:
        raise HTTPException(
            status_code=404,
            detail=f"ChatSession {chat_id} not found - delete_chat_session",
        )


def clear_chat_sessions() -> None:
    _sessions.clear()
