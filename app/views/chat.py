from typing import Optional

from app.models.chat_session import ChatMessage, ChatSession
from app.models.common import Language
from app.services.chat import send_chat_message, start_chat_session
from app.views.base import BaseView


class ChatView(BaseView):
    def __init__(self, language: Language = Language.ENGLISH, **kwargs) -> None:
        super().__init__(language, **kwargs)
        self.session: ChatSession = start_chat_session(language)

    @property
    def messages(self) -> list[ChatMessage]:
        return self.session.messages

    @property
    def placeholder(self) -> str:
        return self.labels["chat_placeholder"]

    async def send(self, text: str) -> Optional[ChatMessage]:
        """Send one message; returns the assistant reply, or None for blank input."""
        if not text.strip() or self.loading:
            return None
        self.loading = True
        try:
            exchange = await send_chat_message(self.session, text, self.context)
        finally:
            self.loading = False
        return exchange[1] if exchange else None
