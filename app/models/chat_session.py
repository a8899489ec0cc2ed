from datetime import datetime
from enum import Enum
from typing import List
from uuid import uuid4

from pydantic import BaseModel, Field

from .common import Language


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    role: Role
    text: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ChatSession(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    language: Language = Language.ENGLISH
    messages: List[ChatMessage] = Field(default_factory=list)

    def append(self, role: Role, text: str) -> ChatMessage:
        message = ChatMessage(role=role, text=text)
        self.messages.append(message)
        return message
