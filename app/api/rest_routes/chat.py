from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from app.collections.chat_session import (
    delete_chat_session,
    get_chat_session_from_id,
    get_messages_from_chat_session_id,
    save_chat_session,
)
from app.models.chat_session import ChatMessage, ChatSession
from app.models.common import Language, RequestContext
from app.services.chat import send_chat_message, start_chat_session

router = APIRouter(prefix="/chats", tags=["Chat"])


class CreateChatRequest(BaseModel):
    language: Language = Language.ENGLISH


class SendMessageRequest(BaseModel):
    text: str = Field(..., max_length=2000)
    district: Optional[str] = None
    crop: Optional[str] = None


class SendMessageResponse(BaseModel):
    user_message: ChatMessage
    model_message: ChatMessage


@router.post("/", response_model=ChatSession, status_code=status.HTTP_201_CREATED)
async def create_chat_session(request: CreateChatRequest):
    """
    Creates a new in-memory chat session opened with the assistant greeting.
    """
    return await save_chat_session(start_chat_session(request.language))


@router.get("/{chat_id}", response_model=ChatSession)
async def get_chat_session(chat_id: str):
    return await get_chat_session_from_id(chat_id)


@router.get("/{chat_id}/messages", response_model=List[ChatMessage])
async def get_chat_messages(
    chat_id: str,
    timestamp: Optional[float] = Query(
        default=None,
        description="Filter messages sent after this timestamp (Unix seconds)",
    ),
    limit: Optional[int] = Query(
        default=None, description="Limit the number of messages returned", ge=1, le=100
    ),
):
    return await get_messages_from_chat_session_id(chat_id, ts=timestamp, limit=limit)


@router.post("/{chat_id}/messages", response_model=SendMessageResponse)
async def send_message(chat_id: str, request: SendMessageRequest):
    """
    Appends the farmer's message and the assistant's reply to the session.
    """
    chat = await get_chat_session_from_id(chat_id)
    context = RequestContext(
        language=chat.language, district=request.district, crop=request.crop
    )
    exchange = await send_chat_message(chat, request.text, context)
    if exchange is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message text is empty.",
        )
    user_message, model_message = exchange
    return SendMessageResponse(user_message=user_message, model_message=model_message)


@router.delete("/{chat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_chat_session(chat_id: str):
    """
    Deletes a chat session and all its messages.
    """
    await delete_chat_session(chat_id)
    return
