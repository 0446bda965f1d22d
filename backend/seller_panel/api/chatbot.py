"""
Chatbot API Endpoints

Endpoints:
- POST /chatbot/chat - Answer a message with Claude
- GET /chatbot/suggestions - Suggested questions for a user type
- DELETE /chatbot/conversation - Forget the caller's conversation

Author: Amzify Team
Date: 2025-11-10
"""
import logging
from datetime import datetime, timezone
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import Field

from seller_panel.core.auth import TokenUser, get_current_user
from seller_panel.domain.seller import CamelModel
from seller_panel.services.assistant_chat_service import (
    AssistantChatService,
    ChatbotUnavailable,
    get_chat_service,
    get_suggestions,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class ChatMessage(CamelModel):
    """A single message in the conversation history"""
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=2000)
    conversation_history: Optional[List[ChatMessage]] = None
    user_type: Optional[str] = None


def chat_service() -> AssistantChatService:
    try:
        return get_chat_service()
    except ChatbotUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/chat")
async def chat(
    request: ChatRequest,
    user: TokenUser = Depends(get_current_user),
    service: AssistantChatService = Depends(chat_service)
):
    """
    Answer a message with the system prompt for the caller's role.

    A userType that differs from the role is ignored.

    When conversationHistory is sent it replaces the stored history.
    """
    try:
        history = (
            [m.model_dump() for m in request.conversation_history]
            if request.conversation_history is not None else None
        )
        reply = service.chat(user.id, request.message, user.role, history)

        return {
            "success": True,
            "message": reply.message,
            "model": reply.model,
            "usage": reply.usage(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    except Exception as e:
        logger.error(f"Chat error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error processing chat: {str(e)}")


@router.get("/suggestions")
async def suggestions(user_type: Optional[str] = Query(None, alias="userType")):
    return {"success": True, "suggestions": get_suggestions(user_type)}


@router.delete("/conversation")
async def clear_conversation(
    user: TokenUser = Depends(get_current_user),
    service: AssistantChatService = Depends(chat_service)
):
    service.clear(user.id)
    return {"success": True, "message": "Conversation cleared"}
