"""
Assistant Chat Service

Support chatbot for customers, sellers and admins, backed by Claude
(Anthropic). Each user type gets its own system prompt and suggested
questions. Conversation history is kept per user in process memory and
trimmed before every call to keep the context small.

Author: Amzify Team
Date: 2025-11-10
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import anthropic

from seller_panel.core.config import settings

logger = logging.getLogger(__name__)

USER_TYPES = ("customer", "seller", "admin")
DEFAULT_USER_TYPE = "customer"

# Approximate token limit for the history sent with each message
MAX_HISTORY_TOKENS = 4000

SYSTEM_PROMPTS = {
    "customer": """You are a helpful customer support assistant for Amzify, an e-commerce marketplace.
You help customers with:
- Product inquiries and recommendations
- Order tracking and status
- Account management questions
- Payment and shipping information
- Returns and refunds policy
- General shopping assistance

Be friendly, concise, and helpful. If you don't know something, suggest contacting customer support.""",

    "seller": """You are a helpful assistant for Amzify sellers.
You help with:
- Product listing guidelines
- Inventory management
- Order fulfillment process
- Pricing strategies
- Seller policies and fees
- Performance metrics
- Marketing tips

Be professional and provide actionable advice for growing their business on Amzify.""",

    "admin": """You are an administrative assistant for Amzify platform admins.
You help with:
- Platform analytics and metrics
- User management
- Seller applications review
- System health monitoring
- Policy enforcement
- Technical troubleshooting

Provide clear, technical information to help admins manage the platform effectively.""",
}

SUGGESTED_QUESTIONS = {
    "customer": [
        "How do I track my order?",
        "What's your return policy?",
        "How can I contact customer support?",
        "Do you offer international shipping?",
        "How do I apply a discount code?",
    ],
    "seller": [
        "How do I list a new product?",
        "What are the seller fees?",
        "How do I manage my inventory?",
        "What's the order fulfillment process?",
        "How can I improve my seller rating?",
    ],
    "admin": [
        "How do I review seller applications?",
        "What are the key platform metrics?",
        "How do I manage user accounts?",
        "What's the process for handling disputes?",
        "How do I monitor system health?",
    ],
}

FALLBACK_REPLY = "I couldn't generate a response. Please try rephrasing your question."


class ChatbotUnavailable(RuntimeError):
    """No Claude API key configured"""


def resolve_user_type(user_type: Optional[str]) -> str:
    return user_type if user_type in USER_TYPES else DEFAULT_USER_TYPE


def get_system_prompt(user_type: Optional[str]) -> str:
    return SYSTEM_PROMPTS[resolve_user_type(user_type)]


def get_suggestions(user_type: Optional[str]) -> List[str]:
    return list(SUGGESTED_QUESTIONS[resolve_user_type(user_type)])


def estimate_tokens(text: str) -> int:
    """Rough token estimation: ~4 chars per token."""
    return len(text) // 4


def limit_history(
    history: List[Dict[str, str]],
    max_messages: Optional[int] = None,
    max_tokens: int = MAX_HISTORY_TOKENS
) -> Tuple[List[Dict[str, str]], int]:
    """
    Keep the most recent messages within a message count and token budget.

    At least two messages survive the token trim.

    Returns:
        Tuple of (limited_history, estimated_tokens)
    """
    if not history:
        return [], 0

    max_messages = max_messages or settings.MAX_HISTORY_MESSAGES
    limited = history[-max_messages:]

    total_tokens = sum(estimate_tokens(msg.get("content", "")) for msg in limited)
    while total_tokens > max_tokens and len(limited) > 2:
        removed = limited.pop(0)
        total_tokens -= estimate_tokens(removed.get("content", ""))

    if len(limited) < len(history):
        logger.info(f"History trimmed: {len(history)} -> {len(limited)} messages (~{total_tokens} tokens)")

    return limited, total_tokens


@dataclass
class ChatReply:
    message: str
    model: str
    input_tokens: int
    output_tokens: int

    def usage(self) -> Dict[str, int]:
        return {
            "promptTokens": self.input_tokens,
            "completionTokens": self.output_tokens,
            "totalTokens": self.input_tokens + self.output_tokens,
        }


class AssistantChatService:
    """
    Claude-backed chatbot with per-user conversation memory.

    Args:
        client: Anthropic client; built from CLAUDE_API_KEY when omitted
    """

    def __init__(self, client=None, model: Optional[str] = None, max_tokens: Optional[int] = None):
        if client is None:
            if not settings.CLAUDE_API_KEY:
                raise ChatbotUnavailable("Chatbot is not configured")
            client = anthropic.Anthropic(api_key=settings.CLAUDE_API_KEY)

        self.client = client
        self.model = model or settings.CLAUDE_MODEL
        self.max_tokens = max_tokens or settings.CLAUDE_MAX_TOKENS
        self._conversations: Dict[str, List[Dict[str, str]]] = defaultdict(list)
        logger.info(f"AssistantChatService initialized with model: {self.model}")

    def history(self, user_id: str) -> List[Dict[str, str]]:
        return list(self._conversations.get(user_id, []))

    def clear(self, user_id: str) -> None:
        self._conversations.pop(user_id, None)

    def chat(
        self,
        user_id: str,
        message: str,
        user_type: Optional[str] = None,
        history: Optional[List[Dict[str, str]]] = None
    ) -> ChatReply:
        """
        Answer a message.

        Args:
            history: History sent by the caller; replaces the stored one when given
        """
        if history is not None:
            self._conversations[user_id] = list(history)

        limited, history_tokens = limit_history(self._conversations[user_id])
        messages = [{"role": m["role"], "content": m["content"]} for m in limited]
        messages.append({"role": "user", "content": message})

        logger.info(f"Chat for {user_id}: {len(messages)} messages, ~{history_tokens + estimate_tokens(message)} tokens")

        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=get_system_prompt(user_type),
            messages=messages,
        )

        text = next((block.text for block in response.content if getattr(block, "type", None) == "text"), None)
        text = text or FALLBACK_REPLY

        stored = self._conversations[user_id] + [
            {"role": "user", "content": message},
            {"role": "assistant", "content": text},
        ]
        self._conversations[user_id] = stored[-settings.MAX_HISTORY_MESSAGES:]

        return ChatReply(
            message=text,
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )


_service_instance: Optional[AssistantChatService] = None


def get_chat_service() -> AssistantChatService:
    """
    Get the singleton chat service instance.

    Raises:
        ChatbotUnavailable: CLAUDE_API_KEY is not set
    """
    global _service_instance
    if _service_instance is None:
        _service_instance = AssistantChatService()
    return _service_instance
