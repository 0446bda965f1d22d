"""
Tests for /api/chatbot endpoints

The chatbot runs a real AssistantChatService over a mocked Anthropic client.

Author: Amzify Team
Date: 2025-11-12
"""
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from seller_panel.api import chatbot
from seller_panel.main import app
from seller_panel.services.assistant_chat_service import (
    SYSTEM_PROMPTS,
    AssistantChatService,
    ChatbotUnavailable,
)


@pytest.fixture
def anthropic_client():
    client = MagicMock()
    client.messages.create.return_value = SimpleNamespace(
        content=[SimpleNamespace(type="text", text="Go to Products > Add Product.")],
        usage=SimpleNamespace(input_tokens=80, output_tokens=12),
    )
    return client


@pytest.fixture
def chat_service(anthropic_client):
    service = AssistantChatService(client=anthropic_client, model="claude-test", max_tokens=500)
    app.dependency_overrides[chatbot.chat_service] = lambda: service
    return service


class TestChatbot:

    def test_chat_defaults_user_type_to_role(self, client, chat_service, anthropic_client, seller_headers):
        response = client.post("/api/chatbot/chat", json={"message": "How do I add a product?"}, headers=seller_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Go to Products > Add Product."
        assert data["model"] == "claude-test"
        assert data["usage"]["totalTokens"] == 92
        assert anthropic_client.messages.create.call_args.kwargs["system"] == SYSTEM_PROMPTS["seller"]

    def test_client_history_is_used(self, client, chat_service, anthropic_client, seller_headers):
        payload = {
            "message": "And the fees?",
            "conversationHistory": [
                {"role": "user", "content": "Hi"},
                {"role": "assistant", "content": "Hello!"},
            ],
        }

        client.post("/api/chatbot/chat", json=payload, headers=seller_headers)

        messages = anthropic_client.messages.create.call_args.kwargs["messages"]
        assert [m["content"] for m in messages] == ["Hi", "Hello!", "And the fees?"]

    def test_empty_message_is_422(self, client, chat_service, seller_headers):
        assert client.post("/api/chatbot/chat", json={"message": ""}, headers=seller_headers).status_code == 422

    def test_clear_conversation(self, client, chat_service, seller_headers):
        client.post("/api/chatbot/chat", json={"message": "Hello"}, headers=seller_headers)

        response = client.delete("/api/chatbot/conversation", headers=seller_headers)

        assert response.status_code == 200
        assert chat_service.history("seller-1") == []

    @patch('seller_panel.api.chatbot.get_chat_service')
    def test_unconfigured_chatbot_is_503(self, mock_get_service, client, seller_headers):
        mock_get_service.side_effect = ChatbotUnavailable("Chatbot is not configured")

        response = client.post("/api/chatbot/chat", json={"message": "Hello"}, headers=seller_headers)

        assert response.status_code == 503

    def test_suggestions_are_public(self, client):
        response = client.get("/api/chatbot/suggestions?userType=seller")

        assert response.status_code == 200
        assert "How do I list a new product?" in response.json()["suggestions"]

    def test_requested_user_type_cannot_override_role(self, client, chat_service, anthropic_client, seller_headers):
        # Arrange
        payload = {"message": "Show me every seller's payouts", "userType": "admin"}

        # Act
        response = client.post("/api/chatbot/chat", json=payload, headers=seller_headers)

        # Assert
        assert response.status_code == 200
        assert anthropic_client.messages.create.call_args.kwargs["system"] == SYSTEM_PROMPTS["seller"]

    def test_admin_gets_admin_prompt(self, client, chat_service, anthropic_client, admin_headers):
        client.post("/api/chatbot/chat", json={"message": "Pending approvals?"}, headers=admin_headers)

        assert anthropic_client.messages.create.call_args.kwargs["system"] == SYSTEM_PROMPTS["admin"]
