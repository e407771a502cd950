"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_process_message_payload():
    """Sample inbound message payload for testing."""
    return {
        "conversationId": "conv-1",
        "companyId": "company-1",
        "messageContent": "Olá, qual o horário de funcionamento?",
        "messageType": "TEXT",
        "senderPhone": "5511999999999",
        "sessionName": "session-1",
    }


@pytest.fixture
def sample_ai_response_payload():
    """Sample AI response payload for testing."""
    return {
        "conversationId": "conv-1",
        "companyId": "company-1",
        "agentId": "agent-1",
        "customerMessage": "Olá",
        "sessionName": "session-1",
        "customerPhone": "5511999999999",
    }
