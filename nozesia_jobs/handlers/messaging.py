"""Default messaging handlers.

These only log. The WhatsApp webhook layer registers the real processing
logic over them at startup.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def payload_field(payload: Any, name: str) -> Any:
    """Read ``name`` from a pydantic payload or a plain dict."""
    if isinstance(payload, dict):
        return payload.get(name)
    return getattr(payload, name, None)


async def process_message(payload):
    """
    Default handler for inbound message processing.

    Args:
        payload: ProcessMessageData or dict
    """
    logger.debug(
        f"Processing message job for conversation "
        f"{payload_field(payload, 'conversation_id')}"
    )


async def send_ai_response(payload):
    """
    Default handler for AI response dispatch.

    Args:
        payload: SendAIResponseData or dict
    """
    logger.debug(
        f"AI response job for conversation {payload_field(payload, 'conversation_id')}"
    )
