"""Default notification and WhatsApp sync handlers."""

import logging

from nozesia_jobs.handlers.messaging import payload_field

logger = logging.getLogger(__name__)


async def send_notification(payload):
    """Default handler for notifications; logs the target company and title."""
    company_id = payload_field(payload, "company_id")
    title = payload_field(payload, "title")

    logger.debug(f"Notification job: company_id={company_id}, title={title}")


async def sync_whatsapp(payload):
    """Default handler for WhatsApp session status sync."""
    logger.debug(
        f"WhatsApp sync job for session {payload_field(payload, 'session_name')}"
    )
