"""Default job handlers."""

import logging
from typing import Optional, Union

from nozesia_jobs.handlers.messaging import process_message, send_ai_response
from nozesia_jobs.handlers.notifications import send_notification, sync_whatsapp
from nozesia_jobs.models import JobType
from nozesia_jobs.queue import JobQueue
from nozesia_jobs.registry import JobRegistry, job_registry

logger = logging.getLogger(__name__)

DEFAULT_HANDLERS = {
    JobType.PROCESS_MESSAGE: process_message,
    JobType.SEND_AI_RESPONSE: send_ai_response,
    JobType.SYNC_WHATSAPP: sync_whatsapp,
    JobType.SEND_NOTIFICATION: send_notification,
}


def initialize_default_handlers(
    target: Optional[Union[JobQueue, JobRegistry]] = None,
) -> None:
    """
    Register a handler for every job type. Call once at startup.

    Args:
        target: JobQueue or JobRegistry to wire. If None, uses the global
            job_registry.
    """
    if target is None:
        target = job_registry

    for job_type, handler in DEFAULT_HANDLERS.items():
        if isinstance(target, JobQueue):
            target.register_handler(job_type, handler)
        else:
            target.register(job_type, handler)

    logger.info("Default job handlers initialized")


__all__ = [
    "DEFAULT_HANDLERS",
    "initialize_default_handlers",
    "process_message",
    "send_ai_response",
    "send_notification",
    "sync_whatsapp",
]
