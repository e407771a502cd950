"""Data models for queued jobs."""

import json
import random
import string
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

_ID_ALPHABET = string.digits + string.ascii_lowercase


class JobType(str, Enum):
    """Kinds of deferred work the queue knows about."""

    PROCESS_MESSAGE = "PROCESS_MESSAGE"
    SEND_AI_RESPONSE = "SEND_AI_RESPONSE"
    SYNC_WHATSAPP = "SYNC_WHATSAPP"
    SEND_NOTIFICATION = "SEND_NOTIFICATION"


class JobStatus(str, Enum):
    """Job status values."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


def generate_job_id() -> str:
    """Return an id like ``job_1718000000000_k3j9x0a``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=7))
    return f"job_{int(time.time() * 1000)}_{suffix}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Job:
    """Represents a queued job.

    The queue owns every state transition; callers holding a reference
    only observe it.
    """

    def __init__(
        self,
        id: str,
        type: JobType,
        payload: Any,
        max_attempts: int,
        attempts: int = 0,
        status: JobStatus = JobStatus.PENDING,
        created_at: Optional[datetime] = None,
        processed_at: Optional[datetime] = None,
        error: Optional[str] = None,
    ):
        self.id = id
        self.type = JobType(type) if isinstance(type, str) else type
        self.payload = payload
        self.attempts = attempts
        self.max_attempts = max_attempts
        self.status = JobStatus(status) if isinstance(status, str) else status
        self.created_at = created_at or utcnow()
        self.processed_at = processed_at
        self.error = error

    @property
    def duration_ms(self) -> Optional[int]:
        """Milliseconds between enqueue and completion, if completed."""
        if self.processed_at is None:
            return None
        return int((self.processed_at - self.created_at).total_seconds() * 1000)

    @property
    def is_terminal(self) -> bool:
        return self.status in (JobStatus.COMPLETED, JobStatus.FAILED)

    def to_dict(self) -> Dict[str, Any]:
        """Convert job to dictionary for JSON serialization."""
        payload = self.payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", by_alias=True)
        else:
            # opaque payloads; values json can't encode fall back to str()
            payload = json.loads(json.dumps(payload, default=str))
        return {
            "id": self.id,
            "type": self.type.value,
            "payload": payload,
            "attempts": self.attempts,
            "max_attempts": self.max_attempts,
            "status": self.status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "processed_at": (
                self.processed_at.isoformat() if self.processed_at else None
            ),
            "error": self.error,
        }

    def __repr__(self) -> str:
        return (
            f"Job(id={self.id!r}, type={self.type.value}, "
            f"status={self.status.value}, attempts={self.attempts}/{self.max_attempts})"
        )


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=_to_camel, populate_by_name=True)


class ProcessMessageData(_Payload):
    """Payload for an inbound WhatsApp message awaiting processing."""

    conversation_id: str
    company_id: str
    message_content: str
    message_type: str
    sender_phone: str
    session_name: str


class SendAIResponseData(_Payload):
    """Payload for an AI reply to be generated and sent to a customer."""

    conversation_id: str
    company_id: str
    agent_id: str
    customer_message: str
    session_name: str
    customer_phone: str


class QueueStats:
    """Point-in-time snapshot of queue health."""

    def __init__(
        self,
        pending: int,
        processing: int,
        completed: int,
        failed: int,
        recent_jobs: List[Job],
    ):
        self.pending = pending
        self.processing = processing
        self.completed = completed
        self.failed = failed
        self.recent_jobs = recent_jobs

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pending": self.pending,
            "processing": self.processing,
            "completed": self.completed,
            "failed": self.failed,
            "recent_jobs": [job.to_dict() for job in self.recent_jobs],
        }
