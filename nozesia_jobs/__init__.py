"""In-process job queue for the NozesIA WhatsApp back office."""

from nozesia_jobs.config import JobQueueConfig
from nozesia_jobs.errors import JobQueueError, NoHandlerError, UnknownJobTypeError
from nozesia_jobs.fastapi_router import create_queue_router
from nozesia_jobs.handlers import initialize_default_handlers
from nozesia_jobs.models import (
    Job,
    JobStatus,
    JobType,
    ProcessMessageData,
    QueueStats,
    SendAIResponseData,
)
from nozesia_jobs.queue import JobQueue
from nozesia_jobs.registry import JobRegistry, job_registry

__version__ = "0.1.0"

__all__ = [
    "JobQueueConfig",
    "JobQueueError",
    "NoHandlerError",
    "UnknownJobTypeError",
    "create_queue_router",
    "initialize_default_handlers",
    "Job",
    "JobStatus",
    "JobType",
    "ProcessMessageData",
    "QueueStats",
    "SendAIResponseData",
    "JobQueue",
    "JobRegistry",
    "job_registry",
]
