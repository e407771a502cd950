"""Job handler registry."""

from collections.abc import Awaitable, Callable
from typing import Any, Optional, Union

from nozesia_jobs.models import JobType

JobHandler = Callable[[Any], Awaitable[None]]


class JobRegistry:
    """Registry mapping each job type to a single async handler."""

    def __init__(self):
        self._handlers: dict[JobType, JobHandler] = {}

    def register(self, job_type: Union[JobType, str], handler: JobHandler) -> None:
        """Register ``handler`` for ``job_type``, replacing any earlier one."""
        job_type = JobType(job_type)
        self._handlers[job_type] = handler

    def handler(self, job_type: Union[JobType, str]):
        """
        Decorator to register a job handler.

        Usage:
            @registry.handler(JobType.SEND_NOTIFICATION)
            async def send_notification(payload):
                ...
        """

        def decorator(func: JobHandler):
            self.register(job_type, func)
            return func

        return decorator

    def get_handler(self, job_type: Union[JobType, str]) -> Optional[JobHandler]:
        """Get a handler by job type."""
        return self._handlers.get(JobType(job_type))

    def has_handler(self, job_type: Union[JobType, str]) -> bool:
        return JobType(job_type) in self._handlers

    def all_handlers(self) -> dict[JobType, JobHandler]:
        """Get all registered handlers."""
        return self._handlers.copy()


# Global registry instance
job_registry = JobRegistry()
