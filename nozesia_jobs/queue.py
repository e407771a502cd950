"""In-process job queue with retry and exponential backoff."""

import asyncio
import logging
from collections import deque
from collections.abc import Awaitable, Callable
from typing import Any, Deque, Dict, Optional, Union

from nozesia_jobs.config import JobQueueConfig
from nozesia_jobs.errors import NoHandlerError, UnknownJobTypeError
from nozesia_jobs.models import (
    Job,
    JobStatus,
    JobType,
    ProcessMessageData,
    QueueStats,
    SendAIResponseData,
    generate_job_id,
    utcnow,
)
from nozesia_jobs.registry import JobHandler, JobRegistry

AI_RESPONSE_MAX_ATTEMPTS = 5


class JobQueue:
    """
    Single-process FIFO job queue.

    Jobs run one at a time in a cooperative loop started on demand by
    ``add_job``. A failing job goes back to the tail of the queue and the
    loop sleeps ``backoff_base ** attempts`` seconds before continuing, which
    holds up every job behind it. Terminal jobs are kept in a bounded
    history, newest first.

    State lives only in memory and is lost when the process exits.
    """

    def __init__(
        self,
        config: Optional[JobQueueConfig] = None,
        registry: Optional[JobRegistry] = None,
        logger: Optional[logging.Logger] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.config = config or JobQueueConfig()
        self.registry = registry if registry is not None else JobRegistry()
        self.logger = logger or logging.getLogger(__name__)
        self._sleep = sleep
        self._queue: Deque[Job] = deque()
        self._history: Deque[Job] = deque(maxlen=self.config.history_size)
        self._processing = False
        self._task: Optional[asyncio.Task] = None
        # recreated by _start on whichever loop is running
        self._idle: Optional[asyncio.Event] = None

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def is_processing(self) -> bool:
        return self._processing

    def register_handler(
        self, job_type: Union[JobType, str], handler: JobHandler
    ) -> None:
        """Register the handler for a job type, replacing any earlier one."""
        self.registry.register(job_type, handler)
        self.logger.info(
            f"Job handler registered for type {JobType(job_type).value}"
        )

    def add_job(
        self,
        job_type: Union[JobType, str],
        payload: Any,
        max_attempts: Optional[int] = None,
    ) -> Job:
        """
        Enqueue a job and return it without waiting for it to run.

        Must be called with a running event loop. Handler failures are never
        raised here; they show up on the job record and in the stats.

        Raises:
            UnknownJobTypeError: If ``job_type`` is not a known job type
            ValueError: If ``max_attempts`` is less than 1
        """
        try:
            job_type = JobType(job_type)
        except ValueError as e:
            raise UnknownJobTypeError(str(job_type)) from e

        if max_attempts is None:
            max_attempts = self.config.default_max_attempts
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

        loop = asyncio.get_running_loop()

        job = Job(
            id=generate_job_id(),
            type=job_type,
            payload=payload,
            max_attempts=max_attempts,
        )
        self._queue.append(job)
        self.logger.info(
            f"Job {job.id} added to queue (type={job_type.value}, "
            f"queue_size={len(self._queue)})"
        )

        if not self._processing:
            self._start(loop)

        return job

    def queue_message_processing(
        self, data: Union[ProcessMessageData, Dict[str, Any]]
    ) -> Job:
        """Enqueue an inbound message for processing."""
        return self.add_job(
            JobType.PROCESS_MESSAGE, ProcessMessageData.model_validate(data)
        )

    def queue_ai_response(self, data: Union[SendAIResponseData, Dict[str, Any]]) -> Job:
        """Enqueue an AI reply; these get more attempts than other jobs."""
        return self.add_job(
            JobType.SEND_AI_RESPONSE,
            SendAIResponseData.model_validate(data),
            max_attempts=AI_RESPONSE_MAX_ATTEMPTS,
        )

    async def join(self) -> None:
        """Wait until the queue is drained and the processing loop is idle."""
        while self._processing:
            await self._idle.wait()

    def get_queue_stats(self) -> QueueStats:
        """Return counts for the live queue and history plus recent jobs."""
        pending = sum(1 for j in self._queue if j.status == JobStatus.PENDING)
        processing = sum(1 for j in self._queue if j.status == JobStatus.PROCESSING)
        completed = sum(1 for j in self._history if j.status == JobStatus.COMPLETED)
        failed = sum(1 for j in self._history if j.status == JobStatus.FAILED)
        recent = list(self._history)[: self.config.recent_jobs_limit]

        return QueueStats(
            pending=pending,
            processing=processing,
            completed=completed,
            failed=failed,
            recent_jobs=recent,
        )

    def clear_completed_jobs(self) -> None:
        """Drop the completed/failed history. The live queue is untouched."""
        self._history.clear()
        self.logger.info("Completed jobs cleared")

    def _start(self, loop: asyncio.AbstractEventLoop) -> None:
        self._processing = True
        self._idle = asyncio.Event()
        self._task = loop.create_task(self._process_queue())
        self._task.add_done_callback(self._on_loop_done)

    def _on_loop_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            self.logger.warning("Job queue processing loop was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            self.logger.error("Job queue processing loop crashed", exc_info=exc)

    async def _process_queue(self) -> None:
        try:
            while self._queue:
                job = self._queue[0]

                job.status = JobStatus.PROCESSING
                job.attempts += 1

                handler = self.registry.get_handler(job.type)
                if handler is None:
                    error = NoHandlerError(job.type.value)
                    self.logger.error(f"Job {job.id} failed: {error}")
                    job.status = JobStatus.FAILED
                    job.error = str(error)
                    self._move_to_history(job)
                    continue

                self.logger.debug(
                    f"Processing job {job.id} (type={job.type.value}, "
                    f"attempt={job.attempts}/{job.max_attempts})"
                )

                try:
                    await handler(job.payload)
                except Exception as e:
                    message = str(e) or type(e).__name__
                    self.logger.error(
                        f"Job {job.id} failed (type={job.type.value}, "
                        f"attempt={job.attempts}): {message}",
                        exc_info=True,
                    )

                    if job.attempts >= job.max_attempts:
                        job.status = JobStatus.FAILED
                        job.error = message
                        self._move_to_history(job)
                        self.logger.error(
                            f"Job {job.id} marked as failed after "
                            f"{job.attempts} attempts"
                        )
                    else:
                        job.status = JobStatus.PENDING
                        self._queue.remove(job)
                        self._queue.append(job)

                        backoff_seconds = self.config.backoff_seconds(job.attempts)
                        self.logger.info(
                            f"Job {job.id} will retry (attempt {job.attempts}/"
                            f"{job.max_attempts}) after {backoff_seconds}s"
                        )
                        await self._sleep(backoff_seconds)
                else:
                    job.status = JobStatus.COMPLETED
                    job.processed_at = utcnow()
                    self._move_to_history(job)
                    self.logger.info(
                        f"Job {job.id} completed (type={job.type.value}, "
                        f"duration={job.duration_ms}ms)"
                    )
        finally:
            self._processing = False
            self._idle.set()

    def _move_to_history(self, job: Job) -> None:
        self._queue.remove(job)
        # deque maxlen evicts from the right, where the oldest entry sits
        self._history.appendleft(job)
