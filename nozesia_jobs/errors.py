"""Exception types for the NozesIA job queue."""


class JobQueueError(Exception):
    """Base exception for all job queue errors."""

    pass


class UnknownJobTypeError(JobQueueError, ValueError):
    """Raised when a job is enqueued with a type outside the known set."""

    def __init__(self, job_type: str, message: str = None):
        self.job_type = job_type
        if message is None:
            message = f"Unknown job type: {job_type}"
        super().__init__(message)


class NoHandlerError(JobQueueError):
    """Raised when a job is dispatched and no handler is registered for its type."""

    def __init__(self, job_type: str, message: str = None):
        self.job_type = job_type
        if message is None:
            message = f"No handler for type: {job_type}"
        super().__init__(message)
