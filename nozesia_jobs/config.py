"""Configuration for the NozesIA job queue."""

import os
from typing import Optional

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_HISTORY_SIZE = 100
DEFAULT_RECENT_JOBS_LIMIT = 10
DEFAULT_BACKOFF_BASE_SECONDS = 2


def _int_from_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"Invalid integer in {name}: {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


class JobQueueConfig:
    """Configuration object for a job queue instance."""

    def __init__(
        self,
        default_max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        history_size: int = DEFAULT_HISTORY_SIZE,
        recent_jobs_limit: int = DEFAULT_RECENT_JOBS_LIMIT,
        backoff_base_seconds: int = DEFAULT_BACKOFF_BASE_SECONDS,
        admin_token: Optional[str] = None,
    ):
        if default_max_attempts < 1:
            raise ValueError("default_max_attempts must be >= 1")
        if history_size < 1:
            raise ValueError("history_size must be >= 1")
        self.default_max_attempts = default_max_attempts
        self.history_size = history_size
        self.recent_jobs_limit = recent_jobs_limit
        self.backoff_base_seconds = backoff_base_seconds
        self.admin_token = admin_token

    @classmethod
    def from_env(cls) -> "JobQueueConfig":
        """Create config from environment variables."""
        default_max_attempts = _int_from_env(
            "NOZESIA_JOBS_DEFAULT_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS, minimum=1
        )
        history_size = _int_from_env(
            "NOZESIA_JOBS_HISTORY_SIZE", DEFAULT_HISTORY_SIZE, minimum=1
        )
        recent_jobs_limit = _int_from_env(
            "NOZESIA_JOBS_RECENT_JOBS_LIMIT", DEFAULT_RECENT_JOBS_LIMIT, minimum=0
        )
        backoff_base_seconds = _int_from_env(
            "NOZESIA_JOBS_BACKOFF_BASE_SECONDS",
            DEFAULT_BACKOFF_BASE_SECONDS,
            minimum=0,
        )
        admin_token = os.getenv("NOZESIA_JOBS_ADMIN_TOKEN") or None

        return cls(
            default_max_attempts=default_max_attempts,
            history_size=history_size,
            recent_jobs_limit=recent_jobs_limit,
            backoff_base_seconds=backoff_base_seconds,
            admin_token=admin_token,
        )

    def backoff_seconds(self, attempt: int) -> int:
        """Delay before the next retry after the given (1-indexed) attempt."""
        return self.backoff_base_seconds**attempt
