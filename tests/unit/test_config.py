"""Unit tests for config module."""

import os
from unittest.mock import patch

import pytest

from nozesia_jobs.config import JobQueueConfig


def test_defaults():
    """Test default configuration values."""
    config = JobQueueConfig()
    assert config.default_max_attempts == 3
    assert config.history_size == 100
    assert config.recent_jobs_limit == 10
    assert config.backoff_base_seconds == 2
    assert config.admin_token is None


def test_backoff_seconds():
    """Test exponential backoff in whole seconds."""
    config = JobQueueConfig()
    assert config.backoff_seconds(1) == 2
    assert config.backoff_seconds(2) == 4
    assert config.backoff_seconds(3) == 8


def test_invalid_constructor_values():
    """Test that nonsensical limits are rejected."""
    with pytest.raises(ValueError, match="default_max_attempts"):
        JobQueueConfig(default_max_attempts=0)
    with pytest.raises(ValueError, match="history_size"):
        JobQueueConfig(history_size=0)


def test_from_env_minimal():
    """Test loading configuration from an empty environment."""
    with patch.dict(os.environ, {}, clear=True):
        config = JobQueueConfig.from_env()
        assert config.default_max_attempts == 3
        assert config.history_size == 100
        assert config.admin_token is None


def test_from_env_overrides():
    """Test loading configuration from environment variables."""
    env = {
        "NOZESIA_JOBS_DEFAULT_MAX_ATTEMPTS": "5",
        "NOZESIA_JOBS_HISTORY_SIZE": "20",
        "NOZESIA_JOBS_RECENT_JOBS_LIMIT": "4",
        "NOZESIA_JOBS_BACKOFF_BASE_SECONDS": "3",
        "NOZESIA_JOBS_ADMIN_TOKEN": "secret-token-123",
    }
    with patch.dict(os.environ, env, clear=True):
        config = JobQueueConfig.from_env()
        assert config.default_max_attempts == 5
        assert config.history_size == 20
        assert config.recent_jobs_limit == 4
        assert config.backoff_base_seconds == 3
        assert config.admin_token == "secret-token-123"


def test_from_env_invalid_integer():
    """Test that a non-numeric value names the variable."""
    env = {"NOZESIA_JOBS_HISTORY_SIZE": "lots"}
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ValueError, match="NOZESIA_JOBS_HISTORY_SIZE"):
            JobQueueConfig.from_env()


def test_from_env_below_minimum():
    """Test that max attempts below one is rejected."""
    env = {"NOZESIA_JOBS_DEFAULT_MAX_ATTEMPTS": "0"}
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ValueError, match="NOZESIA_JOBS_DEFAULT_MAX_ATTEMPTS"):
            JobQueueConfig.from_env()
