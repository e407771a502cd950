"""Unit tests for the default handlers."""

import logging

import pytest

from nozesia_jobs.handlers import initialize_default_handlers
from nozesia_jobs.handlers.messaging import payload_field, process_message
from nozesia_jobs.models import JobStatus, JobType, ProcessMessageData
from nozesia_jobs.queue import JobQueue
from nozesia_jobs.registry import JobRegistry


def test_initialize_default_handlers_covers_every_type():
    """Test that startup wiring registers all job types."""
    registry = JobRegistry()

    initialize_default_handlers(registry)

    for job_type in JobType:
        assert registry.has_handler(job_type)


def test_payload_field_reads_models_and_dicts():
    """Test payload access for both payload shapes."""
    model = ProcessMessageData(
        conversation_id="conv-1",
        company_id="company-1",
        message_content="Olá",
        message_type="TEXT",
        sender_phone="5511999999999",
        session_name="session-1",
    )

    assert payload_field(model, "conversation_id") == "conv-1"
    assert payload_field({"conversation_id": "conv-2"}, "conversation_id") == "conv-2"
    assert payload_field({}, "conversation_id") is None
    assert payload_field(model, "missing") is None


@pytest.mark.asyncio
async def test_process_message_logs_conversation(caplog):
    """Test that the default message handler logs and succeeds."""
    with caplog.at_level(logging.DEBUG, logger="nozesia_jobs.handlers.messaging"):
        await process_message({"conversation_id": "conv-9"})

    assert "conv-9" in caplog.text


@pytest.mark.asyncio
async def test_default_handlers_complete_every_job_type():
    """Test that a queue wired with defaults completes all job types."""
    registry = JobRegistry()
    initialize_default_handlers(registry)
    queue = JobQueue(registry=registry)

    jobs = [queue.add_job(job_type, {}) for job_type in JobType]
    await queue.join()

    assert all(job.status == JobStatus.COMPLETED for job in jobs)
    assert queue.get_queue_stats().completed == len(JobType)


@pytest.mark.asyncio
async def test_initialize_default_handlers_accepts_queue():
    """Test wiring the default handlers straight onto a JobQueue."""
    queue = JobQueue()

    initialize_default_handlers(queue)

    for job_type in JobType:
        assert queue.registry.has_handler(job_type)

    job = queue.add_job(JobType.SYNC_WHATSAPP, {"session_name": "loja-1"})
    await queue.join()

    assert job.status == JobStatus.COMPLETED


def test_queue_registration_logged_through_queue_logger(caplog):
    """Test that handler registration is logged on the queue's own logger."""
    queue = JobQueue(logger=logging.getLogger("nozesia.test.queue"))

    with caplog.at_level(logging.INFO, logger="nozesia.test.queue"):
        initialize_default_handlers(queue)

    records = [r for r in caplog.records if r.name == "nozesia.test.queue"]
    assert len(records) == len(JobType)
    assert "SEND_NOTIFICATION" in caplog.text
