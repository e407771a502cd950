"""Unit tests for errors module."""

from nozesia_jobs.errors import JobQueueError, NoHandlerError, UnknownJobTypeError


def test_unknown_job_type_error():
    """Test UnknownJobTypeError message and hierarchy."""
    error = UnknownJobTypeError("SEND_SMS")
    assert error.job_type == "SEND_SMS"
    assert str(error) == "Unknown job type: SEND_SMS"
    assert isinstance(error, JobQueueError)
    assert isinstance(error, ValueError)


def test_no_handler_error():
    """Test NoHandlerError default message."""
    error = NoHandlerError("SYNC_WHATSAPP")
    assert error.job_type == "SYNC_WHATSAPP"
    assert str(error) == "No handler for type: SYNC_WHATSAPP"
    assert isinstance(error, JobQueueError)


def test_custom_message():
    """Test that a custom message overrides the default."""
    error = NoHandlerError("SYNC_WHATSAPP", "wiring missing")
    assert str(error) == "wiring missing"
