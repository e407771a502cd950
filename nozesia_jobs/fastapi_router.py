"""FastAPI router for the admin queue monitoring API."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from nozesia_jobs.queue import JobQueue


logger = logging.getLogger(__name__)


class JobResponse(BaseModel):
    """Response model for a job record."""

    id: str
    type: str
    payload: Any = None
    attempts: int
    max_attempts: int
    status: str
    created_at: Optional[str] = None
    processed_at: Optional[str] = None
    error: Optional[str] = None


class QueueStatsResponse(BaseModel):
    """Counts and recent history of a queue."""

    pending: int
    processing: int
    completed: int
    failed: int
    recent_jobs: List[JobResponse]


class QueueSnapshot(BaseModel):
    queue: QueueStatsResponse
    timestamp: str


class QueueStatsEnvelope(BaseModel):
    success: bool = True
    data: QueueSnapshot


class MessageData(BaseModel):
    message: str


class MessageEnvelope(BaseModel):
    success: bool = True
    data: MessageData


def install_error_handlers(app: FastAPI) -> None:
    """Render HTTP errors as ``{"success": false, "error": ...}``."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def create_queue_router(
    queue_factory: Callable[[], JobQueue],
    admin_token: Optional[str] = None,
) -> APIRouter:
    """
    Create FastAPI router for the admin queue API.

    Args:
        queue_factory: Callable that returns the JobQueue to inspect
        admin_token: Optional token required in the X-Admin-Token header

    Returns:
        APIRouter instance
    """
    router = APIRouter()

    async def get_queue() -> JobQueue:
        """Dependency to get the JobQueue instance."""
        return queue_factory()

    async def verify_admin_token(
        x_admin_token: Optional[str] = Header(None, alias="X-Admin-Token")
    ) -> None:
        """Verify admin token if configured."""
        if admin_token:
            if not x_admin_token or x_admin_token != admin_token:
                raise HTTPException(status_code=401, detail="Unauthorized")

    @router.get("/admin/queue", response_model=QueueStatsEnvelope)
    async def get_queue_stats(
        queue: JobQueue = Depends(get_queue),
        _: None = Depends(verify_admin_token),
    ):
        """Return queue statistics."""
        try:
            stats: Dict[str, Any] = queue.get_queue_stats().to_dict()
            envelope = QueueStatsEnvelope(
                data=QueueSnapshot(
                    queue=QueueStatsResponse(**stats),
                    timestamp=datetime.now(timezone.utc).isoformat(),
                )
            )
            # encode here so serialization errors get the error envelope
            return JSONResponse(content=jsonable_encoder(envelope))
        except Exception as e:
            logger.exception("Error getting queue stats")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    @router.delete("/admin/queue", response_model=MessageEnvelope)
    async def clear_completed_jobs(
        queue: JobQueue = Depends(get_queue),
        _: None = Depends(verify_admin_token),
    ):
        """Clear the completed/failed job history."""
        try:
            queue.clear_completed_jobs()
            return MessageEnvelope(data=MessageData(message="Completed jobs cleared"))
        except Exception as e:
            logger.exception("Error clearing queue")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return router
