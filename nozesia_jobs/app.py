"""Service entrypoint hosting the job queue and its admin API."""

import argparse
import logging
import os
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from nozesia_jobs.config import JobQueueConfig
from nozesia_jobs.fastapi_router import create_queue_router, install_error_handlers
from nozesia_jobs.handlers import initialize_default_handlers
from nozesia_jobs.queue import JobQueue
from nozesia_jobs.registry import JobRegistry


def setup_logging():
    """Setup logging configuration."""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    config: Optional[JobQueueConfig] = None,
    queue: Optional[JobQueue] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: JobQueueConfig instance. If None, will load from environment.
        queue: JobQueue to expose. If None, one is created with the default
            handlers registered.
    """
    if config is None:
        config = JobQueueConfig.from_env()

    if queue is None:
        registry = JobRegistry()
        initialize_default_handlers(registry)
        queue = JobQueue(config=config, registry=registry)

    app = FastAPI(
        title="NozesIA Job Queue",
        description="In-process job queue with admin monitoring",
        version="0.1.0",
    )
    app.state.job_queue = queue

    install_error_handlers(app)
    app.include_router(
        create_queue_router(lambda: queue, admin_token=config.admin_token),
        prefix="/api",
    )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "queue_size": len(queue),
            "processing": queue.is_processing,
        }

    return app


def main():
    """Main entrypoint for the service."""
    setup_logging()
    logger = logging.getLogger(__name__)

    parser = argparse.ArgumentParser(description="NozesIA job queue service")
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )

    args = parser.parse_args()

    try:
        config = JobQueueConfig.from_env()
    except ValueError as e:
        logger.error(f"Failed to load config: {e}")
        sys.exit(1)

    app = create_app(config)
    logger.info(f"Starting job queue service on {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
