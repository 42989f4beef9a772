"""
FastAPI application with assembled routers.

Initializes FastAPI app with the quote and health routers and configures
uvicorn server. With the in-memory queue backend, a background QueueWorker
thread delivers notifications in-process. Startup fails when ALLOWED_ORIGINS
is missing, or when the in-memory backend has no notification addresses.

Dependencies: fastapi, quote_service.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
import threading
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quote_service.api.deps.dependencies import get_service_cache
from quote_service.configs import (
    get_settings,
    require_intake_settings,
    require_notification_settings,
)
from quote_service.observability import configure_logging
from quote_service.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import health_router, quote_router


def _start_local_worker(cache, settings) -> tuple[threading.Thread, threading.Event] | None:
    """Run the dispatcher beside the API when the queue lives in this process."""
    logger = logging.getLogger("uvicorn")

    if settings.queue.backend.lower() != "memory":
        return None

    stop_event = threading.Event()
    thread = threading.Thread(
        target=cache.worker.run_forever,
        kwargs={"stop_event": stop_event},
        name="quote-dispatch-worker",
        daemon=True,
    )
    thread.start()
    logger.info("Local dispatch worker started")
    return thread, stop_event


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    settings = get_settings()
    if settings.queue.backend.lower() == "memory":
        # Quotes accepted without an in-process dispatcher would expire unsent
        require_notification_settings(settings)

    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    # Trigger property access to load instances
    _ = cache.queue
    _ = cache.intake_handler
    worker = _start_local_worker(cache, settings)
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    if worker is not None:
        thread, stop_event = worker
        stop_event.set()
        thread.join(timeout=settings.dispatcher.timeout_seconds)
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    require_intake_settings(settings)

    app = FastAPI(
        title="Quote Request API",
        description="Quote request intake with queued sales notifications",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Browser callers are limited to the configured site origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.intake.allowed_origins,
        allow_credentials=False,
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )

    # Add observability middleware
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health_router)
    app.include_router(quote_router)

    return app


if __name__ == "__main__":
    uvicorn.run(
        "quote_service.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
