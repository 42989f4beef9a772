"""
Health check API endpoints.

Routes: GET /health, GET /health/queue

Dependencies: quote_service.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from quote_service.api.deps import get_queue


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    queue: dict[str, int] | None = None


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/queue", response_model=HealthResponse)
async def health_check_queue(queue=Depends(get_queue)) -> HealthResponse:
    """Queue health check; includes depth counters for the in-memory queue."""
    stats = queue.stats() if hasattr(queue, "stats") else None
    return HealthResponse(status="healthy", message="Queue reachable", queue=stats)
