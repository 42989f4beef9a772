"""API routers."""

from .health import router as health_router
from .quote import router as quote_router

__all__ = [
    "health_router",
    "quote_router",
]
