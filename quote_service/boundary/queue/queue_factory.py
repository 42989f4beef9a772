"""
Durable queue factory for selecting between in-memory (dev) and SQS (prod).

Depends on the QUEUE_BACKEND environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: quote_service.boundary, quote_service.configs
System role: Durable queue instantiation and selection
"""

import logging

from quote_service.boundary.aws.sqs_client import SqsDurableQueue
from quote_service.boundary.queue.memory_queue import InMemoryDurableQueue
from quote_service.configs import Settings, get_settings
from quote_service.core.exceptions import ConfigurationError
from quote_service.core.queue import DurableQueue, RedrivePolicy

logger = logging.getLogger(__name__)


def get_durable_queue(settings: Settings | None = None) -> DurableQueue:
    """
    Factory function to get the durable queue based on configuration.

    Args:
        settings: Application settings (cached settings if None)

    Returns:
        InMemoryDurableQueue or SqsDurableQueue: Configured queue instance

    Raises:
        ConfigurationError: Unknown backend, or sqs backend without QUEUE_URL
    """
    settings = settings or get_settings()
    backend = settings.queue.backend.lower()

    if backend == "memory":
        logger.info(f"{__name__}:get_durable_queue - Creating in-memory queue (local dev mode)")
        return InMemoryDurableQueue(policy=RedrivePolicy.from_settings(settings))

    elif backend == "sqs":
        if not settings.queue.url:
            raise ConfigurationError(
                "QUEUE_URL is required for the sqs backend", missing=["QUEUE_URL"]
            )
        logger.info(f"{__name__}:get_durable_queue - Creating SQS queue (production mode)")
        return SqsDurableQueue(
            queue_url=settings.queue.url,
            region=settings.queue.region,
            wait_time_seconds=settings.queue.wait_time_seconds,
        )

    else:
        raise ConfigurationError(
            f"Invalid QUEUE_BACKEND: {backend}. Must be 'memory' (dev) or 'sqs' (production)."
        )
