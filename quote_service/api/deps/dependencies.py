"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: quote_service.configs, quote_service.core, quote_service.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from quote_service.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._queue = None
        self._intake_handler = None
        self._email_transport = None
        self._dispatcher = None
        self._worker = None

    @property
    def queue(self):
        """Get cached durable queue."""
        if self._queue is None:
            from quote_service.boundary.queue import get_durable_queue
            self._queue = get_durable_queue()
        return self._queue

    @property
    def intake_handler(self):
        """Get cached intake handler."""
        if self._intake_handler is None:
            from quote_service.core.intake import IntakeHandler
            self._intake_handler = IntakeHandler(self.queue)
        return self._intake_handler

    @property
    def email_transport(self):
        """Get cached SES email transport."""
        if self._email_transport is None:
            from quote_service.boundary.aws.ses_client import SesEmailTransport

            settings = get_settings()
            self._email_transport = SesEmailTransport(
                region=settings.notification.ses_region or settings.queue.region,
            )
        return self._email_transport

    @property
    def dispatcher(self):
        """
        Get cached notification dispatcher.

        Raises:
            ConfigurationError: SALES_REP_EMAIL or SENDER_EMAIL missing
        """
        if self._dispatcher is None:
            from quote_service.configs import require_notification_settings
            from quote_service.core.dispatch import NotificationDispatcher

            notification = require_notification_settings(get_settings())
            self._dispatcher = NotificationDispatcher(
                transport=self.email_transport,
                sender=notification.sender_email,
                recipient=notification.sales_rep_email,
            )
        return self._dispatcher

    @property
    def worker(self):
        """Get cached queue worker bound to the cached queue and dispatcher."""
        if self._worker is None:
            from quote_service.core.dispatch import QueueWorker
            self._worker = QueueWorker(
                queue=self.queue,
                dispatcher=self.dispatcher,
                timeout_seconds=get_settings().dispatcher.timeout_seconds,
            )
        return self._worker

    def clear(self) -> None:
        """Clear all cached instances."""
        self._queue = None
        self._intake_handler = None
        self._email_transport = None
        self._dispatcher = None
        self._worker = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_intake_handler():
    """Get intake handler instance."""
    return get_service_cache().intake_handler


def get_queue():
    """Get durable queue instance."""
    return get_service_cache().queue
