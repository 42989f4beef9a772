"""Notification rendering and the email transport contract."""

from quote_service.core.notification.renderer import render, total_quantity
from quote_service.core.notification.transport import EmailTransport

__all__ = ["EmailTransport", "render", "total_quantity"]
