"""Durable queue contract and redelivery policy."""

from quote_service.core.queue.base import DurableQueue
from quote_service.core.queue.policy import LEASE_SAFETY_FACTOR, RedrivePolicy

__all__ = ["DurableQueue", "LEASE_SAFETY_FACTOR", "RedrivePolicy"]
