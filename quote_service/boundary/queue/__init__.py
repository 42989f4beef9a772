"""
Durable queue backends.

Exports: InMemoryDurableQueue, get_durable_queue
"""

from .memory_queue import InMemoryDurableQueue
from .queue_factory import get_durable_queue

__all__ = ["InMemoryDurableQueue", "get_durable_queue"]
