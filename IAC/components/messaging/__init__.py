"""
Messaging components for queued notification delivery.

Components:
- SqsQueuesComponent: Main quote queue and dead letter queue
"""

from IAC.components.messaging.sqs_queues import SqsQueuesComponent, SqsOutputs

__all__ = [
    "SqsQueuesComponent",
    "SqsOutputs",
]
