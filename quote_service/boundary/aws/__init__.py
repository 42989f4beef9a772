"""
AWS boundary modules.

Exports: SqsDurableQueue, SesEmailTransport
"""

from .ses_client import SesEmailTransport
from .sqs_client import SqsDurableQueue

__all__ = ["SesEmailTransport", "SqsDurableQueue"]
