"""
Infrastructure constants for the quote request pipeline.

Contains timeouts, queue policy, throttling limits, and default tags.
Queue values are derived from the dispatcher timeout so the lease and
retention relations hold by construction.
"""

from typing import Final

AWS_REGION: Final[str] = "ap-southeast-2"

# Lambda configuration
LAMBDA_DEFAULTS: Final[dict[str, int]] = {
    "memory_mb": 256,
    "intake_timeout_seconds": 10,
    "dispatcher_timeout_seconds": 30,
    "log_retention_days": 30,
}

LAMBDA_RUNTIME: Final[str] = "python3.12"

# Lease = 6 x dispatcher timeout
VISIBILITY_TIMEOUT_FACTOR: Final[int] = 6

# SQS configuration
SQS_DEFAULTS: Final[dict[str, int]] = {
    "visibility_timeout_seconds": LAMBDA_DEFAULTS["dispatcher_timeout_seconds"] * VISIBILITY_TIMEOUT_FACTOR,
    "message_retention_seconds": 604800,  # 7 days
    "dlq_message_retention_seconds": 1209600,  # 14 days
    "max_receive_count": 3,  # Failed deliveries before DLQ
}

# HTTP API stage throttling (abuse protection)
API_THROTTLING: Final[dict[str, int]] = {
    "burst_limit": 50,
    "rate_limit": 25,
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "quote-pipeline",
    "ManagedBy": "pulumi",
}
