"""
Timeout and retention relations checked before any resource is declared.

A stack whose lease could expire mid-attempt, or whose retention could drop
a message before its retries are spent, is rejected at preview time.
"""

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import SQS_DEFAULTS, VISIBILITY_TIMEOUT_FACTOR

# HTTP API integrations time out after 30 seconds regardless of the function
API_GATEWAY_MAX_INTEGRATION_SECONDS = 30
SQS_MAX_VISIBILITY_TIMEOUT_SECONDS = 43200


def visibility_timeout_for(config: EnvironmentConfig) -> int:
    """Queue lease for the configured dispatcher timeout."""
    return config.dispatcher_timeout * VISIBILITY_TIMEOUT_FACTOR


def validate_timeouts(config: EnvironmentConfig) -> int:
    """
    Check the timeout relations of a stack configuration.

    Args:
        config: Environment configuration

    Returns:
        int: Visibility timeout to declare on the main queue

    Raises:
        ValueError: Any relation is violated (all violations are listed)
    """
    visibility = visibility_timeout_for(config)
    retention = SQS_DEFAULTS["message_retention_seconds"]
    dlq_retention = SQS_DEFAULTS["dlq_message_retention_seconds"]
    max_receive_count = SQS_DEFAULTS["max_receive_count"]

    problems = []
    if config.intake_timeout <= 0 or config.dispatcher_timeout <= 0:
        problems.append("Lambda timeouts must be positive")
    if config.intake_timeout > API_GATEWAY_MAX_INTEGRATION_SECONDS:
        problems.append(
            f"intake_timeout {config.intake_timeout}s exceeds the "
            f"{API_GATEWAY_MAX_INTEGRATION_SECONDS}s API Gateway integration limit"
        )
    if visibility <= config.dispatcher_timeout:
        problems.append("visibility timeout must exceed the dispatcher timeout")
    if visibility > SQS_MAX_VISIBILITY_TIMEOUT_SECONDS:
        problems.append(
            f"visibility timeout {visibility}s exceeds the SQS maximum "
            f"of {SQS_MAX_VISIBILITY_TIMEOUT_SECONDS}s"
        )
    if retention <= max_receive_count * visibility:
        problems.append("retention must outlast every retry of a message")
    if dlq_retention <= retention:
        problems.append("dead letter retention must exceed main queue retention")

    if problems:
        raise ValueError("Invalid timeout configuration: " + "; ".join(problems))
    return visibility
