"""
Lambda handler for API Gateway quote submissions.

Adapts an HTTP API (payload format 2.0) proxy event to IntakeHandler and
returns the proxy response shape.

Environment variables:
- QUEUE_BACKEND: "sqs" in deployed stacks
- QUEUE_URL: Main quote queue URL
- QUEUE_REGION: AWS region of the queue
- LOG_LEVEL: Logging level

Dependencies: python-dotenv, quote_service.core.intake, quote_service.boundary.queue
System role: Lambda entry point for POST /quote
"""

import base64
import binascii
import json
import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from quote_service.boundary.queue import get_durable_queue
from quote_service.core.intake.handler import (
    IntakeHandler,
    IntakeResponse,
    invalid_json_response,
)

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))

RESPONSE_HEADERS = {"Content-Type": "application/json"}


def _request_body(event: Dict[str, Any]) -> str | bytes | None:
    """Extract the raw body, decoding base64 payloads."""
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        return base64.b64decode(body, validate=True)
    return body


def _to_proxy_response(response: IntakeResponse) -> Dict[str, Any]:
    return {
        "statusCode": response.status_code,
        "headers": dict(RESPONSE_HEADERS),
        "body": json.dumps(response.body),
    }


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for POST /quote.

    Args:
        event: API Gateway HTTP API proxy event
        context: Lambda context object

    Returns:
        Dict with statusCode, headers, and JSON body
    """
    # Initialize intake handler (done once, reused across invocations)
    if not hasattr(handler, "_intake"):
        handler._intake = IntakeHandler(get_durable_queue())

    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    http_context = (event.get("requestContext") or {}).get("http") or {}
    source_ip = http_context.get("sourceIp")
    user_agent = headers.get("user-agent")

    try:
        body = _request_body(event)
    except (binascii.Error, ValueError) as e:
        logger.warning("handler - Undecodable base64 body: %s", e)
        return _to_proxy_response(invalid_json_response())

    response = handler._intake.handle(body, source_ip=source_ip, user_agent=user_agent)
    return _to_proxy_response(response)
