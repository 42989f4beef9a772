"""
Shared test fixtures and configuration for entire test suite.

Provides: sample quote payloads, a controllable clock, in-memory queues,
recording email transports, settings isolation
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import copy
import json
from unittest.mock import MagicMock

import pytest

from quote_service.boundary.queue.memory_queue import InMemoryDurableQueue
from quote_service.core.exceptions import EmailDeliveryError
from quote_service.core.notification.transport import EmailTransport
from quote_service.core.queue.policy import RedrivePolicy

SAMPLE_PAYLOAD = {
    "contactInfo": {"name": "Jane", "email": "jane@x.com", "phone": "555-1234"},
    "quoteItems": [{"productName": "Widget", "quantity": 2}],
    "metadata": {
        "totalItems": 2,
        "totalUniqueProducts": 1,
        "submittedAt": "2024-01-01T00:00:00Z",
    },
    "agreedToContact": True,
}


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingTransport(EmailTransport):
    """EmailTransport that records sends and can be told to fail."""

    def __init__(self, failures: int = 0) -> None:
        self.sent = []
        self.failures = failures

    def send(self, sender, recipient, reply_to, content) -> str:
        if self.failures > 0:
            self.failures -= 1
            raise EmailDeliveryError("SES unavailable", recipient=recipient)
        self.sent.append(
            {"sender": sender, "recipient": recipient, "reply_to": reply_to, "content": content}
        )
        return f"ses-{len(self.sent)}"


@pytest.fixture
def sample_payload():
    """A valid quote request payload (deep copy, safe to mutate)."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_body(sample_payload):
    """The sample payload serialized as a request body."""
    return json.dumps(sample_payload)


@pytest.fixture
def clock():
    """Controllable clock for queue lease and retention tests."""
    return FakeClock()


@pytest.fixture
def policy():
    """Default redrive policy (30s attempts, 180s lease, 3 receives)."""
    return RedrivePolicy()


@pytest.fixture
def memory_queue(policy, clock):
    """Empty in-memory queue driven by the fake clock."""
    return InMemoryDurableQueue(policy=policy, clock=clock)


@pytest.fixture
def transport():
    """Email transport that always succeeds."""
    return RecordingTransport()


@pytest.fixture
def make_transport():
    """Factory for transports failing a given number of sends first."""
    return RecordingTransport


@pytest.fixture
def failing_transport():
    """Email transport that always fails."""
    return RecordingTransport(failures=10**6)


@pytest.fixture
def mock_queue():
    """MagicMock standing in for a DurableQueue."""
    queue = MagicMock()
    queue.enqueue.return_value = "msg-123"
    return queue


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear cached settings and pipeline env vars around every test."""
    from quote_service.configs import get_settings

    for var in (
        "SALES_REP_EMAIL",
        "SENDER_EMAIL",
        "SES_REGION",
        "ALLOWED_ORIGINS",
        "INTAKE_TIMEOUT_SECONDS",
        "QUEUE_BACKEND",
        "QUEUE_URL",
        "QUEUE_REGION",
        "DISPATCHER_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
