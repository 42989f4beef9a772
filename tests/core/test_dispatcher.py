"""Tests for the notification dispatcher and the local queue worker."""

import json
import threading

import pytest

from quote_service.core.dispatch import NotificationDispatcher, QueueWorker, parse_quote
from quote_service.core.exceptions import MessageParseError
from quote_service.core.intake import IntakeHandler

SENDER = "quotes@as-distributors.example"
SALES_REP = "sales@as-distributors.example"


@pytest.fixture
def dispatcher(transport):
    return NotificationDispatcher(transport, sender=SENDER, recipient=SALES_REP)


# ============================================================================
# Dispatcher
# ============================================================================


class TestNotificationDispatcher:
    """One delivery attempt per message."""

    def test_success_sends_to_sales_rep_with_reply_to(self, dispatcher, transport, sample_body) -> None:
        """Should email the sales rep, replying to the submitter."""
        result = dispatcher.process("msg-1", sample_body)

        assert result.success is True
        assert result.email_message_id == "ses-1"
        [sent] = transport.sent
        assert sent["sender"] == SENDER
        assert sent["recipient"] == SALES_REP
        assert sent["reply_to"] == "jane@x.com"
        assert sent["content"].subject == "New Quote Request from Jane"

    def test_transport_failure_is_reported(self, failing_transport, sample_body) -> None:
        """Should return a failed result instead of raising."""
        dispatcher = NotificationDispatcher(failing_transport, sender=SENDER, recipient=SALES_REP)

        result = dispatcher.process("msg-1", sample_body)

        assert result.success is False
        assert "SES unavailable" in result.error

    def test_unparseable_body_is_reported(self, dispatcher, transport) -> None:
        """Should fail the attempt for a body that is not a quote request."""
        result = dispatcher.process("msg-1", "{}")

        assert result.success is False
        assert transport.sent == []

    def test_parse_quote_raises_parse_error(self) -> None:
        """Should wrap schema errors in MessageParseError."""
        with pytest.raises(MessageParseError):
            parse_quote("not json")


# ============================================================================
# Worker
# ============================================================================


class TestQueueWorker:
    """Mapping dispatch results onto the queue."""

    def test_success_acknowledges(self, memory_queue, dispatcher, sample_body) -> None:
        """Should remove a delivered message from the queue."""
        memory_queue.enqueue(sample_body)
        worker = QueueWorker(memory_queue, dispatcher)

        result = worker.run_once()

        assert result.success is True
        assert memory_queue.stats() == {"visible": 0, "in_flight": 0, "dead_lettered": 0}

    def test_failure_releases_for_redelivery(self, memory_queue, make_transport, sample_body) -> None:
        """Should leave a failed message visible with its count incremented."""
        transport = make_transport(failures=1)
        dispatcher = NotificationDispatcher(transport, sender=SENDER, recipient=SALES_REP)
        memory_queue.enqueue(sample_body)
        worker = QueueWorker(memory_queue, dispatcher)

        first = worker.run_once()
        [redelivered] = memory_queue.receive()

        assert first.success is False
        assert redelivered.receive_count == 1
        assert transport.sent == []

    def test_run_once_on_empty_queue(self, memory_queue, dispatcher) -> None:
        """Should return None when nothing is visible."""
        assert QueueWorker(memory_queue, dispatcher).run_once() is None

    def test_persistent_failure_is_dead_lettered_after_three_attempts(
        self, memory_queue, failing_transport, sample_body
    ) -> None:
        """Should stop retrying once the message reaches the dead-letter area."""
        dispatcher = NotificationDispatcher(failing_transport, sender=SENDER, recipient=SALES_REP)
        memory_queue.enqueue(sample_body)

        results = QueueWorker(memory_queue, dispatcher).drain()

        assert [r.success for r in results] == [False, False, False]
        assert memory_queue.stats()["dead_lettered"] == 1

    def test_slow_attempt_times_out_as_failure(self, memory_queue, sample_body) -> None:
        """Should count an attempt exceeding the timeout as failed."""
        release = threading.Event()

        class SlowDispatcher:
            def process(self, message_id, body):
                release.wait(5)

        memory_queue.enqueue(sample_body)
        worker = QueueWorker(memory_queue, SlowDispatcher(), timeout_seconds=0.05)

        try:
            result = worker.run_once()
        finally:
            release.set()

        assert result.success is False
        assert "timed out" in result.error
        [message] = memory_queue.receive()
        assert message.receive_count == 1

    def test_run_forever_stops_on_event(self, memory_queue, dispatcher) -> None:
        """Should return once the stop event is set."""
        stop_event = threading.Event()
        stop_event.set()

        QueueWorker(memory_queue, dispatcher).run_forever(stop_event=stop_event)


# ============================================================================
# End to end
# ============================================================================


class TestPipeline:
    """Intake through delivery on the in-memory queue."""

    def test_total_quantity_reaches_email(self, memory_queue, dispatcher, transport, sample_payload) -> None:
        """Should email the recomputed total, ignoring declared metadata."""
        sample_payload["quoteItems"] = [
            {"productName": "Widget", "quantity": 3},
            {"productName": "Gadget", "quantity": 5},
        ]
        sample_payload["metadata"]["totalItems"] = 999

        response = IntakeHandler(memory_queue).handle(json.dumps(sample_payload))
        QueueWorker(memory_queue, dispatcher).drain()

        assert response.status_code == 200
        [sent] = transport.sent
        assert "Total: 8 pack(s)" in sent["content"].text_body

    def test_transient_failure_then_delivery(self, memory_queue, make_transport, sample_body) -> None:
        """Should deliver on the second attempt after one send failure."""
        transport = make_transport(failures=1)
        dispatcher = NotificationDispatcher(transport, sender=SENDER, recipient=SALES_REP)
        IntakeHandler(memory_queue).handle(sample_body)

        results = QueueWorker(memory_queue, dispatcher).drain()

        assert [r.success for r in results] == [False, True]
        assert len(transport.sent) == 1
        assert memory_queue.stats() == {"visible": 0, "in_flight": 0, "dead_lettered": 0}
