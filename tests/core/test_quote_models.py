"""Tests for the quote request models and logging helpers."""

import json
import logging

import pytest
from pydantic import ValidationError

from quote_service.models import QuoteRequest
from quote_service.observability.log_utils import log_with_context, safe_log_value


class TestQuoteRequest:
    """Wire format of queued quote requests."""

    def test_message_body_uses_wire_keys(self, sample_payload) -> None:
        """Should serialize camelCase keys and omit unset optionals."""
        quote = QuoteRequest.model_validate(sample_payload)

        body = json.loads(quote.to_message_body())

        assert body["contactInfo"] == sample_payload["contactInfo"]
        assert body["quoteItems"] == [{"productName": "Widget", "quantity": 2}]
        assert body["agreedToContact"] is True
        assert body["metadata"]["submittedAt"] == "2024-01-01T00:00:00Z"

    def test_null_metadata_is_treated_as_absent(self, sample_payload) -> None:
        """Should accept an explicit null metadata block."""
        sample_payload["metadata"] = None

        quote = QuoteRequest.model_validate(sample_payload)

        assert quote.metadata.submitted_at is None

    def test_non_object_metadata_is_treated_as_absent(self, sample_payload) -> None:
        """Should ignore a metadata value that is not an object."""
        sample_payload["metadata"] = ["not", "an", "object"]

        quote = QuoteRequest.model_validate(sample_payload)

        assert quote.metadata.total_items is None

    def test_snake_case_construction(self) -> None:
        """Should accept attribute names as well as wire keys."""
        quote = QuoteRequest(
            contact_info={"name": "Jane", "email": "jane@x.com", "phone": "1"},
            quote_items=[{"product_name": "Widget", "quantity": 1}],
            agreed_to_contact=True,
        )

        assert quote.quote_items[0].product_name == "Widget"

    def test_missing_items_rejected(self) -> None:
        """Should refuse a request without items."""
        with pytest.raises(ValidationError):
            QuoteRequest.model_validate({"contactInfo": {}, "agreedToContact": True})


class TestLogUtils:
    """Safe structured logging."""

    def test_safe_log_value_truncates(self) -> None:
        """Should cap long values."""
        value = safe_log_value("x" * 600, max_length=10)

        assert value.startswith("xxxxxxxxxx... (truncated, 600 total)")

    def test_safe_log_value_summarizes_collections(self) -> None:
        """Should log collection sizes, not contents."""
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_log_with_context_attaches_extra(self, caplog) -> None:
        """Should attach stringified context to the record."""
        logger = logging.getLogger("quote_service.tests")

        with caplog.at_level(logging.INFO, logger="quote_service.tests"):
            log_with_context(logger, logging.INFO, "handle - test", source_ip=None, count=3)

        [record] = caplog.records
        assert record.source_ip == "None"
        assert record.count == "3"
