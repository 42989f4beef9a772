"""Tests for the quote request payload validator."""

import pytest

from quote_service.core.validation import validate


class TestValidPayloads:
    """Payloads that should pass."""

    def test_sample_payload_is_valid(self, sample_payload) -> None:
        """Should return no errors for a complete request."""
        assert validate(sample_payload) == []

    def test_fractional_quantity_above_one_is_valid(self, sample_payload) -> None:
        """Should accept any finite quantity of at least 1."""
        sample_payload["quoteItems"][0]["quantity"] = 1.5

        assert validate(sample_payload) == []

    def test_metadata_is_not_cross_checked(self, sample_payload) -> None:
        """Should ignore client-declared totals that disagree with the items."""
        sample_payload["metadata"]["totalItems"] = 999

        assert validate(sample_payload) == []


class TestContactInfo:
    """Contact block checks."""

    def test_missing_contact_info(self, sample_payload) -> None:
        """Should report a missing contact block once, not per field."""
        del sample_payload["contactInfo"]

        errors = validate(sample_payload)

        assert errors == ["contactInfo is required"]

    @pytest.mark.parametrize("field", ["name", "email", "phone"])
    def test_blank_field_is_required(self, sample_payload, field) -> None:
        """Should treat whitespace-only values as missing."""
        sample_payload["contactInfo"][field] = "   "

        assert f"{field} is required" in validate(sample_payload)

    def test_invalid_email(self, sample_payload) -> None:
        """Should reject an address without a dotted domain."""
        sample_payload["contactInfo"]["email"] = "jane@localhost"

        assert validate(sample_payload) == ["email is invalid"]

    def test_non_string_name_is_required(self, sample_payload) -> None:
        """Should reject non-string contact values."""
        sample_payload["contactInfo"]["name"] = 42

        assert validate(sample_payload) == ["name is required"]


class TestQuoteItems:
    """Item list checks."""

    def test_items_must_be_array(self, sample_payload) -> None:
        """Should reject a non-list item collection."""
        sample_payload["quoteItems"] = {"productName": "Widget"}

        assert validate(sample_payload) == ["quoteItems must be an array"]

    def test_items_cannot_be_empty(self, sample_payload) -> None:
        """Should reject an empty item list."""
        sample_payload["quoteItems"] = []

        assert validate(sample_payload) == ["quoteItems cannot be empty"]

    def test_every_malformed_item_is_reported(self, sample_payload) -> None:
        """Should report each bad index, in order."""
        sample_payload["quoteItems"] = [
            {"productName": "Widget", "quantity": 2},
            {"productName": "", "quantity": 1},
            {"productName": "Gadget", "quantity": 0},
            {"quantity": -1},
        ]

        errors = validate(sample_payload)

        assert errors == [
            "quoteItems[1].productName is required",
            "quoteItems[2].quantity must be a positive number",
            "quoteItems[3].productName is required",
            "quoteItems[3].quantity must be a positive number",
        ]

    @pytest.mark.parametrize("quantity", [0, 0.5, -3, "2", True, None, float("inf"), float("nan")])
    def test_non_positive_or_non_numeric_quantity(self, sample_payload, quantity) -> None:
        """Should reject quantities that are not finite numbers >= 1."""
        sample_payload["quoteItems"][0]["quantity"] = quantity

        assert validate(sample_payload) == ["quoteItems[0].quantity must be a positive number"]

    def test_non_object_item(self, sample_payload) -> None:
        """Should report both fields of an item that is not an object."""
        sample_payload["quoteItems"] = ["Widget"]

        assert validate(sample_payload) == [
            "quoteItems[0].productName is required",
            "quoteItems[0].quantity must be a positive number",
        ]


class TestAgreement:
    """Consent flag checks."""

    @pytest.mark.parametrize("value", [False, "true", 1, None])
    def test_agreement_must_be_literal_true(self, sample_payload, value) -> None:
        """Should only accept the boolean true."""
        sample_payload["agreedToContact"] = value

        assert "agreedToContact must be true" in validate(sample_payload)

    def test_missing_agreement(self, sample_payload) -> None:
        """Should report a missing consent flag."""
        del sample_payload["agreedToContact"]

        assert validate(sample_payload) == ["agreedToContact must be true"]


class TestMalformedShapes:
    """Top-level values that are not objects."""

    @pytest.mark.parametrize("raw", [None, [], 42, "text"])
    def test_non_object_payload_accumulates_all_errors(self, raw) -> None:
        """Should never raise, and report every top-level problem."""
        errors = validate(raw)

        assert errors == [
            "contactInfo is required",
            "quoteItems must be an array",
            "agreedToContact must be true",
        ]

    def test_errors_are_accumulated_in_check_order(self) -> None:
        """Should list contact, item, and agreement errors together."""
        raw = {
            "contactInfo": {"name": "", "email": "bad", "phone": ""},
            "quoteItems": [{"productName": "Widget", "quantity": 0}],
        }

        assert validate(raw) == [
            "name is required",
            "email is invalid",
            "phone is required",
            "quoteItems[0].quantity must be a positive number",
            "agreedToContact must be true",
        ]
