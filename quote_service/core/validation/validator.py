"""
Quote request payload validator.

Checks an untrusted, already-parsed JSON payload and returns every problem
found. Never raises for malformed shapes: a list, a number, or null at the
top level simply produces diagnostics.

Dependencies: re (stdlib)
System role: First gate of the intake path; nothing invalid reaches the queue
"""

import math
import re
from collections.abc import Mapping
from typing import Any

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _is_positive_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a quantity
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 1


def _validate_contact(payload: Mapping, errors: list[str]) -> None:
    contact = payload.get("contactInfo")
    if not isinstance(contact, Mapping):
        errors.append("contactInfo is required")
        return

    if _is_blank(contact.get("name")):
        errors.append("name is required")

    email = contact.get("email")
    if _is_blank(email):
        errors.append("email is required")
    elif not EMAIL_PATTERN.match(email):
        errors.append("email is invalid")

    if _is_blank(contact.get("phone")):
        errors.append("phone is required")


def _validate_items(payload: Mapping, errors: list[str]) -> None:
    items = payload.get("quoteItems")
    if not isinstance(items, list):
        errors.append("quoteItems must be an array")
        return
    if not items:
        errors.append("quoteItems cannot be empty")
        return

    for index, item in enumerate(items):
        entry = item if isinstance(item, Mapping) else {}
        if _is_blank(entry.get("productName")):
            errors.append(f"quoteItems[{index}].productName is required")
        if not _is_positive_number(entry.get("quantity")):
            errors.append(f"quoteItems[{index}].quantity must be a positive number")


def validate(raw: Any) -> list[str]:
    """
    Validate a parsed quote request payload.

    Checks run in a fixed order (contact, items, agreement) and all failures
    are accumulated; an empty list means the payload is valid.

    Args:
        raw: Result of JSON-decoding the request body (any shape)

    Returns:
        list[str]: Human-readable validation errors, empty when valid
    """
    payload = raw if isinstance(raw, Mapping) else {}
    errors: list[str] = []

    _validate_contact(payload, errors)
    _validate_items(payload, errors)

    if payload.get("agreedToContact") is not True:
        errors.append("agreedToContact must be true")

    return errors
