"""Centralized error codes and domain exceptions.

Validation inside the library raises these; the public conversion functions
catch them at the boundary and degrade to their documented fallback output.
"""
from __future__ import annotations
from typing import Any

ERROR_CODES = {
    "currency_spec": "INVALID_CURRENCY_SPEC",
    "number": "INVALID_NUMBER",
}


class DomainError(Exception):
    """Base domain error storing standardized fields."""

    def __init__(self, code: str, message: str, details: Any | None = None):  # noqa: D401
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class InvalidCurrencySpec(DomainError):
    def __init__(self, value: Any, reason: str):
        super().__init__(
            ERROR_CODES["currency_spec"], f"Invalid currency spec: {reason}", details={"value": repr(value)})


class InvalidNumberInput(DomainError):
    def __init__(self, value: Any):
        super().__init__(
            ERROR_CODES["number"], f"Cannot interpret {value!r} as a number", details={"value": repr(value)})


__all__ = [
    "ERROR_CODES",
    "DomainError",
    "InvalidCurrencySpec",
    "InvalidNumberInput",
]
