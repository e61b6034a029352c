"""
Receipt store errors.

Every failure the core can report for external input is one of these.
"""
from __future__ import annotations


class ReceiptStoreError(Exception):
    """Base class for receipt store failures."""


class ReceiptDecodeError(ReceiptStoreError):
    """Raised when a payload cannot be decoded into a receipt."""


class ReceiptValidationError(ReceiptStoreError):
    """Raised when a decoded receipt fails a format or structural rule."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("invalid receipt: " + "; ".join(self.errors))


class ReceiptNotFoundError(ReceiptStoreError):
    """Raised when no receipt is stored under the requested id."""
