"""
Field-format validation for receipts and their items.

Each entity has one function that lists its field checks directly. All
failures are collected so a rejected receipt reports every bad field.
"""
from __future__ import annotations

import re

from app.errors import ReceiptValidationError
from app.schemas import Item, Receipt

# Character classes are ASCII-only, as in the upstream receipt format.
RETAILER_RE = re.compile(r"[\w\s\-&]+", re.ASCII)
PURCHASE_DATE_RE = re.compile(r"\d{4}-(0[1-9]|1[0-2])-([0-2]\d|3[0-1])", re.ASCII)
PURCHASE_TIME_RE = re.compile(r"([01]\d|2[0-3]):([0-5]\d)", re.ASCII)
AMOUNT_RE = re.compile(r"\d+\.\d{2}", re.ASCII)
SHORT_DESCRIPTION_RE = re.compile(r"[\w\s\-]+", re.ASCII)


def _check(pattern: re.Pattern[str], value: str, name: str, errors: list[str]) -> None:
    if pattern.fullmatch(value) is None:
        errors.append(f"{name}: {value!r} does not match {pattern.pattern!r}")


def item_errors(item: Item, prefix: str = "item") -> list[str]:
    """Return the list of format failures for one item."""
    errors: list[str] = []
    _check(SHORT_DESCRIPTION_RE, item.short_description, f"{prefix}.shortDescription", errors)
    _check(AMOUNT_RE, item.price, f"{prefix}.price", errors)
    return errors


def receipt_errors(receipt: Receipt) -> list[str]:
    """Return the list of format and structural failures for a receipt."""
    errors: list[str] = []
    _check(RETAILER_RE, receipt.retailer, "retailer", errors)
    _check(PURCHASE_DATE_RE, receipt.purchase_date, "purchaseDate", errors)
    _check(PURCHASE_TIME_RE, receipt.purchase_time, "purchaseTime", errors)
    _check(AMOUNT_RE, receipt.total, "total", errors)

    if not receipt.items:
        errors.append("items: receipt has no items")
    for idx, item in enumerate(receipt.items):
        errors.extend(item_errors(item, prefix=f"items[{idx}]"))
    return errors


def validate_item(item: Item) -> None:
    errors = item_errors(item)
    if errors:
        raise ReceiptValidationError(errors)


def validate_receipt(receipt: Receipt) -> None:
    """Raise ``ReceiptValidationError`` if any field or item is malformed."""
    errors = receipt_errors(receipt)
    if errors:
        raise ReceiptValidationError(errors)
