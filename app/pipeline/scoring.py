"""
Rule-based reward points.

Every rule is deterministic and independent; the receipt's points are the sum
of all of them. Rules assume a validated receipt, and a value that still fails
to parse scores 0 for that rule instead of raising.
"""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable

from app.schemas import Item, Receipt

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ITEM_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_HOURS = ("14", "15")


def _to_decimal(amount: str) -> Decimal | None:
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        return None
    return value if value.is_finite() else None


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_name_points(name: str) -> int:
    """One point for every letter or digit in the retailer name."""
    return sum(1 for ch in name if ch.isalpha() or ch.isdecimal())


def round_dollar_points(total: str) -> int:
    """50 points if the total has no cents."""
    if len(total) >= 2 and total[-2:] == "00":
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_points(total: str) -> int:
    """25 points if the total is a multiple of 0.25."""
    value = _to_decimal(total)
    if value is None:
        return 0
    cents = int(value * 100)  # truncates toward zero
    if cents % 25 == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0


def item_pair_points(count: int) -> int:
    """5 points for every two items."""
    return count // 2 * ITEM_PAIR_POINTS


def item_description_points(item: Item) -> int:
    """``ceil(price * 0.2)`` if the trimmed description length is a multiple of 3."""
    length = len(item.short_description.strip(" "))
    if length == 0 or length % 3 != 0:
        return 0
    price = _to_decimal(item.price)
    if price is None:
        return 0
    return math.ceil(price * ITEM_PRICE_MULTIPLIER)


def items_points(items: Iterable[Item]) -> int:
    return sum(item_description_points(item) for item in items)


def purchase_day_points(date: str) -> int:
    """6 points if the day of the purchase date is odd."""
    day = date[-2:]
    if len(day) != 2 or not day.isdigit():
        return 0
    return ODD_DAY_POINTS if int(day) % 2 == 1 else 0


def purchase_time_points(time: str) -> int:
    """10 points for purchases after 2:00pm and before 4:00pm."""
    hour, minutes = time[:2], time[3:]
    if hour not in AFTERNOON_HOURS:
        return 0
    if hour == "14" and minutes == "00":
        return 0
    return AFTERNOON_POINTS


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

RULES: list[tuple[str, Callable[[Receipt], int]]] = [
    ("retailer_name", lambda r: retailer_name_points(r.retailer)),
    ("round_dollar", lambda r: round_dollar_points(r.total)),
    ("quarter_multiple", lambda r: quarter_multiple_points(r.total)),
    ("item_pairs", lambda r: item_pair_points(len(r.items))),
    ("item_descriptions", lambda r: items_points(r.items)),
    ("purchase_day", lambda r: purchase_day_points(r.purchase_date)),
    ("purchase_time", lambda r: purchase_time_points(r.purchase_time)),
]


def points_breakdown(receipt: Receipt) -> dict[str, int]:
    """Return each rule's contribution, keyed by rule name."""
    return {name: rule(receipt) for name, rule in RULES}


def calculate_points(receipt: Receipt) -> int:
    """Total reward points for a validated receipt."""
    return sum(points_breakdown(receipt).values())
