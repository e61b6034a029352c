"""
Receipt schemas — wire shape of a purchase receipt and the stored result.

Field names on the wire are camelCase (``purchaseDate``, ``shortDescription``)
and are mapped to snake_case attributes through aliases.
"""
from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Receipt
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A single line entry on a receipt."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = Field(default="", description="e.g. '6.49'")


class Receipt(BaseModel):
    """A purchase receipt as submitted by the caller.

    Missing fields fall back to empty values so that they are reported by
    the validator rather than by the decoder.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field(default="", alias="purchaseTime", description="HH:MM, 24-hour")
    items: tuple[Item, ...] = Field(default_factory=tuple)
    total: str = Field(default="", description="e.g. '35.35'")


class ScoredReceipt(BaseModel):
    """A validated receipt with its points, as held by the store."""
    model_config = ConfigDict(frozen=True)

    id: uuid.UUID
    receipt: Receipt
    points: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
