"""
Receipt points pipeline.

Orchestrates: validate → score.
"""
import logging

from app.schemas import Receipt
from app.pipeline.scoring import calculate_points, points_breakdown
from app.pipeline.validator import validate_receipt

logger = logging.getLogger(__name__)


def score_receipt(receipt: Receipt) -> int:
    """Validate a decoded receipt and return its points.

    Raises ``ReceiptValidationError`` before any scoring if a field is
    malformed.
    """
    logger.debug("Pipeline start — validate")
    validate_receipt(receipt)
    logger.debug("Validated receipt: retailer=%r items=%d", receipt.retailer, len(receipt.items))

    logger.debug("Pipeline — score")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Points breakdown: %s", points_breakdown(receipt))
    points = calculate_points(receipt)
    logger.info("Scored receipt: %d points", points)
    return points
