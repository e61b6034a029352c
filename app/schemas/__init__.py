from app.schemas.receipt import (  # noqa: F401
    Item,
    PointsResponse,
    ProcessResponse,
    Receipt,
    ScoredReceipt,
)
