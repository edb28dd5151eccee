"""Pydantic request and response schemas for the REST API."""

from sitecabins.web.schemas.requests import (
    LayoutRequest,
    OrderRequest,
    PlacedItemSchema,
    SnapRequest,
)
from sitecabins.web.schemas.responses import (
    CatalogueEntrySchema,
    CatalogueSchema,
    OverlapReportSchema,
    SnapResponse,
)

__all__ = [
    "CatalogueEntrySchema",
    "CatalogueSchema",
    "LayoutRequest",
    "OrderRequest",
    "OverlapReportSchema",
    "PlacedItemSchema",
    "SnapRequest",
    "SnapResponse",
]
