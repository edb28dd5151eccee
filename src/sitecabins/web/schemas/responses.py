"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class CatalogueEntrySchema(BaseModel):
    """A catalogued unit type."""

    type: str = Field(..., description="Catalogue key")
    sku: str
    label: str
    len: float = Field(..., description="Length in metres at yaw 0")
    wid: float = Field(..., description="Width in metres at yaw 0")
    ht: float = Field(..., description="Height in metres")
    weekly: float = Field(..., description="Weekly rate per unit (AUD)")


class CatalogueSchema(BaseModel):
    """All catalogued unit types."""

    entries: list[CatalogueEntrySchema]


class OverlapReportSchema(BaseModel):
    """Collisions in a layout, by index into the request's items."""

    overlapping: list[int] = Field(
        default_factory=list, description="Indexes of items that collide"
    )
    pairs: list[tuple[int, int]] = Field(
        default_factory=list, description="Colliding index pairs"
    )
    ignored: list[int] = Field(
        default_factory=list, description="Indexes of items with an unknown type"
    )


class SnapResponse(BaseModel):
    """A snapped position."""

    position: tuple[float, float, float]
