"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from sitecabins.domain.entities import DEFAULT_COLOR


class PlacedItemSchema(BaseModel):
    """A unit placed on the ground plane."""

    type: str = Field(..., description="Catalogue key of the unit")
    position: tuple[float, float, float] = Field(
        default=(0.0, 0.0, 0.0), description="World position [x, y, z], y vertical"
    )
    yaw: float = Field(default=0.0, description="Rotation about the vertical axis (radians)")
    color: str = Field(default=DEFAULT_COLOR, description="Display color")


class LayoutRequest(BaseModel):
    """A set of placed units."""

    items: list[PlacedItemSchema] = Field(default_factory=list)


class OrderRequest(LayoutRequest):
    """Placed units plus the checkout platform to render for."""

    platform: str = Field(
        default="generic",
        description="generic, shopify or stripe; anything else gives generic",
    )


class SnapRequest(BaseModel):
    """A raw drag position to snap to the grid."""

    position: tuple[float, float, float]
    step: float = Field(default=1.0, description="Grid step in metres")
