"""Pydantic models for layout configuration files.

A layout file describes a site plan: an optional set of catalogue
overrides, the grid step, the checkout platform and the placed items.

Example:
    {
        "schema_version": "1.0",
        "grid_step": 0.5,
        "platform": "stripe",
        "items": [
            {"type": "office6m", "position": [0, 0, 0]},
            {"type": "toilet", "position": [5, 0, 0], "yaw": 1.5708}
        ]
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitecabins.domain.entities import DEFAULT_COLOR

# Version 1.0: Initial layout schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DimensionsConfig(BaseModel):
    """Unit dimensions in metres at yaw 0."""

    model_config = ConfigDict(extra="forbid")

    len: float = Field(..., gt=0, description="Extent along x when unrotated")
    wid: float = Field(..., gt=0, description="Extent along z when unrotated")
    ht: float = Field(..., gt=0, description="Vertical extent")


class CatalogueEntryConfig(BaseModel):
    """A catalogue entry added or replaced by the layout file."""

    model_config = ConfigDict(extra="forbid")

    sku: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    dims: DimensionsConfig
    weekly: float = Field(..., ge=0, description="Weekly rate per unit (AUD)")


class PlacedItemConfig(BaseModel):
    """A unit placed on the ground plane.

    Attributes:
        type: Catalogue key of the unit.
        position: World position as [x, y, z]; y is vertical.
        yaw: Rotation about the vertical axis in radians.
        color: Display color.
    """

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., min_length=1)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    yaw: float = 0.0
    color: str = DEFAULT_COLOR


class LayoutConfiguration(BaseModel):
    """Root layout configuration model."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    grid_step: float = Field(default=1.0, gt=0)
    platform: str = "generic"
    catalogue: dict[str, CatalogueEntryConfig] = Field(default_factory=dict)
    items: list[PlacedItemConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{value}'. Supported: {supported}"
            )
        return value
