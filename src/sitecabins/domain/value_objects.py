"""Immutable value objects for the placement domain."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitDimensions:
    """Unit dimensions in metres, in the unrotated orientation.

    Attributes:
        length: Extent along world x when yaw is 0.
        width: Extent along world z when yaw is 0.
        height: Vertical extent. Never affected by rotation.
    """

    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0 or self.height <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def footprint_area(self) -> float:
        """Ground area covered by the unit in square metres."""
        return self.length * self.width

    def swapped(self) -> UnitDimensions:
        """Return the dimensions with length and width exchanged."""
        return UnitDimensions(length=self.width, width=self.length, height=self.height)


@dataclass(frozen=True)
class Vec3:
    """World-space position. ``y`` is vertical; footprints use ``x`` and ``z``."""

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> Vec3:
        """The world origin, where new units are placed by default."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_sequence(cls, values: tuple[float, float, float] | list[float]) -> Vec3:
        """Build from an ``[x, y, z]`` sequence as used in layout files."""
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def as_tuple(self) -> tuple[float, float, float]:
        """Return ``(x, y, z)``, the layout file ordering."""
        return (self.x, self.y, self.z)

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Vec3:
        return Vec3(self.x + dx, self.y + dy, self.z + dz)


@dataclass(frozen=True)
class BoundingBox2D:
    """Axis-aligned footprint rectangle on the ground (x/z) plane.

    Attributes:
        min_x: Smallest world x covered.
        min_z: Smallest world z covered.
        max_x: Largest world x covered.
        max_z: Largest world z covered.
    """

    min_x: float
    min_z: float
    max_x: float
    max_z: float

    def __post_init__(self) -> None:
        if self.max_x < self.min_x or self.max_z < self.min_z:
            raise ValueError("Bounding box max corner must not be below min corner")

    @property
    def min(self) -> tuple[float, float]:
        """Minimum corner as ``(x, z)``."""
        return (self.min_x, self.min_z)

    @property
    def max(self) -> tuple[float, float]:
        """Maximum corner as ``(x, z)``."""
        return (self.max_x, self.max_z)

    @property
    def size_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def size_z(self) -> float:
        return self.max_z - self.min_z

    def overlaps(self, other: BoundingBox2D) -> bool:
        """True when the interiors intersect.

        Boxes that only share an edge are separated, so units can be
        placed flush against each other.
        """
        return not (
            self.max_x <= other.min_x
            or self.min_x >= other.max_x
            or self.max_z <= other.min_z
            or self.min_z >= other.max_z
        )


@dataclass(frozen=True)
class OrderLine:
    """One consolidated order line per distinct SKU.

    Attributes:
        sku: Stock keeping unit shared by every item on the line.
        label: Human-readable unit name from the catalogue.
        qty: Number of placed items with this SKU.
        weekly_rate: Rental price per unit per week (AUD).
    """

    sku: str
    label: str
    qty: int
    weekly_rate: float

    def __post_init__(self) -> None:
        if self.qty < 1:
            raise ValueError("Quantity must be at least 1")
        if self.weekly_rate < 0:
            raise ValueError("Weekly rate must be non-negative")

    @property
    def line_total(self) -> float:
        """Weekly cost of the whole line."""
        return self.qty * self.weekly_rate
