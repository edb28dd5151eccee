"""Footprint derivation for placed items.

Bounding boxes are recomputed from an item's current state on every call
and never stored, so they cannot go stale after a mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..catalogue import DEFAULT_CATALOGUE, Catalogue
from ..value_objects import BoundingBox2D
from .rotation import dims_for_yaw

if TYPE_CHECKING:
    from ..entities import PlacedItem


def aabb_from(
    item: PlacedItem, catalogue: Catalogue = DEFAULT_CATALOGUE
) -> BoundingBox2D | None:
    """Compute the axis-aligned footprint of ``item`` on the x/z plane.

    Args:
        item: The placed item.
        catalogue: Catalogue used to resolve the item's dimensions.

    Returns:
        The footprint centred on the item's position, or None when the
        item's type does not resolve in ``catalogue``.
    """
    entry = catalogue.resolve(item.unit_type)
    if entry is None:
        return None
    dims = dims_for_yaw(entry.dims, item.yaw)
    half_x = dims.length / 2
    half_z = dims.width / 2
    x, z = item.position.x, item.position.z
    return BoundingBox2D(
        min_x=x - half_x,
        min_z=z - half_z,
        max_x=x + half_x,
        max_z=z + half_z,
    )


def aabb_overlap(a: BoundingBox2D, b: BoundingBox2D) -> bool:
    """True when two footprints overlap. Touching edges do not count."""
    return a.overlaps(b)
