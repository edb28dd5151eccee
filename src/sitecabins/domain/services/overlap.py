"""Pairwise footprint collision detection over a set of placed items.

Every query is a linear scan against freshly derived bounding boxes. That
is fine for the tens of units a site plan holds; no spatial index is kept.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..catalogue import DEFAULT_CATALOGUE, Catalogue
from ..value_objects import BoundingBox2D
from .geometry import aabb_from

if TYPE_CHECKING:
    from ..entities import PlacedItem

__all__ = [
    "find_overlaps",
    "overlapping_ids",
    "overlaps_any",
]


def _footprints(
    items: Iterable[PlacedItem], catalogue: Catalogue
) -> list[tuple[str, BoundingBox2D]]:
    footprints = []
    for item in items:
        box = aabb_from(item, catalogue)
        if box is not None:
            footprints.append((item.id, box))
    return footprints


def overlaps_any(
    item_id: str,
    items: Iterable[PlacedItem],
    catalogue: Catalogue = DEFAULT_CATALOGUE,
) -> bool:
    """Check whether one item collides with any other item.

    Args:
        item_id: Id of the item to test.
        items: The working set (or any iterable of placed items).
        catalogue: Catalogue used to resolve dimensions.

    Returns:
        True on the first collision found. False when the item is absent,
        is itself orphaned, or nothing else collides with it.
    """
    footprints = _footprints(items, catalogue)
    target = next((box for fid, box in footprints if fid == item_id), None)
    if target is None:
        return False
    return any(target.overlaps(box) for fid, box in footprints if fid != item_id)


def find_overlaps(
    items: Iterable[PlacedItem],
    catalogue: Catalogue = DEFAULT_CATALOGUE,
) -> list[tuple[str, str]]:
    """Return every colliding pair of item ids, each pair listed once."""
    footprints = _footprints(items, catalogue)
    pairs = []
    for index, (first_id, first_box) in enumerate(footprints):
        for second_id, second_box in footprints[index + 1 :]:
            if first_box.overlaps(second_box):
                pairs.append((first_id, second_id))
    return pairs


def overlapping_ids(
    items: Iterable[PlacedItem],
    catalogue: Catalogue = DEFAULT_CATALOGUE,
) -> set[str]:
    """Ids of every item that collides with at least one other item."""
    return {item_id for pair in find_overlaps(items, catalogue) for item_id in pair}
