"""Application commands operating on a whole working set."""

from __future__ import annotations

from dataclasses import dataclass, field

from sitecabins.domain import BoundingBox2D, WorkingSet
from sitecabins.domain.services import aabb_from, find_overlaps
from sitecabins.infrastructure.checkout import OrderSummary, summarize_order


@dataclass(frozen=True)
class ItemFootprint:
    """Footprint of one resolved item, as reported to the user."""

    item_id: str
    unit_type: str
    box: BoundingBox2D


@dataclass(frozen=True)
class LayoutReport:
    """Result of checking a layout.

    Attributes:
        footprints: Footprints of every item whose type resolves.
        orphaned_ids: Ids of items whose type no longer resolves.
        overlaps: Colliding item id pairs.
        order: Consolidated order for the resolved items.
    """

    footprints: tuple[ItemFootprint, ...] = field(default_factory=tuple)
    orphaned_ids: tuple[str, ...] = field(default_factory=tuple)
    overlaps: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    order: OrderSummary = field(default_factory=lambda: OrderSummary(lines=()))

    @property
    def has_overlaps(self) -> bool:
        return bool(self.overlaps)

    @property
    def overlapping_ids(self) -> set[str]:
        return {item_id for pair in self.overlaps for item_id in pair}


class CheckLayoutCommand:
    """Derive footprints, collisions and the order for a working set."""

    def execute(self, working_set: WorkingSet) -> LayoutReport:
        catalogue = working_set.catalogue
        footprints = []
        orphaned = []
        for item in working_set:
            box = aabb_from(item, catalogue)
            if box is None:
                orphaned.append(item.id)
            else:
                footprints.append(ItemFootprint(item.id, item.unit_type, box))

        return LayoutReport(
            footprints=tuple(footprints),
            orphaned_ids=tuple(orphaned),
            overlaps=tuple(find_overlaps(working_set, catalogue)),
            order=summarize_order(working_set, catalogue),
        )
