"""Consolidation of placed items into priced order lines."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..catalogue import DEFAULT_CATALOGUE, Catalogue
from ..value_objects import OrderLine

if TYPE_CHECKING:
    from ..entities import PlacedItem

logger = logging.getLogger(__name__)


def build_order_lines(
    items: Iterable[PlacedItem],
    catalogue: Catalogue = DEFAULT_CATALOGUE,
) -> list[OrderLine]:
    """Group items by SKU into order lines.

    Items whose type does not resolve are left out. Lines come out in the
    order each SKU was first seen; consumers should not rely on it.
    """
    counts: dict[str, int] = {}
    entries = {}
    for item in items:
        entry = catalogue.resolve(item.unit_type)
        if entry is None:
            logger.debug(
                f"Excluding item {item.id} with unknown unit type '{item.unit_type}'"
            )
            continue
        counts[entry.sku] = counts.get(entry.sku, 0) + 1
        entries.setdefault(entry.sku, entry)

    return [
        OrderLine(
            sku=sku,
            label=entries[sku].label,
            qty=qty,
            weekly_rate=entries[sku].weekly_rate,
        )
        for sku, qty in counts.items()
    ]
