"""Order building: consolidate a working set and render it for checkout."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sitecabins.domain.catalogue import DEFAULT_CATALOGUE, Catalogue
from sitecabins.domain.services import build_order_lines
from sitecabins.infrastructure.checkout.base import (
    CheckoutPlatform,
    PayloadRendererRegistry,
)

if TYPE_CHECKING:
    from sitecabins.domain.entities import PlacedItem
    from sitecabins.domain.value_objects import OrderLine


@dataclass(frozen=True)
class OrderSummary:
    """Consolidated order with totals, used for previews.

    Attributes:
        lines: One line per distinct SKU.
    """

    lines: tuple[OrderLine, ...]

    @property
    def total_quantity(self) -> int:
        return sum(line.qty for line in self.lines)

    @property
    def total_weekly(self) -> float:
        """Weekly rental cost of the whole order (AUD)."""
        return sum(line.line_total for line in self.lines)


def summarize_order(
    items: Iterable[PlacedItem], catalogue: Catalogue = DEFAULT_CATALOGUE
) -> OrderSummary:
    return OrderSummary(lines=tuple(build_order_lines(items, catalogue)))


def build_order(
    items: Iterable[PlacedItem],
    platform: str | CheckoutPlatform = CheckoutPlatform.GENERIC,
    catalogue: Catalogue = DEFAULT_CATALOGUE,
) -> dict[str, Any]:
    """Build a checkout payload for the placed items.

    Args:
        items: Placed items; items with an unknown type are left out.
        platform: Target platform name. Unknown names produce the generic
            payload.
        catalogue: Catalogue used to resolve SKUs, labels and rates.

    Returns:
        A JSON-serializable payload in the platform's shape.
    """
    target = CheckoutPlatform.from_identifier(platform)
    renderer = PayloadRendererRegistry.get(target)()
    return renderer.render(build_order_lines(items, catalogue))
