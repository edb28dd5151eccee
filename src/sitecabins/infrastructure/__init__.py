"""Infrastructure layer: checkout payload rendering."""

from sitecabins.infrastructure.checkout import (
    CheckoutPlatform,
    OrderSummary,
    PayloadRenderer,
    PayloadRendererRegistry,
    build_order,
    summarize_order,
)

__all__ = [
    "CheckoutPlatform",
    "OrderSummary",
    "PayloadRenderer",
    "PayloadRendererRegistry",
    "build_order",
    "summarize_order",
]
