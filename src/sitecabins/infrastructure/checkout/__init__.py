"""Checkout payload rendering for generic, Shopify and Stripe targets.

Usage:
    from sitecabins.infrastructure.checkout import build_order

    payload = build_order(working_set, platform="stripe")
"""

from sitecabins.infrastructure.checkout.base import (
    CURRENCY,
    CheckoutPlatform,
    PayloadRenderer,
    PayloadRendererRegistry,
)

# Import renderers to trigger registration
from sitecabins.infrastructure.checkout.renderers import (
    GenericPayloadRenderer,
    ShopifyPayloadRenderer,
    StripePayloadRenderer,
    to_minor_units,
)
from sitecabins.infrastructure.checkout.order import (
    OrderSummary,
    build_order,
    summarize_order,
)

__all__ = [
    "CURRENCY",
    "CheckoutPlatform",
    "GenericPayloadRenderer",
    "OrderSummary",
    "PayloadRenderer",
    "PayloadRendererRegistry",
    "ShopifyPayloadRenderer",
    "StripePayloadRenderer",
    "build_order",
    "summarize_order",
    "to_minor_units",
]
