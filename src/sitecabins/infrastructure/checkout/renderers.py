"""Payload renderers for the supported checkout platforms.

Only the generic shape carries labels and rates. Shopify and Stripe
payloads keep the SKU so the caller can map it to variant or price ids.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any, ClassVar

from sitecabins.infrastructure.checkout.base import (
    CURRENCY,
    CheckoutPlatform,
    PayloadRendererRegistry,
)

if TYPE_CHECKING:
    from sitecabins.domain.value_objects import OrderLine


def to_minor_units(amount: float) -> int:
    """Convert a dollar amount to whole cents, rounding half up."""
    cents = Decimal(str(amount)) * 100
    return int(cents.to_integral_value(rounding=ROUND_HALF_UP))


@PayloadRendererRegistry.register(CheckoutPlatform.GENERIC)
class GenericPayloadRenderer:
    """``{currency, lines}`` with sku, label, qty and weekly rate per line."""

    platform: ClassVar[CheckoutPlatform] = CheckoutPlatform.GENERIC

    def render(self, lines: list[OrderLine]) -> dict[str, Any]:
        return {
            "currency": CURRENCY,
            "lines": [
                {
                    "sku": line.sku,
                    "label": line.label,
                    "qty": line.qty,
                    "weekly": line.weekly_rate,
                }
                for line in lines
            ],
        }


@PayloadRendererRegistry.register(CheckoutPlatform.SHOPIFY)
class ShopifyPayloadRenderer:
    """``{items: [{sku, quantity}]}``; variant lookup is left to the caller."""

    platform: ClassVar[CheckoutPlatform] = CheckoutPlatform.SHOPIFY

    def render(self, lines: list[OrderLine]) -> dict[str, Any]:
        return {"items": [{"sku": line.sku, "quantity": line.qty} for line in lines]}


@PayloadRendererRegistry.register(CheckoutPlatform.STRIPE)
class StripePayloadRenderer:
    """Stripe Checkout ``line_items`` with inline ``price_data`` in cents."""

    platform: ClassVar[CheckoutPlatform] = CheckoutPlatform.STRIPE

    def render(self, lines: list[OrderLine]) -> dict[str, Any]:
        return {
            "line_items": [
                {
                    "quantity": line.qty,
                    "price_data": {
                        "currency": CURRENCY.lower(),
                        "unit_amount": to_minor_units(line.weekly_rate),
                        "product_data": {
                            "name": line.label,
                            "metadata": {"sku": line.sku},
                        },
                    },
                }
                for line in lines
            ]
        }
