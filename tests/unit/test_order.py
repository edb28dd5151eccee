"""Unit tests for order consolidation and checkout payload rendering."""

import pytest

from sitecabins.domain import (
    DEFAULT_CATALOGUE,
    Catalogue,
    CatalogueEntry,
    OrderLine,
    PlacedItem,
    UnitDimensions,
)
from sitecabins.domain.services import build_order_lines
from sitecabins.infrastructure.checkout import (
    CheckoutPlatform,
    PayloadRendererRegistry,
    StripePayloadRenderer,
    build_order,
    summarize_order,
    to_minor_units,
)


def make_items(*unit_types: str) -> list[PlacedItem]:
    """Create placed items of the given types at the origin."""
    return [PlacedItem(unit_type=unit_type) for unit_type in unit_types]


@pytest.fixture
def items() -> list[PlacedItem]:
    return make_items("office6m", "office6m", "toilet")


def find_line(lines: list[dict], sku: str) -> dict:
    return next(line for line in lines if line["sku"] == sku)


class TestBuildOrderLines:
    """Tests for build_order_lines()."""

    def test_groups_by_sku(self, items: list[PlacedItem]) -> None:
        lines = build_order_lines(items)
        assert lines == [
            OrderLine(sku="OFF-6", label="Office 6m", qty=2, weekly_rate=210),
            OrderLine(sku="TOI-2", label="Toilet (2 pan)", qty=1, weekly_rate=120),
        ]

    def test_unknown_types_excluded(self) -> None:
        lines = build_order_lines(make_items("toilet", "spaceship", "toilet"))
        assert [(line.sku, line.qty) for line in lines] == [("TOI-2", 2)]

    def test_empty_input(self) -> None:
        assert build_order_lines([]) == []

    @pytest.mark.parametrize(
        "unit_types",
        [
            ("office6m",),
            ("cont20", "cont40", "cont20", "bogus"),
            ("lunch", "ablution", "lunch", "lunch", "nothing", "office12m"),
        ],
    )
    def test_total_quantity_matches_resolved_items(self, unit_types: tuple[str, ...]) -> None:
        lines = build_order_lines(make_items(*unit_types))
        resolved = [t for t in unit_types if t in DEFAULT_CATALOGUE]
        assert sum(line.qty for line in lines) == len(resolved)

    def test_types_sharing_a_sku_are_combined(self) -> None:
        entry = CatalogueEntry("BOX-1", "Box", UnitDimensions(1, 1, 1), 5)
        catalogue = Catalogue({"box": entry})
        lines = build_order_lines(make_items("box", "box"), catalogue)
        assert lines == [OrderLine("BOX-1", "Box", 2, 5)]


class TestGenericPayload:
    """Tests for the generic payload shape."""

    def test_currency_and_lines(self, items: list[PlacedItem]) -> None:
        payload = build_order(items, "generic")
        assert payload["currency"] == "AUD"
        assert len(payload["lines"]) == 2

        office = find_line(payload["lines"], "OFF-6")
        assert office == {"sku": "OFF-6", "label": "Office 6m", "qty": 2, "weekly": 210}
        toilet = find_line(payload["lines"], "TOI-2")
        assert toilet["qty"] == 1
        assert toilet["weekly"] == 120

    def test_default_platform_is_generic(self, items: list[PlacedItem]) -> None:
        assert build_order(items) == build_order(items, "generic")

    @pytest.mark.parametrize("platform", ["paypal", "", "SHOPIFY"])
    def test_unknown_platform_falls_back_to_generic(
        self, items: list[PlacedItem], platform: str
    ) -> None:
        assert build_order(items, platform) == build_order(items, "generic")

    def test_empty_order(self) -> None:
        assert build_order([]) == {"currency": "AUD", "lines": []}


class TestShopifyPayload:
    """Tests for the Shopify payload shape."""

    def test_items_keep_sku_and_quantity_only(self, items: list[PlacedItem]) -> None:
        payload = build_order(items, "shopify")
        assert payload == {
            "items": [
                {"sku": "OFF-6", "quantity": 2},
                {"sku": "TOI-2", "quantity": 1},
            ]
        }

    def test_accepts_enum_member(self, items: list[PlacedItem]) -> None:
        assert build_order(items, CheckoutPlatform.SHOPIFY) == build_order(items, "shopify")


class TestStripePayload:
    """Tests for the Stripe payload shape."""

    def test_toilet_line(self, items: list[PlacedItem]) -> None:
        payload = build_order(items, "stripe")
        line = next(
            li
            for li in payload["line_items"]
            if li["price_data"]["product_data"]["metadata"]["sku"] == "TOI-2"
        )
        assert line["quantity"] == 1
        assert line["price_data"]["currency"] == "aud"
        assert line["price_data"]["unit_amount"] == 12000
        assert line["price_data"]["product_data"]["name"] == "Toilet (2 pan)"

    def test_office_line_quantity(self, items: list[PlacedItem]) -> None:
        payload = build_order(items, "stripe")
        office = payload["line_items"][0]
        assert office["quantity"] == 2
        assert office["price_data"]["unit_amount"] == 21000

    def test_unit_amount_is_an_integer(self) -> None:
        catalogue = Catalogue(
            {"kiosk": CatalogueEntry("KSK-1", "Kiosk", UnitDimensions(2, 2, 2), 19.99)}
        )
        payload = build_order(make_items("kiosk"), "stripe", catalogue)
        amount = payload["line_items"][0]["price_data"]["unit_amount"]
        assert amount == 1999
        assert isinstance(amount, int)


class TestToMinorUnits:
    """Tests for to_minor_units()."""

    @pytest.mark.parametrize(
        "amount, cents",
        [(120, 12000), (0, 0), (19.99, 1999), (0.125, 13), (99.995, 10000), (10.004, 1000)],
    )
    def test_conversion(self, amount: float, cents: int) -> None:
        assert to_minor_units(amount) == cents


class TestPayloadRendererRegistry:
    """Tests for the renderer registry and platform resolution."""

    def test_all_platforms_registered(self) -> None:
        assert PayloadRendererRegistry.available_platforms() == [
            "generic",
            "shopify",
            "stripe",
        ]

    def test_get_returns_renderer_class(self) -> None:
        assert PayloadRendererRegistry.get(CheckoutPlatform.STRIPE) is StripePayloadRenderer

    def test_from_identifier(self) -> None:
        assert CheckoutPlatform.from_identifier("stripe") is CheckoutPlatform.STRIPE
        assert CheckoutPlatform.from_identifier("unknown") is CheckoutPlatform.GENERIC


class TestOrderSummary:
    """Tests for summarize_order()."""

    def test_totals(self, items: list[PlacedItem]) -> None:
        summary = summarize_order(items)
        assert summary.total_quantity == 3
        assert summary.total_weekly == 2 * 210 + 120
