"""Catalogue of purchasable site-cabin and container units."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .value_objects import UnitDimensions


@dataclass(frozen=True)
class CatalogueEntry:
    """A purchasable unit type.

    Attributes:
        sku: Stock keeping unit, unique per entry.
        label: Human-readable name shown to the user.
        dims: Unit dimensions at yaw 0.
        weekly_rate: Rental price per unit per week (AUD).
    """

    sku: str
    label: str
    dims: UnitDimensions
    weekly_rate: float

    def __post_init__(self) -> None:
        if not self.sku:
            raise ValueError("sku must not be empty")
        if self.weekly_rate < 0:
            raise ValueError("Weekly rate must be non-negative")


class Catalogue(Mapping[str, CatalogueEntry]):
    """Read-only mapping from unit type identifier to catalogue entry.

    Lookups with an unknown type return None from :meth:`resolve` rather
    than raising, so callers can drop unresolved items quietly.
    """

    def __init__(self, entries: Mapping[str, CatalogueEntry]) -> None:
        skus = [entry.sku for entry in entries.values()]
        duplicates = sorted({sku for sku in skus if skus.count(sku) > 1})
        if duplicates:
            raise ValueError(f"Duplicate SKUs in catalogue: {', '.join(duplicates)}")
        self._entries = dict(entries)

    def __getitem__(self, unit_type: str) -> CatalogueEntry:
        return self._entries[unit_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalogue({sorted(self._entries)!r})"

    def resolve(self, unit_type: str) -> CatalogueEntry | None:
        """Look up a unit type, returning None when it is not catalogued."""
        return self._entries.get(unit_type)

    def merged(self, overrides: Mapping[str, CatalogueEntry]) -> Catalogue:
        """Return a new catalogue with ``overrides`` replacing or adding entries."""
        return Catalogue({**self._entries, **overrides})


DEFAULT_CATALOGUE = Catalogue(
    {
        "office6m": CatalogueEntry("OFF-6", "Office 6m", UnitDimensions(6, 3, 2.7), 210),
        "office12m": CatalogueEntry(
            "OFF-12", "Office 12m", UnitDimensions(12, 3, 2.7), 380
        ),
        "toilet": CatalogueEntry(
            "TOI-2", "Toilet (2 pan)", UnitDimensions(2.4, 1.4, 2.7), 120
        ),
        "ablution": CatalogueEntry(
            "ABL-6", "Ablution 6m", UnitDimensions(6, 3, 2.7), 260
        ),
        "lunch": CatalogueEntry("LUN-6", "Lunchroom 6m", UnitDimensions(6, 3, 2.7), 230),
        "cont20": CatalogueEntry(
            "CON-20", "Container 20ft", UnitDimensions(6.06, 2.44, 2.59), 75
        ),
        "cont40": CatalogueEntry(
            "CON-40", "Container 40ft", UnitDimensions(12.19, 2.44, 2.59), 120
        ),
    }
)
