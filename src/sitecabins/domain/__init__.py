"""Placement domain: catalogue, placed items, geometry and ordering."""

from .catalogue import DEFAULT_CATALOGUE, Catalogue, CatalogueEntry
from .entities import CLONE_OFFSET, DEFAULT_COLOR, PlacedItem, WorkingSet
from .value_objects import BoundingBox2D, OrderLine, UnitDimensions, Vec3

__all__ = [
    "BoundingBox2D",
    "CLONE_OFFSET",
    "Catalogue",
    "CatalogueEntry",
    "DEFAULT_CATALOGUE",
    "DEFAULT_COLOR",
    "OrderLine",
    "PlacedItem",
    "UnitDimensions",
    "Vec3",
    "WorkingSet",
]
