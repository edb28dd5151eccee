"""FastAPI dependency injection for the layout services."""

from typing import Annotated

from fastapi import Depends

from sitecabins.domain import DEFAULT_CATALOGUE, Catalogue, Vec3, WorkingSet
from sitecabins.web.schemas.requests import PlacedItemSchema


def get_catalogue() -> Catalogue:
    """Dependency for the unit catalogue."""
    return DEFAULT_CATALOGUE


CatalogueDep = Annotated[Catalogue, Depends(get_catalogue)]


def build_working_set(
    items: list[PlacedItemSchema], catalogue: Catalogue
) -> tuple[WorkingSet, dict[str, int]]:
    """Build a per-request working set.

    Returns:
        The working set and a map from generated item id to the item's
        index in the request. Items with unknown types are not added.
    """
    working_set = WorkingSet(catalogue)
    indexes: dict[str, int] = {}
    for index, schema in enumerate(items):
        item = working_set.add(schema.type, Vec3.from_sequence(schema.position))
        if item is None:
            continue
        working_set.update(item.id, yaw=schema.yaw, color=schema.color)
        indexes[item.id] = index
    return working_set, indexes
