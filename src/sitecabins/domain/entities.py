"""Domain entities: placed items and the working set that owns them."""

from __future__ import annotations

import logging
import math
import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field

from .catalogue import DEFAULT_CATALOGUE, Catalogue
from .services.grid import GridStepError, snap_vec3
from .services.rotation import QUARTER_TURN, normalize_yaw
from .value_objects import Vec3

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#c9d1d9"
CLONE_OFFSET = 0.5


def _new_item_id() -> str:
    return str(uuid.uuid4())


@dataclass
class PlacedItem:
    """A catalogued unit placed on the ground plane.

    Attributes:
        unit_type: Catalogue key. An item whose type no longer resolves is
            inert and skipped by geometry and ordering.
        position: World-space position; ``y`` is not used for footprints.
        yaw: Rotation about the vertical axis in radians. Stored as given
            and normalized to a quarter-turn whenever it is used.
        color: Display color, irrelevant to geometry.
        id: Unique identifier, stable for the item's lifetime.
    """

    unit_type: str
    position: Vec3 = field(default_factory=Vec3.origin)
    yaw: float = 0.0
    color: str = DEFAULT_COLOR
    id: str = field(default_factory=_new_item_id)


class WorkingSet:
    """The in-memory collection of placed items.

    The working set is the single writer for its items: all mutation goes
    through :meth:`add`, :meth:`update`, :meth:`remove` and :meth:`clear`
    (plus the :meth:`rotate`, :meth:`clone` and :meth:`move_to`
    conveniences built on them). Operations are synchronous and callers
    must serialize them; nothing derived from an item is cached.

    Example:
        items = WorkingSet()
        office = items.add("office6m", Vec3(0, 0, 0))
        items.rotate(office.id)
    """

    def __init__(self, catalogue: Catalogue = DEFAULT_CATALOGUE) -> None:
        self.catalogue = catalogue
        self._items: dict[str, PlacedItem] = {}

    def __iter__(self) -> Iterator[PlacedItem]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    @property
    def items(self) -> list[PlacedItem]:
        """Snapshot of the placed items in insertion order."""
        return list(self._items.values())

    def get(self, item_id: str) -> PlacedItem | None:
        return self._items.get(item_id)

    def add(self, unit_type: str, position: Vec3 | None = None) -> PlacedItem | None:
        """Place a new unit of ``unit_type`` at ``position``.

        Returns:
            The new item, or None when ``unit_type`` is not catalogued.
        """
        if self.catalogue.resolve(unit_type) is None:
            logger.debug(f"Ignoring add of unknown unit type '{unit_type}'")
            return None
        item = PlacedItem(unit_type=unit_type, position=position or Vec3.origin())
        while item.id in self._items:
            item.id = _new_item_id()
        self._items[item.id] = item
        logger.debug(f"Added {unit_type} as {item.id} at {item.position.as_tuple()}")
        return item

    def update(
        self,
        item_id: str,
        *,
        position: Vec3 | None = None,
        yaw: float | None = None,
        color: str | None = None,
    ) -> None:
        """Patch an item in place. Unknown ids are ignored."""
        item = self._items.get(item_id)
        if item is None:
            logger.debug(f"Ignoring update of unknown item {item_id}")
            return
        if position is not None:
            item.position = position
        if yaw is not None:
            item.yaw = yaw
        if color is not None:
            item.color = color

    def remove(self, item_id: str) -> None:
        if self._items.pop(item_id, None) is not None:
            logger.debug(f"Removed item {item_id}")

    def clear(self) -> None:
        self._items.clear()

    def rotate(self, item_id: str) -> None:
        """Turn an item a further 90 degrees about the vertical axis."""
        item = self._items.get(item_id)
        if item is None:
            return
        self.update(item_id, yaw=normalize_yaw(item.yaw + QUARTER_TURN))

    def clone(self, item_id: str, offset: float = CLONE_OFFSET) -> PlacedItem | None:
        """Add a fresh unit of the same type, offset diagonally from the source.

        The copy starts unrotated with the default color, exactly like a
        newly added unit.
        """
        item = self._items.get(item_id)
        if item is None:
            return None
        return self.add(item.unit_type, item.position.offset(dx=offset, dz=offset))

    def move_to(self, item_id: str, x: float, z: float, step: float) -> None:
        """Move an item to a ground hit point, snapped to the grid.

        Non-finite hit coordinates are skipped; the item keeps its height.
        """
        if not (math.isfinite(x) and math.isfinite(z)):
            logger.debug(f"Skipping move of {item_id} to non-finite point ({x}, {z})")
            return
        item = self._items.get(item_id)
        if item is None:
            return
        self.update(item_id, position=snap_vec3(Vec3(x, item.position.y, z), step))

    def snap_all(self, step: float) -> None:
        """Snap every item's ground position to the grid.

        Raises:
            GridStepError: If ``step`` is zero or negative, before any item moves.
        """
        if step <= 0:
            raise GridStepError(step)
        for item in self._items.values():
            item.position = snap_vec3(item.position, step)
