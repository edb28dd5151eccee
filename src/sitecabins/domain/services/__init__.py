"""Pure domain services: rotation, grid snapping, footprints, overlap, ordering."""

from .geometry import aabb_from, aabb_overlap
from .grid import (
    DEFAULT_GRID_STEP,
    GridStep,
    GridStepError,
    clamp,
    next_grid_step,
    snap,
    snap_vec3,
)
from .order import build_order_lines
from .overlap import find_overlaps, overlapping_ids, overlaps_any
from .rotation import QUARTER_TURN, TAU, dims_for_yaw, normalize_yaw, quarter_turns

__all__ = [
    "DEFAULT_GRID_STEP",
    "GridStep",
    "GridStepError",
    "QUARTER_TURN",
    "TAU",
    "aabb_from",
    "aabb_overlap",
    "build_order_lines",
    "clamp",
    "dims_for_yaw",
    "find_overlaps",
    "next_grid_step",
    "normalize_yaw",
    "overlapping_ids",
    "overlaps_any",
    "quarter_turns",
    "snap",
    "snap_vec3",
]
