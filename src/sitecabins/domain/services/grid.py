"""Grid snapping for drag coordinates."""

from __future__ import annotations

import math
from enum import Enum

from ..value_objects import Vec3


class GridStepError(ValueError):
    """Raised when a snapping step is not a positive number."""

    def __init__(self, step: float) -> None:
        self.step = step
        super().__init__(f"Grid step must be positive, got {step!r}")


class GridStep(float, Enum):
    """Grid sizes offered to the user, cycled with the grid hotkey."""

    COARSE = 1.0
    MEDIUM = 0.5
    FINE = 0.25


DEFAULT_GRID_STEP = GridStep.COARSE

_CYCLE = (GridStep.COARSE, GridStep.MEDIUM, GridStep.FINE)


def next_grid_step(step: float) -> GridStep:
    """Return the grid step after ``step`` in the 1 -> 0.5 -> 0.25 cycle.

    Any step outside the cycle restarts it at the coarse grid.
    """
    for index, candidate in enumerate(_CYCLE):
        if step == candidate.value:
            return _CYCLE[(index + 1) % len(_CYCLE)]
    return GridStep.COARSE


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def snap(value: float, step: float) -> float:
    """Round ``value`` to the nearest multiple of ``step``.

    Halfway values round away from zero.

    Raises:
        GridStepError: If ``step`` is zero or negative.
    """
    if step <= 0:
        raise GridStepError(step)
    # + 0.0 folds a negative zero into 0.0
    return _round_half_away(value / step) * step + 0.0


def snap_vec3(vec: Vec3, step: float) -> Vec3:
    """Snap ``x`` and ``z`` to the grid; ``y`` passes through unchanged."""
    return Vec3(snap(vec.x, step), vec.y, snap(vec.z, step))
