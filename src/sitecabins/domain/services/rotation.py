"""Quarter-turn rotation normalization.

Only orthogonal placements are supported. Any yaw, including negative and
multi-revolution values, is reduced to one of 0, pi/2, pi or 3*pi/2
radians before it is used for footprint math.
"""

from __future__ import annotations

import math

from ..value_objects import UnitDimensions

TAU = 2 * math.pi
QUARTER_TURN = math.pi / 2


def quarter_turns(yaw: float) -> int:
    """Return the number of quarter-turns (0-3) nearest to ``yaw``.

    Ties exactly halfway between two quarter-turns round up to the
    higher one.
    """
    angle = yaw % TAU
    return math.floor(angle / QUARTER_TURN + 0.5) % 4


def normalize_yaw(yaw: float) -> float:
    """Snap ``yaw`` (radians) to the nearest quarter-turn in ``[0, 2*pi)``."""
    return quarter_turns(yaw) * QUARTER_TURN


def dims_for_yaw(dims: UnitDimensions, yaw: float) -> UnitDimensions:
    """Footprint dimensions as occupied in world space after rotation.

    Length and width swap on 90 and 270 degree turns; height is unchanged.
    """
    if quarter_turns(yaw) % 2:
        return dims.swapped()
    return dims
