"""Unit tests for grid snapping and grid step cycling."""

import pytest

from sitecabins.domain import Vec3
from sitecabins.domain.services import (
    DEFAULT_GRID_STEP,
    GridStep,
    GridStepError,
    clamp,
    next_grid_step,
    snap,
    snap_vec3,
)


class TestSnap:
    """Tests for snap()."""

    def test_rounds_to_nearest_whole_step(self) -> None:
        assert snap(0.49, 1) == 0
        assert snap(0.51, 1) == 1

    def test_rounds_to_nearest_half_step(self) -> None:
        assert snap(1.24, 0.5) == 1.0
        assert snap(1.26, 0.5) == 1.5

    def test_quarter_step(self) -> None:
        assert snap(0.9, 0.25) == 1.0
        assert snap(0.3, 0.25) == 0.25

    def test_negative_values(self) -> None:
        assert snap(-0.74, 0.5) == -0.5
        assert snap(-1.3, 1) == -1

    def test_halfway_rounds_away_from_zero(self) -> None:
        assert snap(0.5, 1) == 1
        assert snap(-0.5, 1) == -1
        assert snap(2.5, 1) == 3

    def test_small_negative_gives_positive_zero(self) -> None:
        assert str(snap(-0.2, 1)) == "0.0"

    @pytest.mark.parametrize("value", [-3.7, -0.26, 0.0, 0.13, 1.26, 4.75, 99.9])
    @pytest.mark.parametrize("step", [1.0, 0.5, 0.25])
    def test_idempotent(self, value: float, step: float) -> None:
        once = snap(value, step)
        assert snap(once, step) == once

    @pytest.mark.parametrize("step", [0, -1, -0.5])
    def test_non_positive_step_rejected(self, step: float) -> None:
        with pytest.raises(GridStepError, match="must be positive"):
            snap(1.0, step)

    def test_grid_step_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            snap(1.0, 0)

    def test_accepts_grid_step_members(self) -> None:
        assert snap(1.26, GridStep.MEDIUM) == 1.5


class TestSnapVec3:
    """Tests for snap_vec3()."""

    def test_snaps_x_and_z_keeps_y(self) -> None:
        assert snap_vec3(Vec3(1.26, 2, -0.74), 0.5) == Vec3(1.5, 2, -0.5)

    def test_y_is_not_snapped(self) -> None:
        assert snap_vec3(Vec3(0.1, 1.37, 0.1), 1).y == 1.37

    def test_non_positive_step_rejected(self) -> None:
        with pytest.raises(GridStepError):
            snap_vec3(Vec3(1, 0, 1), 0)


class TestGridStepCycle:
    """Tests for the grid step hotkey cycle."""

    def test_default_is_coarse(self) -> None:
        assert DEFAULT_GRID_STEP == 1.0

    def test_cycle_order(self) -> None:
        assert next_grid_step(1.0) is GridStep.MEDIUM
        assert next_grid_step(0.5) is GridStep.FINE
        assert next_grid_step(0.25) is GridStep.COARSE

    def test_unknown_step_restarts_cycle(self) -> None:
        assert next_grid_step(0.1) is GridStep.COARSE


class TestClamp:
    """Tests for clamp()."""

    def test_within_range(self) -> None:
        assert clamp(5, 0, 10) == 5

    def test_below_and_above(self) -> None:
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10
