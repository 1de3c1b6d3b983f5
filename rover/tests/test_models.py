"""
Tests for rover data models.

Tests verify:
- Facing rotation wraps around modulo four
- Grid bounds are inclusive on both axes
- Step deltas match the compass (north is +y, east is +x)
- Pydantic coercion of raw symbols
"""

import pytest
from pydantic import ValidationError

from rover.models import (
    GRID_MAX,
    GRID_MIN,
    Coordinates,
    Facing,
    Instruction,
    RoverState,
    SimulationResult,
)


class TestFacing:
    """Test facing arithmetic."""

    def test_ordinals_follow_clockwise_order(self):
        """Verify N, E, S, W map to 0..3."""
        assert [f.ordinal for f in (Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST)] == [0, 1, 2, 3]

    def test_right_turn_wraps_west_to_north(self):
        """Verify turning clockwise from W gives N."""
        assert Facing.WEST.turned(1) == Facing.NORTH

    def test_left_turn_wraps_north_to_west(self):
        """Verify turning counter-clockwise from N gives W."""
        assert Facing.NORTH.turned(-1) == Facing.WEST

    @pytest.mark.parametrize("facing", list(Facing))
    def test_half_turn_is_opposite(self, facing):
        """Verify two quarter turns either way land on the same facing."""
        assert facing.turned(2) == facing.turned(-2)
        assert facing.turned(2) != facing

    def test_symbols(self):
        """Verify facing symbols are single letters."""
        assert [f.value for f in Facing] == ["N", "E", "S", "W"]


class TestCoordinates:
    """Test grid bounds and stepping."""

    def test_grid_is_five_by_five(self):
        """Verify the grid spans 0..4 on both axes."""
        assert (GRID_MIN.x, GRID_MIN.y) == (0, 0)
        assert (GRID_MAX.x, GRID_MAX.y) == (4, 4)

    @pytest.mark.parametrize("x,y", [(0, 0), (4, 4), (0, 4), (4, 0), (2, 3)])
    def test_inside_grid(self, x, y):
        """Verify corners and interior cells are inside."""
        assert Coordinates(x=x, y=y).is_within_grid()

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 5)])
    def test_outside_grid(self, x, y):
        """Verify cells one past each edge are outside."""
        assert not Coordinates(x=x, y=y).is_within_grid()

    def test_stepped_does_not_mutate(self):
        """Verify stepped() returns a new cell."""
        origin = Coordinates(x=2, y=2)
        moved = origin.stepped(Facing.NORTH)

        assert moved == Coordinates(x=2, y=3)
        assert origin == Coordinates(x=2, y=2)

    def test_label(self):
        """Verify coordinates render without a space."""
        assert Coordinates(x=0, y=5).label() == "(0,5)"


class TestModelCoercion:
    """Test pydantic validation of the models."""

    def test_rover_state_accepts_symbol(self):
        """Verify 'E' is coerced to Facing.EAST."""
        state = RoverState(coordinates=Coordinates(x=1, y=1), facing="E")
        assert state.facing is Facing.EAST
        assert state.label() == "(1,1) E"

    def test_rover_state_rejects_unknown_symbol(self):
        """Verify construction rejects an unknown facing symbol."""
        with pytest.raises(ValidationError):
            RoverState(coordinates=Coordinates(x=1, y=1), facing="Q")

    def test_instruction_symbols(self):
        """Verify instruction symbols are F, L, R."""
        assert [i.value for i in Instruction] == ["F", "L", "R"]

    def test_negative_scuffs_rejected(self):
        """Verify a result cannot carry a negative scuff count."""
        state = RoverState(coordinates=Coordinates(x=0, y=0), facing=Facing.NORTH)
        with pytest.raises(ValidationError):
            SimulationResult(final_state=state, scuffs=-1)

    def test_result_as_tuple(self):
        """Verify as_tuple() returns (final_state, scuffs)."""
        state = RoverState(coordinates=Coordinates(x=0, y=0), facing=Facing.NORTH)
        final_state, scuffs = SimulationResult(final_state=state, scuffs=2).as_tuple()

        assert final_state == state
        assert scuffs == 2
