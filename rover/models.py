"""
Core data models for the rover simulator.

These models define the domain objects used throughout the system:
- Facing and instruction symbols
- Grid coordinates and bounds
- Rover state, per-instruction trace events, and simulation results
"""

from enum import Enum
from pydantic import BaseModel, Field


class Facing(str, Enum):
    """Cardinal direction the rover points, in clockwise order."""
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def ordinal(self) -> int:
        """Position in the clockwise cycle N=0, E=1, S=2, W=3."""
        return _FACING_CYCLE.index(self)

    def turned(self, steps: int) -> "Facing":
        """Return the facing after `steps` quarter turns (positive is clockwise)."""
        return _FACING_CYCLE[(self.ordinal + steps) % len(_FACING_CYCLE)]


_FACING_CYCLE: list[Facing] = [Facing.NORTH, Facing.EAST, Facing.SOUTH, Facing.WEST]


class Instruction(str, Enum):
    """Movement instruction symbols."""
    FORWARD = "F"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"


class Coordinates(BaseModel):
    """A grid cell, zero-indexed from the south-west corner."""
    x: int = Field(..., description="Column, increasing to the east")
    y: int = Field(..., description="Row, increasing to the north")

    def is_within_grid(self) -> bool:
        """Check the cell lies inside the fixed grid, bounds inclusive."""
        return (
            GRID_MIN.x <= self.x <= GRID_MAX.x
            and GRID_MIN.y <= self.y <= GRID_MAX.y
        )

    def stepped(self, facing: Facing) -> "Coordinates":
        """Return the neighbouring cell one unit ahead in `facing`."""
        dx, dy = _STEP_DELTAS[facing]
        return Coordinates(x=self.x + dx, y=self.y + dy)

    def label(self) -> str:
        """Render as '(x,y)'."""
        return f"({self.x},{self.y})"


# Fixed 5x5 grid
GRID_MIN = Coordinates(x=0, y=0)
GRID_MAX = Coordinates(x=4, y=4)

_STEP_DELTAS: dict[Facing, tuple[int, int]] = {
    Facing.NORTH: (0, 1),
    Facing.EAST: (1, 0),
    Facing.SOUTH: (0, -1),
    Facing.WEST: (-1, 0),
}


class RoverState(BaseModel):
    """Complete rover state: where it is and which way it points."""
    coordinates: Coordinates = Field(..., description="Current grid cell")
    facing: Facing = Field(..., description="Current facing direction")

    def label(self) -> str:
        """Render as '(x,y) F', e.g. '(0,2) E'."""
        return f"{self.coordinates.label()} {self.facing.value}"


class TraceEvent(BaseModel):
    """Rover state recorded after a single instruction has been applied."""
    instruction_number: int = Field(..., description="1-based position in the instruction list")
    instruction: Instruction = Field(..., description="Instruction that was applied")
    coordinates: Coordinates = Field(..., description="Coordinates after the instruction")
    facing: Facing = Field(..., description="Facing after the instruction")
    scuffs: int = Field(..., description="Running scuff count after the instruction")


class SimulationResult(BaseModel):
    """Result of a single simulation run."""
    final_state: RoverState = Field(..., description="Rover state after all instructions")
    scuffs: int = Field(..., ge=0, description="Number of rejected forward moves")

    def as_tuple(self) -> tuple[RoverState, int]:
        """Return (final_state, scuffs)."""
        return self.final_state, self.scuffs
