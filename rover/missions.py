"""
Reference Missions Module

Defines the reference rover missions:
- Function: build_reference_missions() -> list[Mission]
- Four scenarios with known final states and scuff counts
- Function: parse_instructions(text) -> list[str] for compact instruction strings
"""

from pydantic import BaseModel, Field

from .models import Coordinates, Facing, Instruction, RoverState


class Mission(BaseModel):
    """A starting state, its instructions, and the expected outcome."""
    name: str = Field(..., description="Short mission name")
    start: RoverState = Field(..., description="Starting rover state")
    instructions: list[Instruction] = Field(..., description="Ordered instructions")
    expected_final_state: RoverState = Field(..., description="State after all instructions")
    expected_scuffs: int = Field(..., ge=0, description="Rejected forward moves")


def parse_instructions(text: str) -> list[str]:
    """
    Split a compact instruction string into symbols.

    Whitespace and commas are ignored, so "FLR", "F L R" and "F, L, R" all
    give ['F', 'L', 'R']. No validation is done here; unknown symbols are
    passed through for the simulator to reject.
    """
    return [ch for ch in text if not ch.isspace() and ch != ","]


def _state(x: int, y: int, facing: Facing) -> RoverState:
    return RoverState(coordinates=Coordinates(x=x, y=y), facing=facing)


def _mission(
    name: str,
    start: RoverState,
    instructions: str,
    final: RoverState,
    scuffs: int,
) -> Mission:
    return Mission(
        name=name,
        start=start,
        instructions=[Instruction(s) for s in parse_instructions(instructions)],
        expected_final_state=final,
        expected_scuffs=scuffs,
    )


def build_reference_missions() -> list[Mission]:
    """
    Build the four reference missions.

    One crosses the grid without touching an edge, two and four bump into
    grid edges, and three loops back to its starting cell.

    Returns:
        list[Mission]: fresh mission objects on every call
    """
    return [
        # (0,2) E -> (4,1) N, no edge contact
        _mission(
            "one",
            _state(0, 2, Facing.EAST),
            "FLFRFFFRFFRR",
            _state(4, 1, Facing.NORTH),
            0,
        ),
        # (4,4) S -> (0,1) W, one scuff on the east edge
        _mission(
            "two",
            _state(4, 4, Facing.SOUTH),
            "LFLLFFLFFFRFF",
            _state(0, 1, Facing.WEST),
            1,
        ),
        # (2,2) W -> (2,2) N, figure-eight back to the start
        _mission(
            "three",
            _state(2, 2, Facing.WEST),
            "FLFLFLFRFRFRFRF",
            _state(2, 2, Facing.NORTH),
            0,
        ),
        # (1,3) N -> (0,0) S, one scuff on each of the north, west and south edges
        _mission(
            "four",
            _state(1, 3, Facing.NORTH),
            "FFLFFLFFFFF",
            _state(0, 0, Facing.SOUTH),
            3,
        ),
    ]
