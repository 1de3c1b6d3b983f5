"""
Input validation errors raised by the rover simulator.

All of them are raised before any instruction is applied. A forward move
that would leave the grid is not an error; it is counted as a scuff.
"""

from typing import Any, Sequence


class RoverInputError(ValueError):
    """
    Base class for rejected simulation input.

    Carries structured error information for observability:
    - code: error category (e.g., 'INVALID_START_COORDINATES')
    - message: human-readable error description
    - details: dict with the offending values
    """

    code = "INVALID_INPUT"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidStartCoordinates(RoverInputError):
    """Starting coordinates lie outside the grid."""

    code = "INVALID_START_COORDINATES"

    def __init__(self, x: int, y: int):
        super().__init__(
            f"Rover starting coordinates of ({x},{y}) are not valid.",
            {"x": x, "y": y},
        )


class InvalidStartFacing(RoverInputError):
    """Starting facing is not one of N, E, S, W."""

    code = "INVALID_START_FACING"

    def __init__(self, facing: Any):
        super().__init__(
            f"Rover starting face position of {facing} is not valid.",
            {"facing": facing},
        )


class InvalidInstructions(RoverInputError):
    """One or more instructions are not one of F, L, R."""

    code = "INVALID_INSTRUCTIONS"

    def __init__(self, rendered: Sequence[str], invalid: Sequence[Any]):
        super().__init__(
            f"Rover instructions of '{', '.join(rendered)}' are not valid.",
            {"instructions": list(rendered), "invalid": list(invalid)},
        )
