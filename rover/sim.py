"""
Simulation Engine Module

Drives a single rover across the fixed 5x5 grid:
- Validates the starting state and the instruction list
- Applies F / L / R instructions in order
- Counts scuffs (forward moves rejected at the grid edge)
- Emits one trace event per instruction

The simulator holds no per-call state, so one instance can be shared freely.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from .config import default_trace_sink
from .errors import InvalidInstructions, InvalidStartCoordinates, InvalidStartFacing
from .models import Facing, Instruction, RoverState, SimulationResult, TraceEvent
from .trace import NullTraceSink, TraceSink

logger = logging.getLogger(__name__)


class RoverSimulator:
    """Stateless rover instruction interpreter with an injected trace sink."""

    def __init__(self, trace_sink: Optional[TraceSink] = None):
        self.trace_sink = NullTraceSink() if trace_sink is None else trace_sink

    def simulate(
        self,
        start: RoverState,
        instructions: Sequence[Instruction | str],
    ) -> SimulationResult:
        """
        Run the rover from `start` through `instructions`.

        Validation happens before anything moves, in this order:
        1. Starting coordinates are inside the grid
        2. Starting facing is one of N, E, S, W
        3. Every instruction is one of F, L, R

        Args:
            start: Starting RoverState (never mutated; a copy is driven)
            instructions: Ordered Instruction members or raw 'F'/'L'/'R' symbols

        Returns:
            SimulationResult with the final state and the scuff count

        Raises:
            InvalidStartCoordinates: if the start lies outside the grid
            InvalidStartFacing: if the start facing is not a defined direction
            InvalidInstructions: if any instruction is not a defined kind
        """
        facing, steps = validate_request(start, instructions)

        state = start.model_copy(deep=True)
        state.facing = facing
        scuffs = 0

        logger.debug(
            "simulate called: start=%s instructions=%d",
            state.label(),
            len(steps),
        )

        for instruction_number, instruction in enumerate(steps, start=1):
            if instruction == Instruction.FORWARD:
                candidate = state.coordinates.stepped(state.facing)
                if candidate.is_within_grid():
                    state.coordinates = candidate
                else:
                    scuffs += 1
            elif instruction == Instruction.TURN_LEFT:
                state.facing = state.facing.turned(-1)
            else:
                state.facing = state.facing.turned(1)

            self._record(
                TraceEvent(
                    instruction_number=instruction_number,
                    instruction=instruction,
                    coordinates=state.coordinates.model_copy(),
                    facing=state.facing,
                    scuffs=scuffs,
                )
            )

        logger.debug("simulate finished: final=%s scuffs=%d", state.label(), scuffs)

        return SimulationResult(final_state=state, scuffs=scuffs)

    def _record(self, event: TraceEvent) -> None:
        # A broken sink must never abort the run
        try:
            self.trace_sink.record(event)
        except Exception:  # noqa: BLE001
            logger.warning(
                "trace sink %s failed on instruction %d",
                type(self.trace_sink).__name__,
                event.instruction_number,
                exc_info=True,
            )


def validate_request(
    start: RoverState,
    instructions: Iterable[Any],
) -> tuple[Facing, list[Instruction]]:
    """
    Check a simulation request and coerce its symbols.

    Only the first failing check is reported.

    Returns:
        (facing, instructions) with the facing and every instruction
        converted to their enum members
    """
    if not start.coordinates.is_within_grid():
        raise InvalidStartCoordinates(start.coordinates.x, start.coordinates.y)

    facing = _coerce(Facing, start.facing)
    if facing is None:
        raise InvalidStartFacing(start.facing)

    steps: list[Instruction] = []
    invalid: list[Any] = []
    rendered: list[str] = []
    for entry in instructions:
        rendered.append(_render(entry))
        instruction = _coerce(Instruction, entry)
        if instruction is None:
            invalid.append(entry)
        else:
            steps.append(instruction)

    if invalid:
        raise InvalidInstructions(rendered, invalid)

    return facing, steps


def simulate(
    start: RoverState,
    instructions: Sequence[Instruction | str],
    trace_sink: Optional[TraceSink] = None,
) -> SimulationResult:
    """
    High-level simulation entrypoint.

    Builds a RoverSimulator around `trace_sink` and runs it once. Without a
    sink, the ROVER_TRACE setting picks between logging and no tracing.
    """
    if trace_sink is None:
        trace_sink = default_trace_sink()
    return RoverSimulator(trace_sink).simulate(start, instructions)


def _coerce(enum_cls: type[Enum], value: Any) -> Optional[Enum]:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def _render(entry: Any) -> str:
    if isinstance(entry, Instruction):
        return entry.value
    return str(entry)
