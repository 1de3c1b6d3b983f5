"""
Trace sinks for per-instruction rover events.

The simulator hands one TraceEvent to its sink after every instruction.
Sinks are observers only: nothing they do feeds back into the result.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .models import TraceEvent

logger = logging.getLogger(__name__)


class TraceSink(ABC):
    """Consumer of rover trace events."""

    @abstractmethod
    def record(self, event: TraceEvent) -> None: ...


class NullTraceSink(TraceSink):
    """Discards every event."""

    def record(self, event: TraceEvent) -> None:
        return None


class LoggingTraceSink(TraceSink):
    """Writes one INFO log line per event."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def record(self, event: TraceEvent) -> None:
        self._log.info(format_event(event))


class InMemoryTraceSink(TraceSink):
    """Keeps events in order for tests and demos."""

    def __init__(self):
        self.events: list[TraceEvent] = []

    def record(self, event: TraceEvent) -> None:
        self.events.append(event)


def format_event(event: TraceEvent) -> str:
    """
    Render a trace event as a single line.

    Example:
        Rover location after instruction number 3: Coordinates - (1,3); Direction - N; Scuffs - 0
    """
    return (
        f"Rover location after instruction number {event.instruction_number}: "
        f"Coordinates - {event.coordinates.label()}; "
        f"Direction - {event.facing.value}; "
        f"Scuffs - {event.scuffs}"
    )
