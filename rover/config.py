import logging
import os
import sys
from dotenv import load_dotenv

from .trace import LoggingTraceSink, NullTraceSink, TraceSink

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def get_log_level() -> int:
    """
    Return the logging level named by ROVER_LOG_LEVEL (default INFO).

    Raises:
        RuntimeError: if the env var names an unknown level.
    """
    name = os.environ.get("ROVER_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise RuntimeError(
            f"ROVER_LOG_LEVEL={name!r} is not a logging level; use DEBUG, INFO, WARNING or ERROR."
        )
    return level


def get_trace_enabled() -> bool:
    """
    Return whether per-instruction tracing is on (ROVER_TRACE, default on).

    Raises:
        RuntimeError: if the env var is not a recognisable boolean.
    """
    raw = os.environ.get("ROVER_TRACE", "1").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise RuntimeError(f"ROVER_TRACE={raw!r} is not a boolean; use 1/0, true/false, yes/no or on/off.")


def configure_logging() -> None:
    """Install the root handler used by scripts embedding the simulator."""
    logging.basicConfig(
        level=get_log_level(),
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )


def default_trace_sink() -> TraceSink:
    """Return a logging sink when tracing is enabled, otherwise a no-op sink."""
    if get_trace_enabled():
        return LoggingTraceSink()
    return NullTraceSink()
