"""Timer package."""

from .clock import format_time, parse_time
from .engine import (
    TimerEngine,
    TimerState,
    DEFAULT_DURATION,
    TICK_INTERVAL_MS,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "DEFAULT_DURATION",
    "TICK_INTERVAL_MS",
    "format_time",
    "parse_time",
]
