"""Timer package."""

from .clock import Clock, ManualClock, QtClock, TICK_INTERVAL_MS
from .engine import TimerEngine
from .state import (
    Mode,
    TimerState,
    SelectMode,
    Start,
    Pause,
    Toggle,
    Reset,
    Tick,
    SaveSettings,
    DEFAULT_MINUTES,
    DURATION_RANGES,
    clamp_minutes,
    format_time,
    transition,
)

__all__ = [
    "Clock",
    "ManualClock",
    "QtClock",
    "TICK_INTERVAL_MS",
    "TimerEngine",
    "Mode",
    "TimerState",
    "SelectMode",
    "Start",
    "Pause",
    "Toggle",
    "Reset",
    "Tick",
    "SaveSettings",
    "DEFAULT_MINUTES",
    "DURATION_RANGES",
    "clamp_minutes",
    "format_time",
    "transition",
]
