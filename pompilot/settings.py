"""Start-up configuration for Pom Pilot.

Nothing is persisted: every launch begins from these defaults, optionally
overridden by environment variables::

    POMPILOT_WORK_MINUTES=50 POMPILOT_LOG_LEVEL=DEBUG python -m pompilot

Usage::

    settings = load_settings()
    engine = TimerEngine(durations=settings.durations())
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping

from loguru import logger

from .timer.clock import TICK_INTERVAL_MS
from .timer.state import DEFAULT_MINUTES, Mode, clamp_minutes


ENV_PREFIX = "POMPILOT_"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """All start-up preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_minutes: int = DEFAULT_MINUTES[Mode.WORK]
    short_break_minutes: int = DEFAULT_MINUTES[Mode.SHORT_BREAK]
    long_break_minutes: int = DEFAULT_MINUTES[Mode.LONG_BREAK]
    tick_interval_ms: int = TICK_INTERVAL_MS

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"

    def durations(self) -> dict[Mode, int]:
        """Per-mode minutes, clamped to each mode's range."""
        return {
            Mode.WORK: clamp_minutes(Mode.WORK, self.work_minutes),
            Mode.SHORT_BREAK: clamp_minutes(Mode.SHORT_BREAK, self.short_break_minutes),
            Mode.LONG_BREAK: clamp_minutes(Mode.LONG_BREAK, self.long_break_minutes),
        }


def _parse(name: str, raw: str, default: object) -> object:
    if isinstance(default, int):
        value = int(raw.strip())
        if value <= 0:
            raise ValueError(f"{name} must be positive")
        return value
    value = raw.strip().upper()
    if name == "log_level" and value not in LOG_LEVELS:
        raise ValueError(f"unknown log level {raw!r}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from defaults plus any ``POMPILOT_*`` overrides.

    Unparsable values are logged and ignored.  Durations are clamped to
    their valid ranges.
    """
    env = os.environ if environ is None else environ
    defaults = Settings()
    overrides: dict[str, object] = {}

    for f in fields(Settings):
        key = ENV_PREFIX + f.name.upper()
        raw = env.get(key)
        if raw is None:
            continue
        try:
            overrides[f.name] = _parse(f.name, raw, getattr(defaults, f.name))
        except ValueError as exc:
            logger.warning("Ignoring {}={!r}: {}", key, raw, exc)

    settings = Settings(**overrides)
    clamped = settings.durations()
    settings.work_minutes = clamped[Mode.WORK]
    settings.short_break_minutes = clamped[Mode.SHORT_BREAK]
    settings.long_break_minutes = clamped[Mode.LONG_BREAK]
    return settings
