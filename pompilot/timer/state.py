"""Pure timer state machine for Pom Pilot.

States
------
Idle      Not counting down (any remaining value).
Running   Counting down, one ``Tick`` per second.

Transitions
-----------
SelectMode(m)        any      → Idle     (full duration of ``m``)
Start                Idle     → Running  (only when remaining > 0)
Pause                Running  → Idle     (remaining kept)
Reset                any      → Idle     (full duration of current mode)
Tick                 Running  → Running, or Idle when remaining hits 0
SaveSettings(w,s,l)  any      → unchanged run state

Every transition is a pure function of ``(TimerState, event)`` and
returns a new frozen snapshot.  Reaching zero never advances the mode;
the user picks the next one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


# ── enums ─────────────────────────────────────────────────────────────────


class Mode(Enum):
    WORK = "Work"
    SHORT_BREAK = "Short Break"
    LONG_BREAK = "Long Break"

    @property
    def label(self) -> str:
        return self.value

    @property
    def accent(self) -> str:
        """Hex colour used to highlight the mode when selected."""
        return MODE_ACCENTS[self]

    @property
    def minutes_range(self) -> tuple[int, int]:
        return DURATION_RANGES[self]


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_MINUTES: dict[Mode, int] = {
    Mode.WORK: 25,
    Mode.SHORT_BREAK: 5,
    Mode.LONG_BREAK: 15,
}

# inclusive (min, max) in minutes
DURATION_RANGES: dict[Mode, tuple[int, int]] = {
    Mode.WORK: (10, 60),
    Mode.SHORT_BREAK: (3, 15),
    Mode.LONG_BREAK: (10, 45),
}

MODE_ACCENTS: dict[Mode, str] = {
    Mode.WORK: "#FF3B30",
    Mode.SHORT_BREAK: "#E4E4E7",
    Mode.LONG_BREAK: "#E4E4E7",
}


def clamp_minutes(mode: Mode, minutes: int) -> int:
    """Clamp *minutes* into the valid range for *mode*."""
    low, high = DURATION_RANGES[mode]
    return max(low, min(high, int(minutes)))


def format_time(seconds: int) -> str:
    """``MM:SS`` with both fields zero-padded (``60:00`` for an hour)."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SelectMode:
    mode: Mode


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Toggle:
    """The shared Start/Pause control."""


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class SaveSettings:
    work: int
    short_break: int
    long_break: int


Event = Union[SelectMode, Start, Pause, Toggle, Reset, Tick, SaveSettings]


# ── snapshot ──────────────────────────────────────────────────────────────


def _frozen_durations(durations: Mapping[Mode, int]) -> Mapping[Mode, int]:
    return MappingProxyType({m: durations[m] for m in Mode})


@dataclass(frozen=True)
class TimerState:
    """Immutable snapshot of the timer.

    Build the start-of-day state with :meth:`initial`; derive every
    other state with :func:`transition`.
    """

    mode: Mode
    remaining_seconds: int
    is_running: bool = False
    sessions_completed: int = 0
    durations: Mapping[Mode, int] = field(
        default_factory=lambda: _frozen_durations(DEFAULT_MINUTES),
    )

    @classmethod
    def initial(
        cls,
        durations: Mapping[Mode, int] | None = None,
        mode: Mode = Mode.WORK,
    ) -> TimerState:
        src = dict(DEFAULT_MINUTES)
        if durations:
            src.update(durations)
        clamped = {m: clamp_minutes(m, src[m]) for m in Mode}
        return cls(
            mode=mode,
            remaining_seconds=clamped[mode] * 60,
            durations=_frozen_durations(clamped),
        )

    # ── derived values ────────────────────────────────────────────────

    def total_seconds_for(self, mode: Mode) -> int:
        return self.durations[mode] * 60

    @property
    def total_seconds(self) -> int:
        """Full length of the active mode's countdown."""
        return self.total_seconds_for(self.mode)

    @property
    def progress(self) -> float:
        """0.0 → 1.0 through the current countdown."""
        total = self.total_seconds
        if total <= 0:
            return 0.0
        return max(0.0, min(1.0, 1.0 - self.remaining_seconds / total))

    @property
    def time_text(self) -> str:
        return format_time(self.remaining_seconds)

    @property
    def is_finished(self) -> bool:
        return self.remaining_seconds == 0


# ── transitions ───────────────────────────────────────────────────────────


def transition(state: TimerState, event: Event) -> TimerState:
    """Apply *event* to *state* and return the resulting snapshot."""
    if isinstance(event, SelectMode):
        return replace(
            state,
            mode=event.mode,
            remaining_seconds=state.total_seconds_for(event.mode),
            is_running=False,
        )

    if isinstance(event, Start):
        if state.is_running or state.remaining_seconds <= 0:
            return state
        return replace(state, is_running=True)

    if isinstance(event, Pause):
        if not state.is_running:
            return state
        return replace(state, is_running=False)

    if isinstance(event, Toggle):
        return transition(state, Pause() if state.is_running else Start())

    if isinstance(event, Reset):
        return replace(
            state,
            remaining_seconds=state.total_seconds,
            is_running=False,
        )

    if isinstance(event, Tick):
        return _tick(state)

    if isinstance(event, SaveSettings):
        return _save_settings(state, event)

    raise TypeError(f"unknown timer event: {event!r}")


def _tick(state: TimerState) -> TimerState:
    if not state.is_running or state.remaining_seconds <= 0:
        return state

    remaining = state.remaining_seconds - 1
    if remaining > 0:
        return replace(state, remaining_seconds=remaining)

    sessions = state.sessions_completed
    if state.mode == Mode.WORK:
        sessions += 1
    return replace(
        state,
        remaining_seconds=0,
        is_running=False,
        sessions_completed=sessions,
    )


def _save_settings(state: TimerState, event: SaveSettings) -> TimerState:
    durations = {
        Mode.WORK: clamp_minutes(Mode.WORK, event.work),
        Mode.SHORT_BREAK: clamp_minutes(Mode.SHORT_BREAK, event.short_break),
        Mode.LONG_BREAK: clamp_minutes(Mode.LONG_BREAK, event.long_break),
    }
    new_total = durations[state.mode] * 60
    remaining = state.remaining_seconds

    # An untouched idle countdown picks up the new length; anything else
    # keeps its progress and is only capped to the new maximum.
    if not state.is_running and remaining == state.total_seconds:
        remaining = new_total
    else:
        remaining = min(remaining, new_total)

    return replace(
        state,
        remaining_seconds=remaining,
        durations=_frozen_durations(durations),
    )
