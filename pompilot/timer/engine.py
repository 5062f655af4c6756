"""Qt-facing timer engine for Pom Pilot.

Owns the single ``TimerState`` value, routes every user intent and clock
tick through :func:`transition`, keeps the clock armed exactly while the
state is running, and announces each new snapshot over Qt signals.
"""

from __future__ import annotations

from typing import Mapping

from loguru import logger
from PyQt6.QtCore import QObject, pyqtSignal

from .clock import Clock, QtClock
from .state import (
    Event, Mode, Pause, Reset, SaveSettings, SelectMode, Start, Tick,
    TimerState, Toggle, transition,
)


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Pomodoro countdown with an injectable clock.

    Signals
    -------
    state_changed(state: TimerState)
        Emitted after every transition that produced a new snapshot.
    session_completed(sessions_completed: int)
        Emitted when a Work countdown reaches zero on its own.
    countdown_finished(mode: Mode)
        Emitted when any countdown reaches zero on its own.
    """

    state_changed = pyqtSignal(object)
    session_completed = pyqtSignal(int)
    countdown_finished = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        clock: Clock | None = None,
        durations: Mapping[Mode, int] | None = None,
    ) -> None:
        super().__init__(parent)
        self._state: TimerState = TimerState.initial(durations)
        self._clock: Clock = clock if clock is not None else QtClock(self)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._state.remaining_seconds

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def sessions_completed(self) -> int:
        return self._state.sessions_completed

    def minutes_for(self, mode: Mode) -> int:
        return self._state.durations[mode]

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def select_mode(self, mode: Mode) -> None:
        self.dispatch(SelectMode(mode))

    def start(self) -> None:
        self.dispatch(Start())

    def pause(self) -> None:
        self.dispatch(Pause())

    def toggle(self) -> None:
        """Start when idle, pause when running."""
        self.dispatch(Toggle())

    def reset(self) -> None:
        self.dispatch(Reset())

    def save_settings(self, work: int, short_break: int, long_break: int) -> None:
        self.dispatch(SaveSettings(work, short_break, long_break))
        logger.info(
            "Durations saved: work={}m short={}m long={}m",
            *(self._state.durations[m] for m in Mode),
        )

    def stop(self) -> None:
        """Disarm the clock without touching the countdown (window closing)."""
        self.dispatch(Pause())
        self._clock.cancel()

    def dispatch(self, event: Event) -> TimerState:
        """Run *event* through the state machine and sync the clock."""
        old = self._state
        new = transition(old, event)
        if new == old:
            return old

        # Disarm before anything else can observe the new state so no
        # stale tick lands after leaving Running.
        if old.is_running and not new.is_running:
            self._clock.cancel()

        self._state = new
        logger.debug(
            "{}: {} {} -> {} {} ({} sessions)",
            type(event).__name__,
            old.mode.name, old.time_text,
            new.mode.name, new.time_text,
            new.sessions_completed,
        )

        if new.is_running and not self._clock.active:
            self._clock.start(self._on_tick)

        self.state_changed.emit(new)

        if isinstance(event, Tick) and new.is_finished:
            self.countdown_finished.emit(new.mode)
            if new.sessions_completed > old.sessions_completed:
                logger.info("Work session #{} completed", new.sessions_completed)
                self.session_completed.emit(new.sessions_completed)
        return new

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        self.dispatch(Tick())
