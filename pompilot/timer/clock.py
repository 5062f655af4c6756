"""Interval sources that drive the timer's one-second ticks.

A clock is armed with ``start(callback)`` and disarmed with ``cancel()``.
At most one callback is armed at a time; arming again replaces it.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


TICK_INTERVAL_MS = 1000


class Clock(Protocol):
    @property
    def active(self) -> bool: ...

    def start(self, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class QtClock(QObject):
    """Clock backed by a repeating ``QTimer`` on the Qt event loop."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._callback: Callable[[], None] | None = None
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def start(self, callback: Callable[[], None]) -> None:
        self._qt_timer.stop()
        self._callback = callback
        self._qt_timer.start()

    def cancel(self) -> None:
        self._qt_timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()


class ManualClock:
    """Clock that only fires when told to.

    Lets callers simulate elapsed seconds without waiting::

        clock = ManualClock()
        engine = TimerEngine(clock=clock)
        engine.start()
        clock.advance(60)
    """

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self.starts = 0
        self.cancels = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self.starts += 1

    def cancel(self) -> None:
        if self._callback is not None:
            self.cancels += 1
        self._callback = None

    def advance(self, seconds: int = 1) -> int:
        """Deliver up to *seconds* ticks; stop early if cancelled.

        Returns the number of ticks actually delivered.
        """
        delivered = 0
        for _ in range(seconds):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered
