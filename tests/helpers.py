"""Shared test helpers for Pom Pilot."""

from pompilot.timer.state import TimerState, Tick, transition


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def tick_n(state: TimerState, n: int) -> TimerState:
    """Apply *n* Tick events to a pure state."""
    for _ in range(n):
        state = transition(state, Tick())
    return state
