"""UI package."""

from .timer_widget import TimerWidget
from .settings_dialog import SettingsDialog, LabeledSlider
from .progress_bar import LinearProgress

__all__ = [
    "TimerWidget",
    "SettingsDialog",
    "LabeledSlider",
    "LinearProgress",
]
