"""Settings dialog for Pom Pilot.

Three sliders, one per mode, each locked to that mode's minute range.
Nothing is applied until "Save Settings" is pressed; closing the dialog
any other way throws the edits away.
"""

from __future__ import annotations

from typing import Mapping

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QPushButton, QWidget,
)

from ..timer.state import Mode, DEFAULT_MINUTES, clamp_minutes


SLIDER_TITLES: dict[Mode, str] = {
    Mode.WORK:        "Work Duration",
    Mode.SHORT_BREAK: "Short Break",
    Mode.LONG_BREAK:  "Long Break",
}


def slider_caption(title: str, minutes: int) -> str:
    unit = "minute" if minutes == 1 else "minutes"
    return f"{title}: {minutes} {unit}"


class LabeledSlider(QWidget):
    """A caption showing the current minutes above a whole-step slider."""

    def __init__(
        self,
        title: str,
        minimum: int,
        maximum: int,
        value: int,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._title = title

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._label = QLabel(self)
        self._label.setObjectName("sliderLabel")
        layout.addWidget(self._label)

        self._slider = QSlider(Qt.Orientation.Horizontal, self)
        self._slider.setRange(minimum, maximum)
        self._slider.setSingleStep(1)
        self._slider.setPageStep(1)
        self._slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self._slider)

        self._slider.setValue(max(minimum, min(maximum, value)))
        self._on_value_changed(self._slider.value())

    def _on_value_changed(self, value: int) -> None:
        self._label.setText(slider_caption(self._title, value))

    @property
    def slider(self) -> QSlider:
        return self._slider

    @property
    def caption(self) -> str:
        return self._label.text()

    def value(self) -> int:
        return self._slider.value()

    def set_value(self, value: int) -> None:
        self._slider.setValue(value)


class SettingsDialog(QDialog):
    """Modal editor for the three mode durations.

    Emits ``settings_saved(work, short_break, long_break)`` once when the
    user commits; the dialog then closes with ``Accepted``.
    """

    settings_saved = pyqtSignal(int, int, int)

    def __init__(
        self,
        durations: Mapping[Mode, int] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setFixedSize(500, 340)

        current = dict(DEFAULT_MINUTES)
        if durations:
            current.update(durations)
        self._sliders: dict[Mode, LabeledSlider] = {}
        self._build_ui(current)

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self, current: Mapping[Mode, int]) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(20)

        title = QLabel("Settings", self)
        title.setObjectName("titleLabel")
        root.addWidget(title)

        for mode in Mode:
            low, high = mode.minutes_range
            slider = LabeledSlider(
                SLIDER_TITLES[mode], low, high,
                clamp_minutes(mode, current[mode]), self,
            )
            self._sliders[mode] = slider
            root.addWidget(slider)

        root.addStretch()

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._save_btn = QPushButton("Save Settings", self)
        self._save_btn.setObjectName("primaryButton")
        self._save_btn.setMaximumWidth(320)
        self._save_btn.clicked.connect(self._on_save)
        btn_row.addWidget(self._save_btn)
        btn_row.addStretch()
        root.addLayout(btn_row)

    # ══════════════════════════════════════════════════════════════════
    #  COMMIT
    # ══════════════════════════════════════════════════════════════════

    def _on_save(self) -> None:
        self.settings_saved.emit(*self.values())
        self.accept()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    def values(self) -> tuple[int, int, int]:
        """Pending (work, short_break, long_break) minutes."""
        return (
            self._sliders[Mode.WORK].value(),
            self._sliders[Mode.SHORT_BREAK].value(),
            self._sliders[Mode.LONG_BREAK].value(),
        )

    def slider_for(self, mode: Mode) -> LabeledSlider:
        return self._sliders[mode]

    @property
    def save_button(self) -> QPushButton:
        return self._save_btn
