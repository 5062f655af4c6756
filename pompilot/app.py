"""Main application window for Pom Pilot."""

from __future__ import annotations

from loguru import logger
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFrame,
)

from .settings import Settings, load_settings
from .timer.clock import Clock, QtClock
from .timer.engine import TimerEngine
from .ui.settings_dialog import SettingsDialog
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget


class PomPilotApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Pom Pilot")
        self.setMinimumSize(520, 420)
        self.resize(560, 460)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── engine ────────────────────────────────────────────────────
        if clock is None:
            clock = QtClock(self, interval_ms=self._settings.tick_interval_ms)
        self._timer_engine = TimerEngine(
            self, clock=clock, durations=self._settings.durations(),
        )

        self.setStyleSheet(build_stylesheet())

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self._timer_widget = TimerWidget(self._timer_engine, central)
        root_layout.addWidget(self._timer_widget, 1)

        # ── bottom bar ────────────────────────────────────────────────
        divider = QFrame(central)
        divider.setObjectName("divider")
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setFixedHeight(1)
        root_layout.addWidget(divider)

        bottom = QHBoxLayout()
        bottom.setContentsMargins(16, 0, 16, 0)
        bottom.addStretch()
        self._settings_btn = QPushButton("Settings", central)
        self._settings_btn.setObjectName("linkButton")
        self._settings_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._settings_btn.clicked.connect(self._open_settings)
        bottom.addWidget(self._settings_btn)
        bottom.addStretch()
        root_layout.addLayout(bottom)

        self._settings_dialog: SettingsDialog | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def settings_dialog(self) -> SettingsDialog | None:
        return self._settings_dialog

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _open_settings(self) -> SettingsDialog:
        """Show the settings sheet pre-filled with the current durations."""
        dialog = SettingsDialog(self._timer_engine.state.durations, self)
        dialog.settings_saved.connect(self._timer_engine.save_settings)
        dialog.finished.connect(self._on_settings_closed)
        self._settings_dialog = dialog
        dialog.open()
        return dialog

    def _on_settings_closed(self, result: int) -> None:
        if result != SettingsDialog.DialogCode.Accepted.value:
            logger.debug("Settings dialog dismissed without saving")
        self._settings_dialog = None

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the timer."""
        self._timer_engine.toggle()

    def _on_escape(self) -> None:
        """Reset the countdown."""
        self._timer_engine.reset()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop the countdown when the window goes away."""
        self._timer_engine.stop()
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)
