"""Main timer view.

Layout (top → bottom):
    - Mode selector (Work / Short Break / Long Break)
    - Divider
    - MM:SS countdown
    - LinearProgress bar
    - Start/Pause + Reset buttons
    - Sessions completed counter
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

from ..timer.engine import TimerEngine
from ..timer.state import Mode, TimerState
from .progress_bar import LinearProgress
from .styles import mode_button_style


class TimerWidget(QWidget):
    """Renders the engine's snapshot and forwards button presses to it."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._mode_buttons: dict[Mode, QPushButton] = {}
        self._build_ui()
        self._connect_signals()
        self._render(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        # ── mode selector ────────────────────────────────────────────
        mode_row = QHBoxLayout()
        mode_row.setContentsMargins(20, 14, 20, 8)
        mode_row.setSpacing(12)
        for mode in Mode:
            btn = QPushButton(mode.label, self)
            btn.setObjectName("modeButton")
            btn.setFixedHeight(32)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            self._mode_buttons[mode] = btn
            mode_row.addWidget(btn)
        mode_row.addStretch()
        root.addLayout(mode_row)

        divider = QFrame(self)
        divider.setObjectName("divider")
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setFixedHeight(1)
        root.addWidget(divider)

        # ── countdown ────────────────────────────────────────────────
        body = QVBoxLayout()
        body.setContentsMargins(48, 28, 48, 0)
        body.setSpacing(18)
        body.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)

        self._time_label = QLabel(self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        body.addWidget(self._time_label)

        self._progress = LinearProgress(self)
        body.addWidget(self._progress)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(16)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", self)
        self._start_pause_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("secondaryButton")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        body.addLayout(btn_row)

        self._sessions_label = QLabel(self)
        self._sessions_label.setObjectName("sessionsLabel")
        self._sessions_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        body.addWidget(self._sessions_label)

        root.addLayout(body)
        root.addStretch()

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        for mode, btn in self._mode_buttons.items():
            btn.clicked.connect(lambda _=False, m=mode: self._engine.select_mode(m))
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)

        self._engine.state_changed.connect(self._render)

    # ── rendering ─────────────────────────────────────────────────────────

    def _render(self, state: TimerState) -> None:
        for mode, btn in self._mode_buttons.items():
            btn.setStyleSheet(mode_button_style(mode == state.mode))

        self._time_label.setText(state.time_text)
        self._progress.set_value(state.progress)
        self._start_pause_btn.setText("Pause" if state.is_running else "Start")
        self._sessions_label.setText(
            f"Sessions completed: {state.sessions_completed}"
        )

    # ── read-only accessors (tests, shortcuts) ────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def start_pause_text(self) -> str:
        return self._start_pause_btn.text()

    @property
    def sessions_text(self) -> str:
        return self._sessions_label.text()

    @property
    def progress_value(self) -> float:
        return self._progress.value

    def mode_button(self, mode: Mode) -> QPushButton:
        return self._mode_buttons[mode]

    @property
    def start_pause_button(self) -> QPushButton:
        return self._start_pause_btn

    @property
    def reset_button(self) -> QPushButton:
        return self._reset_btn
