"""Tests for the widgets and the main window.

Covers: rendering after each transition, button wiring, the settings
dialog commit/discard behaviour, and keyboard shortcuts.
"""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QKeyEvent

from pompilot.app import PomPilotApp
from pompilot.settings import Settings
from pompilot.timer.clock import ManualClock
from pompilot.timer.state import Mode
from pompilot.ui.progress_bar import LinearProgress
from pompilot.ui.settings_dialog import SettingsDialog, slider_caption
from pompilot.ui.styles import ACTIVE_MODE_COLOR, INACTIVE_MODE_COLOR
from pompilot.ui.timer_widget import TimerWidget

from helpers import SignalCollector


@pytest.fixture
def widget(engine):
    return TimerWidget(engine)


@pytest.fixture
def window(qapp):
    clock = ManualClock()
    win = PomPilotApp(Settings(), clock=clock)
    win._test_clock = clock
    win.show()
    yield win
    win.close()


def _key(key: Qt.Key) -> QKeyEvent:
    return QKeyEvent(QEvent.Type.KeyPress, key.value, Qt.KeyboardModifier.NoModifier)


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:

    def test_initial_render(self, widget):
        assert widget.time_text == "25:00"
        assert widget.start_pause_text == "Start"
        assert widget.sessions_text == "Sessions completed: 0"
        assert widget.progress_value == pytest.approx(0.0)

    def test_start_button_toggles(self, widget, engine):
        widget.start_pause_button.click()
        assert engine.is_running is True
        assert widget.start_pause_text == "Pause"

        widget.start_pause_button.click()
        assert engine.is_running is False
        assert widget.start_pause_text == "Start"

    def test_tick_updates_display(self, widget, engine, clock):
        engine.start()
        clock.advance(61)
        assert widget.time_text == "23:59"
        assert widget.progress_value == pytest.approx(61 / 1500)

    def test_reset_button(self, widget, engine, clock):
        engine.start()
        clock.advance(100)
        widget.reset_button.click()
        assert widget.time_text == "25:00"
        assert widget.start_pause_text == "Start"

    @pytest.mark.parametrize("mode,text", [
        (Mode.WORK, "25:00"),
        (Mode.SHORT_BREAK, "05:00"),
        (Mode.LONG_BREAK, "15:00"),
    ])
    def test_mode_buttons(self, widget, engine, mode, text):
        widget.mode_button(mode).click()
        assert engine.mode == mode
        assert widget.time_text == text

    def test_active_mode_highlighted(self, widget, engine):
        engine.select_mode(Mode.SHORT_BREAK)
        assert ACTIVE_MODE_COLOR in widget.mode_button(Mode.SHORT_BREAK).styleSheet()
        assert INACTIVE_MODE_COLOR in widget.mode_button(Mode.WORK).styleSheet()

    def test_session_counter(self, widget, engine, clock):
        engine.save_settings(10, 5, 15)
        engine.start()
        clock.advance(600)
        assert widget.time_text == "00:00"
        assert widget.start_pause_text == "Start"
        assert widget.sessions_text == "Sessions completed: 1"
        assert widget.progress_value == pytest.approx(1.0)


# ═══════════════════════════════════════════════════════════════════════
#  PROGRESS BAR
# ═══════════════════════════════════════════════════════════════════════


class TestLinearProgress:

    def test_clamps(self, qapp):
        bar = LinearProgress()
        bar.set_value(1.7)
        assert bar.value == 1.0
        bar.set_value(-0.3)
        assert bar.value == 0.0

    def test_renders(self, qapp):
        bar = LinearProgress()
        bar.resize(200, LinearProgress.BAR_HEIGHT)
        bar.set_value(0.4)
        assert not bar.grab().isNull()


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS DIALOG
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDialog:

    def test_caption_pluralisation(self):
        assert slider_caption("Work Duration", 25) == "Work Duration: 25 minutes"
        assert slider_caption("Short Break", 1) == "Short Break: 1 minute"

    def test_prefilled_from_durations(self, qapp):
        dialog = SettingsDialog({Mode.WORK: 40, Mode.SHORT_BREAK: 7, Mode.LONG_BREAK: 20})
        assert dialog.values() == (40, 7, 20)
        assert dialog.slider_for(Mode.WORK).caption == "Work Duration: 40 minutes"

    def test_slider_ranges(self, qapp):
        dialog = SettingsDialog()
        for mode in Mode:
            low, high = mode.minutes_range
            slider = dialog.slider_for(mode).slider
            assert (slider.minimum(), slider.maximum()) == (low, high)
            assert slider.singleStep() == 1

    def test_slider_cannot_leave_range(self, qapp):
        dialog = SettingsDialog()
        dialog.slider_for(Mode.LONG_BREAK).set_value(100)
        assert dialog.values()[2] == 45

    def test_caption_follows_slider(self, qapp):
        dialog = SettingsDialog()
        dialog.slider_for(Mode.SHORT_BREAK).set_value(12)
        assert dialog.slider_for(Mode.SHORT_BREAK).caption == "Short Break: 12 minutes"

    def test_save_emits_all_three(self, qapp):
        dialog = SettingsDialog()
        c = SignalCollector()
        dialog.settings_saved.connect(c)
        dialog.slider_for(Mode.WORK).set_value(30)
        dialog.save_button.click()
        assert c.items == [(30, 5, 15)]
        assert dialog.result() == SettingsDialog.DialogCode.Accepted.value

    def test_reject_emits_nothing(self, qapp):
        dialog = SettingsDialog()
        c = SignalCollector()
        dialog.settings_saved.connect(c)
        dialog.slider_for(Mode.WORK).set_value(30)
        dialog.reject()
        assert len(c) == 0


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


class TestMainWindow:

    def test_uses_settings_durations(self, qapp):
        win = PomPilotApp(Settings(work_minutes=45), clock=ManualClock())
        assert win.timer_widget.time_text == "45:00"
        win.close()

    def test_settings_commit_reaches_engine(self, window):
        dialog = window._open_settings()
        dialog.slider_for(Mode.WORK).set_value(50)
        dialog.slider_for(Mode.SHORT_BREAK).set_value(3)
        dialog.save_button.click()
        assert window.engine.minutes_for(Mode.WORK) == 50
        assert window.engine.minutes_for(Mode.SHORT_BREAK) == 3
        assert window.timer_widget.time_text == "50:00"
        assert window.settings_dialog is None

    def test_settings_cancel_discards(self, window):
        dialog = window._open_settings()
        dialog.slider_for(Mode.WORK).set_value(50)
        dialog.reject()
        assert window.engine.minutes_for(Mode.WORK) == 25

    def test_dialog_prefilled_with_current(self, window):
        window.engine.save_settings(33, 4, 22)
        dialog = window._open_settings()
        assert dialog.values() == (33, 4, 22)
        dialog.reject()

    def test_space_toggles(self, window):
        window.keyPressEvent(_key(Qt.Key.Key_Space))
        assert window.engine.is_running is True
        window.keyPressEvent(_key(Qt.Key.Key_Space))
        assert window.engine.is_running is False

    def test_escape_resets(self, window):
        window.engine.start()
        window._test_clock.advance(30)
        window.keyPressEvent(_key(Qt.Key.Key_Escape))
        assert window.engine.remaining == 1500
        assert window.engine.is_running is False

    def test_close_stops_countdown(self, window):
        window.engine.start()
        window._test_clock.advance(5)
        window.close()
        assert window.engine.is_running is False
        assert window._test_clock.active is False
        assert window.engine.remaining == 1495
