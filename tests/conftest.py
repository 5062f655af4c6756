"""Shared pytest fixtures for Pom Pilot tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from loguru import logger
from PyQt6.QtWidgets import QApplication

from pompilot.timer.clock import ManualClock
from pompilot.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def engine(qapp, clock):
    """Fresh TimerEngine on default durations, driven by a manual clock."""
    return TimerEngine(parent=None, clock=clock)


@pytest.fixture
def log_messages():
    """Capture loguru records as plain strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda m: messages.append(m.record["message"]), level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
