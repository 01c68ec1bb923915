"""Shared pytest fixtures for Pomodoro tests."""

import os
import sys

import pytest

# Headless runs (CI, SSH) have no display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomodoro.context import AppContext
from pomodoro.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def context(qapp):
    return AppContext()


@pytest.fixture
def engine(qapp, context):
    """Fresh TimerEngine at 25:00 wired to a fresh AppContext."""
    return TimerEngine(parent=None, context=context)
