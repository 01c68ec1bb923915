"""Application-wide state shared between the shell and its views."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class AppContext(QObject):
    """Session counter owned by the main window.

    Passed explicitly to whatever needs it instead of living in a module
    global.

    Signals
    -------
    session_count_changed(total: int)
        Emitted after every increment.
    """

    session_count_changed = pyqtSignal(int)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._total_sessions: int = 0

    @property
    def total_sessions(self) -> int:
        return self._total_sessions

    def increment_session_count(self) -> None:
        self._total_sessions += 1
        logger.info("Completed sessions this run: %d", self._total_sessions)
        self.session_count_changed.emit(self._total_sessions)
