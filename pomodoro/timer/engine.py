"""Countdown state machine for the Pomodoro tab.

States
------
IDLE      Not running, time left on the clock (full or partial).
RUNNING   Counting down once per second.
EXPIRED   Reached 00:00, not running.

Transitions
-----------
IDLE → RUNNING              (start / commit_edit)
RUNNING → IDLE              (pause)
RUNNING → EXPIRED           (last tick)
Any → IDLE                  (reset, directly or via confirm_reset)

Resetting is gated behind a confirmation step unless the user has asked
to skip it.  Every call that does not apply in the current state is a
silent no-op.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..context import AppContext
from .clock import parse_time

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    EXPIRED = "expired"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_DURATION = 25 * 60
TICK_INTERVAL_MS = 1000


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown with a confirmation-gated reset.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted whenever the remaining time changes (ticks, edits, resets).
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    reset_confirmation_changed(pending: bool)
        Emitted when the reset prompt should appear or go away.
    skip_confirmation_changed(skip: bool)
        Emitted when the "don't show again" preference flips.
    session_finished()
        Emitted once when the countdown reaches zero on its own.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    reset_confirmation_changed = pyqtSignal(bool)
    skip_confirmation_changed = pyqtSignal(bool)
    session_finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        context: AppContext | None = None,
        duration: int = DEFAULT_DURATION,
    ) -> None:
        super().__init__(parent)

        self._context = context
        self._duration: int = max(0, duration)

        # ── countdown state ───────────────────────────────────────────
        self._remaining: int = self._duration
        self._running: bool = False

        # ── reset confirmation ────────────────────────────────────────
        self._skip_confirmation: bool = False
        self._pending_confirmation: bool = False

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        if self._running:
            return TimerState.RUNNING
        if self._remaining == 0:
            return TimerState.EXPIRED
        return TimerState.IDLE

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def duration(self) -> int:
        """Seconds restored by :meth:`reset`."""
        return self._duration

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_editable(self) -> bool:
        """The time field accepts edits only while stopped."""
        return not self._running

    @property
    def pending_reset_confirmation(self) -> bool:
        return self._pending_confirmation

    @property
    def skip_reset_confirmation(self) -> bool:
        return self._skip_confirmation

    @skip_reset_confirmation.setter
    def skip_reset_confirmation(self, value: bool) -> None:
        value = bool(value)
        if value == self._skip_confirmation:
            return
        self._skip_confirmation = value
        self.skip_confirmation_changed.emit(value)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin counting down.  Only valid from IDLE."""
        if self.state != TimerState.IDLE:
            return
        self._running = True
        self._qt_timer.start()
        logger.debug("Timer started at %d s", self._remaining)
        self._emit_state()

    def pause(self) -> None:
        """Stop counting, keeping the remaining time."""
        if not self._running:
            return
        self._stop_ticking()
        logger.debug("Timer paused at %d s", self._remaining)
        self._emit_state()

    def request_reset(self) -> None:
        """Reset now, or ask first unless the user opted out of asking."""
        if self._skip_confirmation:
            self.reset()
            if self._pending_confirmation:
                self._clear_pending()
            return
        if self._pending_confirmation:
            return
        self._pending_confirmation = True
        self.reset_confirmation_changed.emit(True)

    def confirm_reset(self) -> None:
        if not self._pending_confirmation:
            return
        self.reset()
        self._clear_pending()

    def cancel_reset(self) -> None:
        if not self._pending_confirmation:
            return
        self._clear_pending()

    def reset(self) -> None:
        """Stop and put the full duration back on the clock."""
        self._stop_ticking()
        self._remaining = self._duration
        logger.debug("Timer reset to %d s", self._remaining)
        self.tick.emit(self._remaining)
        self._emit_state()

    def set_remaining(self, seconds: int) -> None:
        """Overwrite the clock while stopped.  Negative values become 0."""
        if self._running:
            return
        self._remaining = max(0, seconds)
        self.tick.emit(self._remaining)
        self._emit_state()

    def commit_edit(self, text: str) -> None:
        """Apply the text typed into the time field and start the timer.

        Unparseable text sets the clock to zero, so nothing starts.
        """
        if self._running:
            return
        seconds = parse_time(text)
        logger.debug("Time field committed %r -> %d s", text, seconds)
        self.set_remaining(seconds)
        self.start()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        # A timeout queued before stop() must not touch the clock.
        if not self._running:
            return
        self._remaining = max(0, self._remaining - 1)
        self.tick.emit(self._remaining)
        if self._remaining == 0:
            self._finish_session()

    def _finish_session(self) -> None:
        self._stop_ticking()
        logger.info("Pomodoro finished")
        self._emit_state()
        self.session_finished.emit()
        if self._context is not None:
            self._context.increment_session_count()

    def _stop_ticking(self) -> None:
        self._qt_timer.stop()
        self._running = False

    def _clear_pending(self) -> None:
        self._pending_confirmation = False
        self.reset_confirmation_changed.emit(False)

    def _emit_state(self) -> None:
        self.state_changed.emit(self.state)
