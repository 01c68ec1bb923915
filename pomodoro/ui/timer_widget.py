"""Main timer display widget — the pomodoro tab.

Layout (top → bottom):
    - Date (bold) and inspirational quote, filled in by ContentFetcher
    - Editable MM:SS time field (read-only while running)
    - Controls: play when stopped, reset + pause while running
    - Reset confirmation popup floating over the card
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit, QFrame,
)

from ..content.fetcher import ContentFetcher
from ..timer.clock import format_time
from ..timer.engine import TimerEngine, TimerState
from .reset_popup import ResetConfirmationPopup


class TimerWidget(QWidget):
    """The timer card shown in the pomodoro tab."""

    def __init__(
        self,
        engine: TimerEngine,
        fetcher: ContentFetcher,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._fetcher = fetcher
        self._build_ui()
        self._connect_signals()
        self._date_label.setText(fetcher.date_text)
        self._quote_label.setText(fetcher.quote_text)
        self._refresh_display(engine.remaining)
        self._on_state_changed(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(20)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── date + quote ──────────────────────────────────────────────
        self._date_label = QLabel("", card)
        self._date_label.setObjectName("dateLabel")
        self._date_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._date_label)

        self._quote_label = QLabel("", card)
        self._quote_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._quote_label.setWordWrap(True)
        layout.addWidget(self._quote_label)

        # ── time field ────────────────────────────────────────────────
        field_row = QHBoxLayout()
        field_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_field = QLineEdit(card)
        self._time_field.setObjectName("timeField")
        self._time_field.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_field.setFixedWidth(240)
        field_row.addWidget(self._time_field)
        layout.addLayout(field_row)

        # ── controls ──────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(40)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("⏪", card)
        self._reset_btn.setToolTip("Reset")
        self._pause_btn = QPushButton("⏸", card)
        self._pause_btn.setToolTip("Pause")
        self._play_btn = QPushButton("▶", card)
        self._play_btn.setToolTip("Start")

        for btn in (self._reset_btn, self._pause_btn, self._play_btn):
            btn.setObjectName("controlButton")
            btn.setFixedSize(60, 60)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        # ── popup overlay (not part of the layout) ───────────────────
        self._popup = ResetConfirmationPopup(self._engine, self)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._play_btn.clicked.connect(self._on_play)
        self._pause_btn.clicked.connect(self._engine.pause)
        self._reset_btn.clicked.connect(self._engine.request_reset)
        self._time_field.returnPressed.connect(self._on_time_submitted)

        self._engine.tick.connect(self._refresh_display)
        self._engine.state_changed.connect(self._on_state_changed)

        self._fetcher.quote_ready.connect(self._quote_label.setText)
        self._fetcher.date_ready.connect(self._date_label.setText)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_play(self) -> None:
        # Typed-but-unsubmitted text counts, as if Return had been pressed.
        if self._time_field.isModified():
            self._on_time_submitted()
        else:
            self._engine.start()

    def _on_time_submitted(self) -> None:
        text = self._time_field.text()
        self._time_field.setModified(False)
        self._time_field.clearFocus()
        self._engine.commit_edit(text)

    def _on_state_changed(self, state: TimerState) -> None:
        running = state == TimerState.RUNNING
        self._reset_btn.setVisible(running)
        self._pause_btn.setVisible(running)
        self._play_btn.setVisible(not running)
        self._time_field.setReadOnly(not self._engine.is_editable)

    def _refresh_display(self, remaining: int) -> None:
        self._time_field.setText(format_time(remaining))

    # ── toggles used by the window's keyboard shortcuts ──────────────────

    def toggle_running(self) -> None:
        """Space bar: pause when running, otherwise play."""
        if self._engine.is_running:
            self._engine.pause()
        else:
            self._on_play()

    def time_field_has_focus(self) -> bool:
        return self._time_field.hasFocus()

    # ── geometry ──────────────────────────────────────────────────────────

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if self._popup.isVisible():
            self._popup.recenter()
