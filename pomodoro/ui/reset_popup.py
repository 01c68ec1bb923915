""""Reset the timer?" overlay.

Shown over the timer card while the engine is waiting for the user to
confirm a reset.  The checkbox writes straight through to
``TimerEngine.skip_reset_confirmation`` and only affects the next
reset request.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFrame,
    QLabel, QPushButton, QCheckBox,
)

from ..timer.engine import TimerEngine


class ResetConfirmationPopup(QFrame):
    """Small modal-style card with yes / no and a "don't show again" box."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self.setObjectName("popup")
        self.setFixedWidth(250)
        self._build_ui()
        self._connect_signals()
        self._skip_box.setChecked(engine.skip_reset_confirmation)
        self.setVisible(engine.pending_reset_confirmation)

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        icon = QLabel("ⓘ", self)
        icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        icon.setStyleSheet("font-size: 40px;")
        layout.addWidget(icon)

        self._question = QLabel("reset the timer?", self)
        self._question.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._question.setStyleSheet("font-size: 17px; font-weight: 700;")
        layout.addWidget(self._question)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)

        self._yes_btn = QPushButton("yes", self)
        self._yes_btn.setObjectName("confirmButton")

        self._no_btn = QPushButton("no", self)
        self._no_btn.setObjectName("cancelButton")

        btn_row.addWidget(self._yes_btn)
        btn_row.addWidget(self._no_btn)
        layout.addLayout(btn_row)

        self._skip_box = QCheckBox("don’t show again", self)
        self._skip_box.setObjectName("skipBox")
        layout.addWidget(self._skip_box)

    # ── signals ───────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._yes_btn.clicked.connect(self._engine.confirm_reset)
        self._no_btn.clicked.connect(self._engine.cancel_reset)
        self._skip_box.toggled.connect(self._on_skip_toggled)

        self._engine.reset_confirmation_changed.connect(self._on_pending_changed)
        self._engine.skip_confirmation_changed.connect(self._skip_box.setChecked)

    # ── slots ─────────────────────────────────────────────────────────

    def _on_skip_toggled(self, checked: bool) -> None:
        self._engine.skip_reset_confirmation = checked

    def _on_pending_changed(self, pending: bool) -> None:
        self.setVisible(pending)
        if pending:
            self.adjustSize()
            self.recenter()
            self.raise_()

    def recenter(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        x = (parent.width() - self.width()) // 2
        y = (parent.height() - self.height()) // 2
        self.move(max(0, x), max(0, y))
