"""The secondary tabs: stats, sign in and help.

None of these hold timer logic.  The stats page shows the session count
from :class:`AppContext`; sign in only logs what was typed.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QFrame, QLabel, QLineEdit, QPushButton,
)

from ..context import AppContext

logger = logging.getLogger(__name__)

HELP_TITLE = "what is pomodoro?"

HELP_PARAGRAPHS = (
    "Pomodoro is a technique that helps you stay focused and productive by "
    "using timed work sessions. Use the timer to work for 25 minutes, then "
    "take a 5-minute break. After four sessions, take a longer break to "
    "recharge. It’s a simple way to stay consistent, avoid burnout, and make "
    "progress one step at a time.",
    "The Pomodoro Technique also emphasizes tracking each completed session, "
    "known as a “pomodoro,” to build awareness of how you spend your time. "
    "This helps you estimate workload more accurately and identify when you "
    "tend to lose focus. Between sessions, short breaks are used to reset "
    "mentally without losing momentum, while longer breaks after multiple "
    "cycles prevent cognitive fatigue. Many people adapt the method by "
    "adjusting session length, break duration, or the number of cycles to "
    "match their personal rhythm. The core principle remains the same: work "
    "in short, deliberate intervals with structured recovery to maintain "
    "consistent, high-quality focus.",
)


def _card(owner: QWidget, spacing: int) -> tuple[QFrame, QVBoxLayout]:
    """Grey rounded card filling *owner*, returned with its inner layout."""
    root = QVBoxLayout(owner)
    root.setContentsMargins(0, 0, 0, 0)
    card = QFrame(owner)
    card.setObjectName("card")
    root.addWidget(card)

    layout = QVBoxLayout(card)
    layout.setContentsMargins(40, 40, 40, 40)
    layout.setSpacing(spacing)
    layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return card, layout


class StatsWidget(QWidget):
    """Completed-session count for this run."""

    def __init__(self, context: AppContext, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        card, layout = _card(self, 12)

        title = QLabel("pomodoro stats", card)
        title.setObjectName("titleLabel")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._count_label = QLabel("", card)
        self._count_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._count_label)

        context.session_count_changed.connect(self._set_count)
        self._set_count(context.total_sessions)

    def _set_count(self, total: int) -> None:
        self._count_label.setText(f"sessions completed: {total}")


class SignInWidget(QWidget):
    """Username / password form.  There is no account backend."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        card, layout = _card(self, 12)

        self._username = QLineEdit(card)
        self._username.setPlaceholderText("username")
        self._username.setFixedHeight(40)
        layout.addWidget(self._username)

        self._password = QLineEdit(card)
        self._password.setPlaceholderText("password")
        self._password.setEchoMode(QLineEdit.EchoMode.Password)
        self._password.setFixedHeight(40)
        layout.addWidget(self._password)

        self._login_btn = QPushButton("log in", card)
        self._login_btn.setObjectName("primaryButton")
        self._login_btn.clicked.connect(self._on_login)
        layout.addWidget(self._login_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._create_btn = QPushButton("create account", card)
        self._create_btn.setObjectName("linkButton")
        self._create_btn.clicked.connect(self._on_create_account)
        layout.addWidget(self._create_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    def _on_login(self) -> None:
        logger.info("Logging in with %s", self._username.text())

    def _on_create_account(self) -> None:
        logger.info("Create account tapped")


class HelpWidget(QWidget):
    """Static explanation of the technique."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        card, layout = _card(self, 20)

        title = QLabel(HELP_TITLE, card)
        title.setObjectName("titleLabel")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        for text in HELP_PARAGRAPHS:
            para = QLabel(text, card)
            para.setWordWrap(True)
            layout.addWidget(para)
