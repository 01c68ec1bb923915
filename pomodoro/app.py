"""Main application window for Pomodoro."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QTabWidget

from .context import AppContext
from .content.fetcher import ContentFetcher
from .settings import Settings
from .timer.engine import TimerEngine
from .ui.timer_widget import TimerWidget
from .ui.pages import StatsWidget, SignInWidget, HelpWidget
from .ui.styles import build_stylesheet

logger = logging.getLogger(__name__)


class PomodoroApp(QMainWindow):
    """Main application window.

    Owns the :class:`AppContext`, the :class:`TimerEngine` and the
    :class:`ContentFetcher`; the tabs only receive references to them.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        fetcher: ContentFetcher | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        s = self._settings

        self.setWindowTitle("Pomodoro")
        self.resize(s.window_width, s.window_height)
        self.setStyleSheet(build_stylesheet())

        # ── shared state ──────────────────────────────────────────────
        self._context = AppContext(self)
        self._timer_engine = TimerEngine(
            self, context=self._context, duration=s.work_duration,
        )
        self._fetcher = fetcher or ContentFetcher(s.quote_url, s.date_url, self)

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(30, 30, 30, 30)

        self._tabs = QTabWidget(central)
        self._tabs.setDocumentMode(True)
        self._tabs.tabBar().setExpanding(False)
        root_layout.addWidget(self._tabs)

        self._timer_widget = TimerWidget(
            self._timer_engine, self._fetcher, self._tabs,
        )
        self._tabs.addTab(self._timer_widget, "pomodoro")

        self._stats_widget = StatsWidget(self._context, self._tabs)
        self._tabs.addTab(self._stats_widget, "stats")

        self._sign_in_widget = SignInWidget(self._tabs)
        self._tabs.addTab(self._sign_in_widget, "sign in")

        self._help_widget = HelpWidget(self._tabs)
        self._tabs.addTab(self._help_widget, "help")

        # ── wire signals ──────────────────────────────────────────────
        self._activated_once = False
        self._tabs.currentChanged.connect(self._on_tab_changed)

    # ══════════════════════════════════════════════════════════════════
    #  ACCESSORS
    # ══════════════════════════════════════════════════════════════════

    @property
    def timer_engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def context(self) -> AppContext:
        return self._context

    @property
    def fetcher(self) -> ContentFetcher:
        return self._fetcher

    # ══════════════════════════════════════════════════════════════════
    #  VIEW ACTIVATION
    # ══════════════════════════════════════════════════════════════════

    def _activate_timer_view(self) -> None:
        """Refresh the quote and date each time the pomodoro tab appears."""
        logger.debug("Timer view activated, fetching content")
        self._fetcher.fetch_all()

    def _on_tab_changed(self, index: int) -> None:
        if self._tabs.widget(index) is self._timer_widget:
            self._activate_timer_view()

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the timer."""
        if self._tabs.currentWidget() is not self._timer_widget:
            return
        # Space is a normal character while typing into the time field
        if self._timer_widget.time_field_has_focus():
            return
        self._timer_widget.toggle_running()

    def _on_escape(self) -> None:
        if self._tabs.currentWidget() is not self._timer_widget:
            return
        if self._timer_engine.pending_reset_confirmation:
            self._timer_engine.cancel_reset()
        else:
            self._timer_engine.request_reset()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def showEvent(self, event) -> None:  # type: ignore[override]
        super().showEvent(event)
        if not self._activated_once:
            self._activated_once = True
            if self._tabs.currentWidget() is self._timer_widget:
                self._activate_timer_view()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop the clock and drop any fetch still in flight."""
        self._timer_engine.pause()
        self._fetcher.shutdown()
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
