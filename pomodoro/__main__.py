"""Allow running Pomodoro as a module: python -m pomodoro."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomodoroApp
from .log import configure_logging
from .settings import load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Pomodoro ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro")
    app.setOrganizationName("Pomodoro")

    window = PomodoroApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
