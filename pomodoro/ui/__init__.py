"""UI package."""

from .timer_widget import TimerWidget
from .reset_popup import ResetConfirmationPopup
from .pages import StatsWidget, SignInWidget, HelpWidget

__all__ = [
    "TimerWidget",
    "ResetConfirmationPopup",
    "StatsWidget",
    "SignInWidget",
    "HelpWidget",
]
