"""QSS stylesheet and palette for the Pomodoro window."""

from __future__ import annotations

# ── default palette (soft grey cards on a light window) ──────────────────

PALETTE: dict[str, str] = {
    "bg":           "#ECECEC",
    "card":         "#DCDCDC",
    "button":       "#9E9E9E",
    "popup":        "#8E8E8E",
    "accent":       "#0A84FF",
    "confirm":      "#0A84FF",
    "cancel":       "#1C1C1E",
    "text":         "#1C1C1E",
    "text_inverse": "#FFFFFF",
    "text_muted":   "#6E6E73",
}


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("SF Pro Rounded", "SF Pro", ".AppleSystemUIFont"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    font = resolve_font_family()
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── frame / card ────────────────────────────── */
    QFrame#card {{
        background-color: {p['card']};
        border-radius: 16px;
    }}

    QFrame#popup {{
        background-color: {p['popup']};
        border-radius: 12px;
    }}

    /* ── icon buttons under the timer ────────────── */
    QPushButton#controlButton {{
        background-color: {p['button']};
        color: {p['text_inverse']};
        border: none;
        border-radius: 8px;
        font-size: 28px;
        font-weight: 700;
    }}

    QPushButton#controlButton:pressed {{
        background-color: {p['text_muted']};
    }}

    /* ── popup buttons ───────────────────────────── */
    QPushButton#confirmButton, QPushButton#cancelButton {{
        color: {p['text_inverse']};
        border: none;
        border-radius: 6px;
        padding: 8px 0;
        font-weight: 700;
    }}

    QPushButton#confirmButton {{
        background-color: {p['confirm']};
    }}

    QPushButton#cancelButton {{
        background-color: {p['cancel']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['text_inverse']};
        border: none;
        border-radius: 6px;
        padding: 10px 20px;
        font-weight: 600;
    }}

    QPushButton#linkButton {{
        background-color: transparent;
        color: {p['accent']};
        border: none;
    }}

    /* ── time field ──────────────────────────────── */
    QLineEdit#timeField {{
        background-color: transparent;
        border: none;
        font-size: 64px;
        font-weight: 700;
    }}

    /* ── tab widget ──────────────────────────────── */
    QTabWidget::pane {{
        border: none;
    }}

    QTabBar::tab {{
        background-color: {p['button']};
        color: {p['text_inverse']};
        padding: 6px 18px;
        border: none;
    }}

    QTabBar::tab:first {{
        border-top-left-radius: 8px;
        border-bottom-left-radius: 8px;
    }}

    QTabBar::tab:last {{
        border-top-right-radius: 8px;
        border-bottom-right-radius: 8px;
    }}

    QTabBar::tab:selected {{
        background-color: {p['text_muted']};
    }}

    /* ── labels ──────────────────────────────────── */
    QLabel#titleLabel {{
        font-size: 24px;
        font-weight: 700;
    }}

    QLabel#dateLabel {{
        font-weight: 600;
    }}

    QCheckBox#skipBox {{
        font-size: 12px;
    }}
    """
