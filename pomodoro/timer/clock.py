"""Conversion between seconds and the ``MM:SS`` text shown in the timer field."""

from __future__ import annotations


def format_time(seconds: int) -> str:
    """Render *seconds* as ``MM:SS``.

    Minutes are not clamped, so 6000 s renders as ``"100:00"``.
    """
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def parse_time(text: str) -> int:
    """Parse ``MM:SS`` back into seconds.

    Malformed input (wrong number of fields, non-digits, negatives) gives
    ``0`` instead of raising; the caller treats that as "reset to zero".
    """
    parts = text.strip().split(":")
    if len(parts) != 2:
        return 0
    minutes, secs = parts
    # isdigit() rejects signs, blanks and decimals in one go
    if not (minutes.isascii() and minutes.isdigit()):
        return 0
    if not (secs.isascii() and secs.isdigit()):
        return 0
    return int(minutes) * 60 + int(secs)
