# vitals_insights/utils/formatting.py
"""
Display formatting for insight values.

These strings are rendered verbatim by the presentation layer, so their
shape is part of the observable output.
"""

import math


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as "7h 30m", "8h" or "45m" (whole minutes)."""
    minutes = int(seconds / 60)
    if minutes >= 60:
        hours, remainder = divmod(minutes, 60)
        return f"{hours}h" if remainder == 0 else f"{hours}h {remainder}m"
    return f"{minutes}m"


def format_percent(value: float) -> str:
    """Format a value already expressed in percent, e.g. 12.7 -> "13%"."""
    return f"{value:.0f}%"


def format_minutes(minutes: float) -> str:
    return f"{minutes:.0f} min"


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return int(math.copysign(rounded, value))


def format_bpm(bpm: float) -> str:
    return f"{round_half_away(bpm)} bpm"


def format_ms(ms: float) -> str:
    return f"{round_half_away(ms)} ms"
