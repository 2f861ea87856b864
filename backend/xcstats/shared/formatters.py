"""
Formatting utilities for display.

Used by the aggregation layer and the API schemas.
"""

import math
from typing import NamedTuple


class FormattedDelta(NamedTuple):
    """Signed time difference ready for display."""

    text: str
    is_positive: bool  # slower than the baseline


def format_time(seconds: float, show_fraction: bool = False) -> str:
    """
    Format seconds as 'M:SS'.

    Args:
        seconds: Time in seconds (e.g., 1085 or 244.2)
        show_fraction: Keep hundredths when the seconds are not whole

    Returns:
        Formatted string (e.g., '18:05', '4:04.20')
    """
    minutes = math.floor(seconds / 60)
    remainder = seconds % 60

    if show_fraction and remainder % 1 != 0:
        return f"{minutes}:{remainder:05.2f}"

    return f"{minutes}:{math.floor(remainder):02d}"


def format_improvement_pct(pct: float) -> str:
    """
    Format improvement with sign.

    Returns:
        Formatted string (e.g., '+10.0%', '-2.5%', '0.0%')
    """
    sign = "+" if pct > 0 else ""
    return f"{sign}{pct:.1f}%"


def format_delta(delta_seconds: float) -> FormattedDelta:
    """
    Format a time delta with sign.

    Positive delta means slower (worse) than the baseline.
    """
    sign = "+" if delta_seconds > 0 else ""
    return FormattedDelta(
        text=f"{sign}{format_time(abs(delta_seconds))}",
        is_positive=delta_seconds > 0,
    )


def get_pace_per_mile(seconds: float, distance_mi: float) -> str:
    """Pace per mile as 'M:SS'."""
    return format_time(seconds / distance_mi)
