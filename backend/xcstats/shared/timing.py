"""
Race time formulas.

Parsing of sheet time strings, the 3-mile equivalent conversion and
improvement percentages. Pure functions, no I/O.
"""

import re

from .constants import (
    DISTANCE_TOLERANCE_MI,
    SPECIAL_DISTANCES_MI,
    TARGET_DISTANCE_MI,
)


_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?:\.(\d+))?$", re.ASCII)


class InvalidTimeFormat(ValueError):
    """Time string is not M:SS, MM:SS or MM:SS.fraction."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid time format: {text!r}")


def parse_time_to_seconds(text: str) -> float:
    """
    Parse a finish time string into seconds.

    "18:05"    → 1085.0
    "5:11"     → 311.0
    "14:51.20" → 891.2

    Raises:
        InvalidTimeFormat: for anything else (no colon, letters,
            three minute digits, single second digit, ...)
    """
    match = _TIME_RE.match(text.strip())
    if not match:
        raise InvalidTimeFormat(text)

    minutes = int(match.group(1))
    seconds = int(match.group(2))
    fraction = float(f"0.{match.group(3)}") if match.group(3) else 0.0

    return minutes * 60 + seconds + fraction


def calculate_3mi_equivalent(seconds: float, distance_mi: float) -> float:
    """
    Project a race time onto the standard 3-mile distance.

    5K (3.11 mi), 3400m (2.112 mi) and 2.9 mi courses are matched within
    ±0.01 mi and scaled by their nominal distance; everything else
    scales linearly.

    Args:
        seconds: Finish time in seconds
        distance_mi: Race distance in miles (must be > 0)

    Returns:
        3-mile equivalent time in seconds
    """
    for nominal in SPECIAL_DISTANCES_MI:
        if abs(distance_mi - nominal) < DISTANCE_TOLERANCE_MI:
            return seconds * (TARGET_DISTANCE_MI / nominal)

    return seconds * (TARGET_DISTANCE_MI / distance_mi)


def calculate_improvement_pct(first_time: float, latest_time: float) -> float:
    """
    Percentage change from the first time to the latest one.

    Positive = faster (improved). Returns 0 if either time is not positive.
    """
    if first_time <= 0 or latest_time <= 0:
        return 0.0
    return (first_time - latest_time) / first_time * 100
