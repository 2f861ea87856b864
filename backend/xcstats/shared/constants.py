"""
Unified constants for race distances and sheet layout.

Single source of truth for the numbers the normalizer and the
3-mile conversion rely on.
"""

from enum import IntEnum


# Standard distance every result is projected onto
TARGET_DISTANCE_MI = 3.0

# Course distances with their own scaling (miles)
FIVE_K_MI = 3.11
THREE_FOUR_HUNDRED_M_MI = 2.112
TWO_POINT_NINE_MI = 2.9

SPECIAL_DISTANCES_MI: tuple[float, ...] = (
    FIVE_K_MI,
    THREE_FOUR_HUNDRED_M_MI,
    TWO_POINT_NINE_MI,
)

# Match window around a special distance
DISTANCE_TOLERANCE_MI = 0.01

# Sanity bounds for a cross country race
MIN_DISTANCE_MI = 0.5
MAX_DISTANCE_MI = 10.0

# Rankings
TOP_SEVEN_SIZE = 7
MOST_IMPROVED_LIMIT = 3

# Placeholder for a missing formatted time
NOT_AVAILABLE = "N/A"


class ResultColumn(IntEnum):
    """Column positions in the results worksheet (A:K)."""
    RUNNER = 0
    RACE_DATE = 1
    RACE_NAME = 2
    TIME = 3
    SECONDS = 4
    DISTANCE = 5
    PACE = 6
    PROJECTED_3MI = 7
    IMPROVEMENT = 8
    EQUIV_3MI = 9
    PREV_EQUIV_3MI = 10


RESULT_COLUMN_COUNT = len(ResultColumn)


class ScheduleColumn(IntEnum):
    """Column positions in the race dates worksheet (A:D)."""
    NAME = 0
    DATE = 1
    LOCATION = 2
    NOTES = 3


SCHEDULE_COLUMN_COUNT = len(ScheduleColumn)
