"""
Shared utilities (NOT business logic).

Usage:
    from xcstats.shared import parse_time_to_seconds, format_time
    from xcstats.shared.cache import QueryCache
"""
from .timing import (
    InvalidTimeFormat,
    parse_time_to_seconds,
    calculate_3mi_equivalent,
    calculate_improvement_pct,
)
from .formatters import (
    FormattedDelta,
    format_time,
    format_improvement_pct,
    format_delta,
    get_pace_per_mile,
)
from .cache import QueryCache, CacheEntry

__all__ = [
    # timing
    "InvalidTimeFormat",
    "parse_time_to_seconds",
    "calculate_3mi_equivalent",
    "calculate_improvement_pct",
    # formatters
    "FormattedDelta",
    "format_time",
    "format_improvement_pct",
    "format_delta",
    "get_pace_per_mile",
    # cache
    "QueryCache",
    "CacheEntry",
]
