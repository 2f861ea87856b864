"""Row sources: Google Sheets and the bundled demo data."""

from .base import Grid, RowSource
from .client import GoogleSheetsClient, SourceUnavailable
from .demo import DemoSource

__all__ = [
    "Grid",
    "RowSource",
    "GoogleSheetsClient",
    "SourceUnavailable",
    "DemoSource",
]
