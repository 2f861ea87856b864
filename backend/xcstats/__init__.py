"""XC Stats: cross country team statistics from a results spreadsheet."""

__version__ = "0.1.0"
