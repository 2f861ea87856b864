"""
Row source interface.

Anything that can hand back the results grid and the race dates grid
as lists of string cells.
"""

from abc import ABC, abstractmethod

Grid = list[list[str]]


class RowSource(ABC):
    """Abstract provider of raw worksheet values."""

    @abstractmethod
    async def fetch_raw_rows(self) -> Grid:
        """
        Fetch every row of the results worksheet.

        Returns:
            Grid of string cells, header at row 0

        Raises:
            SourceUnavailable: if the data cannot be fetched
        """
        pass

    @abstractmethod
    async def fetch_raw_race_dates(self) -> Grid:
        """Fetch the race dates worksheet (name, date, location, notes)."""
        pass

    async def close(self) -> None:
        """Release resources held by the source."""
        return None
