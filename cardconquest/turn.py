"""Game turns, one per month."""

from __future__ import annotations


class Turn(int):
    """A zero-based turn number; twelve turns make a year."""

    def year_month(self) -> tuple[int, int]:
        """Return the one-based (year, month) of this turn."""
        year, month = divmod(int(self), 12)
        return year + 1, month + 1

    def next(self) -> Turn:
        """Return the following turn."""
        return Turn(int(self) + 1)

    def __str__(self) -> str:
        year, month = self.year_month()
        return f"Year {year}, Month {month}"

    def __repr__(self) -> str:
        return f"Turn({int(self)})"