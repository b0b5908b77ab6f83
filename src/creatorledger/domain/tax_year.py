"""UK tax year value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from creatorledger.domain.errors import ValidationError

APRIL = 4
TAX_YEAR_START_DAY = 6
TAX_YEAR_END_DAY = 5
MAX_YEARS_IN_PAST = 10
MAX_YEARS_IN_FUTURE = 5


@dataclass(frozen=True)
class TaxYear:
    """UK tax year running from 6 April to 5 April of the following year.

    ``TaxYear.of`` is the entry point for user input and enforces the rolling
    window of accepted years. Direct construction only checks the type, so
    summaries persisted years ago can still be loaded.
    """

    start_year: int

    def __post_init__(self) -> None:
        if self.start_year is None:
            raise ValidationError("Start year cannot be null")
        if isinstance(self.start_year, bool) or not isinstance(self.start_year, int):
            raise ValidationError(f"Start year must be an integer (got {self.start_year!r})")

    @classmethod
    def of(cls, start_year: Optional[int], today: Optional[date] = None) -> TaxYear:
        """Create a tax year starting in ``start_year``.

        Args:
            start_year: Calendar year in which the tax year starts
            today: Reference date for the accepted window (defaults to today)

        Returns:
            TaxYear instance

        Raises:
            ValidationError: If start_year is missing or outside the window of
                MAX_YEARS_IN_PAST years back and MAX_YEARS_IN_FUTURE years ahead
        """
        tax_year = cls(start_year)

        current_year = (today or date.today()).year
        min_year = current_year - MAX_YEARS_IN_PAST
        max_year = current_year + MAX_YEARS_IN_FUTURE
        if start_year < min_year or start_year > max_year:
            raise ValidationError(
                f"Start year must be within {MAX_YEARS_IN_PAST} years in the past "
                f"and {MAX_YEARS_IN_FUTURE} years in the future (got {start_year})"
            )
        return tax_year

    @classmethod
    def containing(cls, day: date) -> TaxYear:
        """Return the tax year that ``day`` falls in."""
        if day is None:
            raise ValidationError("Date cannot be null")
        if (day.month, day.day) >= (APRIL, TAX_YEAR_START_DAY):
            return cls(day.year)
        return cls(day.year - 1)

    @property
    def start_date(self) -> date:
        return date(self.start_year, APRIL, TAX_YEAR_START_DAY)

    @property
    def end_date(self) -> date:
        return date(self.start_year + 1, APRIL, TAX_YEAR_END_DAY)

    @property
    def label(self) -> str:
        """Short label such as ``2023-24``."""
        return f"{self.start_year}-{(self.start_year + 1) % 100:02d}"

    def contains(self, day: Optional[date]) -> bool:
        """Check whether a date falls within this tax year (inclusive)."""
        if day is None:
            return False
        return self.start_date <= day <= self.end_date

    def __str__(self) -> str:
        return f"TaxYear[{self.start_year}-{self.start_year + 1}]"
