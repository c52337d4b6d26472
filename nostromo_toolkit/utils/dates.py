"""
Date normalization for contract-native date parts.

Nostromo stores dates as (year, month, day, hour) tuples. Campaign records
carry the year as an offset from 2000, while project records arrive with the
year already expanded to four digits by the chain accessor. The convention is
therefore always passed explicitly as a YearMode; nothing here infers it.

All conversions are UTC. Local time is never read or produced.
"""

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime, timedelta, timezone
from enum import Enum
from typing import Any, Mapping, Union

YEAR_BASE = 2000

DEFAULT_INSTANT_FORMAT = "%Y-%m-%d %H:%M UTC"

# Bounds for parts whose year falls outside what datetime can represent
EARLIEST_INSTANT = datetime.min.replace(tzinfo=timezone.utc)
LATEST_INSTANT = datetime.max.replace(tzinfo=timezone.utc)

TimeLike = Union[datetime, int, float]


class YearMode(Enum):
    """How the year component of a contract date is interpreted."""

    OFFSET_2000 = "offset_2000"  # year - 2000, e.g. 25 -> 2025
    ABSOLUTE = "absolute"  # four-digit year, used as-is

    @classmethod
    def parse(cls, value: Union[str, "YearMode"]) -> "YearMode":
        """Parse a YearMode from its value, e.g. ``"offset_2000"``."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(
            f"Unknown year mode: {value}. "
            f"Must be one of {[m.value for m in cls]}"
        )


def to_instant(
    year: int, month: int, day: int, hour: int, mode: YearMode
) -> datetime:
    """
    Convert contract date parts to a timezone-aware UTC datetime.

    Out-of-range components roll over instead of raising: month 13 is
    January of the following year, day 0 is the last day of the previous
    month, hour 24 is midnight of the next day. Years datetime cannot hold
    (e.g. year 0 of an unset record) clamp to EARLIEST_INSTANT or
    LATEST_INSTANT, so the conversion never raises.

    Args:
        year: Year component, interpreted according to ``mode``
        month: Month (1-12)
        day: Day of month (1-31)
        hour: Hour of day (0-23)
        mode: Year convention of the record the parts come from

    Returns:
        UTC datetime for the given parts
    """
    full_year = year + YEAR_BASE if mode is YearMode.OFFSET_2000 else year

    extra_years, month_index = divmod(month - 1, 12)
    start_year = full_year + extra_years
    if start_year < MINYEAR:
        return EARLIEST_INSTANT
    if start_year > MAXYEAR:
        return LATEST_INSTANT

    month_start = datetime(start_year, month_index + 1, 1, tzinfo=timezone.utc)
    try:
        return month_start + timedelta(days=day - 1, hours=hour)
    except OverflowError:
        if (day - 1) * 24 + hour < 0:
            return EARLIEST_INSTANT
        return LATEST_INSTANT


@dataclass(frozen=True)
class DateParts:
    """A date as stored by the contract."""

    year: int
    month: int
    day: int
    hour: int

    @classmethod
    def from_record(cls, record: Mapping[str, Any], prefix: str) -> "DateParts":
        """
        Read ``<prefix>Year/Month/Day/Hour`` fields from a decoded record.

        Raises:
            KeyError: If one of the four fields is missing
        """
        return cls(
            year=record[f"{prefix}Year"],
            month=record[f"{prefix}Month"],
            day=record[f"{prefix}Day"],
            hour=record[f"{prefix}Hour"],
        )

    def to_instant(self, mode: YearMode) -> datetime:
        return to_instant(self.year, self.month, self.day, self.hour, mode)

    def is_empty(self) -> bool:
        """True when every component is zero (field never set on-chain)."""
        return not (self.year or self.month or self.day or self.hour)


def to_utc(value: TimeLike) -> datetime:
    """
    Normalize a caller-supplied "now" to an aware UTC datetime.

    Aware datetimes are converted to UTC, naive datetimes are taken to
    already be UTC, and numbers are Unix timestamps in seconds.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.fromtimestamp(value, tz=timezone.utc)


def format_instant(
    instant: datetime, format_str: str = DEFAULT_INSTANT_FORMAT
) -> str:
    """Format an instant in UTC, e.g. ``2025-01-01 00:00 UTC``."""
    return to_utc(instant).strftime(format_str)
