# calendar_core.py
# ------------------------------------------------------------------------------
# Gregorian date arithmetic + month grid for the calendar widget.
# - Months are 0-based (0 = January .. 11 = December).
# - Weekdays are 0 = Sunday .. 6 = Saturday.
# - Proleptic day counting, valid for any integer year (no datetime math),
#   so navigation can run arbitrarily far in either direction.
# ------------------------------------------------------------------------------

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional, Tuple

MONTH_NAMES: List[str] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
WEEKDAYS: List[str] = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_ISO_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_DAYS_BEFORE_EPOCH = 719_468  # 0000-03-01 .. 1970-01-01


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """Carry an out-of-range 0-based month into the year."""
    carry, m = divmod(month, 12)
    return year + carry, m


def days_in_month(year: int, month: int) -> int:
    year, month = normalize_month(year, month)
    if month == 1:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (3, 5, 8, 10) else 31


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a 0-based month."""
    m = month + 1
    y = year - (1 if m <= 2 else 0)
    era = y // 400
    yoe = y - era * 400
    mp = (m + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - _DAYS_BEFORE_EPOCH


def _civil_from_days(days: int) -> Tuple[int, int, int]:
    z = days + _DAYS_BEFORE_EPOCH
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    d = doy - (153 * mp + 2) // 5 + 1
    m = mp + 3 if mp < 10 else mp - 9
    y = yoe + era * 400 + (1 if m <= 2 else 0)
    return y, m - 1, d


def day_of_week(year: int, month: int, day: int) -> int:
    # 1970-01-01 was a Thursday
    return (_days_from_civil(year, month, day) + 4) % 7


@dataclass(frozen=True, order=True)
class CalendarDate:
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month - 1, d.day)

    @classmethod
    def from_ordinal(cls, days: int) -> "CalendarDate":
        return cls(*_civil_from_days(days))

    def is_valid(self) -> bool:
        return 0 <= self.month <= 11 and 1 <= self.day <= days_in_month(self.year, self.month)

    def ordinal(self) -> int:
        """Days since 1970-01-01 (negative before)."""
        return _days_from_civil(self.year, self.month, self.day)

    def add_days(self, n: int) -> "CalendarDate":
        return CalendarDate.from_ordinal(self.ordinal() + n)

    def start_of_month(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, 1)

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def weekday(self) -> int:
        return day_of_week(self.year, self.month, self.day)

    def same_month_day(self, other: "CalendarDate") -> bool:
        return self.month == other.month and self.day == other.day

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"


def parse_iso_date(text: Any) -> Optional[CalendarDate]:
    """Strict ``YYYY-MM-DD`` parse; None unless it names a real calendar day."""
    if isinstance(text, date):
        return CalendarDate.from_date(text)
    if not isinstance(text, str):
        return None
    m = _ISO_RE.fullmatch(text.strip())
    if not m:
        return None
    cd = CalendarDate(int(m.group(1)), int(m.group(2)) - 1, int(m.group(3)))
    return cd if cd.is_valid() else None


def today() -> CalendarDate:
    return CalendarDate.from_date(date.today())


def month_label(year: int, month: int) -> str:
    year, month = normalize_month(year, month)
    return f"{MONTH_NAMES[month]} {year}"


# --- Grid ------------------------------------------------------------------- #

@dataclass(frozen=True)
class CalendarCell:
    date: Optional[CalendarDate] = None
    events: Tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_blank(self) -> bool:
        return self.date is None


def leading_blanks(year: int, month: int) -> int:
    year, month = normalize_month(year, month)
    return day_of_week(year, month, 1)


def build_grid(year: int, month: int) -> List[CalendarCell]:
    """
    Cells for a Sunday-first 7-column month grid: one blank per weekday
    before the 1st, then one cell per day. Events are left empty here and
    resolved by the matcher.
    """
    year, month = normalize_month(year, month)
    cells = [CalendarCell() for _ in range(leading_blanks(year, month))]
    for d in range(1, days_in_month(year, month) + 1):
        cells.append(CalendarCell(CalendarDate(year, month, d)))
    return cells


__all__ = [
    "MONTH_NAMES", "WEEKDAYS",
    "CalendarDate", "CalendarCell",
    "is_leap_year", "normalize_month", "days_in_month", "day_of_week",
    "leading_blanks", "build_grid", "parse_iso_date", "today", "month_label",
]
