import unittest
from datetime import date, timedelta

from calendar_core import (
    CalendarDate,
    build_grid,
    day_of_week,
    days_in_month,
    is_leap_year,
    leading_blanks,
    month_label,
    normalize_month,
    parse_iso_date,
)


def _sunday_first(d: date) -> int:
    return (d.weekday() + 1) % 7


class TestLeapYears(unittest.TestCase):
    def test_february_lengths(self) -> None:
        self.assertEqual(days_in_month(2024, 1), 29)
        self.assertEqual(days_in_month(2023, 1), 28)
        self.assertEqual(days_in_month(2000, 1), 29)
        self.assertEqual(days_in_month(1900, 1), 28)

    def test_is_leap_year(self) -> None:
        self.assertTrue(is_leap_year(2400))
        self.assertFalse(is_leap_year(2100))
        self.assertTrue(is_leap_year(0))
        self.assertTrue(is_leap_year(-4))

    def test_month_lengths_match_stdlib(self) -> None:
        for year in (1899, 1900, 2000, 2023, 2024, 2100):
            for month in range(12):
                first = date(year, month + 1, 1)
                nxt = date(year + (month == 11), (month + 1) % 12 + 1, 1)
                self.assertEqual(days_in_month(year, month), (nxt - first).days, (year, month))


class TestWeekdays(unittest.TestCase):
    def test_known_weekdays(self) -> None:
        self.assertEqual(day_of_week(1970, 0, 1), 4)   # Thursday
        self.assertEqual(day_of_week(2000, 0, 1), 6)   # Saturday
        self.assertEqual(day_of_week(1900, 0, 1), 1)   # Monday
        self.assertEqual(day_of_week(2025, 0, 1), 3)   # Wednesday
        self.assertEqual(day_of_week(2026, 9, 1), 4)   # Thursday
        self.assertEqual(day_of_week(1, 0, 1), 1)      # Monday (proleptic)

    def test_weekdays_match_stdlib(self) -> None:
        d = date(1600, 1, 1)
        end = date(2400, 12, 31)
        while d <= end:
            self.assertEqual(day_of_week(d.year, d.month - 1, d.day), _sunday_first(d), d)
            d += timedelta(days=97)


class TestCalendarDate(unittest.TestCase):
    def test_total_order(self) -> None:
        a = CalendarDate(2025, 5, 9)
        b = CalendarDate(2025, 5, 10)
        c = CalendarDate(2025, 6, 1)
        d = CalendarDate(2026, 0, 1)
        self.assertEqual(sorted([d, c, b, a]), [a, b, c, d])
        self.assertLess(CalendarDate(2024, 11, 31), CalendarDate(2025, 0, 1))

    def test_ordinal_matches_stdlib(self) -> None:
        epoch = date(1970, 1, 1).toordinal()
        for d in (date(1, 1, 1), date(1969, 12, 31), date(2000, 2, 29), date(9999, 12, 31)):
            self.assertEqual(CalendarDate.from_date(d).ordinal(), d.toordinal() - epoch)

    def test_add_days_rolls_months_and_years(self) -> None:
        self.assertEqual(CalendarDate(2024, 1, 28).add_days(1), CalendarDate(2024, 1, 29))
        self.assertEqual(CalendarDate(2024, 1, 28).add_days(2), CalendarDate(2024, 2, 1))
        self.assertEqual(CalendarDate(2023, 11, 31).add_days(1), CalendarDate(2024, 0, 1))
        self.assertEqual(CalendarDate(2025, 2, 1).add_days(-1), CalendarDate(2025, 1, 28))
        self.assertEqual(CalendarDate(0, 0, 1).add_days(-1), CalendarDate(-1, 11, 31))

    def test_start_of_month_and_length(self) -> None:
        d = CalendarDate(2024, 1, 17)
        self.assertEqual(d.start_of_month(), CalendarDate(2024, 1, 1))
        self.assertEqual(d.days_in_month(), 29)
        self.assertEqual(d.weekday(), 6)  # Saturday

    def test_validity(self) -> None:
        self.assertTrue(CalendarDate(2024, 1, 29).is_valid())
        self.assertFalse(CalendarDate(2023, 1, 29).is_valid())
        self.assertFalse(CalendarDate(2023, 12, 1).is_valid())
        self.assertFalse(CalendarDate(2023, 3, 31).is_valid())
        self.assertFalse(CalendarDate(2023, 0, 0).is_valid())

    def test_isoformat(self) -> None:
        self.assertEqual(CalendarDate(2025, 2, 5).isoformat(), "2025-03-05")


class TestParse(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(parse_iso_date("2025-03-15"), CalendarDate(2025, 2, 15))
        self.assertEqual(parse_iso_date("2024-02-29"), CalendarDate(2024, 1, 29))
        self.assertEqual(parse_iso_date(date(2025, 3, 15)), CalendarDate(2025, 2, 15))

    def test_invalid(self) -> None:
        for raw in ("not-a-date", "", "2023-02-29", "2025-13-01", "2025-00-10",
                    "2025-3-15", "2025/03/15", "2025-03-15T10:00", "\u0662\u0660\u0662\u0665-\u0660\u0663-\u0661\u0665",
                    "\uff12\uff10\uff12\uff15-03-15", None, 20250315):
            self.assertIsNone(parse_iso_date(raw), raw)


class TestGrid(unittest.TestCase):
    def test_length_invariant(self) -> None:
        for year in (1900, 1999, 2000, 2023, 2024, 2025, 2099):
            for month in range(12):
                cells = build_grid(year, month)
                blanks = leading_blanks(year, month)
                self.assertIn(blanks, range(7))
                self.assertEqual(len(cells), blanks + days_in_month(year, month))
                self.assertTrue(all(c.is_blank for c in cells[:blanks]))
                self.assertEqual(cells[blanks].date, CalendarDate(year, month, 1))
                self.assertEqual(cells[-1].date.day, days_in_month(year, month))

    def test_march_2025(self) -> None:
        cells = build_grid(2025, 2)
        self.assertEqual(len(cells), 6 + 31)  # March 1st 2025 is a Saturday

    def test_february_2015_has_no_padding(self) -> None:
        cells = build_grid(2015, 1)
        self.assertEqual(len(cells), 28)
        self.assertFalse(cells[0].is_blank)

    def test_cells_start_without_events(self) -> None:
        self.assertTrue(all(c.events == () for c in build_grid(2026, 9)))

    def test_month_is_normalized(self) -> None:
        self.assertEqual(normalize_month(2025, 12), (2026, 0))
        self.assertEqual(normalize_month(2025, -1), (2024, 11))
        self.assertEqual(build_grid(2025, 12), build_grid(2026, 0))

    def test_month_label(self) -> None:
        self.assertEqual(month_label(2026, 9), "October 2026")
        self.assertEqual(month_label(2025, -1), "December 2024")


if __name__ == "__main__":
    unittest.main()
