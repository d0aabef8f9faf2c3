# event_store.py
# ------------------------------------------------------------------------------
# Two event collections + the per-cell matcher.
# - Recurring events: keyed by (month, day), loaded once, read-only after.
# - Ad-hoc events: keyed by full date, added by the user, pruned by date.
# ------------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from calendar_core import CalendarCell, CalendarDate, parse_iso_date


@dataclass(frozen=True)
class RecurringEvent:
    title: str
    month: int
    day: int

    kind = "recurring"

    def matches(self, d: CalendarDate) -> bool:
        return self.month == d.month and self.day == d.day


@dataclass(frozen=True)
class AdHocEvent:
    title: str
    date: CalendarDate

    kind = "ad-hoc"

    def matches(self, d: CalendarDate) -> bool:
        return self.date.is_valid() and self.date == d


Event = Union[RecurringEvent, AdHocEvent]


def recurring_from_record(rec: Any) -> Optional[RecurringEvent]:
    """
    Convert a stored ``{"date": "YYYY-MM-DD", "title": ...}`` row.
    The year is dropped; rows with a malformed date return None.
    """
    if not isinstance(rec, dict):
        return None
    d = parse_iso_date(rec.get("date"))
    if d is None:
        return None
    return RecurringEvent(title=str(rec.get("title") or ""), month=d.month, day=d.day)


def recurring_from_records(rows: Iterable[Any]) -> Tuple[RecurringEvent, ...]:
    out: List[RecurringEvent] = []
    for r in rows or []:
        ev = recurring_from_record(r)
        if ev is None:
            continue
        out.append(ev)
    return tuple(out)


def events_for(
    cell: CalendarCell,
    recurring: Sequence[RecurringEvent],
    ad_hoc: Sequence[AdHocEvent],
) -> List[Event]:
    if cell.is_blank:
        return []
    d = cell.date
    return [e for e in recurring if e.matches(d)] + [e for e in ad_hoc if e.matches(d)]


class EventStore:
    """
    Per-session holder for both collections.

    ``version`` grows on every mutation so derived views can be memoized
    on it.
    """

    def __init__(self) -> None:
        self._recurring: Tuple[RecurringEvent, ...] = ()
        self._ad_hoc: List[AdHocEvent] = []
        self.loaded = False
        self.version = 0

    @property
    def recurring(self) -> Tuple[RecurringEvent, ...]:
        return self._recurring

    @property
    def ad_hoc(self) -> Tuple[AdHocEvent, ...]:
        return tuple(self._ad_hoc)

    def set_recurring(self, events: Iterable[RecurringEvent]) -> None:
        if self.loaded:
            raise RuntimeError("recurring events are already loaded")
        self._recurring = tuple(events)
        self.loaded = True
        self.version += 1

    def add_ad_hoc(self, title: Any, date: Any) -> bool:
        """Append an event; returns False (and changes nothing) on bad input."""
        title = (title or "").strip() if isinstance(title, str) else ""
        if not title:
            return False
        d = date if isinstance(date, CalendarDate) else parse_iso_date(date)
        if d is None or not d.is_valid():
            return False
        self._ad_hoc.append(AdHocEvent(title=title, date=d))
        self.version += 1
        return True

    def prune_ad_hoc(self, today: CalendarDate) -> int:
        """Drop ad-hoc events dated before ``today``; same-day events stay."""
        kept = [e for e in self._ad_hoc if e.date.is_valid() and e.date >= today]
        removed = len(self._ad_hoc) - len(kept)
        if removed:
            self._ad_hoc[:] = kept
            self.version += 1
        return removed

    def events_for(self, cell: CalendarCell) -> List[Event]:
        return events_for(cell, self._recurring, self._ad_hoc)


__all__ = [
    "RecurringEvent", "AdHocEvent", "Event", "EventStore",
    "recurring_from_record", "recurring_from_records", "events_for",
]
