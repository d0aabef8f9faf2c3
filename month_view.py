# month_view.py
# ------------------------------------------------------------------------------
# Pure derivation: (navigation, store, today) -> renderable month view-model.
# ------------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from calendar_core import CalendarCell, CalendarDate, build_grid, month_label
from event_store import EventStore
from state import NavigationState


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    label: str
    cells: Tuple[CalendarCell, ...]
    today: CalendarDate

    def is_today(self, cell: CalendarCell) -> bool:
        return not cell.is_blank and cell.date == self.today

    @property
    def today_index(self) -> Optional[int]:
        for i, c in enumerate(self.cells):
            if self.is_today(c):
                return i
        return None


def build_month_view(store: EventStore, nav: NavigationState, today: CalendarDate) -> MonthView:
    cells = tuple(
        c if c.is_blank else CalendarCell(c.date, tuple(store.events_for(c)))
        for c in build_grid(nav.year, nav.month)
    )
    return MonthView(
        year=nav.year,
        month=nav.month,
        label=month_label(nav.year, nav.month),
        cells=cells,
        today=today,
    )
