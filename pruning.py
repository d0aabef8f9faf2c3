# pruning.py
from __future__ import annotations

from typing import Callable

from calendar_core import CalendarDate, today
from event_store import EventStore
from loader import LoadResult
from state import NavigationState, navigate


class PruningScheduler:
    """
    Drops expired ad-hoc events. Runs at session start and on each
    prev/next, always against the real-world date at call time (never the
    displayed month).
    """

    def __init__(self, store: EventStore, clock: Callable[[], CalendarDate] = today):
        self.store = store
        self.clock = clock

    def run(self, reason: str = "navigate") -> int:
        now = self.clock()
        removed = self.store.prune_ad_hoc(now)
        if removed:
            print(f"[Prune] {reason}: dropped {removed} event(s) dated before {now.isoformat()}")
        return removed


def navigate_and_prune(pruner: PruningScheduler, nav: NavigationState, action: str) -> NavigationState:
    """One prev/next step; expired ad-hoc events are dropped on every move."""
    nxt = navigate(nav, action)
    pruner.run(action)
    return nxt


def apply_load_result(store: EventStore, pruner: PruningScheduler, result: LoadResult) -> bool:
    """
    Settle the one-shot recurring load into the store and run the startup
    prune. A failed load still marks the store loaded, with no recurring
    events. Returns False if the store was already settled.
    """
    if store.loaded:
        return False
    store.set_recurring(result.events)
    pruner.run("startup")
    return True
