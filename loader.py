# loader.py
# ------------------------------------------------------------------------------
# One-shot recurring-event load. Never raises: any failure resolves to an
# empty set so the grid can still render.
# ------------------------------------------------------------------------------

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Tuple

import anyio

from config import Settings
from event_store import RecurringEvent, recurring_from_records
from supa import SupaClient


@dataclass(frozen=True)
class LoadResult:
    events: Tuple[RecurringEvent, ...] = ()
    failed: bool = False

    @classmethod
    def empty(cls) -> "LoadResult":
        return cls(events=(), failed=True)


async def fetch_records(settings: Settings) -> Any:
    if settings.source == "supabase":
        db = SupaClient(
            settings.supabase_url,
            settings.supabase_key,
            schema=settings.supabase_schema,
            events_table=settings.recurring_table,
        )
        return await db.load_events()
    raw = await anyio.Path(settings.events_path).read_text(encoding="utf-8")
    return json.loads(raw)


async def load_recurring(settings: Settings) -> LoadResult:
    try:
        rows = await fetch_records(settings)
    except Exception as e:
        print(f"[Loader] {settings.source} load failed: {e!r}")
        return LoadResult.empty()

    if not isinstance(rows, list):
        print(f"[Loader] expected a list of records, got {type(rows).__name__}")
        return LoadResult.empty()

    events = recurring_from_records(rows)
    skipped = len(rows) - len(events)
    if skipped:
        print(f"[Loader] skipped {skipped} malformed record(s)")
    return LoadResult(events=events)
