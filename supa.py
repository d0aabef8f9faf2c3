# supa.py
# -----------------------------------------------------------------------------
# Supabase reader for the recurring-event table.
# - Uses ClientOptions(schema=...) (not a dict for options).
# - Runs the sync supabase-py client off-thread via anyio.to_thread.run_sync.
# - Tolerates response shapes (obj/dict/None) without touching .data on None.
# - Errors propagate; the loader decides how a failed read degrades.
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, List, Optional

import anyio
from supabase import create_client

try:
    # Newer releases
    from supabase.client import ClientOptions
except ImportError:
    # Older releases
    from supabase.lib.client_options import ClientOptions


class SupaClient:
    """
    Read-only access to recurring events stored in Supabase.

    Parameters
    ----------
    url : str
        SUPABASE_URL
    key : str
        Service or anon key; the table only needs select rights.
    schema : str
        Postgres schema (defaults to "public")
    events_table : str
        Table holding recurring rows.
        Expected columns: date (text, YYYY-MM-DD), title (text)
    """

    def __init__(
        self,
        url: str,
        key: str,
        *,
        schema: str = "public",
        events_table: str = "recurring_events",
    ):
        if not url or not key:
            raise RuntimeError("SUPABASE_URL or SUPABASE_KEY missing")
        self.client = create_client(url, key, options=ClientOptions(schema=schema))
        self.events_table = events_table

    async def load_events(self) -> List[dict]:
        """Return every {date, title} row in the order the table yields them."""
        def _q():
            return (
                self.client.table(self.events_table)
                .select("date,title")
                .execute()
            )

        resp = await anyio.to_thread.run_sync(_q)
        data = _extract_data(resp)
        if data is None:
            print(f"[Supa] load_events(): empty response from '{self.events_table}'")
            return []
        return list(data)


def _extract_data(resp: Any) -> Optional[Any]:
    """
    Normalise supabase response shapes:
    - PostgrestResponse with .data
    - dict with 'data' key
    - None
    """
    if resp is None:
        return None
    data = getattr(resp, "data", None)
    if data is None and isinstance(resp, dict):
        data = resp.get("data")
    return data


__all__ = ["SupaClient"]
