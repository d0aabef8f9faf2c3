# config.py
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv(override=False)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SOURCES = ("static", "supabase")
DEFAULT_MAX_BLURBS = 4


@dataclass(frozen=True)
class Settings:
    assets_dir: str
    events_file: str = "events.json"
    source: str = "static"
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_schema: str = "public"
    recurring_table: str = "recurring_events"
    max_blurbs: int = DEFAULT_MAX_BLURBS

    @property
    def events_path(self) -> str:
        return os.path.join(self.assets_dir, self.events_file)


def _positive_int(raw: str, default: int) -> int:
    try:
        n = int(raw)
    except (TypeError, ValueError):
        return default
    return n if n > 0 else default


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    get = lambda k, d="": (env.get(k) or d).strip()

    source = get("CALENDAR_RECURRING_SOURCE", "static").lower()
    if source not in SOURCES:
        raise ValueError(f"Config error: CALENDAR_RECURRING_SOURCE must be one of {list(SOURCES)}, got '{source}'.")

    return Settings(
        assets_dir=get("CALENDAR_ASSETS_DIR") or os.path.join(BASE_DIR, "www"),
        events_file=get("CALENDAR_EVENTS_FILE", "events.json"),
        source=source,
        supabase_url=get("SUPABASE_URL"),
        supabase_key=get("SUPABASE_SERVICE_KEY") or get("SUPABASE_ANON_KEY"),
        supabase_schema=get("SUPABASE_SCHEMA", "public"),
        recurring_table=get("CALENDAR_RECURRING_TABLE", "recurring_events"),
        max_blurbs=_positive_int(get("CALENDAR_MAX_BLURBS"), DEFAULT_MAX_BLURBS),
    )
