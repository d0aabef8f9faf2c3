# app.py
# ------------------------------------------------------------------------------
# Month Calendar – recurring + ad-hoc events (Shiny for Python)
# Run with: shiny run app.py
# ------------------------------------------------------------------------------

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from shiny import App, reactive, render, ui

from calendar_core import WEEKDAYS, CalendarCell, today
from config import Settings, load_settings
from event_store import Event, EventStore
from loader import LoadResult, load_recurring
from month_view import MonthView, build_month_view
from pruning import PruningScheduler, apply_load_result, navigate_and_prune
from state import FormState, edit_form, initial_navigation, submit_form, toggle_form

# ------------------------------------------------------------------------------
# Constants & Config
# ------------------------------------------------------------------------------

SETTINGS: Settings = load_settings()
ASSETS_DIR = SETTINGS.assets_dir

# ------------------------------------------------------------------------------
# Injected CSS
# ------------------------------------------------------------------------------

CUSTOM_CSS = """
body { background: linear-gradient(135deg, #dbeafe, #ede9fe); min-height: 100vh; }
.cal-wrap {
    max-width: 40rem; margin: 2rem auto; padding: 1rem;
    background: #fff; border-radius: 8px; box-shadow: 0 4px 16px rgba(0,0,0,0.12);
}
.cal-title { font-size: 1.5rem; font-weight: bold; text-align: center; flex: 1; }
.weekday-row, .month-grid { display: grid; grid-template-columns: repeat(7, 1fr); gap: 0.4rem; }
.weekday-row { text-align: center; font-weight: 600; margin-bottom: 0.5rem; }
.day-tile {
    height: 6rem; padding: 0.25rem; border: 1px solid #ddd; border-radius: 8px;
    background: #f9fafb; display: flex; flex-direction: column; align-items: center;
    overflow: hidden;
}
.day-tile.blank { border: none; background: none; }
.day-tile.today { background: #bfdbfe; border-color: #3b82f6; }
.day-num { font-size: 0.85rem; font-weight: bold; margin-bottom: 0.25rem; }
.day-events { display: flex; flex-direction: column; gap: 0.2rem; width: 100%; }
.event-blurb {
    font-size: 0.7rem; color: #fff; border-radius: 4px; padding: 0 0.25rem;
    white-space: nowrap; overflow: hidden; text-overflow: ellipsis;
}
.event-blurb.recurring { background: #3b82f6; }
.event-blurb.ad-hoc { background: #22c55e; }
.event-more { font-size: 0.65rem; color: #666; }
.loading-banner { text-align: center; color: #6b7280; margin-bottom: 1rem; }
"""

# ------------------------------------------------------------------------------
# UI Components
# ------------------------------------------------------------------------------

def _iso(d: Optional[date]) -> Optional[str]:
    return d.isoformat() if d else None


def event_blurbs(events_list: Sequence[Event], max_items: int) -> ui.TagChild:
    if not events_list:
        return ui.div(class_="day-events")
    items: List[ui.TagChild] = []
    for e in events_list[:max_items]:
        items.append(ui.span(e.title, class_=f"event-blurb {e.kind}", title=e.title))
    if len(events_list) > max_items:
        items.append(ui.div(f"+{len(events_list) - max_items} more", class_="event-more"))
    return ui.div(*items, class_="day-events")


def day_tile(cell: CalendarCell, highlight: bool, max_items: int) -> ui.TagChild:
    if cell.is_blank:
        return ui.div(class_="day-tile blank")
    tile_class = "day-tile today" if highlight else "day-tile"
    return ui.div(
        ui.div(str(cell.date.day), class_="day-num"),
        event_blurbs(cell.events, max_items),
        class_=tile_class,
        **{"data-date": cell.date.isoformat()},
    )


def month_grid_ui(view: MonthView, max_items: int) -> ui.TagChild:
    header = ui.div(*[ui.div(d, class_="py-2") for d in WEEKDAYS], class_="weekday-row")
    tiles = [day_tile(c, view.is_today(c), max_items) for c in view.cells]
    return ui.div(header, ui.div(*tiles, class_="month-grid"))


def event_form_ui(form: FormState) -> ui.TagChild:
    if not form.visible:
        return ui.div()
    return ui.div(
        ui.input_text("ev_title", "Title", value=form.title, placeholder="Event Title"),
        # An empty form pre-fills today; clearing the field submits no date.
        ui.input_date("ev_date", "Date", value=form.date or None),
        ui.input_action_button("ev_add", "Add", class_="btn btn-success"),
        class_="mb-3 p-3 border rounded bg-light d-flex flex-column gap-2",
    )

# ------------------------------------------------------------------------------
# Main App
# ------------------------------------------------------------------------------

page = ui.page_fluid(
    ui.head_content(ui.tags.style(CUSTOM_CSS)),
    ui.div(
        ui.div(
            ui.input_action_button("btn_toggle_form", "Add Event", class_="btn btn-primary"),
            ui.div(ui.output_text("month_title"), class_="cal-title"),
            class_="d-flex align-items-center justify-content-between mb-3",
        ),
        ui.output_ui("event_form"),
        ui.div(
            ui.input_action_button("btn_prev", "< Prev", class_="btn btn-light"),
            ui.input_action_button("btn_next", "Next >", class_="btn btn-light"),
            class_="d-flex justify-content-between mb-3",
        ),
        ui.output_ui("loading_banner"),
        ui.output_ui("month_grid"),
        class_="cal-wrap",
    ),
)

# ------------------------------------------------------------------------------
# Server
# ------------------------------------------------------------------------------

def server(input, output, session):
    store = EventStore()
    pruner = PruningScheduler(store)

    # State
    nav = reactive.Value(initial_navigation(today()))
    form = reactive.Value(FormState())
    store_version = reactive.Value(store.version)
    loaded = reactive.Value(False)

    def _touch_store():
        store_version.set(store.version)

    # ---- Recurring load (one shot) -------------------------------------------

    @reactive.extended_task
    async def recurring_task(cfg: Settings) -> LoadResult:
        return await load_recurring(cfg)

    @reactive.effect
    def _start_load():
        with reactive.isolate():
            recurring_task.invoke(SETTINGS)

    @reactive.effect
    def _on_loaded():
        status = recurring_task.status()
        if status in ("initial", "running"):
            return
        result = recurring_task.result() if status == "success" else LoadResult.empty()
        apply_load_result(store, pruner, result)
        loaded.set(True)
        _touch_store()

    # ---- Derived view --------------------------------------------------------

    @reactive.calc
    def month_view() -> MonthView:
        store_version.get()
        return build_month_view(store, nav.get(), today())

    @render.text
    def month_title():
        return month_view().label

    @render.ui
    def month_grid():
        return month_grid_ui(month_view(), SETTINGS.max_blurbs)

    @render.ui
    def loading_banner():
        if loaded.get():
            return None
        return ui.div("Loading events...", class_="loading-banner")

    @render.ui
    def event_form():
        return event_form_ui(form.get())

    # ---- Navigation ----------------------------------------------------------

    def _go(action: str):
        nav.set(navigate_and_prune(pruner, nav.get(), action))
        _touch_store()

    @reactive.effect
    @reactive.event(input.btn_prev)
    def _prev():
        _go("prev")

    @reactive.effect
    @reactive.event(input.btn_next)
    def _next():
        _go("next")

    # ---- Add-event form ------------------------------------------------------

    @reactive.effect
    @reactive.event(input.btn_toggle_form)
    def _toggle_form():
        form.set(toggle_form(form.get()))

    @reactive.effect
    def _sync_toggle_label():
        label = "Cancel" if form.get().visible else "Add Event"
        ui.update_action_button("btn_toggle_form", label=label)

    @reactive.effect
    @reactive.event(input.ev_add)
    def _add_event():
        typed = edit_form(
            form.get(),
            title=input.ev_title() or "",
            date=_iso(input.ev_date()) or "",
        )
        next_form, submission = submit_form(typed)
        form.set(next_form)
        if submission is None:
            return
        # Bad dates are dropped silently; the form still resets.
        if store.add_ad_hoc(*submission):
            _touch_store()


app = App(page, server=server, static_assets=ASSETS_DIR)
