# state.py
# ------------------------------------------------------------------------------
# Session state slots and their pure transitions (old state + action -> new).
# ------------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from calendar_core import CalendarDate


@dataclass(frozen=True)
class NavigationState:
    year: int
    month: int  # 0-11


def initial_navigation(today: CalendarDate) -> NavigationState:
    return NavigationState(today.year, today.month)


def prev_month(state: NavigationState) -> NavigationState:
    if state.month == 0:
        return NavigationState(state.year - 1, 11)
    return NavigationState(state.year, state.month - 1)


def next_month(state: NavigationState) -> NavigationState:
    if state.month == 11:
        return NavigationState(state.year + 1, 0)
    return NavigationState(state.year, state.month + 1)


def navigate(state: NavigationState, action: str) -> NavigationState:
    if action == "prev":
        return prev_month(state)
    if action == "next":
        return next_month(state)
    raise ValueError(f"Unknown navigation action '{action}'. Allowed: ['prev', 'next']")


# --- Add-event form ---------------------------------------------------------- #

@dataclass(frozen=True)
class FormState:
    visible: bool = False
    title: str = ""
    date: str = ""  # ISO yyyy-mm-dd as typed


def toggle_form(form: FormState) -> FormState:
    return replace(form, visible=not form.visible)


def edit_form(form: FormState, *, title: Optional[str] = None, date: Optional[str] = None) -> FormState:
    return replace(
        form,
        title=form.title if title is None else title,
        date=form.date if date is None else date,
    )


def submit_form(form: FormState) -> Tuple[FormState, Optional[Tuple[str, str]]]:
    """
    Presence check only: a form missing either field is returned unchanged
    with no submission. A complete form is cleared and hidden, and its
    (title, date) handed back for the store to accept or drop.
    """
    if not form.title or not form.date:
        return form, None
    return FormState(), (form.title, form.date)


__all__ = [
    "NavigationState", "initial_navigation", "prev_month", "next_month", "navigate",
    "FormState", "toggle_form", "edit_form", "submit_form",
]
