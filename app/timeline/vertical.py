"""Reverse-chronological list view.

Every user-supplied string passes through ``html.escape`` before it is placed
in markup, including attribute values such as the category class.
"""

import html
from datetime import date

from app.events.schemas import Event
from app.timeline.render import category_class, has_span, parse_date
from app.timeline.schemas import VerticalEntry, VerticalView

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

EMPTY_MARKUP = '<p class="vertical-timeline-empty">No events to display</p>'


def format_date(value: str) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return value
    return f"{MONTH_ABBR[parsed.month - 1]} {parsed.day}, {parsed.year}"


def date_label(event: Event) -> str:
    if has_span(event):
        return f"{format_date(event.start)} - {format_date(event.end)}"
    return format_date(event.start)


def _sort_key(event: Event) -> tuple[date, str]:
    return (parse_date(event.start) or date.min, event.start)


def sort_newest_first(events: list[Event]) -> list[Event]:
    # sorted() is stable, so equal start dates keep storage order.
    return sorted(events, key=_sort_key, reverse=True)


def entry_markup(event: Event, label: str, selected: bool) -> str:
    esc = html.escape
    css = category_class(event.category)
    classes = f"vertical-event {css}" + (" selected" if selected else "")
    parts = [
        f'<li class="{esc(classes)}" data-event-id="{esc(event.id)}">',
        f'<div class="vertical-event-date">{esc(label)}</div>',
        f'<div class="vertical-event-title">{esc(event.title)}</div>',
        f'<span class="category-badge {esc(css)}">{esc(event.category)}</span>',
    ]
    if event.description:
        parts.append(f'<p class="vertical-event-description">{esc(event.description)}</p>')
    parts.append("</li>")
    return "".join(parts)


def build_entry(event: Event, selected_event_id: str | None = None) -> VerticalEntry:
    label = date_label(event)
    selected = event.id == selected_event_id
    return VerticalEntry(
        id=event.id,
        date_label=label,
        title=event.title,
        category=event.category,
        class_name=category_class(event.category),
        description=event.description or "",
        selected=selected,
        html=entry_markup(event, label, selected),
    )


def build_vertical_view(
    events: list[Event], selected_event_id: str | None = None
) -> VerticalView:
    entries = [build_entry(event, selected_event_id) for event in sort_newest_first(events)]
    if not entries:
        return VerticalView(entries=[], html=EMPTY_MARKUP)
    body = "".join(entry.html for entry in entries)
    return VerticalView(entries=entries, html=f'<ol class="vertical-timeline">{body}</ol>')
