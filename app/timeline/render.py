import re
from datetime import date

from app.events.models import EventKind
from app.events.schemas import Event

_WHITESPACE = re.compile(r"\s+")


def category_class(category: str) -> str:
    return "category-" + _WHITESPACE.sub("-", category)


def parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def has_span(event: Event) -> bool:
    """True when the event should be drawn as a start/end span."""
    return event.type == EventKind.range and bool(event.end)


def visible_events(events: list[Event], visible_categories: set[str]) -> list[Event]:
    return [event for event in events if event.category in visible_categories]
