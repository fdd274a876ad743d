from datetime import date

from app.events.schemas import Event
from app.timeline.models import DEFAULT_YEARS_BACK
from app.timeline.render import category_class, has_span, parse_date
from app.timeline.schemas import HorizontalItem, HorizontalOptions, HorizontalView


def build_item(event: Event) -> HorizontalItem:
    if has_span(event):
        return HorizontalItem(
            id=event.id,
            content=event.title,
            start=event.start,
            end=event.end,
            type="range",
            class_name=category_class(event.category),
            title=event.description or "",
        )
    return HorizontalItem(
        id=event.id,
        content=event.title,
        start=event.start,
        type="point",
        class_name=category_class(event.category),
        title=event.description or "",
    )


def build_options(birthdate: str, today: date) -> HorizontalOptions:
    start = parse_date(birthdate) or date(today.year - DEFAULT_YEARS_BACK, 1, 1)
    return HorizontalOptions(
        start=start.isoformat(),
        end=today.isoformat(),
        min=start.isoformat(),
        max=today.isoformat(),
    )


def build_horizontal_view(
    events: list[Event],
    birthdate: str,
    today: date,
    selected_event_id: str | None = None,
) -> HorizontalView:
    items = [build_item(event) for event in events]
    item_ids = {item.id for item in items}
    selection = [selected_event_id] if selected_event_id in item_ids else []
    return HorizontalView(
        items=items,
        options=build_options(birthdate, today),
        selection=selection,
    )
