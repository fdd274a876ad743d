from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

import structlog

from app.events.schemas import Event
from app.timeline.form import EventForm
from app.timeline.horizontal import build_horizontal_view
from app.timeline.models import Orientation, Viewport
from app.timeline.orientation import toggled
from app.timeline.render import visible_events
from app.timeline.schemas import HorizontalView, TimelineView, VerticalView
from app.timeline.vertical import build_vertical_view
from app.users.schemas import UserProfile

logger = structlog.get_logger()


@dataclass
class TimelineState:
    """Client-side application state.

    The cached user, categories and events are replaced wholesale from server
    responses and never edited locally. Both views are recomputed after every
    change so switching orientation never needs a reload.
    """

    user: UserProfile = field(default_factory=UserProfile)
    events: list[Event] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    visible_categories: set[str] = field(default_factory=set)
    orientation: Orientation = Orientation.horizontal
    viewport: Viewport = field(default_factory=Viewport)
    selected_event_id: str | None = None
    form: EventForm = field(default_factory=EventForm)
    clock: Callable[[], date] = date.today
    horizontal: HorizontalView = field(init=False)
    vertical: VerticalView = field(init=False)

    def __post_init__(self) -> None:
        self.refresh()

    @property
    def visible(self) -> list[Event]:
        return visible_events(self.events, self.visible_categories)

    @property
    def active_view(self) -> HorizontalView | VerticalView:
        if self.orientation == Orientation.vertical:
            return self.vertical
        return self.horizontal

    def view(self) -> TimelineView:
        return TimelineView(
            orientation=self.orientation,
            horizontal=self.horizontal,
            vertical=self.vertical,
        )

    def refresh(self) -> None:
        events = self.visible
        self.horizontal = build_horizontal_view(
            events, self.user.birthdate, self.clock(), self.selected_event_id
        )
        self.vertical = build_vertical_view(events, self.selected_event_id)

    def replace_user(self, user: UserProfile) -> None:
        self.user = user
        self.refresh()

    def replace_categories(self, categories: list[str]) -> None:
        previous = set(self.categories)
        current = set(categories)
        if not previous:
            self.visible_categories = set(current)
        else:
            # Hidden categories stay hidden; categories new to the list start visible.
            self.visible_categories = (self.visible_categories & current) | (current - previous)
        self.categories = list(categories)
        self.refresh()

    def replace_events(self, events: list[Event]) -> None:
        self.events = list(events)
        if self.selected_event_id and not any(e.id == self.selected_event_id for e in self.events):
            self.selected_event_id = None
            self.form = EventForm()
        self.refresh()

    def toggle_category(self, category: str) -> bool:
        if category in self.visible_categories:
            self.visible_categories.discard(category)
            visible = False
        else:
            self.visible_categories.add(category)
            visible = True
        logger.debug("category_toggled", category=category, visible=visible)
        self.refresh()
        return visible

    def select_event(self, event_id: str) -> EventForm | None:
        event = next((e for e in self.events if e.id == event_id), None)
        if event is None:
            return None
        self.selected_event_id = event.id
        self.form = EventForm.from_event(event)
        self.refresh()
        return self.form

    def clear_form(self) -> None:
        self.form = EventForm()
        self.selected_event_id = None
        self.refresh()

    def set_orientation(self, orientation: Orientation) -> None:
        self.orientation = orientation
        self.refresh()

    def toggle_orientation(self) -> Orientation:
        self.set_orientation(toggled(self.orientation))
        return self.orientation

    def resize(self, viewport: Viewport) -> VerticalView:
        self.viewport = viewport
        self.vertical = build_vertical_view(self.visible, self.selected_event_id)
        return self.vertical
