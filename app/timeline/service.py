from collections.abc import Callable
from datetime import date

from app.categories.service import CategoryService
from app.events.service import EventService
from app.timeline.models import Orientation
from app.timeline.schemas import TimelineView
from app.timeline.state import TimelineState
from app.users.service import UserService


class TimelineService:
    def __init__(
        self,
        users: UserService,
        categories: CategoryService,
        events: EventService,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._users = users
        self._categories = categories
        self._events = events
        self._clock = clock

    async def render(
        self,
        hidden: list[str] | None = None,
        orientation: Orientation = Orientation.horizontal,
        selected: str | None = None,
    ) -> TimelineView:
        state = TimelineState(orientation=orientation, clock=self._clock)
        state.replace_user(await self._users.get())
        state.replace_categories(await self._categories.list_all())
        state.replace_events(await self._events.list_events())

        for category in hidden or []:
            if category in state.visible_categories:
                state.toggle_category(category)
        if selected:
            state.select_event(selected)

        return state.view()
