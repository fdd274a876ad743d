from typing import Any

import httpx
import structlog

from app.config import settings
from app.events.schemas import Event
from app.exceptions import AppError
from app.timeline.form import EventForm
from app.timeline.models import Orientation, Viewport
from app.timeline.orientation import initial_orientation, persist_orientation
from app.timeline.preferences import FilePreferenceStore, PreferenceStore
from app.timeline.state import TimelineState
from app.users.schemas import UserProfile

logger = structlog.get_logger()


class NetworkFailure(AppError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, code="NETWORK_ERROR")


class TimelineClient:
    """Drives a TimelineState against the REST API.

    State only changes after the server confirms a request. Any transport
    error or non-2xx response is logged and raised as NetworkFailure with the
    state left as it was.
    """

    def __init__(
        self,
        state: TimelineState | None = None,
        base_url: str | None = None,
        preferences: PreferenceStore | None = None,
        viewport: Viewport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.state = state or TimelineState()
        self._preferences = preferences or FilePreferenceStore(settings.preferences_file)
        if viewport is not None:
            self.state.viewport = viewport
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=settings.client_timeout,
        )

    async def __aenter__(self) -> "TimelineClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def init(self) -> TimelineState:
        await self.load_user()
        await self.load_categories()
        await self.load_events()
        self.state.set_orientation(initial_orientation(self._preferences, self.state.viewport))
        logger.info(
            "timeline_initialized",
            events=len(self.state.events),
            categories=len(self.state.categories),
            orientation=self.state.orientation.value,
        )
        return self.state

    async def load_user(self) -> UserProfile:
        data = await self._request("GET", "user")
        user = UserProfile.model_validate(data or {})
        self.state.replace_user(user)
        return user

    async def load_categories(self) -> list[str]:
        categories = [str(name) for name in await self._request("GET", "categories")]
        self.state.replace_categories(categories)
        return categories

    async def load_events(self) -> list[Event]:
        events = [Event.model_validate(item) for item in await self._request("GET", "events")]
        self.state.replace_events(events)
        return events

    async def save_user(self, name: str, birthdate: str) -> UserProfile:
        result = await self._request("POST", "user", {"name": name, "birthdate": birthdate})
        user = UserProfile.model_validate(result["user"])
        self.state.replace_user(user)
        logger.info("profile_saved", name=user.name)
        return user

    async def save_event(self, form: EventForm | None = None) -> Event:
        form = form or self.state.form
        payload = form.to_payload()
        if form.id:
            result = await self._request("PUT", f"events/{form.id}", payload)
        else:
            result = await self._request("POST", "events", payload)

        event = Event.model_validate(result["event"])
        await self.load_events()
        self.state.clear_form()
        logger.info("event_saved", event_id=event.id, updated=bool(form.id))
        return event

    async def delete_event(self, event_id: str | None = None) -> None:
        event_id = event_id or self.state.form.id
        if not event_id:
            return
        await self._request("DELETE", f"events/{event_id}")
        await self.load_events()
        self.state.clear_form()
        logger.info("event_removed", event_id=event_id)

    async def add_category(self, name: str) -> list[str]:
        result = await self._request("POST", "categories", {"name": name})
        categories = [str(c) for c in result["categories"]]
        self.state.replace_categories(categories)
        return categories

    def toggle_category(self, category: str) -> bool:
        return self.state.toggle_category(category)

    def select_event(self, event_id: str) -> EventForm | None:
        return self.state.select_event(event_id)

    def cancel_edit(self) -> None:
        self.state.clear_form()

    def toggle_orientation(self) -> Orientation:
        orientation = self.state.toggle_orientation()
        persist_orientation(self._preferences, orientation)
        return orientation

    async def _request(self, method: str, path: str, payload: dict | None = None) -> Any:
        try:
            response = await self._http.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            logger.error("api_request_failed", method=method, path=path, error=str(exc))
            raise NetworkFailure(f"{method} {path} failed: {exc}") from exc

        if response.is_error:
            message = f"HTTP error! status: {response.status_code}"
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error"):
                message = str(body["error"])
            logger.error(
                "api_request_rejected",
                method=method,
                path=path,
                status=response.status_code,
                error=message,
            )
            raise NetworkFailure(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise NetworkFailure(f"{method} {path} returned invalid JSON") from exc
