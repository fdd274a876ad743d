from datetime import date

import httpx
import pytest

from app.database import get_store
from app.main import app
from app.timeline.client import NetworkFailure, TimelineClient
from app.timeline.models import ORIENTATION_KEY, Orientation, Viewport
from app.timeline.preferences import MemoryPreferenceStore
from app.timeline.state import TimelineState

TODAY = date(2024, 3, 15)


@pytest.fixture
def preferences():
    return MemoryPreferenceStore()


@pytest.fixture
async def timeline(store, preferences):
    app.dependency_overrides[get_store] = lambda: store
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver/api")
    client = TimelineClient(
        state=TimelineState(clock=lambda: TODAY),
        preferences=preferences,
        viewport=Viewport(width=1280),
        http_client=http,
    )
    try:
        yield client
    finally:
        await http.aclose()
        app.dependency_overrides.clear()


async def test_init_loads_everything(timeline):
    state = await timeline.init()

    assert state.user.name == ""
    assert state.categories[0] == "Work"
    assert state.visible_categories == set(state.categories)
    assert state.events == []
    assert state.orientation == Orientation.horizontal


async def test_init_uses_compact_viewport(store, preferences):
    app.dependency_overrides[get_store] = lambda: store
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver/api") as http:
            client = TimelineClient(
                preferences=preferences, viewport=Viewport(width=375, touch=True), http_client=http
            )
            state = await client.init()
    finally:
        app.dependency_overrides.clear()

    assert state.orientation == Orientation.vertical


async def test_save_user_updates_window(timeline):
    await timeline.init()

    user = await timeline.save_user("Alice", "1990-05-01")

    assert user.birthdate == "1990-05-01"
    assert timeline.state.horizontal.options.start == "1990-05-01"


async def test_create_edit_delete_round_trip(timeline):
    await timeline.init()

    timeline.state.form = timeline.state.form.model_copy(
        update={"title": "Started job", "category": "Work", "start": "2015-06-01"}
    )
    created = await timeline.save_event()

    assert [e.id for e in timeline.state.events] == [created.id]
    assert timeline.state.form.id == ""
    assert [item.id for item in timeline.state.horizontal.items] == [created.id]

    form = timeline.select_event(created.id)
    assert form.show_delete is True
    edited = form.model_copy(update={"title": "Joined Acme"})
    await timeline.save_event(edited)

    assert timeline.state.events[0].title == "Joined Acme"
    assert timeline.state.selected_event_id is None

    timeline.select_event(created.id)
    await timeline.delete_event()

    assert timeline.state.events == []
    assert timeline.state.form.show_delete is False


async def test_failed_request_leaves_state_unchanged(timeline):
    await timeline.init()
    before = list(timeline.state.categories)

    with pytest.raises(NetworkFailure) as exc_info:
        await timeline.add_category("Work")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Category already exists"
    assert timeline.state.categories == before


async def test_add_category_becomes_visible(timeline):
    await timeline.init()
    timeline.toggle_category("Travel")

    await timeline.add_category("Hobbies")

    assert "Hobbies" in timeline.state.visible_categories
    assert "Travel" not in timeline.state.visible_categories


async def test_transport_error_raises_network_failure():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(refuse), base_url="http://nowhere/api")
    client = TimelineClient(preferences=MemoryPreferenceStore(), http_client=http)

    with pytest.raises(NetworkFailure):
        await client.load_events()

    assert client.state.events == []
    await http.aclose()


async def test_toggle_orientation_persists(timeline, preferences):
    await timeline.init()

    assert timeline.toggle_orientation() == Orientation.vertical
    assert preferences.get(ORIENTATION_KEY) == "vertical"
