import pytest
from fastapi.testclient import TestClient

from app.config import DEFAULT_CATEGORIES
from app.database import get_store
from app.events.models import EventKind
from app.events.schemas import Event
from app.main import app
from app.store.document import JsonDocumentStore


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def store(data_file):
    return JsonDocumentStore(data_file, DEFAULT_CATEGORIES)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_event():
    def _make(
        event_id: str,
        start: str,
        category: str = "Work",
        title: str | None = None,
        kind: EventKind = EventKind.point,
        end: str | None = None,
        description: str = "",
    ) -> Event:
        return Event(
            id=event_id,
            title=title or f"Event {event_id}",
            description=description,
            category=category,
            type=kind,
            start=start,
            end=end,
        )

    return _make
