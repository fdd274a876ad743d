import time

import structlog

from app.events.models import EventKind
from app.events.schemas import Event, EventCreate, EventUpdate
from app.exceptions import NotFoundError, ValidationError
from app.store.document import JsonDocumentStore
from app.store.models import DocumentKey

logger = structlog.get_logger()

REQUIRED_TEXT_FIELDS = ("title", "category", "start")


def next_event_id(events: list[dict], last_issued: int = 0) -> str:
    candidate = max(int(time.time() * 1000), last_issued + 1)
    taken = {str(event.get("id")) for event in events if isinstance(event, dict)}
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def _find_index(events: list[dict], event_id: str) -> int | None:
    return next(
        (
            i
            for i, event in enumerate(events)
            if isinstance(event, dict) and str(event.get("id")) == event_id
        ),
        None,
    )


def _text(value: object) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def _require_text(field: str, value: str | None) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"Missing required field: {field}")
    return value


class EventService:
    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    async def list_events(self) -> list[Event]:
        document = await self._store.read()
        return [
            self._to_event(record)
            for record in document[DocumentKey.events]
            if isinstance(record, dict)
        ]

    async def create(self, data: EventCreate) -> Event:
        record = {
            "title": _require_text("title", data.title),
            "description": data.description or "",
            "category": _require_text("category", data.category),
            "type": data.type.value,
            "start": _require_text("start", data.start),
        }
        if data.type == EventKind.range and data.end:
            record["end"] = data.end

        async with self._store.mutate() as document:
            events = document[DocumentKey.events]
            event_id = next_event_id(events, self._store.last_issued_id)
            self._store.last_issued_id = int(event_id)
            record = {"id": event_id, **record}
            events.append(record)

        logger.info(
            "event_created",
            event_id=record["id"],
            event_type=record["type"],
            category=record["category"],
        )
        return self._to_event(record)

    async def update(self, event_id: str, data: EventUpdate) -> Event:
        changes = data.model_dump(exclude_unset=True)

        async with self._store.mutate() as document:
            events = document[DocumentKey.events]
            index = _find_index(events, event_id)
            if index is None:
                raise NotFoundError("Event", event_id)

            existing = events[index]
            merged = dict(existing)
            for field in REQUIRED_TEXT_FIELDS:
                if field in changes:
                    merged[field] = _require_text(field, changes[field])
            if "description" in changes:
                merged["description"] = changes["description"] or ""
            if changes.get("type") is not None:
                merged["type"] = changes["type"].value

            if merged.get("type") == EventKind.range:
                end = changes["end"] if "end" in changes else existing.get("end")
                if end:
                    merged["end"] = end
                else:
                    merged.pop("end", None)
            else:
                merged.pop("end", None)

            merged["id"] = existing["id"]
            events[index] = merged

        logger.info("event_updated", event_id=event_id, fields=sorted(changes))
        return self._to_event(merged)

    async def delete(self, event_id: str) -> None:
        async with self._store.mutate() as document:
            events = document[DocumentKey.events]
            index = _find_index(events, event_id)
            if index is None:
                raise NotFoundError("Event", event_id)
            events.pop(index)

        logger.info("event_deleted", event_id=event_id)

    @staticmethod
    def _to_event(record: dict) -> Event:
        # Records come from a hand-editable file; unknown types render as points.
        kind = record.get("type")
        if kind not in (EventKind.point, EventKind.range):
            kind = EventKind.point
        end = _text(record.get("end")) if kind == EventKind.range else ""
        return Event(
            id=_text(record.get("id")),
            title=_text(record.get("title")),
            description=_text(record.get("description")),
            category=_text(record.get("category")),
            type=kind,
            start=_text(record.get("start")),
            end=end or None,
        )
