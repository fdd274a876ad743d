from pydantic import BaseModel

from app.events.models import EventKind
from app.events.schemas import Event


class EventForm(BaseModel):
    id: str = ""
    title: str = ""
    description: str = ""
    category: str = ""
    type: EventKind = EventKind.point
    start: str = ""
    end: str = ""
    show_end: bool = False
    show_delete: bool = False

    @classmethod
    def from_event(cls, event: Event) -> "EventForm":
        is_range = event.type == EventKind.range
        return cls(
            id=event.id,
            title=event.title,
            description=event.description or "",
            category=event.category,
            type=event.type,
            start=event.start,
            end=(event.end or "") if is_range else "",
            show_end=is_range,
            show_delete=True,
        )

    def with_type(self, kind: EventKind) -> "EventForm":
        return self.model_copy(update={"type": kind, "show_end": kind == EventKind.range})

    def to_payload(self) -> dict:
        payload = {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "type": self.type.value,
            "start": self.start,
        }
        if self.type == EventKind.range:
            payload["end"] = self.end
        return payload
