from pydantic import BaseModel

from app.events.models import EventKind


class EventCreate(BaseModel):
    title: str
    description: str | None = None
    category: str
    type: EventKind
    start: str
    end: str | None = None


class EventUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    category: str | None = None
    type: EventKind | None = None
    start: str | None = None
    end: str | None = None


class Event(BaseModel):
    id: str
    title: str
    description: str = ""
    category: str
    type: EventKind
    start: str
    end: str | None = None


class EventSaveResponse(BaseModel):
    success: bool = True
    event: Event


class DeleteResponse(BaseModel):
    success: bool = True
