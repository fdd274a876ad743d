from fastapi import APIRouter

from app.dependencies import EventServiceDep
from app.events.schemas import (
    DeleteResponse,
    Event,
    EventCreate,
    EventSaveResponse,
    EventUpdate,
)

router = APIRouter()


@router.get("", response_model=list[Event], response_model_exclude_none=True)
async def list_events(service: EventServiceDep) -> list[Event]:
    return await service.list_events()


@router.post("", response_model=EventSaveResponse, response_model_exclude_none=True)
async def create_event(data: EventCreate, service: EventServiceDep) -> EventSaveResponse:
    event = await service.create(data)
    return EventSaveResponse(event=event)


@router.put("/{event_id}", response_model=EventSaveResponse, response_model_exclude_none=True)
async def update_event(
    event_id: str,
    data: EventUpdate,
    service: EventServiceDep,
) -> EventSaveResponse:
    event = await service.update(event_id, data)
    return EventSaveResponse(event=event)


@router.delete("/{event_id}", response_model=DeleteResponse)
async def delete_event(event_id: str, service: EventServiceDep) -> DeleteResponse:
    await service.delete(event_id)
    return DeleteResponse()
