from typing import Annotated

from fastapi import Depends

from app.categories.service import CategoryService
from app.database import get_store
from app.events.service import EventService
from app.store.document import JsonDocumentStore
from app.timeline.service import TimelineService
from app.users.service import UserService

StoreDep = Annotated[JsonDocumentStore, Depends(get_store)]


def get_user_service(store: StoreDep) -> UserService:
    return UserService(store)


def get_event_service(store: StoreDep) -> EventService:
    return EventService(store)


def get_category_service(store: StoreDep) -> CategoryService:
    return CategoryService(store)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
EventServiceDep = Annotated[EventService, Depends(get_event_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


def get_timeline_service(
    users: UserServiceDep,
    categories: CategoryServiceDep,
    events: EventServiceDep,
) -> TimelineService:
    return TimelineService(users, categories, events)


TimelineServiceDep = Annotated[TimelineService, Depends(get_timeline_service)]
