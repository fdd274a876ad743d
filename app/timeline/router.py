from fastapi import APIRouter, Query

from app.dependencies import TimelineServiceDep
from app.timeline.models import Orientation
from app.timeline.schemas import TimelineView

router = APIRouter()


@router.get("", response_model=TimelineView, response_model_exclude_none=True)
async def get_timeline(
    service: TimelineServiceDep,
    hidden: list[str] = Query(default=[]),  # noqa: B008
    orientation: Orientation = Orientation.horizontal,
    selected: str | None = None,
) -> TimelineView:
    return await service.render(hidden=hidden, orientation=orientation, selected=selected)
