from typing import Literal

from pydantic import BaseModel, Field

from app.timeline.models import ZOOM_MAX_MS, ZOOM_MIN_MS, Orientation


class HorizontalItem(BaseModel):
    id: str
    content: str
    start: str
    end: str | None = None
    type: Literal["point", "range"]
    class_name: str
    title: str = ""


class HorizontalOptions(BaseModel):
    start: str
    end: str
    min: str
    max: str
    zoom_min: int = ZOOM_MIN_MS
    zoom_max: int = ZOOM_MAX_MS
    editable: bool = False
    selectable: bool = True
    stack: bool = True
    show_current_time: bool = True
    margin: dict[str, int] = Field(default_factory=lambda: {"item": 10, "axis": 5})
    orientation: Literal["top", "bottom"] = "top"


class HorizontalView(BaseModel):
    items: list[HorizontalItem]
    options: HorizontalOptions
    selection: list[str] = Field(default_factory=list)


class VerticalEntry(BaseModel):
    id: str
    date_label: str
    title: str
    category: str
    class_name: str
    description: str = ""
    selected: bool = False
    html: str


class VerticalView(BaseModel):
    entries: list[VerticalEntry]
    html: str


class TimelineView(BaseModel):
    orientation: Orientation
    horizontal: HorizontalView
    vertical: VerticalView
