from dataclasses import dataclass
from enum import StrEnum

ORIENTATION_KEY = "timelineOrientation"
COMPACT_VIEWPORT_MAX_WIDTH = 768

DAY_MS = 1000 * 60 * 60 * 24
ZOOM_MIN_MS = DAY_MS * 30
ZOOM_MAX_MS = DAY_MS * 365 * 100
DEFAULT_YEARS_BACK = 30


class Orientation(StrEnum):
    horizontal = "horizontal"
    vertical = "vertical"


@dataclass(frozen=True)
class Viewport:
    width: int = 1280
    touch: bool = False

    @property
    def is_compact(self) -> bool:
        return self.touch or self.width <= COMPACT_VIEWPORT_MAX_WIDTH
