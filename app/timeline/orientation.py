import structlog

from app.timeline.models import ORIENTATION_KEY, Orientation, Viewport
from app.timeline.preferences import PreferenceStore

logger = structlog.get_logger()


def stored_orientation(preferences: PreferenceStore) -> Orientation | None:
    value = preferences.get(ORIENTATION_KEY)
    if value in (Orientation.horizontal, Orientation.vertical):
        return Orientation(value)
    return None


def initial_orientation(preferences: PreferenceStore, viewport: Viewport) -> Orientation:
    stored = stored_orientation(preferences)
    if stored is not None:
        return stored
    return Orientation.vertical if viewport.is_compact else Orientation.horizontal


def toggled(current: Orientation) -> Orientation:
    if current == Orientation.horizontal:
        return Orientation.vertical
    return Orientation.horizontal


def persist_orientation(preferences: PreferenceStore, orientation: Orientation) -> None:
    preferences.set(ORIENTATION_KEY, orientation.value)
    logger.info("orientation_saved", orientation=orientation.value)
