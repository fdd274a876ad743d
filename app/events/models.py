from enum import StrEnum


class EventKind(StrEnum):
    point = "point"
    range = "range"
