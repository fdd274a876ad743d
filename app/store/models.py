from enum import StrEnum


class DocumentKey(StrEnum):
    user = "user"
    events = "events"
    categories = "categories"


def empty_user() -> dict:
    return {"name": "", "birthdate": ""}


def seed_document(categories: list[str]) -> dict:
    return {
        DocumentKey.user: empty_user(),
        DocumentKey.events: [],
        DocumentKey.categories: list(categories),
    }
