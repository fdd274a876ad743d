import structlog

from app.exceptions import ValidationError
from app.store.document import JsonDocumentStore
from app.store.models import DocumentKey, empty_user
from app.users.schemas import UserProfile, UserSave

logger = structlog.get_logger()


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""


class UserService:
    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    async def get(self) -> UserProfile:
        document = await self._store.read()
        stored = document.get(DocumentKey.user)
        user = {**empty_user(), **(stored if isinstance(stored, dict) else {})}
        return UserProfile(name=_text(user["name"]), birthdate=_text(user["birthdate"]))

    async def save(self, data: UserSave) -> UserProfile:
        name = (data.name or "").strip()
        birthdate = (data.birthdate or "").strip()

        missing = [field for field, value in (("name", name), ("birthdate", birthdate)) if not value]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")

        profile = UserProfile(name=name, birthdate=birthdate)
        async with self._store.mutate() as document:
            document[DocumentKey.user] = profile.model_dump()

        logger.info("user_saved", name=name, birthdate=birthdate)
        return profile
