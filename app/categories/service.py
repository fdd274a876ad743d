import structlog

from app.exceptions import ConflictError, ValidationError
from app.store.document import JsonDocumentStore
from app.store.models import DocumentKey

logger = structlog.get_logger()


class CategoryService:
    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    async def list_all(self) -> list[str]:
        document = await self._store.read()
        return [name for name in document[DocumentKey.categories] if isinstance(name, str)]

    async def add(self, name: str | None) -> list[str]:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")

        async with self._store.mutate() as document:
            categories = document[DocumentKey.categories]
            if name in categories:
                raise ConflictError("Category already exists")
            categories.append(name)
            updated = [c for c in categories if isinstance(c, str)]

        logger.info("category_added", category=name, total=len(updated))
        return updated
