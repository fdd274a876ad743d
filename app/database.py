import structlog

from app.config import settings
from app.store.document import JsonDocumentStore

logger = structlog.get_logger()

_store: JsonDocumentStore | None = None


async def init_database() -> None:
    global _store
    _store = JsonDocumentStore(settings.data_file, settings.seed_categories)
    await _store.initialize()

    logger.info("database_initialized", path=settings.data_file)


async def close_database() -> None:
    global _store
    if _store is not None:
        _store = None
        logger.info("database_closed")


def get_store() -> JsonDocumentStore:
    if _store is None:
        raise RuntimeError("Store not initialized. Call init_database() first.")
    return _store


async def check_health(store: JsonDocumentStore) -> None:
    await store.read()
