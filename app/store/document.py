import asyncio
import json
import os
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog

from app.exceptions import StorageError
from app.store.models import DocumentKey, seed_document

logger = structlog.get_logger()


def _read_file(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _write_file(path: Path, document: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", delete=False
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            json.dump(document, tmp, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)


class JsonDocumentStore:
    """Single JSON document holding the user profile, events and categories.

    Every mutation reads the whole document, changes it in memory and writes
    the whole document back. Writes replace the file atomically, so a failed
    write leaves the previous copy on disk untouched.
    """

    def __init__(self, path: str | os.PathLike, seed_categories: list[str]) -> None:
        self._path = Path(path)
        self._seed_categories = list(seed_categories)
        self._lock = asyncio.Lock()
        # Highest numeric id handed out by this store; only touched under the lock.
        self.last_issued_id = 0

    @property
    def path(self) -> Path:
        return self._path

    async def initialize(self) -> None:
        if self._path.exists():
            logger.info("document_found", path=str(self._path))
            return
        await self.write(seed_document(self._seed_categories))
        logger.info("document_seeded", path=str(self._path), categories=self._seed_categories)

    async def read(self) -> dict:
        if not self._path.exists():
            return seed_document(self._seed_categories)
        try:
            document = await asyncio.to_thread(_read_file, self._path)
        except (OSError, ValueError) as exc:
            logger.error("document_read_failed", path=str(self._path), error=str(exc))
            raise StorageError(f"Failed to read data: {exc}") from exc

        if not isinstance(document, dict):
            raise StorageError("Failed to read data: document is not an object")

        document.setdefault(DocumentKey.user, {})
        document.setdefault(DocumentKey.events, [])
        document.setdefault(DocumentKey.categories, [])
        for key in (DocumentKey.events, DocumentKey.categories):
            if not isinstance(document[key], list):
                raise StorageError(f"Failed to read data: '{key.value}' is not a list")
        return document

    async def write(self, document: dict) -> None:
        try:
            await asyncio.to_thread(_write_file, self._path, document)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("document_write_failed", path=str(self._path), error=str(exc))
            raise StorageError(f"Failed to write data: {exc}") from exc

    @asynccontextmanager
    async def mutate(self) -> AsyncIterator[dict]:
        # Exceptions raised inside the block skip the write.
        async with self._lock:
            document = await self.read()
            yield document
            await self.write(document)
