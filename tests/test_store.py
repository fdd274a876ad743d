import json

import pytest

from app.exceptions import StorageError
from app.store import document as document_module


async def test_initialize_seeds_missing_document(store, data_file):
    await store.initialize()

    data = json.loads(data_file.read_text())
    assert data == {
        "user": {"name": "", "birthdate": ""},
        "events": [],
        "categories": ["Work", "Education", "Personal", "Travel", "Health", "Relationships"],
    }


async def test_initialize_keeps_existing_document(store, data_file):
    data_file.write_text(json.dumps({"user": {}, "events": [], "categories": ["Only"]}))

    await store.initialize()

    assert json.loads(data_file.read_text())["categories"] == ["Only"]


async def test_read_without_file_returns_seed(store, data_file):
    document = await store.read()

    assert document["categories"][0] == "Work"
    assert not data_file.exists()


async def test_read_fills_missing_keys(store, data_file):
    data_file.write_text(json.dumps({"categories": ["A"]}))

    document = await store.read()

    assert document["events"] == []
    assert document["user"] == {}


async def test_read_corrupt_document_raises_storage_error(store, data_file):
    data_file.write_text("{not json")

    with pytest.raises(StorageError):
        await store.read()


async def test_mutate_writes_whole_document_with_indent(store, data_file):
    async with store.mutate() as document:
        document["categories"].append("Hobbies")

    text = data_file.read_text()
    assert '\n  "categories"' in text
    assert json.loads(text)["categories"][-1] == "Hobbies"


async def test_mutate_discards_changes_when_block_raises(store, data_file):
    await store.initialize()

    with pytest.raises(RuntimeError):
        async with store.mutate() as document:
            document["categories"].append("Lost")
            raise RuntimeError("boom")

    assert "Lost" not in json.loads(data_file.read_text())["categories"]


async def test_failed_write_leaves_previous_copy(store, data_file, monkeypatch):
    await store.initialize()
    before = data_file.read_text()

    def failing_write(path, document):
        raise OSError("disk full")

    monkeypatch.setattr(document_module, "_write_file", failing_write)

    with pytest.raises(StorageError, match="disk full"):
        async with store.mutate() as document:
            document["categories"].append("Never")

    assert data_file.read_text() == before
    assert "Never" not in (await store.read())["categories"]


async def test_write_leaves_no_temp_files(store, data_file):
    await store.initialize()
    async with store.mutate() as document:
        document["user"] = {"name": "Alice", "birthdate": "1990-05-01"}

    assert [p.name for p in data_file.parent.iterdir()] == ["data.json"]
