"""
Unit tests for the repositories' per-item write sequencing
"""
from types import SimpleNamespace

import pytest

from darshan_admin.core.exceptions import (
    DependentWriteError,
    EntityNotFoundError,
    StoreError,
    TranslationWriteError,
)
from darshan_admin.models.destination import Destination, DestinationImage, DestinationTranslation
from darshan_admin.models.enums import Language
from darshan_admin.repositories import (
    DependentCollectionRepository,
    EntityRepository,
    TranslationSetRepository,
    WriteMode,
)
from darshan_admin.schemas.destination import DestinationText
from darshan_admin.schemas.translations import TranslationSet


class ScriptedStore:
    """Row store stand-in: records calls and fails on the n-th call"""

    def __init__(self, fail_at=None, matched=1):
        self.calls = []
        self.fail_at = fail_at
        self.matched = matched

    def _record(self, *call):
        self.calls.append(call)
        if self.fail_at is not None and len(self.calls) == self.fail_at:
            raise StoreError("write refused", collection="destination_translations", operation=call[0])

    async def insert(self, model, values):
        self._record("insert", model, values)
        return SimpleNamespace(id="new-id", **values)

    async def update(self, model, criteria, values):
        self._record("update", model, values)
        return self.matched

    async def delete(self, model, criteria):
        self._record("delete", model)
        return self.matched


def _translations() -> TranslationSet[DestinationText]:
    return TranslationSet[DestinationText](**{
        lang.value: {
            "name": f"Name {lang.value}",
            "location": "Loc",
            "short_description": "Short",
            "detailed_description": "Long",
        }
        for lang in Language
    })


@pytest.mark.asyncio
async def test_insert_writes_one_row_per_language_in_order():
    store = ScriptedStore()
    repo = TranslationSetRepository(store, DestinationTranslation, parent_key="destination_id")

    await repo.upsert_all("D1", _translations())

    assert [call[0] for call in store.calls] == ["insert"] * 5
    assert [call[2]["language"] for call in store.calls] == list(Language)
    assert all(call[2]["destination_id"] == "D1" for call in store.calls)


@pytest.mark.parametrize("position, language", list(enumerate(Language, start=1)))
@pytest.mark.asyncio
async def test_insert_stops_at_first_failing_language(position, language):
    store = ScriptedStore(fail_at=position)
    repo = TranslationSetRepository(store, DestinationTranslation, parent_key="destination_id")

    with pytest.raises(TranslationWriteError) as exc_info:
        await repo.upsert_all("D1", _translations())

    assert exc_info.value.language == language.value
    assert len(store.calls) == position


@pytest.mark.asyncio
async def test_update_overwrites_by_key():
    store = ScriptedStore(matched=1)
    repo = TranslationSetRepository(store, DestinationTranslation, parent_key="destination_id")

    await repo.upsert_all("D1", _translations(), mode=WriteMode.UPDATE)

    assert [call[0] for call in store.calls] == ["update"] * 5
    assert store.calls[0][2] == {
        "name": "Name en",
        "location": "Loc",
        "short_description": "Short",
        "detailed_description": "Long",
    }


@pytest.mark.asyncio
async def test_update_inserts_rows_that_do_not_exist_yet():
    store = ScriptedStore(matched=0)
    repo = TranslationSetRepository(store, DestinationTranslation, parent_key="destination_id")

    await repo.upsert_all("D1", _translations(), mode=WriteMode.UPDATE)

    assert [call[0] for call in store.calls] == ["update", "insert"] * 5


@pytest.mark.asyncio
async def test_dependents_stop_at_first_failure():
    store = ScriptedStore(fail_at=2)
    repo = DependentCollectionRepository(
        store, DestinationImage, parent_key="destination_id", value_column="hero_image"
    )

    with pytest.raises(DependentWriteError) as exc_info:
        await repo.upsert_all("D1", ["https://x/a.jpg", "https://x/b.jpg", "https://x/c.jpg"])

    assert exc_info.value.index == 1
    assert exc_info.value.item == "https://x/b.jpg"
    assert len(store.calls) == 2
    assert store.calls[0][2] == {"destination_id": "D1", "hero_image": "https://x/a.jpg"}


@pytest.mark.asyncio
async def test_entity_create_returns_assigned_id():
    repo = EntityRepository(ScriptedStore(), Destination)
    assert await repo.create({"city": "Puri"}) == "new-id"


@pytest.mark.asyncio
async def test_entity_update_and_delete_of_unknown_id():
    repo = EntityRepository(ScriptedStore(matched=0), Destination)

    with pytest.raises(EntityNotFoundError) as exc_info:
        await repo.update("missing", {"city": "Puri"})
    assert exc_info.value.status_code == 404

    with pytest.raises(EntityNotFoundError):
        await repo.delete("missing")
