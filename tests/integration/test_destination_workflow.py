"""
Integration tests for destination saves against a real database
"""
import pytest

from darshan_admin.core.exceptions import (
    DraftValidationError,
    EntityNotFoundError,
    SaveFailedError,
    StoreError,
)
from darshan_admin.core.row_store import RowStore
from darshan_admin.models.destination import Destination, DestinationImage, DestinationTranslation
from darshan_admin.models.enums import Deity, Language, Sampradaya
from darshan_admin.schemas.destination import DestinationDraft
from darshan_admin.services.destination_service import DestinationService


class FailingTranslationStore(RowStore):
    """Row store whose translation insert fails for one language"""

    def __init__(self, session_factory, language: Language):
        super().__init__(session_factory)
        self.language = language

    async def insert(self, model, values):
        if model is DestinationTranslation and values.get("language") == self.language:
            raise StoreError("connection reset", collection=model.__tablename__, operation="insert")
        return await super().insert(model, values)


async def _counts(store: RowStore):
    return (
        await store.count(Destination),
        await store.count(DestinationTranslation),
        await store.count(DestinationImage),
    )


@pytest.mark.asyncio
async def test_create_writes_parent_five_translations_and_image(row_store, destination_draft_data):
    service = DestinationService(row_store)

    result = await service.submit(destination_draft_data)

    assert result.created is True
    assert await _counts(row_store) == (1, 5, 1)
    assert result.draft == DestinationDraft.empty()
    assert [item.city for item in result.items] == ["Varanasi"]
    assert result.items[0].name == "Kashi Vishwanath (en)"

    stored = await row_store.select_one(Destination, Destination.id == result.entity_id)
    assert stored.deity is Deity.SHIVA
    assert stored.sampradaya is Sampradaya.SHAIVA
    assert stored.latitude == 25.3


@pytest.mark.asyncio
async def test_invalid_draft_writes_nothing(row_store, destination_draft_data):
    service = DestinationService(row_store)
    destination_draft_data["latitude"] = 200

    with pytest.raises(DraftValidationError) as exc_info:
        await service.submit(destination_draft_data)

    assert "latitude" in exc_info.value.field_errors
    assert await _counts(row_store) == (0, 0, 0)


@pytest.mark.asyncio
async def test_load_for_edit_returns_the_saved_draft(row_store, destination_draft_data):
    service = DestinationService(row_store)
    result = await service.submit(destination_draft_data)

    draft = await service.load_for_edit(result.entity_id)

    assert draft == DestinationDraft(**{**destination_draft_data, "latitude": 25.3, "longitude": 83.0})


@pytest.mark.asyncio
async def test_load_for_edit_defaults_missing_languages(row_store, db_session):
    db_session.add(Destination(
        id="E1", city="Madurai", deity=Deity.DEVI, latitude=9.9, longitude=78.1,
        live_feed="https://x/meenakshi", sampradaya=Sampradaya.SHAKTA,
    ))
    await db_session.flush()
    db_session.add(DestinationTranslation(
        destination_id="E1", language=Language.EN, name="Meenakshi Amman",
        location="Madurai", short_description="Temple", detailed_description="Temple city",
    ))
    await db_session.commit()

    draft = await DestinationService(row_store).load_for_edit("E1")

    assert draft.translations.en.name == "Meenakshi Amman"
    for lang in ("hi", "kn", "ml", "ta"):
        assert getattr(draft.translations, lang).name == ""
    assert draft.images == []


@pytest.mark.asyncio
async def test_edit_with_empty_tamil_name_is_rejected(row_store, destination_draft_data):
    service = DestinationService(row_store)
    created = await service.submit(destination_draft_data)
    draft = await service.load_for_edit(created.entity_id)
    draft.translations.ta.name = ""

    with pytest.raises(DraftValidationError) as exc_info:
        await service.submit(draft, editing_id=created.entity_id)

    assert exc_info.value.field_errors == {"translations.ta.name": "Name is required"}
    stored = await DestinationService(row_store).load_for_edit(created.entity_id)
    assert stored.translations.ta.name == "Kashi Vishwanath (ta)"


@pytest.mark.asyncio
async def test_update_overwrites_translations_and_keeps_images(row_store, destination_draft_data):
    service = DestinationService(row_store)
    created = await service.submit(destination_draft_data)
    draft = await service.load_for_edit(created.entity_id)
    draft.city = "Kashi"
    draft.translations.hi.name = "काशी विश्वनाथ"
    draft.images = ["https://x/replacement.jpg"]

    result = await service.submit(draft, editing_id=created.entity_id)

    assert result.created is False
    assert await _counts(row_store) == (1, 5, 1)
    reloaded = await service.load_for_edit(created.entity_id)
    assert reloaded.city == "Kashi"
    assert reloaded.translations.hi.name == "काशी विश्वनाथ"
    assert reloaded.images == ["https://x/img.jpg"]


@pytest.mark.asyncio
async def test_failed_translation_leaves_earlier_writes_committed(
    session_factory, row_store, destination_draft_data
):
    flaky = DestinationService(FailingTranslationStore(session_factory, Language.KN))

    with pytest.raises(SaveFailedError) as exc_info:
        await flaky.submit(destination_draft_data)

    error = exc_info.value
    assert error.details["language"] == "kn"
    entity_id = error.details["entity_id"]

    # No compensation: parent plus en and hi remain, no images
    assert await _counts(row_store) == (1, 2, 0)
    stored = await row_store.select(
        DestinationTranslation, DestinationTranslation.destination_id == entity_id
    )
    assert {Language(row.language) for row in stored} == {Language.EN, Language.HI}

    # Resubmitting in edit mode completes the set
    service = DestinationService(row_store)
    await service.submit(destination_draft_data, editing_id=entity_id)
    assert await _counts(row_store) == (1, 5, 0)


@pytest.mark.asyncio
async def test_update_of_unknown_destination(row_store, destination_draft_data):
    with pytest.raises(SaveFailedError) as exc_info:
        await DestinationService(row_store).submit(destination_draft_data, editing_id="missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.details["step"] == "writing_parent"
    assert await _counts(row_store) == (0, 0, 0)


@pytest.mark.asyncio
async def test_delete_removes_destination_and_children(row_store, destination_draft_data):
    service = DestinationService(row_store)
    created = await service.submit(destination_draft_data)

    await service.delete_destination(created.entity_id)

    assert await _counts(row_store) == (0, 0, 0)
    with pytest.raises(EntityNotFoundError):
        await service.delete_destination(created.entity_id)


@pytest.mark.asyncio
async def test_list_orders_by_city_and_names_in_language(row_store, destination_draft_data):
    service = DestinationService(row_store)
    await service.submit(destination_draft_data)
    await service.submit({**destination_draft_data, "city": "Madurai"})

    listed = await service.list_destinations(Language.TA)

    assert [d.city for d in listed] == ["Madurai", "Varanasi"]
    assert listed[0].name == "Kashi Vishwanath (ta)"

    options = await service.list_options()
    assert [o.city for o in options] == ["Madurai", "Varanasi"]
