"""
Event schemas: form draft, normalized record and list responses
"""
import datetime as dt
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from darshan_admin.core.validation import RequiredText, UrlText
from darshan_admin.models.enums import Language
from darshan_admin.schemas.translations import TranslationSet, fill_missing_languages


class EventTextDraft(BaseModel):
    name: Optional[str] = ""
    description: Optional[str] = ""


class EventText(BaseModel):
    name: RequiredText
    description: RequiredText


class EventDraft(BaseModel):
    """Unvalidated staging copy of an event and its translations"""
    destination_id: Optional[str] = ""
    start_time: Optional[str] = ""
    end_time: Optional[str] = ""
    date: Optional[str] = ""
    daily: bool = False
    is_popular: bool = False
    event_image: Optional[str] = ""
    translations: Annotated[
        TranslationSet[EventTextDraft], BeforeValidator(fill_missing_languages)
    ] = Field(default_factory=dict, validate_default=True)

    @classmethod
    def empty(cls) -> "EventDraft":
        return cls()

    @classmethod
    def from_rows(cls, event, translations: Dict[Language, Any], dependents=()) -> "EventDraft":
        """Assemble an edit draft from stored rows; missing languages stay empty."""
        return cls(
            destination_id=event.destination_id,
            start_time=event.start_time,
            end_time=event.end_time,
            date=event.date.isoformat() if event.date else "",
            daily=bool(event.daily),
            is_popular=bool(event.is_popular),
            event_image=event.event_image or "",
            translations={
                language.value: {"name": row.name, "description": row.description}
                for language, row in translations.items()
            },
        )


class EventRecord(BaseModel):
    """Validated event, ready to persist"""
    destination_id: RequiredText
    start_time: RequiredText
    end_time: RequiredText
    date: Optional[dt.date] = None
    daily: bool
    is_popular: bool
    event_image: Optional[UrlText] = None
    translations: TranslationSet[EventText]

    @field_validator("date", "event_image", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Optional form fields arrive as empty strings"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def parent_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"translations"})

    def dependent_items(self) -> List[Any]:
        return []


class EventRead(BaseModel):
    """Schema for event list rows"""
    id: str
    destination_id: str
    start_time: str
    end_time: str
    date: Optional[dt.date] = None
    daily: bool
    is_popular: bool
    event_image: Optional[str] = None
    name: Optional[str] = None
    destination_name: Optional[str] = None
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_row(cls, event, language: Language = Language.EN, destination_name: Optional[str] = None) -> "EventRead":
        text = next(
            (t for t in event.translations if Language(t.language) == language), None
        )
        return cls(
            id=event.id,
            destination_id=event.destination_id,
            start_time=event.start_time,
            end_time=event.end_time,
            date=event.date,
            daily=bool(event.daily),
            is_popular=bool(event.is_popular),
            event_image=event.event_image,
            name=text.name if text else None,
            destination_name=destination_name,
            created_at=event.created_at,
        )
