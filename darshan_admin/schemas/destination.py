"""
Destination schemas: form draft, normalized record and list responses
"""
from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from darshan_admin.core.validation import RequiredText, UrlText
from darshan_admin.models.enums import Deity, Language, Sampradaya
from darshan_admin.schemas.translations import TranslationSet, fill_missing_languages


class DestinationTextDraft(BaseModel):
    name: Optional[str] = ""
    location: Optional[str] = ""
    short_description: Optional[str] = ""
    detailed_description: Optional[str] = ""


class DestinationText(BaseModel):
    name: RequiredText
    location: RequiredText
    short_description: RequiredText
    detailed_description: RequiredText


class DestinationDraft(BaseModel):
    """Unvalidated staging copy of a destination and its children"""
    city: Optional[str] = ""
    deity: Optional[str] = Deity.SHIVA.value
    latitude: Union[float, str, bool, None] = 0
    longitude: Union[float, str, bool, None] = 0
    live_feed: Optional[str] = ""
    sampradaya: Optional[str] = Sampradaya.VAISHNAVA.value
    translations: Annotated[
        TranslationSet[DestinationTextDraft], BeforeValidator(fill_missing_languages)
    ] = Field(default_factory=dict, validate_default=True)
    images: List[str] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "DestinationDraft":
        return cls()

    @classmethod
    def from_rows(cls, destination, translations: Dict[Language, Any], images: Sequence[str]) -> "DestinationDraft":
        """Assemble an edit draft from stored rows; missing languages stay empty."""
        return cls(
            city=destination.city,
            deity=Deity(destination.deity).value,
            latitude=destination.latitude,
            longitude=destination.longitude,
            live_feed=destination.live_feed,
            sampradaya=Sampradaya(destination.sampradaya).value,
            translations={
                language.value: {
                    "name": row.name,
                    "location": row.location,
                    "short_description": row.short_description,
                    "detailed_description": row.detailed_description,
                }
                for language, row in translations.items()
            },
            images=list(images),
        )


class DestinationRecord(BaseModel):
    """Validated destination, ready to persist"""
    city: RequiredText
    deity: Deity
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    live_feed: UrlText
    sampradaya: Sampradaya
    translations: TranslationSet[DestinationText]
    images: List[UrlText] = Field(min_length=1)

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def reject_bool(cls, v):
        # bool is an int subclass and would pass as 0.0 or 1.0
        if isinstance(v, bool):
            raise ValueError("Input should be a valid number")
        return v

    def parent_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"translations", "images"})

    def dependent_items(self) -> List[str]:
        return list(self.images)


class DestinationRead(BaseModel):
    """Schema for destination list rows"""
    id: str
    city: str
    deity: Deity
    latitude: float
    longitude: float
    live_feed: str
    sampradaya: Sampradaya
    name: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_row(cls, destination, language: Language = Language.EN) -> "DestinationRead":
        text = next(
            (t for t in destination.translations if Language(t.language) == language), None
        )
        return cls(
            id=destination.id,
            city=destination.city,
            deity=destination.deity,
            latitude=destination.latitude,
            longitude=destination.longitude,
            live_feed=destination.live_feed,
            sampradaya=destination.sampradaya,
            name=text.name if text else None,
            location=text.location if text else None,
            created_at=destination.created_at,
        )


class DestinationOption(BaseModel):
    """Destination picker entry for the event form"""
    id: str
    city: str
    name: Optional[str] = None
