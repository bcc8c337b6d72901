"""
ORM models for the Darshan Admin backend.

Importing this package registers every table on ``Base.metadata``.
"""

from .enums import Language, Deity, Sampradaya
from .destination import Destination, DestinationTranslation, DestinationImage
from .event import Event, EventTranslation
from .user import User
from .activity import UserRequest, SavedPlace

__all__ = [
    "Language",
    "Deity",
    "Sampradaya",
    "Destination",
    "DestinationTranslation",
    "DestinationImage",
    "Event",
    "EventTranslation",
    "User",
    "UserRequest",
    "SavedPlace",
]
