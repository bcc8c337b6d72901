"""
Event models: happenings at a destination and their per-language text
"""
import uuid

from sqlalchemy import Column, String, Date, DateTime, ForeignKey, Boolean, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from darshan_admin.core.db import Base
from darshan_admin.models.enums import Language, enum_column


class Event(Base):
    """
    A dated (or daily) happening tied to one destination
    """
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    destination_id = Column(
        String(36), ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_time = Column(String(32), nullable=False)
    end_time = Column(String(32), nullable=False)
    date = Column(Date, nullable=True, index=True)
    daily = Column(Boolean, nullable=False, default=False)
    is_popular = Column("isPopular", Boolean, nullable=False, default=False)
    event_image = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    translations = relationship(
        "EventTranslation", back_populates="event", passive_deletes=True
    )
    destination = relationship("Destination")


class EventTranslation(Base):
    __tablename__ = "event_translations"

    event_id = Column(
        String(36), ForeignKey("events.id", ondelete="CASCADE"), primary_key=True
    )
    language = Column(enum_column(Language), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    event = relationship("Event", back_populates="translations")
