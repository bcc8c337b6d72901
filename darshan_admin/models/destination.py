"""
Destination models: the parent row, its per-language text and its images
"""
import uuid

from sqlalchemy import Column, String, Float, DateTime, ForeignKey, Integer, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from darshan_admin.core.db import Base
from darshan_admin.models.enums import Deity, Language, Sampradaya, enum_column


class Destination(Base):
    """
    A pilgrimage place. Identity is assigned on insert and never changes.
    """
    __tablename__ = "destinations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    city = Column(String(255), nullable=False, index=True)
    deity = Column(enum_column(Deity), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    live_feed = Column(Text, nullable=False)
    sampradaya = Column(enum_column(Sampradaya), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships; the store cascades deletes
    translations = relationship(
        "DestinationTranslation", back_populates="destination", passive_deletes=True
    )
    images = relationship(
        "DestinationImage", back_populates="destination", passive_deletes=True
    )


class DestinationTranslation(Base):
    __tablename__ = "destination_translations"

    destination_id = Column(
        String(36), ForeignKey("destinations.id", ondelete="CASCADE"), primary_key=True
    )
    language = Column(enum_column(Language), primary_key=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    short_description = Column(Text, nullable=False)
    detailed_description = Column(Text, nullable=False)

    destination = relationship("Destination", back_populates="translations")


class DestinationImage(Base):
    __tablename__ = "destination_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    destination_id = Column(
        String(36), ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    hero_image = Column(Text, nullable=False)

    destination = relationship("Destination", back_populates="images")
