from sqlalchemy.orm import relationship
from sqlalchemy import Column, String, DateTime, func

from darshan_admin.core.db import Base


class User(Base):
    """End user of the mobile app. Read-only from the dashboard."""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    display_name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    requests = relationship("UserRequest", back_populates="user")
    saved_places = relationship("SavedPlace", back_populates="user")

    def __repr__(self) -> str:  # pragma: no cover
        return f"<User id={self.id} email={self.email}>"
