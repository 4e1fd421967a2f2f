"""EventComment ORM model — append-only discussion thread on an event."""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.types import UTCDateTime


class EventComment(Base):
    __tablename__ = "event_comments"

    comment_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String(36), ForeignKey("events.event_id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    message = Column(Text, nullable=False)
    sequence = Column(Integer, nullable=False)
    created_at = Column(UTCDateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    event = relationship("Event", back_populates="comments")
    user = relationship("User")
