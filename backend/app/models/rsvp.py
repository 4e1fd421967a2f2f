"""EventRSVP ORM model — one response per (event, user)."""
import enum
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.types import UTCDateTime


class RSVPStatus(str, enum.Enum):
    accepted = "accepted"
    declined = "declined"
    maybe = "maybe"


class EventRSVP(Base):
    __tablename__ = "event_rsvps"

    event_id = Column(String(36), ForeignKey("events.event_id"), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True)
    status = Column(SAEnum(RSVPStatus), nullable=False, default=RSVPStatus.maybe)
    # Position in the event's RSVP list; fixed when the record is first created.
    sequence = Column(Integer, nullable=False)
    updated_at = Column(UTCDateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    event = relationship("Event", back_populates="rsvps")
