"""Event ORM model and its ordered invite list.

An Event is persisted together with its invitees, RSVPs and comments; the
child rows belong to the event and are removed with it.
"""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.types import UTCDateTime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Event(Base):
    __tablename__ = "events"

    event_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date_time = Column(UTCDateTime(timezone=True), nullable=False)
    location = Column(String(500), nullable=True)
    organizer_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    created_at = Column(UTCDateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(UTCDateTime(timezone=True), nullable=False, default=_utcnow)

    organizer = relationship("User")
    invitee_links = relationship(
        "EventInvitee",
        order_by="EventInvitee.position",
        cascade="all, delete-orphan",
    )
    rsvps = relationship(
        "EventRSVP",
        order_by="EventRSVP.sequence",
        back_populates="event",
        cascade="all, delete-orphan",
    )
    comments = relationship(
        "EventComment",
        order_by="EventComment.sequence",
        back_populates="event",
        cascade="all, delete-orphan",
    )

    @property
    def invitee_ids(self) -> list[str]:
        return [link.user_id for link in self.invitee_links]

    @property
    def invitees(self):
        """Invited users, in invite-list order."""
        return [link.user for link in self.invitee_links]

    def set_invitees(self, user_ids: list[str]) -> None:
        """Replace the invite list, keeping the first occurrence of each id."""
        existing = {link.user_id: link for link in self.invitee_links}
        links = []
        for index, uid in enumerate(dict.fromkeys(user_ids)):
            link = existing.get(uid) or EventInvitee(user_id=uid)
            link.position = index
            links.append(link)
        self.invitee_links = links


class EventInvitee(Base):
    __tablename__ = "event_invitees"

    event_id = Column(String(36), ForeignKey("events.event_id"), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True, index=True)
    position = Column(Integer, nullable=False)

    user = relationship("User")
