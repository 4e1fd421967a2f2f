"""Event store — persistence and rules for the Event aggregate.

An Event is saved together with its invitees, RSVPs and comments in one
commit. Every mutation fetches the current event, checks the access policy,
validates input, then writes; nothing is written when a check fails. There is
no version token, so concurrent writers to the same event race and the last
commit wins.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import pytz
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import Forbidden, NotFound, StoreError, ValidationError
from app.models.comment import EventComment
from app.models.event import Event, EventInvitee
from app.models.rsvp import EventRSVP, RSVPStatus
from app.models.user import User
from app.services import access_policy

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "date_time", "location", "invitees")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def _clean_title(title: Optional[str]) -> str:
    return title.strip() if title else ""


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to save event changes")
        raise StoreError("Server error") from exc


def _check_invitees(db: Session, invitee_ids: list[str]) -> None:
    """Every invitee must reference a known user."""
    unique_ids = set(invitee_ids)
    if not unique_ids:
        return
    found = {uid for (uid,) in db.query(User.user_id).filter(User.user_id.in_(unique_ids))}
    missing = sorted(unique_ids - found)
    if missing:
        raise ValidationError(f"Unknown invitee(s): {', '.join(missing)}")


def get_event(db: Session, event_id: str) -> Event:
    """Fetch a single event or raise NotFound."""
    event = db.query(Event).filter(Event.event_id == event_id).first()
    if not event:
        raise NotFound("Event not found")
    return event


def create_event(
    db: Session,
    requester_id: str,
    title: Optional[str],
    date_time: Optional[datetime],
    description: Optional[str] = None,
    location: Optional[str] = None,
    invitees: Optional[list[str]] = None,
) -> Event:
    """Create an event organized by the requester."""
    title = _clean_title(title)
    if not title:
        raise ValidationError("Title is required")
    if date_time is None:
        raise ValidationError("dateTime is required")
    invitees = invitees or []
    _check_invitees(db, invitees)

    now = _utcnow()
    event = Event(
        title=title,
        description=description,
        date_time=_to_utc(date_time),
        location=location,
        organizer_id=requester_id,
        created_at=now,
        updated_at=now,
    )
    event.set_invitees(invitees)
    db.add(event)
    _commit(db)
    db.refresh(event)
    logger.info("Created event '%s' (%s) by organizer %s", title, event.event_id, requester_id)
    return event


def list_events_for_user(db: Session, user_id: str) -> list[Event]:
    """Events the user organizes or is invited to."""
    return (
        db.query(Event)
        .filter(or_(
            Event.organizer_id == user_id,
            Event.invitee_links.any(EventInvitee.user_id == user_id),
        ))
        .order_by(Event.created_at)
        .all()
    )


def update_event(
    db: Session,
    event_id: str,
    requester_id: str,
    updates: dict[str, Any],
) -> Event:
    """Apply the non-empty fields of ``updates``; organizer only.

    Fields that are absent, None or otherwise falsy (including an empty
    invite list or a blank title) leave the stored value unchanged.
    """
    event = get_event(db, event_id)
    if not access_policy.is_organizer(event, requester_id):
        logger.warning("User %s refused update of event %s", requester_id, event_id)
        raise Forbidden("Not authorized to update this event")

    changes = {field: updates.get(field) for field in UPDATABLE_FIELDS}
    changes["title"] = _clean_title(changes["title"])
    changes = {field: value for field, value in changes.items() if value}
    if "invitees" in changes:
        _check_invitees(db, changes["invitees"])

    for field, value in changes.items():
        if field == "invitees":
            event.set_invitees(value)
        elif field == "date_time":
            event.date_time = _to_utc(value)
        else:
            setattr(event, field, value)
    event.updated_at = _utcnow()

    _commit(db)
    db.refresh(event)
    logger.info("Updated event %s (%s)", event_id, ", ".join(sorted(changes)) or "no changes")
    return event


def delete_event(db: Session, event_id: str, requester_id: str) -> None:
    """Remove an event with its invitees, RSVPs and comments; organizer only."""
    event = get_event(db, event_id)
    if not access_policy.is_organizer(event, requester_id):
        logger.warning("User %s refused delete of event %s", requester_id, event_id)
        raise Forbidden("Not authorized to delete this event")

    db.delete(event)
    _commit(db)
    logger.info("Deleted event %s", event_id)


def set_rsvp(db: Session, event_id: str, requester_id: str, rsvp_status: Optional[str]) -> list[EventRSVP]:
    """Record the requester's response, overwriting any earlier one.

    Returns the event's full RSVP list in the order responses were first made.
    """
    event = get_event(db, event_id)
    if not access_policy.is_invitee(event, requester_id):
        logger.warning("User %s is not invited to event %s", requester_id, event_id)
        raise Forbidden("You are not invited to this event")

    try:
        new_status = RSVPStatus(rsvp_status)
    except ValueError:
        raise ValidationError("Invalid RSVP status") from None

    now = _utcnow()
    rsvp = next((r for r in event.rsvps if r.user_id == requester_id), None)
    if rsvp:
        rsvp.status = new_status
        rsvp.updated_at = now
    else:
        event.rsvps.append(EventRSVP(
            user_id=requester_id,
            status=new_status,
            sequence=len(event.rsvps),
            updated_at=now,
        ))
    event.updated_at = now

    _commit(db)
    db.refresh(event)
    logger.info("User %s RSVP'd '%s' to event %s", requester_id, new_status.value, event_id)
    return event.rsvps


def add_comment(db: Session, event_id: str, requester_id: str, message: Optional[str]) -> list[EventComment]:
    """Append a comment by the organizer or an invitee; returns all comments."""
    event = get_event(db, event_id)
    if not access_policy.is_invitee_or_organizer(event, requester_id):
        logger.warning("User %s refused comment on event %s", requester_id, event_id)
        raise Forbidden("Not authorized to comment on this event")

    if not message:
        raise ValidationError("Message is required")

    now = _utcnow()
    event.comments.append(EventComment(
        user_id=requester_id,
        message=message,
        sequence=len(event.comments),
        created_at=now,
    ))
    event.updated_at = now

    _commit(db)
    db.refresh(event)
    logger.info("User %s commented on event %s", requester_id, event_id)
    return event.comments


def list_comments(
    db: Session,
    event_id: str,
    requester_id: str,
    require_membership: bool = False,
) -> list[EventComment]:
    """Comments of an event in posting order.

    Any authenticated user may read them unless ``require_membership`` is
    set, in which case only the organizer and invitees may.
    """
    event = get_event(db, event_id)
    if require_membership and not access_policy.is_invitee_or_organizer(event, requester_id):
        logger.warning("User %s refused comments of event %s", requester_id, event_id)
        raise Forbidden("Not authorized to view comments on this event")
    return event.comments
