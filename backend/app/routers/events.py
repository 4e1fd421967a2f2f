"""Event API routes — delegates to event_service for rule enforcement."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.event import EventCreate, EventUpdate, EventOut, EventWithMembersOut, MessageOut
from app.services import event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create an event organized by the current user."""
    return event_service.create_event(
        db=db,
        requester_id=user_id,
        title=payload.title,
        date_time=payload.date_time,
        description=payload.description,
        location=payload.location,
        invitees=payload.invitees,
    )


@router.get("/", response_model=list[EventWithMembersOut])
def list_events(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """List events the current user organizes or is invited to."""
    events = event_service.list_events_for_user(db, user_id)
    logger.debug("Listed %d events for user %s", len(events), user_id)
    return events


@router.get("/{event_id}", response_model=EventOut)
def get_event(
    event_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Fetch a single event by ID."""
    return event_service.get_event(db, event_id)


@router.put("/{event_id}", response_model=EventOut)
def update_event(
    event_id: str,
    payload: EventUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Update an event (organizer only)."""
    return event_service.update_event(
        db=db,
        event_id=event_id,
        requester_id=user_id,
        updates=payload.model_dump(exclude_unset=True),
    )


@router.delete("/{event_id}", response_model=MessageOut)
def delete_event(
    event_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete an event with its RSVPs and comments (organizer only)."""
    event_service.delete_event(db, event_id, user_id)
    return {"message": "Event deleted successfully"}
