"""RSVP API routes."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.event import RSVPUpdate, RSVPListOut
from app.services import event_service

router = APIRouter()


@router.put("/{event_id}/rsvp", response_model=RSVPListOut)
def set_rsvp(
    event_id: str,
    payload: RSVPUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Set or update the current user's RSVP status for an event."""
    rsvps = event_service.set_rsvp(db, event_id, user_id, payload.status)
    return {"message": "RSVP updated successfully", "rsvps": rsvps}
