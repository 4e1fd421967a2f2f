"""Comment thread routes."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.dependencies import get_current_user_id
from app.schemas.event import CommentCreate, CommentListOut, CommentWithAuthorOut
from app.services import event_service

router = APIRouter()


@router.post("/{event_id}/comments", response_model=CommentListOut, status_code=status.HTTP_201_CREATED)
def add_comment(
    event_id: str,
    payload: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Post a comment as the organizer or an invitee."""
    comments = event_service.add_comment(db, event_id, user_id, payload.message)
    return {"message": "Comment added", "comments": comments}


@router.get("/{event_id}/comments", response_model=list[CommentWithAuthorOut])
def list_comments(
    event_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List an event's comments with their authors."""
    return event_service.list_comments(
        db, event_id, user_id, require_membership=settings.COMMENTS_REQUIRE_MEMBERSHIP,
    )
