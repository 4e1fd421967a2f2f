"""Request dependencies shared by the routers.

Authentication itself happens upstream; the gateway forwards the
authenticated user's id in the ``X-User-Id`` header and this dependency
checks that it names a known user.
"""
import logging
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import Unauthorized
from app.models.user import User

logger = logging.getLogger(__name__)


def get_current_user_id(
    x_user_id: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> str:
    """Return the id of the authenticated user making the request."""
    if not x_user_id:
        raise Unauthorized("Not authenticated")
    user = db.query(User).filter(User.user_id == x_user_id).first()
    if not user:
        logger.warning("Rejected request for unknown user %s", x_user_id)
        raise Unauthorized("Unknown user")
    return user.user_id
