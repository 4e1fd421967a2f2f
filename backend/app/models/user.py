"""User ORM model — the minimal directory used to resolve user references."""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String
from app.database import Base
from app.models.types import UTCDateTime


class User(Base):
    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    created_at = Column(UTCDateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
