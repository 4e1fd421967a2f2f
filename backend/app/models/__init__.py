"""ORM models; importing this package registers every table on Base.metadata."""
from app.models.user import User  # noqa: F401
from app.models.event import Event, EventInvitee  # noqa: F401
from app.models.rsvp import EventRSVP, RSVPStatus  # noqa: F401
from app.models.comment import EventComment  # noqa: F401
