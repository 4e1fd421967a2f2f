"""Authorization predicates for event operations.

Pure functions of the event's current state; callers re-evaluate them on
every request because invite lists change between requests.
"""
from app.models.event import Event


def is_organizer(event: Event, user_id: str) -> bool:
    return event.organizer_id == user_id


def is_invitee(event: Event, user_id: str) -> bool:
    return user_id in event.invitee_ids


def is_invitee_or_organizer(event: Event, user_id: str) -> bool:
    return is_organizer(event, user_id) or is_invitee(event, user_id)
