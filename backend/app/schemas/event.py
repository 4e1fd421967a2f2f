"""Pydantic schemas for Events, RSVPs and Comments.

Request and response bodies use camelCase keys (``dateTime``, ``createdAt``);
input also accepts the snake_case field names.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.rsvp import RSVPStatus
from app.schemas.user import UserSummary


class CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class EventCreate(CamelModel):
    # title and date_time are optional here so that the store reports them
    # as domain validation errors.
    title: Optional[str] = None
    description: Optional[str] = None
    date_time: Optional[datetime] = None
    location: Optional[str] = None
    invitees: Optional[list[str]] = None


class EventUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date_time: Optional[datetime] = None
    location: Optional[str] = None
    invitees: Optional[list[str]] = None


class RSVPUpdate(CamelModel):
    status: Optional[str] = None  # accepted, declined, maybe


class CommentCreate(CamelModel):
    message: Optional[str] = None


class RSVPOut(CamelModel):
    user: str = Field(validation_alias="user_id", serialization_alias="user")
    status: RSVPStatus
    updated_at: datetime


class CommentOut(CamelModel):
    id: str = Field(validation_alias="comment_id", serialization_alias="id")
    user: str = Field(validation_alias="user_id", serialization_alias="user")
    message: str
    created_at: datetime


class CommentWithAuthorOut(CamelModel):
    id: str = Field(validation_alias="comment_id", serialization_alias="id")
    user: UserSummary
    message: str
    created_at: datetime


class EventOut(CamelModel):
    id: str = Field(validation_alias="event_id", serialization_alias="id")
    title: str
    description: Optional[str] = None
    date_time: datetime
    location: Optional[str] = None
    organizer: str = Field(validation_alias="organizer_id", serialization_alias="organizer")
    invitees: list[str] = Field(validation_alias="invitee_ids", serialization_alias="invitees")
    rsvps: list[RSVPOut] = []
    comments: list[CommentOut] = []
    created_at: datetime
    updated_at: datetime


class EventWithMembersOut(EventOut):
    """EventOut with organizer and invitees resolved to display projections."""

    organizer: UserSummary
    invitees: list[UserSummary]


class RSVPListOut(BaseModel):
    message: str
    rsvps: list[RSVPOut]


class CommentListOut(BaseModel):
    message: str
    comments: list[CommentOut]


class MessageOut(BaseModel):
    message: str
