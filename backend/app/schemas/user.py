"""Pydantic schemas for Users."""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserCreate(BaseModel):
    name: str
    email: str


class UserOut(BaseModel):
    id: str = Field(validation_alias="user_id")
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class UserSummary(BaseModel):
    """Display projection used wherever a user reference is resolved."""

    id: str = Field(validation_alias="user_id")
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
