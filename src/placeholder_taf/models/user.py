"""User record."""

from __future__ import annotations

from pydantic import Field

from .base import RecordModel


class User(RecordModel):
    """A registered user. IDs keep their wire type, integer or string."""

    id: int | str | None = Field(default=None, description="Server-assigned user ID")
    name: str = Field(..., description="Full name")
    username: str | None = Field(default=None)
    email: str = Field(..., description="Contact e-mail address")
    phone: str | None = Field(default=None)
    website: str | None = Field(default=None)
