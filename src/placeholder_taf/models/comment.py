"""Comment record."""

from __future__ import annotations

from pydantic import Field

from .base import RecordModel


class Comment(RecordModel):
    """A comment attached to a post."""

    id: int | None = Field(default=None, description="Server-assigned comment ID")
    post_id: int | None = Field(default=None, alias="postId", description="Parent post ID")
    name: str = Field(..., description="Comment title")
    email: str = Field(..., description="Author e-mail address")
    body: str = Field(..., description="Comment text")
