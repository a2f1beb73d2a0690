"""Client for the ``/comments`` resource."""

from __future__ import annotations

from ..models.comment import Comment
from .base_endpoint import ResourceEndpoint


class CommentEndpoint(ResourceEndpoint[Comment]):
    """Create, read, update and list comments. Comment IDs are integers."""

    resource_name = "Comment"
    collection_path = "/comments"
    member_path = "/comments/{commentID}"
    record_type = Comment
