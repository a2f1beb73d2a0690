"""Client for the ``/users`` resource."""

from __future__ import annotations

from ..models.user import User
from .base_endpoint import ResourceEndpoint


class UserEndpoint(ResourceEndpoint[User]):
    """Create, read, update and list users. User IDs are strings."""

    resource_name = "User"
    collection_path = "/users"
    member_path = "/users/{userID}"
    record_type = User
