from .base_endpoint import ResourceEndpoint, define_endpoint
from .comment_endpoint import CommentEndpoint
from .errors import DeserializationError, StatusAssertionError
from .response import ValidatedResponse
from .user_endpoint import UserEndpoint

__all__ = [
    "ResourceEndpoint",
    "define_endpoint",
    "CommentEndpoint",
    "UserEndpoint",
    "ValidatedResponse",
    "StatusAssertionError",
    "DeserializationError",
]
