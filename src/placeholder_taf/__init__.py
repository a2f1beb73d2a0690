from .client import PlaceholderApi
from .endpoints import (
    CommentEndpoint,
    DeserializationError,
    ResourceEndpoint,
    StatusAssertionError,
    UserEndpoint,
    ValidatedResponse,
    define_endpoint,
)
from .models import Comment, RecordModel, User
from .transport import ApiTransport, ClientConfig

__version__ = "0.1.0"

__all__ = [
    "PlaceholderApi",
    "ApiTransport",
    "ClientConfig",
    "ResourceEndpoint",
    "define_endpoint",
    "CommentEndpoint",
    "UserEndpoint",
    "ValidatedResponse",
    "StatusAssertionError",
    "DeserializationError",
    "RecordModel",
    "Comment",
    "User",
]
