from .base import RecordModel
from .comment import Comment
from .user import User

__all__ = ["RecordModel", "Comment", "User"]
