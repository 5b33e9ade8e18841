"""Domain entities for internal representation.

These are pure dataclasses (frozen) built from API responses by the
mappers module. They are NOT used for the wire format - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
"""

from .category import Category
from .comment import Comment
from .like_status import LikeStatus
from .post import Post
from .search_result import SearchResult
from .session import AuthSession
from .user import User

__all__ = [
    "AuthSession",
    "Category",
    "Comment",
    "LikeStatus",
    "Post",
    "SearchResult",
    "User",
]
