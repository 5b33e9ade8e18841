"""Repository layer for data access.

This layer hides external dependencies (the blog REST API, the local
current-user cache) behind protocol-based interfaces. This enables:
- Unit testing services with fake transports
- Swapping the session cache (file, keyring, memory)
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from blog_client.protocols import BlogApi, UserStore

from .http_blog_api import HttpBlogApi
from .json_user_store import JsonUserStore

__all__ = [
    "BlogApi",
    "UserStore",
    "HttpBlogApi",
    "JsonUserStore",
]
