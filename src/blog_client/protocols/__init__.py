"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the HTTP transport (real network, mock transport, recorder)
- Unit testing services with fakes and call-count assertions
- Clear separation between services and data access

Usage:
    ```python
    from blog_client.protocols import BlogApi, UserStore

    api: BlogApi = HttpBlogApi.create()
    store: UserStore = JsonUserStore.create()
    ```
"""

from .blog_api import BlogApi
from .user_store import UserStore

__all__ = [
    "BlogApi",
    "UserStore",
]
