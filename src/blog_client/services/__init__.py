"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable with fake transports.

Architecture:
    Caller -> Service -> Repository
    (App)  -> (Business) -> (HTTP / local cache)

Usage:
    ```python
    from blog_client.repositories import HttpBlogApi, JsonUserStore
    from blog_client.services import AuthService, BlogService

    api = HttpBlogApi.create()
    auth = AuthService(api=api, store=JsonUserStore.create())
    blog = BlogService.create(api=api)
    ```
"""

from .auth_service import AuthService
from .blog_service import BlogService
from .like_status import infer_like_status

__all__ = [
    "AuthService",
    "BlogService",
    "infer_like_status",
]
