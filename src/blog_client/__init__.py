"""Blog Client - async client for the VirtualsBlog REST API.

This package provides a layered architecture for talking to the blog:

Layers:
    - protocols: Interface contracts (BlogApi, UserStore)
    - repositories: Data access implementations (httpx, JSON file)
    - services: Business logic (BlogService, AuthService)
    - dto: Data transfer objects (wire contracts)
    - entities: Domain models (internal)

Every service call returns a Resource: ``Ok(value)`` or ``Failed(message)``.

Usage:
    ```python
    from blog_client import AuthService, BlogService, HttpBlogApi, JsonUserStore

    api = HttpBlogApi.create()
    auth = AuthService(api=api, store=JsonUserStore.create())
    blog = BlogService.create(api=api)

    await auth.login("username", "password")
    result = await blog.get_posts_for_home(auth.current_token())
    ```
"""

from blog_client.config import get_settings, settings
from blog_client.entities import (
    AuthSession,
    Category,
    Comment,
    LikeStatus,
    Post,
    SearchResult,
    User,
)
from blog_client.errors import classify_http_error
from blog_client.logging_config import configure_logging
from blog_client.protocols import BlogApi, UserStore
from blog_client.repositories import HttpBlogApi, JsonUserStore
from blog_client.resource import Failed, Ok, Pending, Resource, resource_states
from blog_client.services import AuthService, BlogService, infer_like_status

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    "configure_logging",
    # Protocols (interfaces)
    "BlogApi",
    "UserStore",
    # Services (business logic)
    "AuthService",
    "BlogService",
    "classify_http_error",
    "infer_like_status",
    # Repositories (data access)
    "HttpBlogApi",
    "JsonUserStore",
    # Entities (domain models)
    "AuthSession",
    "Category",
    "Comment",
    "LikeStatus",
    "Post",
    "SearchResult",
    "User",
    # Results
    "Pending",
    "Ok",
    "Failed",
    "Resource",
    "resource_states",
]
