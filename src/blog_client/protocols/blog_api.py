"""Blog API transport protocol.

Defines the interface for anything that can perform the blog's HTTP calls.
Implementations return the raw ``httpx.Response`` and never raise on status
codes; interpreting the envelope is the service layer's job.

Implementations can include:
- httpx over the network (default, ``HttpBlogApi``)
- ``httpx.MockTransport``-backed clients for tests
- Recording/replaying fakes
"""

from typing import Protocol, runtime_checkable

import httpx

from blog_client.utils import ImageUpload


@runtime_checkable
class BlogApi(Protocol):
    """Protocol for blog API transports.

    Every authenticated method takes the raw token; the transport adds the
    ``Bearer`` prefix. Transport failures surface as ``httpx.TransportError``.

    Example:
        ```python
        from blog_client.protocols import BlogApi

        api: BlogApi = HttpBlogApi.create()
        api: BlogApi = RecordingBlogApi(...)
        ```
    """

    async def login(self, username: str, password: str) -> httpx.Response:
        ...

    async def register(
        self,
        fullname: str,
        email: str,
        username: str,
        password: str,
        confirm_password: str,
    ) -> httpx.Response:
        ...

    async def get_all_posts(self, token: str) -> httpx.Response:
        ...

    async def get_posts_by_author_id(self, token: str, author_id: str) -> httpx.Response:
        ...

    async def get_posts_by_category_id(self, token: str, category_id: str) -> httpx.Response:
        ...

    async def get_post_by_id(self, token: str, post_id: str) -> httpx.Response:
        ...

    async def search(self, token: str, keyword: str) -> httpx.Response:
        ...

    async def get_categories(self, token: str) -> httpx.Response:
        ...

    async def create_post(
        self,
        token: str,
        title: str,
        content: str,
        category_id: str,
        photo: ImageUpload,
    ) -> httpx.Response:
        """Upload a new post as multipart form data (photo field ``photo``)."""
        ...

    async def update_post(
        self,
        token: str,
        post_id: str,
        title: str,
        content: str,
        category_id: str,
        photo: ImageUpload | None = None,
    ) -> httpx.Response:
        """Replace a post's fields; the photo part is sent only when given."""
        ...

    async def delete_post(self, token: str, post_id: str) -> httpx.Response:
        ...

    async def create_comment(self, token: str, post_id: str, content: str) -> httpx.Response:
        ...

    async def delete_comment(self, token: str, comment_id: str) -> httpx.Response:
        ...

    async def toggle_like(self, token: str, post_id: str) -> httpx.Response:
        ...
