"""httpx-based transport for the blog REST API.

Talks JSON to the blog server, except for post create/update which are
multipart uploads with the photo under the ``photo`` field.

Key features:
- One lazily created ``httpx.AsyncClient`` per instance (connection reuse)
- Bearer authentication per call, no ambient token state
- Returns raw responses, never raises on status codes
- Injectable transport for tests (``httpx.MockTransport``)
"""

import logging

import httpx

from blog_client.config import settings
from blog_client.dto import CreateCommentRequest, LoginRequest, RegisterRequest
from blog_client.utils import ImageUpload

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class HttpBlogApi:
    """httpx implementation of the BlogApi protocol.

    This class satisfies the BlogApi protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        api = HttpBlogApi.create(base_url="https://blog.example.com")
        response = await api.get_all_posts(token)
        print(response.status_code)
        await api.close()
        ```
    """

    # Endpoint paths, relative to base_url
    LOGIN_PATH = "/api/auth/login"
    REGISTER_PATH = "/api/auth/register"
    POSTS_PATH = "/api/posts"
    POST_PATH = "/api/posts/{post_id}"
    AUTHOR_POSTS_PATH = "/api/posts/author/{author_id}"
    CATEGORY_POSTS_PATH = "/api/posts/category/{category_id}"
    COMMENTS_PATH = "/api/posts/{post_id}/comments"
    COMMENT_PATH = "/api/comments/{comment_id}"
    LIKE_PATH = "/api/posts/{post_id}/like"
    SEARCH_PATH = "/api/search"
    CATEGORIES_PATH = "/api/categories"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: API root URL. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._timeout = timeout or settings.http_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            )
        return self._client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "HttpBlogApi":
        """Factory method to create HttpBlogApi with defaults.

        Args:
            base_url: API root URL. If None, uses settings.
            timeout: Request timeout. If None, uses settings.

        Returns:
            Configured HttpBlogApi
        """
        return cls(base_url=base_url, timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @staticmethod
    def _auth(token: str) -> dict[str, str]:
        return {"Authorization": f"{BEARER_PREFIX}{token}"}

    async def _send(
        self,
        method: str,
        path: str,
        token: str | None = None,
        **kwargs,
    ) -> httpx.Response:
        headers = self._auth(token) if token else None
        logger.debug("%s %s", method, path)
        return await self.client.request(method, path, headers=headers, **kwargs)

    # Auth

    async def login(self, username: str, password: str) -> httpx.Response:
        payload = LoginRequest(username=username, password=password)
        return await self._send("POST", self.LOGIN_PATH, json=payload.model_dump())

    async def register(
        self,
        fullname: str,
        email: str,
        username: str,
        password: str,
        confirm_password: str,
    ) -> httpx.Response:
        payload = RegisterRequest(
            fullname=fullname,
            email=email,
            username=username,
            password=password,
            confirm_password=confirm_password,
        )
        return await self._send("POST", self.REGISTER_PATH, json=payload.model_dump())

    # Posts

    async def get_all_posts(self, token: str) -> httpx.Response:
        return await self._send("GET", self.POSTS_PATH, token)

    async def get_posts_by_author_id(self, token: str, author_id: str) -> httpx.Response:
        return await self._send("GET", self.AUTHOR_POSTS_PATH.format(author_id=author_id), token)

    async def get_posts_by_category_id(self, token: str, category_id: str) -> httpx.Response:
        path = self.CATEGORY_POSTS_PATH.format(category_id=category_id)
        return await self._send("GET", path, token)

    async def get_post_by_id(self, token: str, post_id: str) -> httpx.Response:
        return await self._send("GET", self.POST_PATH.format(post_id=post_id), token)

    async def create_post(
        self,
        token: str,
        title: str,
        content: str,
        category_id: str,
        photo: ImageUpload,
    ) -> httpx.Response:
        return await self._send(
            "POST",
            self.POSTS_PATH,
            token,
            data={"title": title, "content": content, "categoryId": category_id},
            files=photo.as_multipart(),
        )

    async def update_post(
        self,
        token: str,
        post_id: str,
        title: str,
        content: str,
        category_id: str,
        photo: ImageUpload | None = None,
    ) -> httpx.Response:
        data = {"title": title, "content": content, "categoryId": category_id}
        if photo is None:
            # Still multipart so the server parses the same form fields
            files = {key: (None, value) for key, value in data.items()}
            return await self._send(
                "PUT", self.POST_PATH.format(post_id=post_id), token, files=files
            )
        return await self._send(
            "PUT",
            self.POST_PATH.format(post_id=post_id),
            token,
            data=data,
            files=photo.as_multipart(),
        )

    async def delete_post(self, token: str, post_id: str) -> httpx.Response:
        return await self._send("DELETE", self.POST_PATH.format(post_id=post_id), token)

    # Search and categories

    async def search(self, token: str, keyword: str) -> httpx.Response:
        return await self._send("GET", self.SEARCH_PATH, token, params={"keyword": keyword})

    async def get_categories(self, token: str) -> httpx.Response:
        return await self._send("GET", self.CATEGORIES_PATH, token)

    # Comments and likes

    async def create_comment(self, token: str, post_id: str, content: str) -> httpx.Response:
        payload = CreateCommentRequest(content=content)
        return await self._send(
            "POST",
            self.COMMENTS_PATH.format(post_id=post_id),
            token,
            json=payload.model_dump(),
        )

    async def delete_comment(self, token: str, comment_id: str) -> httpx.Response:
        return await self._send("DELETE", self.COMMENT_PATH.format(comment_id=comment_id), token)

    async def toggle_like(self, token: str, post_id: str) -> httpx.Response:
        return await self._send("POST", self.LIKE_PATH.format(post_id=post_id), token)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpBlogApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
