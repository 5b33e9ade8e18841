"""Blog service for posts, categories, comments, likes and search.

Every operation takes the caller's bearer token explicitly. A missing token
fails with the unauthorized message before any request is made.
"""

import logging
from pathlib import Path

from pydantic import TypeAdapter

from blog_client.config import settings
from blog_client.dto import (
    ApiResponse,
    CategoryResponse,
    CommentResponse,
    LikeResponse,
    PostResponse,
    SearchResponse,
)
from blog_client.entities import Category, Comment, LikeStatus, Post, SearchResult
from blog_client.errors import (
    ERROR_FAILED_LOAD_POST,
    ERROR_FILE_TYPE_NOT_ALLOWED,
    ERROR_POST_DELETE_FAILED,
    ERROR_POST_NOT_FOUND,
    ERROR_POST_UPDATE_FAILED,
    ERROR_UNAUTHORIZED,
)
from blog_client.mappers import (
    category_from_response,
    comment_from_response,
    post_from_detail,
    post_from_response,
    search_result_from_response,
)
from blog_client.protocols import BlogApi
from blog_client.resource import Failed, Resource
from blog_client.utils import ImageProblem, ImageUpload, check_image, newest_first, read_image

from .api_call import execute_call
from .like_status import infer_like_status

logger = logging.getLogger(__name__)

ERROR_FAILED_LOAD_AUTHOR_POSTS = "Gagal memuat postingan dari author ini."
ERROR_FAILED_LOAD_CATEGORY_POSTS = "Gagal memuat post dari kategori ini."
ERROR_FAILED_LOAD_CATEGORIES = "Gagal memuat kategori"
ERROR_SEARCH_FAILED = "Gagal melakukan pencarian."
ERROR_EMPTY_KEYWORD = "Keyword pencarian tidak boleh kosong."
ERROR_CREATE_POST_FAILED = "Gagal membuat postingan"
ERROR_CREATE_COMMENT_FAILED = "Gagal membuat komentar"
ERROR_DELETE_COMMENT_FAILED = "Gagal menghapus komentar"
ERROR_EMPTY_COMMENT = "Komentar tidak boleh kosong."
ERROR_TOGGLE_LIKE_FAILED = "Gagal toggle like"

_POSTS = TypeAdapter(list[PostResponse])
_CATEGORIES = TypeAdapter(list[CategoryResponse])


def _photo_messages(max_size_mb: int) -> dict[ImageProblem, str]:
    return {
        ImageProblem.INVALID: "File gambar tidak valid",
        ImageProblem.TOO_LARGE: f"Ukuran file maksimal {max_size_mb}MB",
        ImageProblem.BAD_TYPE: ERROR_FILE_TYPE_NOT_ALLOWED,
    }


def _new_photo_messages(max_size_mb: int) -> dict[ImageProblem, str]:
    return {
        ImageProblem.INVALID: "File gambar baru tidak valid atau kosong.",
        ImageProblem.TOO_LARGE: f"Ukuran file baru maksimal {max_size_mb}MB.",
        ImageProblem.BAD_TYPE: "Tipe file gambar baru tidak diizinkan (JPG, JPEG, PNG).",
    }


def _posts(envelope: ApiResponse) -> list[Post]:
    return [post_from_response(p) for p in _POSTS.validate_python(envelope.data or [])]


class BlogService:
    """Blog operations on top of a BlogApi transport.

    The service depends on the BlogApi PROTOCOL, not on httpx directly,
    so tests can pass a fake transport and count calls.

    Example:
        ```python
        from blog_client.repositories import HttpBlogApi
        from blog_client.services import BlogService

        blog = BlogService.create(api=HttpBlogApi.create())
        result = await blog.get_posts_for_home(token)
        if result.is_ok:
            for post in result.value:
                print(post.title)
        ```
    """

    def __init__(
        self,
        api: BlogApi,
        home_posts_limit: int | None = None,
        max_image_size: int | None = None,
    ) -> None:
        """Initialize the blog service.

        Args:
            api: Transport for the blog REST API (required).
            home_posts_limit: Number of posts on the home feed. Defaults to settings.
            max_image_size: Upload limit in bytes. Defaults to settings.
        """
        if home_posts_limit is None:
            home_posts_limit = settings.home_posts_limit
        if max_image_size is None:
            max_image_size = settings.max_image_size
        if home_posts_limit < 1:
            raise ValueError(f"home_posts_limit must be at least 1, got {home_posts_limit}")
        if max_image_size < 1:
            raise ValueError("max_image_size must be a positive number of bytes")

        self._api = api
        self._home_limit = home_posts_limit
        self._max_image_size = max_image_size

    @classmethod
    def create(
        cls,
        api: BlogApi,
        home_posts_limit: int | None = None,
        max_image_size: int | None = None,
    ) -> "BlogService":
        """Factory method to create BlogService with settings defaults."""
        return cls(api=api, home_posts_limit=home_posts_limit, max_image_size=max_image_size)

    @property
    def home_posts_limit(self) -> int:
        return self._home_limit

    @property
    def api(self) -> BlogApi:
        """Get the underlying transport (for testing)."""
        return self._api

    # Posts

    async def get_all_posts(self, token: str | None) -> Resource[list[Post]]:
        """Fetch every post, newest first."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "get_all_posts",
            lambda: self._api.get_all_posts(token),
            lambda envelope: newest_first(_posts(envelope)),
            ERROR_FAILED_LOAD_POST,
        )

    async def get_posts_for_home(self, token: str | None) -> Resource[list[Post]]:
        """Fetch the newest posts, truncated to the home feed limit."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "get_posts_for_home",
            lambda: self._api.get_all_posts(token),
            lambda envelope: newest_first(_posts(envelope))[: self._home_limit],
            ERROR_FAILED_LOAD_POST,
        )

    async def get_total_posts_count(self, token: str | None) -> Resource[int]:
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "get_total_posts_count",
            lambda: self._api.get_all_posts(token),
            lambda envelope: len(_POSTS.validate_python(envelope.data or [])),
            ERROR_FAILED_LOAD_POST,
        )

    async def get_posts_by_author_id(
        self, token: str | None, author_id: str
    ) -> Resource[list[Post]]:
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "get_posts_by_author_id",
            lambda: self._api.get_posts_by_author_id(token, author_id),
            lambda envelope: newest_first(_posts(envelope)),
            ERROR_FAILED_LOAD_AUTHOR_POSTS,
        )

    async def get_posts_by_category_id(
        self, token: str | None, category_id: str
    ) -> Resource[list[Post]]:
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "get_posts_by_category_id",
            lambda: self._api.get_posts_by_category_id(token, category_id),
            lambda envelope: newest_first(_posts(envelope)),
            ERROR_FAILED_LOAD_CATEGORY_POSTS,
        )

    async def get_post_by_id(self, token: str | None, post_id: str) -> Resource[Post]:
        """Fetch one post with its comments."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "get_post_by_id",
            lambda: self._api.get_post_by_id(token, post_id),
            lambda envelope: post_from_detail(PostResponse.model_validate(envelope.data)),
            ERROR_POST_NOT_FOUND,
            require_data=True,
        )

    async def create_post(
        self,
        token: str | None,
        title: str,
        content: str,
        category_id: str,
        photo: str | Path,
    ) -> Resource[Post]:
        """Create a post with a required photo (JPG/JPEG/PNG)."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)

        upload = self._load_photo(Path(photo), _photo_messages(self._max_size_mb))
        if isinstance(upload, Failed):
            return upload

        return await execute_call(
            "create_post",
            lambda: self._api.create_post(token, title, content, category_id, upload),
            lambda envelope: post_from_response(PostResponse.model_validate(envelope.data)),
            ERROR_CREATE_POST_FAILED,
            require_data=True,
        )

    async def update_post(
        self,
        token: str | None,
        post_id: str,
        title: str,
        content: str,
        category_id: str,
        photo: str | Path | None = None,
    ) -> Resource[Post]:
        """Update a post; the photo is replaced only when one is given."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)

        upload: ImageUpload | None = None
        if photo is not None:
            loaded = self._load_photo(Path(photo), _new_photo_messages(self._max_size_mb))
            if isinstance(loaded, Failed):
                return loaded
            upload = loaded

        return await execute_call(
            "update_post",
            lambda: self._api.update_post(token, post_id, title, content, category_id, upload),
            lambda envelope: post_from_response(PostResponse.model_validate(envelope.data)),
            ERROR_POST_UPDATE_FAILED,
            require_data=True,
        )

    async def delete_post(self, token: str | None, post_id: str) -> Resource[Post]:
        """Delete a post; the server answers with the deleted post."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "delete_post",
            lambda: self._api.delete_post(token, post_id),
            lambda envelope: post_from_response(PostResponse.model_validate(envelope.data)),
            ERROR_POST_DELETE_FAILED,
            require_data=True,
        )

    # Search and categories

    async def search(self, token: str | None, keyword: str) -> Resource[SearchResult]:
        """Search users, categories and posts by keyword."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        if not keyword or not keyword.strip():
            return Failed(ERROR_EMPTY_KEYWORD)
        return await execute_call(
            "search",
            lambda: self._api.search(token, keyword),
            lambda envelope: search_result_from_response(
                SearchResponse.model_validate(envelope.data)
            ),
            ERROR_SEARCH_FAILED,
            require_data=True,
        )

    async def get_categories(self, token: str | None) -> Resource[list[Category]]:
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "get_categories",
            lambda: self._api.get_categories(token),
            lambda envelope: [
                category_from_response(c)
                for c in _CATEGORIES.validate_python(envelope.data or [])
            ],
            ERROR_FAILED_LOAD_CATEGORIES,
        )

    # Comments and likes

    async def create_comment(
        self, token: str | None, post_id: str, content: str
    ) -> Resource[Comment]:
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        text = content.strip()
        if not text:
            return Failed(ERROR_EMPTY_COMMENT)
        return await execute_call(
            "create_comment",
            lambda: self._api.create_comment(token, post_id, text),
            lambda envelope: comment_from_response(CommentResponse.model_validate(envelope.data)),
            ERROR_CREATE_COMMENT_FAILED,
            require_data=True,
        )

    async def delete_comment(self, token: str | None, comment_id: str) -> Resource[Comment]:
        if not token:
            return Failed(ERROR_UNAUTHORIZED)
        return await execute_call(
            "delete_comment",
            lambda: self._api.delete_comment(token, comment_id),
            lambda envelope: comment_from_response(CommentResponse.model_validate(envelope.data)),
            ERROR_DELETE_COMMENT_FAILED,
            require_data=True,
        )

    async def toggle_like(self, token: str | None, post_id: str) -> Resource[LikeStatus]:
        """Like or unlike a post, whichever applies server-side."""
        if not token:
            return Failed(ERROR_UNAUTHORIZED)

        def parse(envelope: ApiResponse) -> LikeStatus:
            payload = None
            if isinstance(envelope.data, dict):
                payload = LikeResponse.model_validate(envelope.data)
            explicit = payload.explicit_status if payload else None
            if explicit is None:
                is_liked = infer_like_status(envelope.message, envelope.data is not None)
            else:
                is_liked = explicit
            return LikeStatus(
                post_id=post_id,
                is_liked=is_liked,
                likes_count=payload.likes_count if payload else None,
            )

        return await execute_call(
            "toggle_like",
            lambda: self._api.toggle_like(token, post_id),
            parse,
            ERROR_TOGGLE_LIKE_FAILED,
        )

    # Helpers

    @property
    def _max_size_mb(self) -> int:
        return max(1, self._max_image_size // (1024 * 1024))

    def _load_photo(
        self, path: Path, messages: dict[ImageProblem, str]
    ) -> ImageUpload | Failed:
        problem = check_image(path, self._max_image_size)
        if problem is not None:
            logger.info("Rejected photo %s: %s", path.name, problem.value)
            return Failed(messages[problem])
        try:
            return read_image(path)
        except OSError as e:
            logger.warning("Could not read photo %s: %s", path.name, e)
            return Failed(messages[ImageProblem.INVALID])
