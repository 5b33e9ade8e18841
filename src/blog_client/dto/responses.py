"""Response DTOs for the blog REST API.

Every endpoint wraps its payload in the same envelope::

    {"success": true, "message": "...", "data": <payload>}

Field names follow the server's camelCase JSON via aliases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for server payloads: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ApiResponse(WireModel):
    """Generic response envelope; ``data`` is validated per endpoint."""

    success: bool = False
    message: str | None = None
    data: Any = None


class ValidationErrorItem(WireModel):
    """Single field-level validation failure."""

    msg: str | None = None
    path: str | None = None
    location: str | None = None
    type: str | None = None
    value: Any = None


class ValidationErrorEnvelope(WireModel):
    """Envelope of a 400/422 response listing validation failures."""

    success: bool = False
    message: str | None = None
    data: list[ValidationErrorItem]


class ServerErrorEnvelope(WireModel):
    """Envelope of a 500 response; ``data`` holds the raw server error text."""

    success: bool = False
    message: str | None = None
    data: str | None = None


class UserResponse(WireModel):
    """User profile as returned by auth and search endpoints."""

    id: str
    username: str
    fullname: str = ""
    email: str = ""
    image: str | None = None
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")


class AuthorResponse(WireModel):
    """Author summary embedded in posts and comments."""

    id: str = ""
    username: str = ""
    fullname: str = ""
    image: str | None = None


class CategoryCount(WireModel):
    posts: int = Field(0, alias="Post")


class CategoryResponse(WireModel):
    id: str
    name: str
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")
    counts: CategoryCount = Field(default_factory=CategoryCount, alias="_count")


class CategoryRef(WireModel):
    """Category summary embedded in posts."""

    id: str = ""
    name: str = ""


class CommentResponse(WireModel):
    id: str
    content: str
    post_id: str = Field("", alias="postId")
    author_id: str = Field("", alias="authorId")
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")
    author: AuthorResponse | None = None


class PostCount(WireModel):
    likes: int = Field(0, alias="Like")
    comments: int = Field(0, alias="Comment")


class PostResponse(WireModel):
    """Post as returned by list, create, update and delete endpoints.

    The detail endpoint adds ``comments`` and ``isLiked``.
    """

    id: str
    title: str
    content: str = ""
    photo: str | None = None
    slug: str = ""
    author_id: str = Field("", alias="authorId")
    category_id: str = Field("", alias="categoryId")
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")
    author: AuthorResponse | None = None
    category: CategoryRef | None = None
    counts: PostCount = Field(default_factory=PostCount, alias="_count")
    is_liked: bool = Field(False, alias="isLiked")
    comments: list[CommentResponse] = Field(default_factory=list)


class SearchResponse(WireModel):
    users: list[UserResponse] = Field(default_factory=list)
    categories: list[CategoryResponse] = Field(default_factory=list)
    posts: list[PostResponse] = Field(default_factory=list)


class LoginResponse(UserResponse):
    """Login payload: the user profile plus its bearer token."""

    access_token: str = Field(..., alias="accessToken", min_length=1)


class LikeResponse(WireModel):
    """Payload of the toggle-like endpoint (may be null when unliked)."""

    is_liked: bool | None = Field(None, alias="isLiked")
    liked: bool | None = None
    likes_count: int | None = Field(None, alias="likesCount")

    @property
    def explicit_status(self) -> bool | None:
        """Structured like flag if the server sent one."""
        if self.is_liked is not None:
            return self.is_liked
        return self.liked
