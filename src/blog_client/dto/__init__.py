"""Data Transfer Objects for the blog REST API.

These Pydantic models mirror the server's JSON contract.
They are used for request serialization and response validation.

Internal logic should use entities from the entities package.
"""

from .requests import CreateCommentRequest, LoginRequest, RegisterRequest
from .responses import (
    ApiResponse,
    AuthorResponse,
    CategoryResponse,
    CommentResponse,
    LikeResponse,
    LoginResponse,
    PostResponse,
    SearchResponse,
    ServerErrorEnvelope,
    UserResponse,
    ValidationErrorEnvelope,
    ValidationErrorItem,
)

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "CreateCommentRequest",
    "ApiResponse",
    "AuthorResponse",
    "CategoryResponse",
    "CommentResponse",
    "LikeResponse",
    "LoginResponse",
    "PostResponse",
    "SearchResponse",
    "ServerErrorEnvelope",
    "UserResponse",
    "ValidationErrorEnvelope",
    "ValidationErrorItem",
]
