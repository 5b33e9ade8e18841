"""Request DTOs for JSON endpoints.

Multipart endpoints (create/update post) are built by the HTTP client.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Request DTO for account registration (server expects snake_case confirm)."""

    fullname: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)


class CreateCommentRequest(BaseModel):
    content: str = Field(..., min_length=1)
