"""
Builders for server JSON payloads and enveloped responses.
"""

from typing import Any

import httpx

TOKEN = "test-token"


def api_response(
    data: Any = None,
    message: str = "OK",
    success: bool = True,
    status_code: int = 200,
) -> httpx.Response:
    """Build a response wrapped in the server's envelope."""
    return httpx.Response(
        status_code,
        json={"success": success, "message": message, "data": data},
    )


def post_json(post_id: str, created_at: str, **overrides: Any) -> dict[str, Any]:
    """Server JSON for a post as returned by list endpoints."""
    data = {
        "id": post_id,
        "title": f"Post {post_id}",
        "content": "Isi postingan",
        "photo": f"https://cdn.example.com/{post_id}.jpg",
        "slug": f"post-{post_id}",
        "authorId": "user-1",
        "categoryId": "cat-1",
        "createdAt": created_at,
        "updatedAt": created_at,
        "author": {"id": "user-1", "username": "lisvindanu", "fullname": "Lisvindanu", "image": ""},
        "category": {"id": "cat-1", "name": "Teknologi"},
        "_count": {"Like": 3, "Comment": 2},
    }
    data.update(overrides)
    return data


def comment_json(comment_id: str = "comment-1", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": comment_id,
        "content": "Mantap!",
        "postId": "post-1",
        "authorId": "user-2",
        "createdAt": "2025-06-12T08:00:00.000Z",
        "updatedAt": "2025-06-12T08:00:00.000Z",
        "author": {"id": "user-2", "username": "budi", "fullname": "Budi Santoso", "image": None},
    }
    data.update(overrides)
    return data


def user_json(user_id: str = "user-123", **overrides: Any) -> dict[str, Any]:
    data = {
        "id": user_id,
        "username": "lisvindanu",
        "fullname": "Lisvindanu",
        "email": "lisvindanu@example.com",
        "image": "url/to/image.jpg",
        "createdAt": "2025-06-11T23:00:00Z",
        "updatedAt": "2025-06-11T23:00:00Z",
    }
    data.update(overrides)
    return data
