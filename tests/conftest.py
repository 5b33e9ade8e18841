"""
Shared fixtures for blog client tests.
"""

from unittest.mock import AsyncMock

import pytest

from blog_client.repositories import HttpBlogApi, JsonUserStore


@pytest.fixture
def fake_api() -> AsyncMock:
    """A BlogApi double whose methods are AsyncMocks (call counts, return values)."""
    return AsyncMock(spec=HttpBlogApi)


@pytest.fixture
def user_store(tmp_path) -> JsonUserStore:
    """A JsonUserStore writing into the test's temp directory."""
    return JsonUserStore(path=tmp_path / "session" / "current_user.json")


@pytest.fixture
def photo(tmp_path):
    """A small valid JPEG-named file."""
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return path
