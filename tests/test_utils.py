"""
Tests for timestamp parsing, feed ordering, photo checks and result states.
"""

import pytest

from blog_client.entities import Post
from blog_client.resource import Failed, Ok, Pending, resource_states
from blog_client.utils import ImageProblem, check_image, newest_first, read_image, to_timestamp


def make_post(post_id: str, created_at: str) -> Post:
    return Post(
        id=post_id,
        title=post_id,
        content="",
        author="",
        author_id="",
        author_username="",
        category="",
        category_id="",
        created_at=created_at,
        updated_at=created_at,
    )


def test_to_timestamp_formats():
    assert to_timestamp("1970-01-01T00:00:10Z") == 10.0
    assert to_timestamp("1970-01-01T00:00:10.000Z") == 10.0
    assert to_timestamp("1970-01-01T01:00:10+01:00") == 10.0
    assert to_timestamp("1970-01-01T00:00:10") == 10.0


@pytest.mark.parametrize("value", [None, "", "kemarin", "2025-13-45"])
def test_to_timestamp_invalid(value):
    assert to_timestamp(value) == 0.0


def test_newest_first():
    posts = [
        make_post("t2", "2025-06-11T08:00:00Z"),
        make_post("t1", "2025-06-10T08:00:00Z"),
        make_post("t3", "2025-06-12T08:00:00Z"),
    ]
    assert [p.id for p in newest_first(posts)] == ["t3", "t2", "t1"]


def test_check_image(tmp_path):
    jpeg = tmp_path / "a.JPEG"
    jpeg.write_bytes(b"12345")
    png = tmp_path / "b.png"
    png.write_bytes(b"123456")
    webp = tmp_path / "c.webp"
    webp.write_bytes(b"1")

    assert check_image(jpeg, max_size=5) is None
    assert check_image(png, max_size=5) is ImageProblem.TOO_LARGE
    assert check_image(webp, max_size=5) is ImageProblem.BAD_TYPE
    assert check_image(tmp_path, max_size=5) is ImageProblem.INVALID
    assert check_image(tmp_path / "nope.png", max_size=5) is ImageProblem.INVALID


def test_read_image(photo):
    upload = read_image(photo)

    assert upload.mime_type == "image/jpeg"
    assert upload.as_multipart() == {"photo": ("photo.jpg", photo.read_bytes(), "image/jpeg")}


def test_resource_flags():
    assert Pending().is_pending
    assert Ok([1]).is_ok and Ok([1]).value == [1]
    assert Failed("x").is_failed and not Failed("x").is_ok


@pytest.mark.asyncio
async def test_resource_states_yields_pending_then_result():
    async def call():
        return Ok(42)

    states = [state async for state in resource_states(call())]

    assert states == [Pending(), Ok(42)]
