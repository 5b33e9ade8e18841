"""
Tests for the httpx transport, using httpx.MockTransport to capture requests.
"""

import json

import httpx
import pytest
import pytest_asyncio

from blog_client.repositories import HttpBlogApi
from blog_client.services import BlogService
from blog_client.utils import ImageUpload

from .factories import TOKEN, api_response, post_json

BASE_URL = "https://blog.example.com"


class Recorder:
    """Mock transport handler that records requests and replies with one response."""

    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._response = response or api_response([])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder():
    return Recorder()


@pytest_asyncio.fixture
async def api(recorder):
    client = HttpBlogApi(base_url=BASE_URL + "/", transport=httpx.MockTransport(recorder))
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_bearer_header_and_path(api, recorder):
    await api.get_all_posts(TOKEN)

    assert recorder.last.method == "GET"
    assert str(recorder.last.url) == f"{BASE_URL}/api/posts"
    assert recorder.last.headers["Authorization"] == f"Bearer {TOKEN}"
    assert recorder.last.headers["Accept"] == "application/json"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method_name,args,http_method,path",
    [
        ("get_posts_by_author_id", ("user-1",), "GET", "/api/posts/author/user-1"),
        ("get_posts_by_category_id", ("cat-1",), "GET", "/api/posts/category/cat-1"),
        ("get_post_by_id", ("post-1",), "GET", "/api/posts/post-1"),
        ("get_categories", (), "GET", "/api/categories"),
        ("delete_post", ("post-1",), "DELETE", "/api/posts/post-1"),
        ("delete_comment", ("comment-1",), "DELETE", "/api/comments/comment-1"),
        ("toggle_like", ("post-1",), "POST", "/api/posts/post-1/like"),
    ],
)
async def test_endpoint_routing(api, recorder, method_name, args, http_method, path):
    await getattr(api, method_name)(TOKEN, *args)

    assert recorder.last.method == http_method
    assert recorder.last.url.path == path


@pytest.mark.asyncio
async def test_search_sends_keyword_param(api, recorder):
    await api.search(TOKEN, "kotlin flow")

    assert recorder.last.url.path == "/api/search"
    assert recorder.last.url.params["keyword"] == "kotlin flow"


@pytest.mark.asyncio
async def test_login_has_no_authorization_header(api, recorder):
    await api.login("lisvindanu", "rahasia123")

    assert "Authorization" not in recorder.last.headers
    assert json.loads(recorder.last.content) == {"username": "lisvindanu", "password": "rahasia123"}


@pytest.mark.asyncio
async def test_register_sends_confirm_password(api, recorder):
    await api.register("Lisvindanu", "l@example.com", "lisvindanu", "pw123456", "pw123456")

    body = json.loads(recorder.last.content)
    assert recorder.last.url.path == "/api/auth/register"
    assert body["confirm_password"] == "pw123456"


@pytest.mark.asyncio
async def test_create_comment_json_body(api, recorder):
    await api.create_comment(TOKEN, "post-1", "Mantap")

    assert recorder.last.url.path == "/api/posts/post-1/comments"
    assert json.loads(recorder.last.content) == {"content": "Mantap"}


@pytest.mark.asyncio
async def test_create_post_multipart_photo_field(api, recorder):
    photo = ImageUpload(filename="kucing.png", content=b"\x89PNG-data", mime_type="image/png")

    await api.create_post(TOKEN, "Judul", "Isi", "cat-1", photo)

    request = recorder.last
    body = request.content
    assert request.method == "POST"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="photo"; filename="kucing.png"' in body
    assert b"Content-Type: image/png" in body
    assert b'name="categoryId"' in body
    assert b"\x89PNG-data" in body


@pytest.mark.asyncio
async def test_update_post_without_photo_is_still_multipart(api, recorder):
    await api.update_post(TOKEN, "post-1", "Judul", "Isi", "cat-1")

    request = recorder.last
    assert request.method == "PUT"
    assert request.url.path == "/api/posts/post-1"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="title"' in request.content
    assert b'name="photo"' not in request.content


@pytest.mark.asyncio
async def test_status_codes_do_not_raise():
    failing = Recorder(httpx.Response(500, json={"success": False, "message": "boom"}))
    async with HttpBlogApi(base_url=BASE_URL, transport=httpx.MockTransport(failing)) as api:
        response = await api.get_all_posts(TOKEN)

    assert response.status_code == 500


@pytest.mark.asyncio
async def test_service_over_mock_transport():
    recorder = Recorder(api_response([post_json("p1", "2025-01-01T00:00:00Z")]))
    async with HttpBlogApi(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as api:
        blog = BlogService.create(api=api)

        assert (await blog.get_all_posts("")).is_failed
        assert recorder.requests == []

        result = await blog.get_all_posts(TOKEN)

    assert [p.id for p in result.value] == ["p1"]
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_transport_failure_surfaces_as_network_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async with HttpBlogApi(base_url=BASE_URL, transport=httpx.MockTransport(refuse)) as api:
        result = await BlogService.create(api=api).get_categories(TOKEN)

    assert result.is_failed
    assert result.message == "Kesalahan jaringan: Connection refused"
