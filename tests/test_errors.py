"""
Tests for HTTP error classification.
"""

import json

import pytest

from blog_client.errors import (
    ERROR_FILE_TOO_LARGE,
    ERROR_FILE_TYPE_NOT_ALLOWED,
    ERROR_FORBIDDEN,
    ERROR_INVALID_REQUEST,
    ERROR_KEYWORD_REQUIRED,
    ERROR_NOT_FOUND,
    ERROR_PHOTO_REQUIRED,
    ERROR_SERVER,
    ERROR_UNAUTHORIZED,
    ERROR_UNKNOWN,
    ERROR_UPLOAD_FAILED,
    ERROR_VALIDATION,
    classify_http_error,
    network_error,
)


def validation_body(*messages: str, message: str | None = "Validation error") -> str:
    return json.dumps(
        {
            "success": False,
            "message": message,
            "data": [
                {"type": "field", "value": "", "msg": msg, "path": "title", "location": "body"}
                for msg in messages
            ],
        }
    )


def server_body(data: str | None, message: str | None = "Internal Server Error") -> str:
    return json.dumps({"success": False, "message": message, "data": data})


@pytest.mark.parametrize("code", [302, 405, 409, 418, 429, 502, 503])
def test_unlisted_codes_mention_the_code(code):
    """Any status without a dedicated rule embeds the numeric code."""
    message = classify_http_error(code, "upstream exploded")
    assert str(code) in message
    assert "upstream exploded" in message


def test_unlisted_code_without_body():
    message = classify_http_error(502, "")
    assert message == "Terjadi kesalahan: HTTP 502. Pesan: Tidak ada detail."
    assert classify_http_error(502, None) == message


def test_422_surfaces_first_validation_message():
    body = validation_body("Title wajib diisi", "Content wajib diisi")
    assert classify_http_error(422, body) == "Validasi gagal: Title wajib diisi"


def test_422_envelope_without_messages():
    body = validation_body()
    assert classify_http_error(422, body) == f"Validasi gagal: {ERROR_VALIDATION}"


@pytest.mark.parametrize("body", ["", None, "<html>Bad</html>", '{"success": false}'])
def test_422_unparseable_body(body):
    assert classify_http_error(422, body) == ERROR_VALIDATION


def test_400_file_type_marker_wins_over_envelope():
    """The file-type marker overrides whatever else the body says."""
    body = validation_body("Error: File type not allowed", message="Bad request")
    assert classify_http_error(400, body) == ERROR_FILE_TYPE_NOT_ALLOWED
    assert classify_http_error(400, "FILE TYPE NOT ALLOWED!") == ERROR_FILE_TYPE_NOT_ALLOWED


def test_400_required_field_markers():
    assert classify_http_error(400, "photo wajib diisi") == ERROR_PHOTO_REQUIRED
    assert classify_http_error(400, "Keyword pencarian wajib diisi") == ERROR_KEYWORD_REQUIRED


def test_400_first_validation_message():
    body = validation_body("Password minimal 8 karakter")
    assert classify_http_error(400, body) == "Password minimal 8 karakter"


def test_400_falls_back_to_envelope_message():
    body = validation_body(message="Kategori tidak valid")
    assert classify_http_error(400, body) == "Kategori tidak valid"


@pytest.mark.parametrize("body", ["", None, "not json", validation_body(message=None)])
def test_400_generic_message(body):
    assert classify_http_error(400, body) == ERROR_INVALID_REQUEST


@pytest.mark.parametrize(
    "code,expected",
    [
        (401, ERROR_UNAUTHORIZED),
        (403, ERROR_FORBIDDEN),
        (404, ERROR_NOT_FOUND),
        (413, ERROR_FILE_TOO_LARGE),
    ],
)
def test_fixed_messages(code, expected):
    assert classify_http_error(code, '{"success": false, "message": "ignored"}') == expected
    assert classify_http_error(code, "") == expected


def test_500_file_type_in_data():
    body = server_body("MulterError: File type not allowed")
    assert classify_http_error(500, body) == ERROR_FILE_TYPE_NOT_ALLOWED


def test_500_upload_failure_in_data():
    body = server_body("Failed to upload file to storage")
    assert classify_http_error(500, body) == ERROR_UPLOAD_FAILED


def test_500_envelope_message():
    assert classify_http_error(500, server_body("stack trace")) == "Internal Server Error"
    assert classify_http_error(500, server_body(None, message=None)) == ERROR_UNKNOWN


@pytest.mark.parametrize("body", ["", None, "Gateway timeout", '{"data": {"nested": 1}}'])
def test_500_unparseable_body(body):
    assert classify_http_error(500, body) == ERROR_SERVER


def test_network_error_prefix():
    assert network_error(OSError("Connection refused")) == "Kesalahan jaringan: Connection refused"
