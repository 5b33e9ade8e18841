"""User-facing error messages and HTTP error classification.

``classify_http_error`` turns a failed response into one message string. Each
status code owns an ordered list of matchers; a matcher looks at the body
(raw text plus whichever envelope it parses into) and returns a message or
``None``. The first message wins, and every list ends with a matcher that
always answers, so classification never raises.
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property

from pydantic import ValidationError

from blog_client.dto import ServerErrorEnvelope, ValidationErrorEnvelope

# Messages shown to the user (the API and its audience are Indonesian)
ERROR_UNAUTHORIZED = "Sesi Anda telah berakhir. Silakan login kembali."
ERROR_NETWORK = "Kesalahan jaringan"
ERROR_UNKNOWN = "Terjadi kesalahan yang tidak diketahui"
ERROR_VALIDATION = "Data yang dimasukkan tidak valid"
ERROR_INVALID_REQUEST = "Permintaan tidak valid atau data input salah."
ERROR_FORBIDDEN = "Anda tidak memiliki izin untuk melakukan tindakan ini."
ERROR_NOT_FOUND = "Sumber daya tidak ditemukan."
ERROR_FILE_TOO_LARGE = "File terlalu besar (maksimal 10MB)."
ERROR_SERVER = "Terjadi kesalahan pada server. Coba lagi nanti."
ERROR_FILE_TYPE_NOT_ALLOWED = "Tipe file tidak diizinkan. Gunakan JPG, JPEG, atau PNG"
ERROR_PHOTO_REQUIRED = "Gambar wajib diupload"
ERROR_KEYWORD_REQUIRED = "Keyword pencarian wajib diisi"
ERROR_UPLOAD_FAILED = "Gagal mengunggah file ke server."
ERROR_NO_DETAIL = "Tidak ada detail."

VALIDATION_FAILED_LABEL = "Validasi gagal"

ERROR_FAILED_LOAD_POST = "Gagal memuat postingan"
ERROR_POST_NOT_FOUND = "Postingan tidak ditemukan"
ERROR_POST_UPDATE_FAILED = "Gagal memperbarui postingan"
ERROR_POST_DELETE_FAILED = "Gagal menghapus postingan"

# Markers the server puts in raw error text
FILE_TYPE_MARKER = "file type not allowed"
PHOTO_REQUIRED_MARKER = "photo wajib diisi"
KEYWORD_REQUIRED_MARKER = "keyword pencarian wajib diisi"
UPLOAD_FAILED_MARKER = "failed to upload file"


@dataclass(frozen=True)
class ErrorBody:
    """Raw error body with lazily parsed envelopes."""

    raw: str

    @property
    def is_empty(self) -> bool:
        return not self.raw

    def contains(self, marker: str) -> bool:
        return marker in self.raw.lower()

    @cached_property
    def validation(self) -> ValidationErrorEnvelope | None:
        if self.is_empty:
            return None
        try:
            return ValidationErrorEnvelope.model_validate_json(self.raw)
        except ValidationError:
            return None

    @cached_property
    def server_error(self) -> ServerErrorEnvelope | None:
        if self.is_empty:
            return None
        try:
            return ServerErrorEnvelope.model_validate_json(self.raw)
        except ValidationError:
            return None


Matcher = Callable[[ErrorBody], str | None]


def _fixed(message: str) -> Matcher:
    return lambda body: message


def _marker(marker: str, message: str) -> Matcher:
    return lambda body: message if body.contains(marker) else None


def _first_validation_message(body: ErrorBody) -> str | None:
    envelope = body.validation
    if envelope is None:
        return None
    for item in envelope.data:
        if item.msg:
            return item.msg
    return None


def _validation_envelope_message(body: ErrorBody) -> str | None:
    envelope = body.validation
    if envelope is None:
        return None
    return envelope.message or None


def _labelled_validation_message(body: ErrorBody) -> str | None:
    if body.validation is None:
        return None
    first = _first_validation_message(body)
    return f"{VALIDATION_FAILED_LABEL}: {first or ERROR_VALIDATION}"


def _server_data_marker(marker: str, message: str) -> Matcher:
    def match(body: ErrorBody) -> str | None:
        envelope = body.server_error
        if envelope is None or not envelope.data:
            return None
        return message if marker in envelope.data.lower() else None

    return match


def _server_envelope_message(body: ErrorBody) -> str | None:
    envelope = body.server_error
    if envelope is None:
        return None
    return envelope.message or ERROR_UNKNOWN


def _generic(code: int) -> Matcher:
    return lambda body: (
        f"Terjadi kesalahan: HTTP {code}. Pesan: {body.raw or ERROR_NO_DETAIL}"
    )


_MATCHERS: dict[int, list[Matcher]] = {
    400: [
        _marker(FILE_TYPE_MARKER, ERROR_FILE_TYPE_NOT_ALLOWED),
        _marker(PHOTO_REQUIRED_MARKER, ERROR_PHOTO_REQUIRED),
        _marker(KEYWORD_REQUIRED_MARKER, ERROR_KEYWORD_REQUIRED),
        _first_validation_message,
        _validation_envelope_message,
        _fixed(ERROR_INVALID_REQUEST),
    ],
    401: [_fixed(ERROR_UNAUTHORIZED)],
    403: [_fixed(ERROR_FORBIDDEN)],
    404: [_fixed(ERROR_NOT_FOUND)],
    413: [_fixed(ERROR_FILE_TOO_LARGE)],
    422: [
        _labelled_validation_message,
        _fixed(ERROR_VALIDATION),
    ],
    500: [
        _server_data_marker(FILE_TYPE_MARKER, ERROR_FILE_TYPE_NOT_ALLOWED),
        _server_data_marker(UPLOAD_FAILED_MARKER, ERROR_UPLOAD_FAILED),
        _server_envelope_message,
        _fixed(ERROR_SERVER),
    ],
}


def classify_http_error(status_code: int, body: str | None) -> str:
    """Translate a failed HTTP response into a user-facing message.

    Args:
        status_code: HTTP status code of the response
        body: Raw response body (may be empty or not JSON)

    Returns:
        The message of the first matcher that answers for this status code.
        Codes without a dedicated list get a message embedding the code and
        the raw body.
    """
    error_body = ErrorBody(raw=body or "")
    matchers = _MATCHERS.get(status_code, [_generic(status_code)])
    for matcher in matchers:
        message = matcher(error_body)
        if message is not None:
            return message
    return _generic(status_code)(error_body)


def network_error(exc: BaseException) -> str:
    """Message for a transport-level failure."""
    return f"{ERROR_NETWORK}: {exc}"


def unknown_error(exc: BaseException) -> str:
    """Message for an unexpected failure (e.g. malformed success body)."""
    return f"{ERROR_UNKNOWN}: {exc}"
