"""Client-side checks for photo uploads.

The server accepts JPG/JPEG/PNG up to a size limit under the multipart
field ``photo``. Checking locally avoids uploading a file that will be
rejected anyway.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

PHOTO_FIELD = "photo"

MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
}


class ImageProblem(Enum):
    """Why a photo cannot be uploaded."""

    INVALID = "invalid"
    TOO_LARGE = "too_large"
    BAD_TYPE = "bad_type"


@dataclass(frozen=True)
class ImageUpload:
    """A validated photo ready to be sent as a multipart part."""

    filename: str
    content: bytes
    mime_type: str

    def as_multipart(self) -> dict[str, tuple[str, bytes, str]]:
        """Return the httpx ``files=`` mapping for this photo."""
        return {PHOTO_FIELD: (self.filename, self.content, self.mime_type)}


def check_image(path: Path, max_size: int) -> ImageProblem | None:
    """Validate a photo on disk.

    Args:
        path: File to upload
        max_size: Maximum size in bytes

    Returns:
        The first problem found, or None if the file can be uploaded
    """
    if not path.is_file():
        return ImageProblem.INVALID
    size = path.stat().st_size
    if size == 0:
        return ImageProblem.INVALID
    if size > max_size:
        return ImageProblem.TOO_LARGE
    if path.suffix.lower().lstrip(".") not in MIME_TYPES:
        return ImageProblem.BAD_TYPE
    return None


def read_image(path: Path) -> ImageUpload:
    """Load a photo that passed ``check_image``.

    Raises:
        OSError: If the file cannot be read
    """
    extension = path.suffix.lower().lstrip(".")
    return ImageUpload(
        filename=path.name,
        content=path.read_bytes(),
        mime_type=MIME_TYPES.get(extension, "application/octet-stream"),
    )
