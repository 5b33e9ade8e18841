"""Utility modules for the blog client."""

from .dates import newest_first, to_timestamp
from .images import ImageProblem, ImageUpload, check_image, read_image

__all__ = [
    "ImageProblem",
    "ImageUpload",
    "check_image",
    "newest_first",
    "read_image",
    "to_timestamp",
]
