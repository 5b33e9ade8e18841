"""Like/unlike status inference from the toggle-like response.

The toggle endpoint reports the new state only through its free-text
message (e.g. "Like berhasil ditambahkan" / "Like berhasil dihapus") and
whether it returned a like record. Rules, first match wins:

1. message has an "added" marker                     -> liked
2. message has a "success" marker but no "removed"   -> liked
3. message has a "removed"/"canceled" marker         -> not liked
4. otherwise                                         -> liked iff data present

Callers should prefer a structured flag from the server when one is sent
(see ``LikeResponse.explicit_status``).
"""

ADDED_MARKERS = ("ditambahkan", "added")
SUCCESS_MARKERS = ("berhasil", "success")
REMOVED_MARKERS = ("dihapus", "dibatalkan", "removed", "canceled", "cancelled")


def _has_any(text: str, markers: tuple[str, ...]) -> bool:
    return any(marker in text for marker in markers)


def infer_like_status(message: str | None, has_data: bool) -> bool:
    """Infer whether a post is liked after a toggle.

    Args:
        message: Success message from the server (any case)
        has_data: Whether the response carried a data payload

    Returns:
        True if the post is now liked
    """
    text = (message or "").lower()
    if _has_any(text, ADDED_MARKERS):
        return True
    if _has_any(text, SUCCESS_MARKERS) and not _has_any(text, REMOVED_MARKERS):
        return True
    if _has_any(text, REMOVED_MARKERS):
        return False
    return has_data
