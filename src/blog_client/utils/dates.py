"""Timestamp helpers for ordering feeds."""

from collections.abc import Iterable
from datetime import datetime, timezone

from blog_client.entities import Post


def to_timestamp(value: str | None) -> float:
    """Parse an ISO-8601 timestamp into Unix seconds.

    Naive values are taken as UTC. Empty or unparseable values map to 0.0 so
    they sort after every dated post.
    """
    if not value:
        return 0.0
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def newest_first(posts: Iterable[Post]) -> list[Post]:
    """Sort posts by creation time, newest first (stable for ties)."""
    return sorted(posts, key=lambda post: to_timestamp(post.created_at), reverse=True)
