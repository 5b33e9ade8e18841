"""Like toggle outcome."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LikeStatus:
    """State of a post's like after a toggle.

    Attributes:
        post_id: The toggled post
        is_liked: Whether the post is now liked by the caller
        likes_count: New like total, or None when the server did not report it
                     (callers then adjust their own counter from is_liked)
    """

    post_id: str
    is_liked: bool
    likes_count: int | None = None
