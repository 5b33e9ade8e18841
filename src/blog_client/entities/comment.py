"""Comment domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """Domain entity for a comment on a post.

    Author fields are flattened from the embedded author object; they are
    empty when the server omits it (e.g. in create/delete responses).
    """

    id: str
    content: str
    post_id: str
    author_id: str
    author_name: str = ""
    author_username: str = ""
    author_image: str | None = None
    created_at: str = ""
    updated_at: str = ""
