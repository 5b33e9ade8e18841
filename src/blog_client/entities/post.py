"""Post domain entity."""

from dataclasses import dataclass, field

from .comment import Comment


@dataclass(frozen=True)
class Post:
    """Domain entity for a blog post.

    Attributes:
        id: Server-assigned post id
        title: Post title
        content: Post body
        image: Photo URL, if any
        author: Author display name
        author_id: Author user id
        author_username: Author handle
        author_image: Author avatar URL, if any
        category: Category name
        category_id: Category id
        created_at: ISO-8601 creation timestamp (sort key for feeds)
        updated_at: ISO-8601 last update timestamp
        likes: Number of likes
        comments: Number of comments
        is_liked: Whether the requesting user liked the post
        slug: URL slug
        comment_list: Comments, only filled by the detail endpoint
    """

    id: str
    title: str
    content: str
    author: str
    author_id: str
    author_username: str
    category: str
    category_id: str
    created_at: str
    updated_at: str
    image: str | None = None
    author_image: str | None = None
    likes: int = 0
    comments: int = 0
    is_liked: bool = False
    slug: str = ""
    comment_list: tuple[Comment, ...] = field(default_factory=tuple)
