"""Search result domain entity."""

from dataclasses import dataclass, field

from .category import Category
from .post import Post
from .user import User


@dataclass(frozen=True)
class SearchResult:
    """Users, categories and posts matching one keyword."""

    users: list[User] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.users or self.categories or self.posts)
