"""Category domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    created_at: str = ""
    updated_at: str = ""
    post_count: int = 0
