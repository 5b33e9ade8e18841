"""User domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity for a blog account.

    Attributes:
        id: Server-assigned user id
        username: Unique handle used to log in
        fullname: Display name
        email: Account email address
        image: Avatar URL, or None when the user has none
        created_at: ISO-8601 creation timestamp
        updated_at: ISO-8601 last update timestamp
    """

    id: str
    username: str
    fullname: str
    email: str
    image: str | None = None
    created_at: str = ""
    updated_at: str = ""
