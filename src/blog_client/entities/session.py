"""Authenticated session domain entity."""

from dataclasses import dataclass

from .user import User


@dataclass(frozen=True)
class AuthSession:
    """The logged-in user and the bearer token issued at login."""

    user: User
    access_token: str
