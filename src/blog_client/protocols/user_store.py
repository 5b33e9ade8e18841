"""Current-user store protocol.

Defines the interface for the local cache of the logged-in user.

Implementations can include:
- JSON file on disk (default, ``JsonUserStore``)
- Keyring / OS credential store
- In-memory store for tests
"""

from typing import Protocol, runtime_checkable

from blog_client.entities import AuthSession


@runtime_checkable
class UserStore(Protocol):
    """Protocol for the single-session current-user cache."""

    def save(self, session: AuthSession) -> None:
        """Replace the cached session."""
        ...

    def load(self) -> AuthSession | None:
        """Return the cached session, or None if nobody is logged in."""
        ...

    def clear(self) -> None:
        """Forget the cached session."""
        ...
