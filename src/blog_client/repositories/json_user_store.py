"""JSON file cache for the logged-in user.

Holds exactly one session. The file stores the user profile and the bearer
token, so it is written with owner-only permissions.
"""

import json
import logging
import os
from dataclasses import asdict
from pathlib import Path

from blog_client.config import settings
from blog_client.entities import AuthSession, User

logger = logging.getLogger(__name__)


class JsonUserStore:
    """File-backed implementation of the UserStore protocol.

    Example:
        ```python
        store = JsonUserStore.create()
        store.save(session)
        assert store.load() == session
        store.clear()
        ```
    """

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize the store.

        Args:
            path: JSON file location. Defaults to settings.user_cache_path.
        """
        self._path = Path(path or settings.user_cache_path).expanduser()

    @classmethod
    def create(cls, path: str | Path | None = None) -> "JsonUserStore":
        return cls(path=path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, session: AuthSession) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"user": asdict(session.user), "access_token": session.access_token}
        # Owner-only from creation; chmod covers a file left by an older save.
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            os.chmod(self._path, 0o600)
            f.write(json.dumps(payload, ensure_ascii=False))

    def load(self) -> AuthSession | None:
        """Read the cached session.

        Returns:
            The session, or None if the file is missing or unreadable
        """
        if not self._path.exists():
            return None
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            return AuthSession(user=User(**payload["user"]), access_token=payload["access_token"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable user cache %s: %s", self._path, e)
            return None

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
