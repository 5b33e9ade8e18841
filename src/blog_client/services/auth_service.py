"""Authentication service: login, registration and the cached session."""

import logging

from blog_client.dto import LoginResponse, UserResponse
from blog_client.entities import AuthSession, User
from blog_client.mappers import session_from_login, user_from_response
from blog_client.protocols import BlogApi, UserStore
from blog_client.resource import Failed, Resource

from .api_call import execute_call

logger = logging.getLogger(__name__)

ERROR_LOGIN_FAILED = "Login gagal"
ERROR_INVALID_CREDENTIALS = "Username atau password salah"
ERROR_CREDENTIALS_REQUIRED = "Username dan password wajib diisi"
ERROR_SESSION_NOT_SAVED = "Login berhasil, tetapi sesi tidak dapat disimpan"
ERROR_REGISTER_FAILED = "Registrasi gagal"
ERROR_FIELDS_REQUIRED = "Semua field wajib diisi"
ERROR_PASSWORD_MISMATCH = "Konfirmasi password tidak cocok"


class AuthService:
    """Login/registration on top of a BlogApi plus the current-user cache.

    The session returned by ``login`` is written to the UserStore; its
    ``access_token`` is what BlogService operations expect.

    Example:
        ```python
        auth = AuthService(api=HttpBlogApi.create(), store=JsonUserStore.create())
        result = await auth.login("lisvindanu", "secret")
        if result.is_ok:
            posts = await blog.get_posts_for_home(auth.current_token())
        ```
    """

    def __init__(self, api: BlogApi, store: UserStore) -> None:
        """Initialize the auth service.

        Args:
            api: Transport for the blog REST API (required).
            store: Current-user cache (required).
        """
        self._api = api
        self._store = store

    async def login(self, username: str, password: str) -> Resource[AuthSession]:
        """Log in and cache the session on success."""
        if not username.strip() or not password:
            return Failed(ERROR_CREDENTIALS_REQUIRED)

        result = await execute_call(
            "login",
            lambda: self._api.login(username.strip(), password),
            lambda envelope: session_from_login(LoginResponse.model_validate(envelope.data)),
            ERROR_LOGIN_FAILED,
            require_data=True,
            status_messages={401: ERROR_INVALID_CREDENTIALS},
        )
        if result.is_ok:
            try:
                self._store.save(result.value)
            except OSError as e:
                logger.warning("Could not save session for %s: %s", result.value.user.username, e)
                return Failed(ERROR_SESSION_NOT_SAVED)
            logger.info("Logged in as %s", result.value.user.username)
        return result

    async def register(
        self,
        fullname: str,
        email: str,
        username: str,
        password: str,
        confirm_password: str,
    ) -> Resource[User]:
        """Create an account. Does not log in."""
        fields = (fullname, email, username, password, confirm_password)
        if any(not value.strip() for value in fields):
            return Failed(ERROR_FIELDS_REQUIRED)
        if password != confirm_password:
            return Failed(ERROR_PASSWORD_MISMATCH)

        return await execute_call(
            "register",
            lambda: self._api.register(
                fullname.strip(), email.strip(), username.strip(), password, confirm_password
            ),
            lambda envelope: user_from_response(UserResponse.model_validate(envelope.data)),
            ERROR_REGISTER_FAILED,
            require_data=True,
        )

    def current_session(self) -> AuthSession | None:
        return self._store.load()

    def current_token(self) -> str | None:
        """Bearer token of the cached session, if any."""
        session = self._store.load()
        return session.access_token if session else None

    def logout(self) -> None:
        self._store.clear()
        logger.info("Logged out")
