"""Tagged result type returned by every service operation.

A call is either still ``Pending``, finished ``Ok`` with a value, or
``Failed`` with a human-readable message. Services return ``Ok`` or
``Failed``; ``Pending`` is the state a caller holds while the coroutine runs.

Usage:
    ```python
    result = await blog.get_posts_for_home(token)
    if result.is_ok:
        render(result.value)
    else:
        show_error(result.message)
    ```
"""

from collections.abc import AsyncIterator, Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Pending:
    """Request in flight."""

    is_pending = True
    is_ok = False
    is_failed = False


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying the mapped value."""

    value: T

    is_pending = False
    is_ok = True
    is_failed = False


@dataclass(frozen=True)
class Failed:
    """Failed result carrying a message suitable for the user."""

    message: str

    is_pending = False
    is_ok = False
    is_failed = True


Resource = Union[Pending, Ok[T], Failed]


async def resource_states(call: Awaitable["Resource[T]"]) -> AsyncIterator["Resource[T]"]:
    """Yield ``Pending()`` followed by the outcome of ``call``.

    Convenience for UI adapters that render a loading state first.

    Example:
        ```python
        async for state in resource_states(blog.get_categories(token)):
            screen.render(state)
        ```
    """
    yield Pending()
    yield await call
