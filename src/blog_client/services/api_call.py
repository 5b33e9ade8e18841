"""Shared request/response handling for service operations.

Runs one transport call and turns every outcome into a Resource:
non-2xx responses go through the error classifier, ``success: false``
envelopes keep the server message, transport errors get the network prefix
and malformed payloads the unknown-error prefix.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx

from blog_client.dto import ApiResponse
from blog_client.errors import classify_http_error, network_error, unknown_error
from blog_client.resource import Failed, Ok, Resource

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def execute_call(
    operation: str,
    call: Callable[[], Awaitable[httpx.Response]],
    parse: Callable[[ApiResponse], T],
    fallback: str,
    require_data: bool = False,
    status_messages: dict[int, str] | None = None,
) -> Resource[T]:
    """Perform a transport call and map its outcome.

    Args:
        operation: Name used in log lines
        call: Zero-argument coroutine factory performing the request
        parse: Maps a successful envelope to the result value
        fallback: Message when the server reports failure without one
        require_data: Fail with ``fallback`` if a successful envelope has no data
        status_messages: Per-operation overrides of classified HTTP messages

    Returns:
        Ok with the parsed value, or Failed with a user-facing message
    """
    try:
        response = await call()

        if not response.is_success:
            logger.warning("%s failed: HTTP %s", operation, response.status_code)
            if status_messages and response.status_code in status_messages:
                return Failed(status_messages[response.status_code])
            return Failed(classify_http_error(response.status_code, response.text))

        if not response.content:
            logger.warning("%s failed: empty response body", operation)
            return Failed(fallback)

        envelope = ApiResponse.model_validate_json(response.content)
        if not envelope.success:
            logger.warning("%s rejected by server: %s", operation, envelope.message)
            return Failed(envelope.message or fallback)
        if require_data and envelope.data is None:
            logger.warning("%s failed: no data in response", operation)
            return Failed(fallback)

        value = parse(envelope)
        logger.debug("%s succeeded", operation)
        return Ok(value)

    except httpx.RequestError as e:
        logger.warning("%s failed: %s", operation, type(e).__name__)
        return Failed(network_error(e))
    except ValueError as e:
        # JSON decode errors and pydantic ValidationError both land here
        logger.warning("%s failed: malformed response (%s)", operation, type(e).__name__)
        return Failed(unknown_error(e))
