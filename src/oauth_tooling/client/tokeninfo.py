"""Token validation against a token-info endpoint.

The endpoint is queried with ``GET <url>?access_token=<token>`` and is
expected to answer with JSON for every status: the token payload on 200,
an error object otherwise.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from oauth_tooling.client.transport import open_http_client
from oauth_tooling.exceptions import (
    ConfigurationError,
    TokenInfoError,
    TransportError,
    TransportUnreachableError,
)
from oauth_tooling.log import Logger, safe_logger
from oauth_tooling.models import Token, TransportSettings
from oauth_tooling.urls import append_query


async def get_token_info(
    token_info_url: str,
    access_token: str,
    logger: Optional[Logger] = None,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[TransportSettings] = None,
) -> Token:
    """Validate *access_token* and return the endpoint's token payload.

    Args:
        token_info_url: The token-info endpoint.
        access_token: Token to validate.
        logger: Receives ``debug`` on success and ``warn`` on failure.
        client: Optional caller-owned HTTP client.
        settings: Transport settings used when *client* is ``None``.

    Returns:
        The parsed JSON payload of a 200 response.

    Raises:
        ConfigurationError: *token_info_url* is not a valid URL.
        TransportUnreachableError: The endpoint could not be reached.
        TransportError: A 200 answer did not carry a JSON object, or the
            body was not JSON.
        TokenInfoError: The endpoint answered with a non-200 status.
    """
    log = safe_logger(logger)
    url = append_query(token_info_url, {"access_token": access_token})
    message = f"Error validating token via {token_info_url}"

    try:
        async with open_http_client(client, settings) as http:
            response = await http.get(url)
    except httpx.InvalidURL as exc:
        log.warn(message, exc)
        raise ConfigurationError(f"Invalid endpoint URL: {token_info_url}") from exc
    except httpx.HTTPError as exc:
        log.warn(message, exc)
        raise TransportUnreachableError(
            f"{message}: tokeninfo endpoint not reachable", cause=exc
        ) from exc

    status = response.status_code
    try:
        data: Any = response.json()
    except ValueError as exc:
        log.warn(message, exc)
        raise TransportError(message, cause=exc) from exc

    if status != httpx.codes.OK:
        log.debug(f"Unsuccessful request to {token_info_url}, Http status: {status}")
        log.warn(message)
        raise TokenInfoError(status, data, url=token_info_url)

    if not isinstance(data, dict):
        exc = ValueError(f"expected a JSON object, got {type(data).__name__}")
        log.warn(message, exc)
        raise TransportError(message, cause=exc) from exc

    log.debug(f"Successful request to {token_info_url}")
    return data
