"""Access token requests against an OAuth2 token endpoint.

:func:`request_access_token` performs the HTTP exchange for an already
built form body; :func:`get_access_token` runs the whole pipeline for a
grant configuration::

    config --validate--> resolve credentials --> build body --> POST

The request is sent with ``Authorization: Basic`` client authentication
(:rfc:`6749` section 2.3.1). Non-200 answers are normalised into
:class:`~oauth_tooling.exceptions.TokenError` following the error shape
of :rfc:`6749` section 5.2, falling back to the raw body when a provider
does not follow it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from oauth_tooling.client.transport import open_http_client
from oauth_tooling.config import validate_oauth_config
from oauth_tooling.credentials import CredentialsReader, resolve_credentials
from oauth_tooling.exceptions import (
    ConfigurationError,
    TokenError,
    TransportError,
    TransportUnreachableError,
)
from oauth_tooling.grants import build_body_parameters, get_basic_auth_header_value
from oauth_tooling.log import Logger, safe_logger
from oauth_tooling.models import OAuthConfig, Token, TransportSettings
from oauth_tooling.urls import build_access_token_url

OAUTH_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _token_error(response: httpx.Response, endpoint: str) -> TokenError:
    """Normalise a non-200 token response into a :class:`TokenError`."""
    status = response.status_code
    try:
        body: Any = response.json()
    except ValueError as exc:
        # Keep the parse failure itself as the error value.
        error = TokenError(error=exc, status=status, endpoint=endpoint)
        error.__cause__ = exc
        return error

    if isinstance(body, dict):
        return TokenError(
            error=body.get("error") or body,
            error_description=body.get("error_description") or None,
            status=status,
            endpoint=endpoint,
        )
    return TokenError(error=body, status=status, endpoint=endpoint)


async def request_access_token(
    body: Mapping[str, str],
    client_id: str,
    client_secret: str,
    access_token_endpoint: str,
    query_params: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[TransportSettings] = None,
) -> Token:
    """POST *body* to the token endpoint and return the parsed token.

    Args:
        body: Form fields, typically from
            :func:`~oauth_tooling.grants.build_body_parameters`.
        client_id: Client id for Basic authentication.
        client_secret: Client secret for Basic authentication.
        access_token_endpoint: Token endpoint URL.
        query_params: Optional query parameters appended to the endpoint.
        logger: Receives ``debug`` on success and ``error`` on failure.
        client: Optional caller-owned HTTP client.
        settings: Transport settings used when *client* is ``None``.

    Returns:
        The provider's JSON object, unmodified.

    Raises:
        ConfigurationError: *access_token_endpoint* is not a valid URL.
        TokenError: The endpoint answered with a status other than 200.
        TransportUnreachableError: The request did not complete.
        TransportError: A 200 answer did not carry a JSON object.
    """
    log = safe_logger(logger)
    url = build_access_token_url(access_token_endpoint, query_params)
    headers = {
        "Authorization": get_basic_auth_header_value(client_id, client_secret),
        "Content-Type": OAUTH_CONTENT_TYPE,
    }
    message = f"Error requesting access token from {access_token_endpoint}"

    try:
        async with open_http_client(client, settings) as http:
            response = await http.post(url, data=dict(body), headers=headers)
    except httpx.InvalidURL as exc:
        log.error(f"Unsuccessful request to {access_token_endpoint}", exc)
        raise ConfigurationError(f"Invalid endpoint URL: {access_token_endpoint}") from exc
    except httpx.HTTPError as exc:
        log.error(f"Unsuccessful request to {access_token_endpoint}", exc)
        raise TransportUnreachableError(message, cause=exc) from exc

    if response.status_code != httpx.codes.OK:
        error = _token_error(response, access_token_endpoint)
        log.error(f"Unsuccessful request to {access_token_endpoint}", error)
        raise error

    try:
        token = response.json()
    except ValueError as exc:
        log.error(f"Unsuccessful request to {access_token_endpoint}", exc)
        raise TransportError(message, cause=exc) from exc

    if not isinstance(token, dict):
        exc = ValueError(f"expected a JSON object, got {type(token).__name__}")
        log.error(f"Unsuccessful request to {access_token_endpoint}", exc)
        raise TransportError(message, cause=exc) from exc

    log.debug(f"Successful request to {access_token_endpoint}")
    return token


async def get_access_token(
    config: OAuthConfig,
    logger: Optional[Logger] = None,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[TransportSettings] = None,
    reader: Optional[CredentialsReader] = None,
) -> Token:
    """Request a token for the grant described by *config*.

    Args:
        config: A grant configuration, e.g. from
            :func:`~oauth_tooling.config.parse_oauth_config`.
        logger: Optional :class:`~oauth_tooling.log.Logger`.
        client: Optional caller-owned HTTP client.
        settings: Transport settings used when *client* is ``None``.
        reader: Optional credentials file reader.

    Returns:
        The provider's token object.

    Raises:
        ConfigurationError: Before any I/O, if *config* is unusable.
        CredentialSourceError: If a credentials file is missing or malformed.
        TokenError: If the provider rejects the request.
        TransportError: On network failure or a malformed response.

    Example::

        config = parse_oauth_config({
            "grant_type": "client_credentials",
            "access_token_endpoint": "https://auth.example.com/token",
            "credentials": {"kind": "directory", "path": "/meta/credentials"},
            "scopes": ["read"],
        })
        token = await get_access_token(config)
    """
    validate_oauth_config(config)
    credentials = await resolve_credentials(config, reader=reader)
    body = build_body_parameters(config, credentials)
    return await request_access_token(
        body,
        credentials.client_id,
        credentials.client_secret,
        config.access_token_endpoint,
        query_params=config.query_params,
        logger=logger,
        client=client,
        settings=settings,
    )
