"""Grant-specific form bodies for the token endpoint.

:func:`build_body_parameters` maps a grant configuration and its resolved
credentials to the ``application/x-www-form-urlencoded`` fields of
:rfc:`6749`:

==================== ==================================================
grant                fields
==================== ==================================================
password             ``grant_type``, ``username``, ``password``
client_credentials   ``grant_type``
authorization_code   ``grant_type``, ``code``, ``redirect_uri``
refresh_token        ``grant_type``, ``refresh_token``
==================== ==================================================

``scope`` is added whenever scopes are configured (an empty list gives an
empty ``scope``), then ``body_params`` are merged on top and win on key
collisions.
"""

from __future__ import annotations

import base64

from oauth_tooling.exceptions import InvalidGrantTypeError, MissingFieldError
from oauth_tooling.models import (
    AuthorizationCodeGrantConfig,
    ClientCredentialsGrantConfig,
    OAuthConfig,
    PasswordGrantConfig,
    RefreshGrantConfig,
    ResolvedCredentials,
)


def build_body_parameters(
    config: OAuthConfig, credentials: ResolvedCredentials
) -> dict[str, str]:
    """Build the token request body for *config*.

    Args:
        config: A grant configuration.
        credentials: Credentials resolved for *config*.

    Returns:
        A new, insertion-ordered ``dict`` of form fields.

    Raises:
        InvalidGrantTypeError: If *config* is not one of the grant models.
        MissingFieldError: If a password grant lacks resolved user credentials.
    """
    body: dict[str, str]
    if isinstance(config, PasswordGrantConfig):
        for field in ("application_username", "application_password"):
            if getattr(credentials, field) is None:
                raise MissingFieldError(field, f"Password grant requires {field}")
        body = {
            "grant_type": config.grant_type,
            "username": credentials.application_username,
            "password": credentials.application_password,
        }
    elif isinstance(config, ClientCredentialsGrantConfig):
        body = {"grant_type": config.grant_type}
    elif isinstance(config, AuthorizationCodeGrantConfig):
        body = {
            "grant_type": config.grant_type,
            "code": config.code,
            "redirect_uri": config.redirect_uri,
        }
    elif isinstance(config, RefreshGrantConfig):
        body = {
            "grant_type": config.grant_type,
            "refresh_token": config.refresh_token,
        }
    else:
        raise InvalidGrantTypeError(f"Invalid grant type: {type(config).__name__}")

    if config.scopes is not None:
        body["scope"] = " ".join(config.scopes)

    if config.body_params:
        body.update(config.body_params)

    return body


def get_basic_auth_header_value(client_id: str, client_secret: str) -> str:
    """Return ``Basic base64(client_id:client_secret)``."""
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")
