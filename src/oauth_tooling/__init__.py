"""oauth_tooling -- acquire and validate OAuth2 access tokens.

The package covers the client side of four grant types (password,
client credentials, authorization code, refresh token), resolving client
and user secrets from a credentials directory or from inline
configuration::

    from oauth_tooling import get_access_token, parse_oauth_config

    config = parse_oauth_config({
        "grant_type": "password",
        "access_token_endpoint": "https://auth.example.com/oauth2/access_token",
        "credentials": {"kind": "directory", "path": "/meta/credentials"},
        "scopes": ["uid"],
    })
    token = await get_access_token(config)

Modules:
    models: Pydantic models for grant configurations and credential sources.
    config: Parsing, validation and environment overrides.
    credentials: Credential resolution (directory files or inline fields).
    grants: Grant-specific form bodies and Basic authentication.
    urls: Token endpoint and authorization URL construction.
    client: Token and token-info HTTP exchanges.
    log: Logger protocol and null logger.
    exceptions: Exception hierarchy with exit-code mapping.
    testing: Mock provider endpoints for tests.
"""

__version__ = "0.1.0"

from oauth_tooling.client import get_access_token, get_token_info, request_access_token
from oauth_tooling.config import load_oauth_config, parse_oauth_config
from oauth_tooling.credentials import resolve_credentials
from oauth_tooling.exceptions import (
    ConfigurationError,
    CredentialFileNotFoundError,
    CredentialFileParseError,
    CredentialSourceError,
    InvalidGrantTypeError,
    MissingFieldError,
    OAuthToolingError,
    TokenError,
    TokenInfoError,
    TransportError,
    TransportUnreachableError,
)
from oauth_tooling.grants import build_body_parameters, get_basic_auth_header_value
from oauth_tooling.log import Logger, NullLogger, StdlibLogger
from oauth_tooling.models import (
    AuthorizationCodeGrantConfig,
    ClientCredentialsGrantConfig,
    DirectoryCredentials,
    InlineCredentials,
    OAuthConfig,
    OAuthGrantType,
    PasswordGrantConfig,
    RefreshGrantConfig,
    ResolvedCredentials,
    Token,
    TransportSettings,
)
from oauth_tooling.urls import create_auth_code_request_uri

__all__ = [
    "AuthorizationCodeGrantConfig",
    "ClientCredentialsGrantConfig",
    "ConfigurationError",
    "CredentialFileNotFoundError",
    "CredentialFileParseError",
    "CredentialSourceError",
    "DirectoryCredentials",
    "InlineCredentials",
    "InvalidGrantTypeError",
    "Logger",
    "MissingFieldError",
    "NullLogger",
    "OAuthConfig",
    "OAuthGrantType",
    "OAuthToolingError",
    "PasswordGrantConfig",
    "RefreshGrantConfig",
    "ResolvedCredentials",
    "StdlibLogger",
    "Token",
    "TokenError",
    "TokenInfoError",
    "TransportError",
    "TransportSettings",
    "TransportUnreachableError",
    "build_body_parameters",
    "create_auth_code_request_uri",
    "get_access_token",
    "get_basic_auth_header_value",
    "get_token_info",
    "load_oauth_config",
    "parse_oauth_config",
    "request_access_token",
    "resolve_credentials",
]
