"""Canonical Pydantic models shared across all oauth_tooling modules.

The models fall into three groups:

**Credential sources** -- where client and user secrets come from:
    :class:`DirectoryCredentials` and :class:`InlineCredentials`, joined in
    the :data:`CredentialsSource` discriminated union (tag: ``kind``).

**Grant configurations** -- one model per OAuth2 grant type:
    :class:`PasswordGrantConfig`, :class:`ClientCredentialsGrantConfig`,
    :class:`AuthorizationCodeGrantConfig` and :class:`RefreshGrantConfig`,
    joined in the :data:`OAuthConfig` discriminated union (tag:
    ``grant_type``). Each model forbids unknown fields, so a field that
    belongs to another grant type is a validation error.

**Runtime values** -- :class:`ResolvedCredentials`, :class:`TransportSettings`
and the open :data:`Token` mapping returned by providers.

All models use Pydantic v2.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class OAuthGrantType(str, enum.Enum):
    """Supported grant types. Values are the wire values of ``grant_type``."""

    PASSWORD = "password"
    CLIENT_CREDENTIALS = "client_credentials"
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"


Token = dict[str, Any]
"""Parsed JSON object returned by a provider. No member is guaranteed."""


# --- Credential sources ---


class DirectoryCredentials(BaseModel):
    """Read secrets from ``client.json`` and ``user.json`` inside *path*.

    ``client.json`` holds ``client_id`` and ``client_secret``;
    ``user.json`` holds ``application_username`` and
    ``application_password`` and is only read for the password grant.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["directory"] = "directory"
    path: Path = Field(description="Directory containing client.json / user.json")


class InlineCredentials(BaseModel):
    """Secrets given directly in the configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["inline"] = "inline"
    client_id: str
    client_secret: str
    username: Optional[str] = Field(
        default=None, description="Application username (password grant only)"
    )
    password: Optional[str] = Field(
        default=None, description="Application password (password grant only)"
    )


CredentialsSource = Annotated[
    Union[DirectoryCredentials, InlineCredentials],
    Field(discriminator="kind"),
]


# --- Grant configurations ---


class _GrantConfig(BaseModel):
    """Fields shared by every grant configuration."""

    model_config = ConfigDict(extra="forbid")

    access_token_endpoint: str = Field(description="Token endpoint URL")
    credentials: CredentialsSource
    scopes: Optional[list[str]] = Field(
        default=None, description="Sent space-joined as the 'scope' field"
    )
    body_params: Optional[dict[str, str]] = Field(
        default=None, description="Extra form fields; override computed ones"
    )
    query_params: Optional[dict[str, str]] = Field(
        default=None, description="Query parameters appended to the token endpoint"
    )


class PasswordGrantConfig(_GrantConfig):
    """Resource owner password credentials grant (:rfc:`6749` section 4.3)."""

    grant_type: Literal["password"] = "password"


class ClientCredentialsGrantConfig(_GrantConfig):
    """Client credentials grant (:rfc:`6749` section 4.4)."""

    grant_type: Literal["client_credentials"] = "client_credentials"


class AuthorizationCodeGrantConfig(_GrantConfig):
    """Authorization code exchange (:rfc:`6749` section 4.1.3)."""

    grant_type: Literal["authorization_code"] = "authorization_code"
    code: str
    redirect_uri: str


class RefreshGrantConfig(_GrantConfig):
    """Refresh token grant (:rfc:`6749` section 6)."""

    grant_type: Literal["refresh_token"] = "refresh_token"
    refresh_token: str


OAuthConfig = Annotated[
    Union[
        PasswordGrantConfig,
        ClientCredentialsGrantConfig,
        AuthorizationCodeGrantConfig,
        RefreshGrantConfig,
    ],
    Field(discriminator="grant_type"),
]

GRANT_CONFIG_TYPES: tuple[type[_GrantConfig], ...] = (
    PasswordGrantConfig,
    ClientCredentialsGrantConfig,
    AuthorizationCodeGrantConfig,
    RefreshGrantConfig,
)


# --- Runtime values ---


class ResolvedCredentials(BaseModel):
    """Client and (optionally) user secrets merged for one token request.

    Built fresh for every request and never stored.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str
    application_username: Optional[str] = None
    application_password: Optional[str] = None


class TransportSettings(BaseModel):
    """Settings for the HTTP client built when the caller supplies none."""

    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
