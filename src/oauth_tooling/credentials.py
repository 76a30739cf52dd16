"""Credential resolution from a credentials directory or inline configuration.

:func:`resolve_credentials` turns the ``credentials`` section of a grant
configuration into a :class:`~oauth_tooling.models.ResolvedCredentials`.
Client secrets are always needed; user secrets only for the password grant.

For a :class:`~oauth_tooling.models.DirectoryCredentials` source the two
files are read concurrently::

    <path>/client.json   {"client_id": "...", "client_secret": "..."}
    <path>/user.json     {"application_username": "...", "application_password": "..."}

File access goes through a :data:`CredentialsReader` so callers and tests
can substitute their own secret store.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from oauth_tooling.config import validate_oauth_config
from oauth_tooling.exceptions import (
    CredentialFileNotFoundError,
    CredentialFileParseError,
)
from oauth_tooling.models import (
    DirectoryCredentials,
    InlineCredentials,
    OAuthConfig,
    OAuthGrantType,
    ResolvedCredentials,
)

CLIENT_JSON = "client.json"
USER_JSON = "user.json"

CredentialsReader = Callable[[Path, str], Awaitable[dict[str, Any]]]
"""``reader(directory, file_name)`` returning the file's JSON object."""


def _read_json_object(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CredentialFileNotFoundError(f"Credentials file not found: {path}") from exc
    except OSError as exc:
        raise CredentialFileNotFoundError(
            f"Credentials file could not be read: {path}: {exc}"
        ) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CredentialFileParseError(
            f"Credentials file is not valid JSON: {path}: {exc}"
        ) from exc
    if not isinstance(data, dict):
        raise CredentialFileParseError(f"Credentials file must contain a JSON object: {path}")
    return data


async def read_credentials_file(directory: Path, name: str) -> dict[str, Any]:
    """Read ``directory/name`` as a JSON object without blocking the event loop.

    Raises:
        CredentialFileNotFoundError: If the file is missing or unreadable.
        CredentialFileParseError: If the content is not a JSON object.
    """
    return await asyncio.to_thread(_read_json_object, Path(directory) / name)


def _require(data: dict[str, Any], key: str, source: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise CredentialFileParseError(f"'{key}' missing from credentials file {source}")
    return value


def _client_fields(data: dict[str, Any], source: str) -> dict[str, str]:
    return {
        "client_id": _require(data, "client_id", source),
        "client_secret": _require(data, "client_secret", source),
    }


def _user_fields(data: dict[str, Any], source: str) -> dict[str, str]:
    return {
        "application_username": _require(data, "application_username", source),
        "application_password": _require(data, "application_password", source),
    }


async def _from_directory(
    source: DirectoryCredentials,
    needs_user: bool,
    reader: CredentialsReader,
) -> dict[str, str]:
    client_path = str(source.path / CLIENT_JSON)
    if not needs_user:
        return _client_fields(await reader(source.path, CLIENT_JSON), client_path)

    client_data, user_data = await asyncio.gather(
        reader(source.path, CLIENT_JSON),
        reader(source.path, USER_JSON),
    )
    return {
        **_user_fields(user_data, str(source.path / USER_JSON)),
        **_client_fields(client_data, client_path),
    }


def _from_inline(source: InlineCredentials, needs_user: bool) -> dict[str, str]:
    fields = {"client_id": source.client_id, "client_secret": source.client_secret}
    # validate_oauth_config has already rejected a password grant without these.
    if needs_user and source.username and source.password:
        fields["application_username"] = source.username
        fields["application_password"] = source.password
    return fields


async def resolve_credentials(
    config: OAuthConfig,
    reader: Optional[CredentialsReader] = None,
) -> ResolvedCredentials:
    """Resolve client (and for the password grant, user) credentials.

    A configured directory is authoritative: if one of its files cannot be
    read there is no fallback to inline values.

    Args:
        config: A grant configuration.
        reader: Coroutine used to read credential files. Defaults to
            :func:`read_credentials_file`.

    Returns:
        Freshly built :class:`~oauth_tooling.models.ResolvedCredentials`.

    Raises:
        ConfigurationError: If *config* fails :func:`validate_oauth_config`
            (including :class:`MissingFieldError` for inline password grants).
        CredentialSourceError: If a credentials file is missing or malformed.
    """
    validate_oauth_config(config)
    needs_user = config.grant_type == OAuthGrantType.PASSWORD
    source = config.credentials

    if isinstance(source, DirectoryCredentials):
        fields = await _from_directory(source, needs_user, reader or read_credentials_file)
    else:
        fields = _from_inline(source, needs_user)

    return ResolvedCredentials(**fields)
