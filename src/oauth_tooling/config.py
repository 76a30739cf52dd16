"""Configuration loading, validation and environment overrides.

This module handles everything that turns user input into the typed
models of :mod:`oauth_tooling.models`:

* **Parsing** -- :func:`parse_oauth_config` validates a plain mapping into
  one of the grant configuration models; :func:`load_oauth_config` does the
  same for a JSON file on disk.
* **Validation** -- :func:`validate_oauth_config` performs the checks that
  must pass before any file or network I/O (known grant type, non-empty
  endpoint, user credentials present for an inline password grant).
* **Environment** -- ``OAUTH_TOOLING_CREDENTIALS_DIR`` (or the conventional
  ``CREDENTIALS_DIR``) supplies a default credentials directory, and
  ``OAUTH_TOOLING_TIMEOUT`` / ``OAUTH_TOOLING_VERIFY_SSL`` feed
  :func:`resolve_transport_settings`.

Every failure is raised as :class:`~oauth_tooling.exceptions.ConfigurationError`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from oauth_tooling.exceptions import (
    ConfigurationError,
    InvalidGrantTypeError,
    MissingFieldError,
)
from oauth_tooling.models import (
    GRANT_CONFIG_TYPES,
    InlineCredentials,
    OAuthConfig,
    OAuthGrantType,
    PasswordGrantConfig,
    TransportSettings,
)

ENV_CREDENTIALS_DIR = "OAUTH_TOOLING_CREDENTIALS_DIR"
ENV_CREDENTIALS_DIR_FALLBACK = "CREDENTIALS_DIR"
ENV_TIMEOUT = "OAUTH_TOOLING_TIMEOUT"
ENV_VERIFY_SSL = "OAUTH_TOOLING_VERIFY_SSL"

_FALSE_VALUES = {"0", "false", "no", "off"}
_TRUE_VALUES = {"1", "true", "yes", "on"}

_oauth_config_adapter: TypeAdapter[OAuthConfig] = TypeAdapter(OAuthConfig)


# --- Environment ---


def default_credentials_dir() -> Optional[Path]:
    """Return the credentials directory named by the environment, if any."""
    value = os.environ.get(ENV_CREDENTIALS_DIR) or os.environ.get(
        ENV_CREDENTIALS_DIR_FALLBACK
    )
    return Path(value) if value else None


def resolve_transport_settings(**overrides: Any) -> TransportSettings:
    """Build :class:`~oauth_tooling.models.TransportSettings`.

    Precedence (highest first): keyword *overrides* that are not ``None``,
    environment variables, model defaults.

    Raises:
        ConfigurationError: If an environment value cannot be interpreted.
    """
    values: dict[str, Any] = {}

    timeout = os.environ.get(ENV_TIMEOUT, "").strip()
    if timeout:
        try:
            values["timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"{ENV_TIMEOUT} must be a number of seconds, got '{timeout}'"
            ) from exc

    verify = os.environ.get(ENV_VERIFY_SSL, "").strip().lower()
    if verify:
        if verify in _FALSE_VALUES:
            values["verify_ssl"] = False
        elif verify in _TRUE_VALUES:
            values["verify_ssl"] = True
        else:
            raise ConfigurationError(
                f"{ENV_VERIFY_SSL} must be a boolean, got '{verify}'"
            )

    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return TransportSettings.model_validate(values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid transport settings: {exc}") from exc


# --- Parsing ---


def parse_oauth_config(data: Mapping[str, Any]) -> OAuthConfig:
    """Validate *data* into the grant configuration its ``grant_type`` names.

    When *data* has no ``credentials`` entry and a credentials directory is
    set in the environment, a ``directory`` source pointing there is used.

    Args:
        data: Plain mapping, e.g. decoded JSON.

    Returns:
        One of the grant configuration models.

    Raises:
        InvalidGrantTypeError: If ``grant_type`` is missing or unknown.
        ConfigurationError: If any field is missing, malformed, or belongs
            to another grant type.
    """
    payload = dict(data)
    grant_type = payload.get("grant_type")
    if not isinstance(grant_type, str) or grant_type not in {g.value for g in OAuthGrantType}:
        raise InvalidGrantTypeError(f"Invalid grant_type: {grant_type!r}")

    if "credentials" not in payload:
        directory = default_credentials_dir()
        if directory is not None:
            payload["credentials"] = {"kind": "directory", "path": str(directory)}

    try:
        config = _oauth_config_adapter.validate_python(payload)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration for grant_type '{grant_type}': {exc}"
        ) from exc

    validate_oauth_config(config)
    return config


def load_oauth_config(path: str | Path) -> OAuthConfig:
    """Load and validate an OAuth configuration from a JSON file.

    Raises:
        ConfigurationError: If the file is missing, is not valid JSON, is
            not a JSON object, or fails validation.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigurationError(f"Invalid configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
    return parse_oauth_config(data)


# --- Validation ---


def validate_oauth_config(config: Any) -> None:
    """Check a configuration before any I/O is performed.

    Raises:
        InvalidGrantTypeError: If *config* is not a known grant configuration.
        ConfigurationError: If ``access_token_endpoint`` is empty.
        MissingFieldError: If a password grant uses inline credentials
            without both ``username`` and ``password``.
    """
    if not isinstance(config, GRANT_CONFIG_TYPES):
        raise InvalidGrantTypeError(
            f"Invalid grant type configuration: {type(config).__name__}"
        )
    if not config.access_token_endpoint:
        raise ConfigurationError("access_token_endpoint must not be empty")

    if isinstance(config, PasswordGrantConfig) and isinstance(
        config.credentials, InlineCredentials
    ):
        for field in ("username", "password"):
            if not getattr(config.credentials, field):
                raise MissingFieldError(
                    field,
                    f"Password grant requires credentials.{field} "
                    "when no credentials directory is configured",
                )
