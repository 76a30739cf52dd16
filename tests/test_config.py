"""Tests for oauth_tooling.config — parsing, validation, environment."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from oauth_tooling.config import (
    default_credentials_dir,
    load_oauth_config,
    parse_oauth_config,
    resolve_transport_settings,
    validate_oauth_config,
)
from oauth_tooling.exceptions import (
    ConfigurationError,
    InvalidGrantTypeError,
    MissingFieldError,
)
from oauth_tooling.models import (
    ClientCredentialsGrantConfig,
    DirectoryCredentials,
    InlineCredentials,
    PasswordGrantConfig,
)


def _inline(**kwargs: str) -> dict[str, str]:
    data = {"kind": "inline", "client_id": "cid", "client_secret": "secret"}
    data.update(kwargs)
    return data


# ---------------------------------------------------------------------------
# parse_oauth_config
# ---------------------------------------------------------------------------


class TestParseOAuthConfig:
    def test_client_credentials(self) -> None:
        config = parse_oauth_config(
            {
                "grant_type": "client_credentials",
                "access_token_endpoint": "https://auth.example.com/token",
                "credentials": _inline(),
                "scopes": ["read", "write"],
            }
        )
        assert isinstance(config, ClientCredentialsGrantConfig)
        assert config.scopes == ["read", "write"]

    def test_unknown_grant_type(self) -> None:
        with pytest.raises(InvalidGrantTypeError, match="implicit"):
            parse_oauth_config(
                {
                    "grant_type": "implicit",
                    "access_token_endpoint": "https://auth.example.com/token",
                    "credentials": _inline(),
                }
            )

    def test_missing_grant_type(self) -> None:
        with pytest.raises(InvalidGrantTypeError):
            parse_oauth_config({"access_token_endpoint": "https://auth.example.com/token"})

    def test_mixed_grant_fields_are_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="client_credentials"):
            parse_oauth_config(
                {
                    "grant_type": "client_credentials",
                    "refresh_token": "not-for-this-grant",
                    "access_token_endpoint": "https://auth.example.com/token",
                    "credentials": _inline(),
                }
            )

    def test_inline_password_grant_without_user_fails(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            parse_oauth_config(
                {
                    "grant_type": "password",
                    "access_token_endpoint": "https://auth.example.com/token",
                    "credentials": _inline(username="user"),
                }
            )
        assert exc_info.value.field == "password"

    def test_credentials_dir_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("CREDENTIALS_DIR", str(tmp_path))
        config = parse_oauth_config(
            {
                "grant_type": "password",
                "access_token_endpoint": "https://auth.example.com/token",
            }
        )
        assert isinstance(config, PasswordGrantConfig)
        assert config.credentials == DirectoryCredentials(path=tmp_path)

    def test_explicit_credentials_beat_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("OAUTH_TOOLING_CREDENTIALS_DIR", str(tmp_path))
        config = parse_oauth_config(
            {
                "grant_type": "client_credentials",
                "access_token_endpoint": "https://auth.example.com/token",
                "credentials": _inline(),
            }
        )
        assert isinstance(config.credentials, InlineCredentials)

    def test_no_credentials_anywhere(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_oauth_config(
                {
                    "grant_type": "client_credentials",
                    "access_token_endpoint": "https://auth.example.com/token",
                }
            )


def test_default_credentials_dir_prefers_package_variable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CREDENTIALS_DIR", "/generic")
    monkeypatch.setenv("OAUTH_TOOLING_CREDENTIALS_DIR", "/specific")
    assert default_credentials_dir() == Path("/specific")


def test_default_credentials_dir_unset() -> None:
    assert default_credentials_dir() is None


# ---------------------------------------------------------------------------
# load_oauth_config
# ---------------------------------------------------------------------------


class TestLoadOAuthConfig:
    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "oauth.json"
        path.write_text(
            json.dumps(
                {
                    "grant_type": "refresh_token",
                    "refresh_token": "rt",
                    "access_token_endpoint": "https://auth.example.com/token",
                    "credentials": _inline(),
                }
            )
        )
        config = load_oauth_config(path)
        assert config.grant_type == "refresh_token"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_oauth_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "oauth.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid configuration file"):
            load_oauth_config(path)

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "oauth.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_oauth_config(path)


# ---------------------------------------------------------------------------
# validate_oauth_config
# ---------------------------------------------------------------------------


class TestValidateOAuthConfig:
    def test_rejects_foreign_object(self) -> None:
        with pytest.raises(InvalidGrantTypeError):
            validate_oauth_config({"grant_type": "password"})

    def test_rejects_empty_endpoint(self) -> None:
        config = ClientCredentialsGrantConfig(
            access_token_endpoint="",
            credentials=InlineCredentials(client_id="a", client_secret="b"),
        )
        with pytest.raises(ConfigurationError, match="access_token_endpoint"):
            validate_oauth_config(config)

    def test_password_grant_with_directory_passes(self, tmp_path: Path) -> None:
        config = PasswordGrantConfig(
            access_token_endpoint="https://auth.example.com/token",
            credentials=DirectoryCredentials(path=tmp_path),
        )
        validate_oauth_config(config)


# ---------------------------------------------------------------------------
# resolve_transport_settings
# ---------------------------------------------------------------------------


class TestTransportSettings:
    def test_defaults(self) -> None:
        settings = resolve_transport_settings()
        assert settings.timeout == 30.0
        assert settings.verify_ssl is True

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAUTH_TOOLING_TIMEOUT", "2.5")
        monkeypatch.setenv("OAUTH_TOOLING_VERIFY_SSL", "false")
        settings = resolve_transport_settings()
        assert settings.timeout == 2.5
        assert settings.verify_ssl is False

    def test_override_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAUTH_TOOLING_TIMEOUT", "2.5")
        assert resolve_transport_settings(timeout=9).timeout == 9
        assert resolve_transport_settings(timeout=None).timeout == 2.5

    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAUTH_TOOLING_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError, match="OAUTH_TOOLING_TIMEOUT"):
            resolve_transport_settings()

    def test_invalid_verify(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAUTH_TOOLING_VERIFY_SSL", "maybe")
        with pytest.raises(ConfigurationError, match="OAUTH_TOOLING_VERIFY_SSL"):
            resolve_transport_settings()
