"""Shared test fixtures for oauth_tooling.

Provides credential directories on disk, a logger that records calls,
and isolation of the environment variables and global output state the
package reads.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from oauth_tooling.output import reset_output


CLIENT_DATA = {"client_id": "client-id", "client_secret": "client-secret"}
USER_DATA = {"application_username": "app-user", "application_password": "app-pass"}


class RecordingLogger:
    """Logger double that keeps ``(level, message, args)`` tuples."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []

    def debug(self, message: str, *args: Any) -> None:
        self.calls.append(("debug", message, args))

    def warn(self, message: str, *args: Any) -> None:
        self.calls.append(("warn", message, args))

    def error(self, message: str, *args: Any) -> None:
        self.calls.append(("error", message, args))

    def levels(self) -> list[str]:
        return [level for level, _, _ in self.calls]


def write_json(path: Path, data: Any) -> None:
    """Write *data* as JSON to *path*, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


# ---------------------------------------------------------------------------
# Environment and global state isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear every environment variable the package reads."""
    for var in [
        "OAUTH_TOOLING_CREDENTIALS_DIR",
        "CREDENTIALS_DIR",
        "OAUTH_TOOLING_TIMEOUT",
        "OAUTH_TOOLING_VERIFY_SSL",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test."""
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


@pytest.fixture
def credentials_dir(tmp_path: Path) -> Path:
    """Directory holding valid client.json and user.json files."""
    directory = tmp_path / "credentials"
    write_json(directory / "client.json", CLIENT_DATA)
    write_json(directory / "user.json", USER_DATA)
    return directory


@pytest.fixture
def client_only_dir(tmp_path: Path) -> Path:
    """Directory holding client.json but no user.json."""
    directory = tmp_path / "client-only"
    write_json(directory / "client.json", CLIENT_DATA)
    return directory


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
