"""Exception hierarchy for oauth_tooling.

All exceptions inherit from :class:`OAuthToolingError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`oauth_tooling.exit_codes`. Library callers catch the specific
subclasses; the command-line entry point catches the base class and exits
with the matching code.

Subclass hierarchy::

    OAuthToolingError (exit 1)
    +-- ConfigurationError           (exit 2)
    |   +-- MissingFieldError
    |   +-- InvalidGrantTypeError
    +-- CredentialSourceError        (exit 4)
    |   +-- CredentialFileNotFoundError
    |   +-- CredentialFileParseError
    +-- TransportError               (exit 6)
    |   +-- TransportUnreachableError
    +-- TokenError                   (exit 3)
    +-- TokenInfoError               (exit 3)
"""

from __future__ import annotations

from typing import Any, Optional

from oauth_tooling.exit_codes import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_CONNECTION_ERROR,
    EXIT_CREDENTIALS_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_TOKEN_REJECTED,
)


class OAuthToolingError(Exception):
    """Base exception for all oauth_tooling errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigurationError(OAuthToolingError):
    """Raised when a configuration cannot be used, before any I/O happens."""

    exit_code = EXIT_CONFIGURATION_ERROR


class MissingFieldError(ConfigurationError):
    """Raised when a required credential field is absent.

    Args:
        field: Name of the missing configuration field.
        message: Optional override for the default message.
    """

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"Missing required field '{field}'")
        self.field = field


class InvalidGrantTypeError(ConfigurationError):
    """Raised when a grant type tag is not one of the supported grants."""


class CredentialSourceError(OAuthToolingError):
    """Raised when credentials cannot be read from a credentials directory."""

    exit_code = EXIT_CREDENTIALS_ERROR


class CredentialFileNotFoundError(CredentialSourceError):
    """Raised when ``client.json`` or ``user.json`` does not exist."""


class CredentialFileParseError(CredentialSourceError):
    """Raised when a credentials file is not a JSON object with the expected keys."""


class TransportError(OAuthToolingError):
    """Raised on network failures and on malformed provider responses.

    The original exception is kept on :attr:`cause` and is also chained as
    ``__cause__``.

    Args:
        message: Description naming the operation and the target endpoint.
        cause: The underlying exception.
    """

    exit_code = EXIT_CONNECTION_ERROR

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class TransportUnreachableError(TransportError):
    """Raised when a request never completed (refused, DNS, timeout)."""


class TokenError(OAuthToolingError):
    """The token endpoint answered with a non-200 status.

    Follows the error response shape of :rfc:`6749` section 5.2. When the
    body does not have that shape, :attr:`error` holds the whole parsed
    body (or the parse failure) instead of an error code.

    Attributes:
        error: The ``error`` member, or the raw body / parse failure.
        error_description: The ``error_description`` member, if any.
        status: HTTP status code of the response.
    """

    exit_code = EXIT_TOKEN_REJECTED

    def __init__(
        self,
        error: Any,
        status: int,
        error_description: Optional[str] = None,
        endpoint: Optional[str] = None,
    ):
        target = f" from {endpoint}" if endpoint else ""
        detail = f": {error_description}" if error_description else ""
        super().__init__(
            f"Error requesting access token{target} (HTTP {status}) [{error}]{detail}"
        )
        self.error = error
        self.error_description = error_description
        self.status = status
        self.endpoint = endpoint


class TokenInfoError(OAuthToolingError):
    """The token-info endpoint answered with a non-200 status.

    Attributes:
        status: HTTP status code of the response.
        data: The parsed JSON body of the response.
    """

    exit_code = EXIT_TOKEN_REJECTED

    def __init__(self, status: int, data: Any, url: Optional[str] = None):
        target = f" via {url}" if url else ""
        super().__init__(f"Error validating token{target} (HTTP {status})")
        self.status = status
        self.data = data
        self.url = url
