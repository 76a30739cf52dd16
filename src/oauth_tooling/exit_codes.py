"""Numeric process exit codes used by the ``oauth-tooling`` command.

Each constant maps to one error category and is referenced by the
corresponding :class:`~oauth_tooling.exceptions.OAuthToolingError`
subclass, so shell wrappers can branch on the failure class without
parsing stderr.

Example::

    $ oauth-tooling token config.json
    $ echo $?
    3   # EXIT_TOKEN_REJECTED -- the provider refused the grant
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_CONFIGURATION_ERROR = 2
"""The OAuth configuration is invalid or incomplete."""

EXIT_TOKEN_REJECTED = 3
"""The provider rejected the token request or the token under inspection."""

EXIT_CREDENTIALS_ERROR = 4
"""A credentials file is missing or cannot be parsed."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""
