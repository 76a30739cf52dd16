"""Logger capability used by the token and token-info clients.

Any object with ``debug``, ``warn`` and ``error`` methods can be passed as
the ``logger`` argument of the public operations. When none is given,
:func:`safe_logger` substitutes a :class:`NullLogger`, so the request code
calls the logger unconditionally.

:class:`StdlibLogger` adapts a :class:`logging.Logger`; the command-line
:class:`~oauth_tooling.output.OutputManager` satisfies the protocol directly.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, runtime_checkable

LOGGER_NAME = "oauth_tooling"


@runtime_checkable
class Logger(Protocol):
    """Minimal logging capability: three severities, free-form arguments."""

    def debug(self, message: str, *args: Any) -> None: ...

    def warn(self, message: str, *args: Any) -> None: ...

    def error(self, message: str, *args: Any) -> None: ...


class NullLogger:
    """Logger that discards everything."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass


class StdlibLogger:
    """Route :class:`Logger` calls to a :class:`logging.Logger`.

    Extra positional arguments (typically the exception that caused a
    failure) are appended to the message rather than used as ``%``
    format arguments, since library messages contain URLs.

    Args:
        logger: Target logger. Defaults to ``logging.getLogger("oauth_tooling")``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(join_message(message, args))

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warning(join_message(message, args))

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(join_message(message, args))


def join_message(message: str, args: tuple[Any, ...]) -> str:
    if not args:
        return message
    return " ".join([message, *(str(a) for a in args)])


_NULL_LOGGER = NullLogger()


def safe_logger(logger: Optional[Logger] = None) -> Logger:
    """Return *logger*, or a shared :class:`NullLogger` when it is ``None``."""
    if logger is None:
        return _NULL_LOGGER
    return logger
