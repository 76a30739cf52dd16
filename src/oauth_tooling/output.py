"""Output for the ``oauth-tooling`` command with stdout/stderr discipline.

* **stdout** -- primary data only (token payloads, authorization URLs).
* **stderr** -- diagnostics (debug lines, warnings, errors).
* **TTY detection** -- Rich formatting when stdout is an interactive
  terminal, plain JSON when piped.
* **Colour control** -- respects ``NO_COLOR``, ``TERM=dumb`` and
  ``--no-color``.

:class:`OutputManager` implements ``debug``, ``warn`` and ``error`` with
the signatures of :class:`~oauth_tooling.log.Logger`, so the command
passes it straight to the library as its logger.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from oauth_tooling.log import join_message


class OutputFormat(str, Enum):
    """Supported output formats. ``AUTO`` picks ``RICH`` on a TTY."""

    AUTO = "auto"
    JSON = "json"
    RICH = "rich"


class OutputManager:
    """Routes command output to stdout (data) and stderr (diagnostics).

    Args:
        format: Desired output format. ``AUTO`` resolves based on TTY
            detection.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress warnings on stderr. Errors are always shown.
        verbose: Show debug messages on stderr.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            self._format = (
                OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.JSON
            )
        else:
            self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        """The resolved output format."""
        return self._format

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    # ------------------------------------------------------------------ #
    # Data output (stdout)
    # ------------------------------------------------------------------ #

    def print_json(self, data: Any) -> None:
        """Print a JSON-serialisable payload to stdout."""
        text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
        if self._format == OutputFormat.RICH:
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))
        else:
            self.print_data(text)

    def print_data(self, text: str) -> None:
        """Print raw text to stdout."""
        print(text, file=sys.stdout, flush=True)

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr) -- also the Logger protocol
    # ------------------------------------------------------------------ #

    def debug(self, message: str, *args: Any) -> None:
        """Print a debug line. Only shown with ``--verbose``."""
        if self._verbose:
            self._emit("[debug] ", join_message(message, args), "dim")

    def warn(self, message: str, *args: Any) -> None:
        """Print a warning. Suppressed by ``--quiet``."""
        if not self._quiet:
            self._emit("Warning: ", join_message(message, args), "yellow")

    def error(self, message: str, *args: Any) -> None:
        """Print an error. Never suppressed."""
        self._emit("Error: ", join_message(message, args), "bold red")

    def _emit(self, prefix: str, message: str, style: str) -> None:
        if self._no_color:
            print(f"{prefix}{message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[{style}]{prefix}[/{style}]{escape(message)}", highlight=False)


def _is_tty() -> bool:
    """Check if stdout is a TTY."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set (any value) or ``TERM=dumb``."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    return os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Global output instance (set by the command callback)
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager`."""
    global _output
    _output = output


def reset_output() -> None:
    """Drop the global :class:`OutputManager`. Used between tests."""
    global _output
    _output = None
