"""Typer application and console-script entry point for oauth-tooling.

Commands:

* ``token CONFIG_FILE`` -- request an access token for a JSON grant
  configuration and print it.
* ``tokeninfo URL ACCESS_TOKEN`` -- validate a token against a token-info
  endpoint and print the payload.
* ``authorize-url ENDPOINT REDIRECT_URI CLIENT_ID`` -- print the URL that
  starts the authorization code grant.

Library errors end the command with the ``exit_code`` of the raised
:class:`~oauth_tooling.exceptions.OAuthToolingError`; the message goes to
stderr.
"""

from __future__ import annotations

import asyncio
import signal
import sys
from pathlib import Path
from typing import Any, Awaitable, Optional

import typer

from oauth_tooling import __version__
from oauth_tooling.client import get_access_token, get_token_info
from oauth_tooling.config import load_oauth_config, resolve_transport_settings
from oauth_tooling.exceptions import OAuthToolingError, TokenInfoError
from oauth_tooling.exit_codes import EXIT_GENERIC_FAILURE
from oauth_tooling.output import OutputFormat, OutputManager, get_output, set_output
from oauth_tooling.urls import create_auth_code_request_uri

app = typer.Typer(
    name="oauth-tooling",
    help="Acquire and validate OAuth2 access tokens.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"oauth-tooling {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Plain JSON output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress warnings."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Install the global :class:`~oauth_tooling.output.OutputManager` from flags."""
    set_output(
        OutputManager(
            format=OutputFormat.JSON if json_output else OutputFormat.AUTO,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )


def _run(coro: Awaitable[Any]) -> Any:
    """Run *coro* and turn library errors into a clean exit."""
    output = get_output()
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except TokenInfoError as exc:
        output.error(str(exc))
        output.debug(f"Response body: {exc.data}")
        raise typer.Exit(code=exc.exit_code) from exc
    except OAuthToolingError as exc:
        output.error(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def _parse_params(values: Optional[list[str]]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{item}'", param_hint="--param")
        params[key] = value
    return params


@app.command("token")
def token_command(
    config_file: Path = typer.Argument(..., help="JSON grant configuration."),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Request timeout in seconds."
    ),
) -> None:
    """Request an access token and print it."""
    output = get_output()

    async def _token() -> dict[str, Any]:
        config = load_oauth_config(config_file)
        settings = resolve_transport_settings(timeout=timeout)
        return await get_access_token(config, logger=output, settings=settings)

    output.print_json(_run(_token()))


@app.command("tokeninfo")
def tokeninfo_command(
    url: str = typer.Argument(..., help="Token-info endpoint."),
    access_token: str = typer.Argument(..., help="Token to validate."),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Request timeout in seconds."
    ),
) -> None:
    """Validate an access token and print the token-info payload."""
    output = get_output()

    async def _tokeninfo() -> dict[str, Any]:
        settings = resolve_transport_settings(timeout=timeout)
        return await get_token_info(url, access_token, logger=output, settings=settings)

    output.print_json(_run(_tokeninfo()))


@app.command("authorize-url")
def authorize_url_command(
    authorization_endpoint: str = typer.Argument(..., help="Authorization endpoint."),
    redirect_uri: str = typer.Argument(..., help="Redirect URI for the code."),
    client_id: str = typer.Argument(..., help="Client id."),
    param: Optional[list[str]] = typer.Option(
        None, "--param", "-p", help="Extra query parameter as KEY=VALUE (repeatable)."
    ),
) -> None:
    """Print the URL that starts the authorization code grant."""
    uri = create_auth_code_request_uri(
        authorization_endpoint, redirect_uri, client_id, _parse_params(param) or None
    )
    get_output().print_data(uri)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """Entry point of the ``oauth-tooling`` console script."""
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        get_output().error(f"Unexpected error: {exc!r}")
        sys.exit(EXIT_GENERIC_FAILURE)
