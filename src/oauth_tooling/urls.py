"""URL construction shared by the token client and the authorization step.

Query strings are percent-encoded with :func:`urllib.parse.urlencode` and
then unescaped again, so parameter values that are themselves URLs (such
as ``redirect_uri``) are appended verbatim and never double-encoded by a
provider that decodes once more. Both helpers below produce their query
string the same way.
"""

from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import quote, unquote, urlencode


def build_query_string(params: Mapping[str, str]) -> str:
    """Encode *params* in insertion order, then unescape the result."""
    return unquote(urlencode(params, quote_via=quote))


def append_query(url: str, params: Optional[Mapping[str, str]]) -> str:
    """Return *url* with *params* appended; *url* unchanged when there are none."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{build_query_string(params)}"


def build_access_token_url(
    access_token_endpoint: str,
    query_params: Optional[Mapping[str, str]] = None,
) -> str:
    """URL for the token request, with optional extra query parameters."""
    return append_query(access_token_endpoint, query_params)


def create_auth_code_request_uri(
    authorization_endpoint: str,
    redirect_uri: str,
    client_id: str,
    query_params: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the URI that starts the authorization code grant.

    The query always carries ``client_id``, ``redirect_uri`` and
    ``response_type=code``. Entries in *query_params* are merged afterwards
    and replace those defaults on key collisions.

    Args:
        authorization_endpoint: The provider's authorization endpoint.
        redirect_uri: Absolute URI the provider redirects back to with the code.
        client_id: Client id of the requesting application.
        query_params: Extra query parameters (e.g. ``scope``, ``state``).

    Returns:
        The authorization URL.

    Example::

        >>> create_auth_code_request_uri(
        ...     "https://auth.example/authorize", "https://app.example/cb", "client123"
        ... )
        'https://auth.example/authorize?client_id=client123&redirect_uri=https://app.example/cb&response_type=code'
    """
    params: dict[str, str] = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
    }
    if query_params:
        params.update(query_params)
    return append_query(authorization_endpoint, params)
