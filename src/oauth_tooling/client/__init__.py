"""HTTP exchanges with OAuth2 providers.

- :func:`get_access_token` / :func:`request_access_token` -- token endpoint.
- :func:`get_token_info` -- token-info endpoint.
- :func:`open_http_client` -- per-call :class:`httpx.AsyncClient` lifecycle.
"""

from oauth_tooling.client.token import (
    OAUTH_CONTENT_TYPE,
    get_access_token,
    request_access_token,
)
from oauth_tooling.client.tokeninfo import get_token_info
from oauth_tooling.client.transport import open_http_client

__all__ = [
    "OAUTH_CONTENT_TYPE",
    "get_access_token",
    "get_token_info",
    "open_http_client",
    "request_access_token",
]
