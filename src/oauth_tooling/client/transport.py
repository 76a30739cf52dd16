"""HTTP client lifecycle for a single token or token-info exchange.

The public operations accept an optional :class:`httpx.AsyncClient`. When
the caller supplies one it is used as-is and left open: timeouts, TLS,
proxies and connection pooling are entirely the caller's policy. Otherwise
a client is built from :class:`~oauth_tooling.models.TransportSettings`
for the duration of one call and closed afterwards.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from oauth_tooling.config import resolve_transport_settings
from oauth_tooling.models import TransportSettings


@asynccontextmanager
async def open_http_client(
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[TransportSettings] = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield *client*, or a short-lived client built from *settings*.

    Args:
        client: Caller-owned client. Never closed here.
        settings: Used only when *client* is ``None``. Defaults to
            :func:`~oauth_tooling.config.resolve_transport_settings`.
    """
    if client is not None:
        yield client
        return

    settings = settings or resolve_transport_settings()
    async with httpx.AsyncClient(
        timeout=settings.timeout,
        verify=settings.verify_ssl,
    ) as owned:
        yield owned
