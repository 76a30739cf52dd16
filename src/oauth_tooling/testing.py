"""In-memory OAuth2 provider fakes for tests.

Each helper returns a :class:`MockProvider`: an :class:`httpx.MockTransport`
that also records the requests it receives. Wrap it in an
:class:`httpx.AsyncClient` and pass that as ``client=`` to the public
operations::

    provider = mock_access_token_endpoint({"access_token": "abc"})
    async with httpx.AsyncClient(transport=provider) as client:
        token = await get_access_token(config, client=client)
    assert provider.requests[0].method == "POST"
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


class MockProvider(httpx.MockTransport):
    """:class:`httpx.MockTransport` that keeps every request it handled."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_recording)

    @property
    def last_request(self) -> httpx.Request:
        """The most recent request. Raises ``IndexError`` if there was none."""
        return self.requests[-1]


def mock_access_token_endpoint(
    token: Any,
    status_code: int = 200,
    headers: Optional[Mapping[str, str]] = None,
) -> MockProvider:
    """Answer every ``POST`` with *token* as JSON and *status_code*.

    Other methods get ``405``. Pass a ``str`` as *token* to send a raw
    (possibly non-JSON) body.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method != "POST":
            return httpx.Response(405, json={"error": "method_not_allowed"})
        if isinstance(token, str):
            return httpx.Response(status_code, text=token, headers=headers)
        return httpx.Response(status_code, json=token, headers=headers)

    return MockProvider(handler)


def mock_token_info_endpoint(
    tokens: Mapping[str, Mapping[str, Any]],
    invalid_status_code: int = 401,
) -> MockProvider:
    """Answer ``GET ?access_token=<t>`` with ``tokens[t]`` or an error.

    Unknown or missing tokens get *invalid_status_code* with
    ``{"error": "invalid_token"}``.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        access_token = request.url.params.get("access_token")
        if access_token is not None and access_token in tokens:
            return httpx.Response(200, json=dict(tokens[access_token]))
        return httpx.Response(
            invalid_status_code,
            json={
                "error": "invalid_token",
                "error_description": "Access Token not valid",
            },
        )

    return MockProvider(handler)


def unreachable_transport(message: str = "Connection refused") -> MockProvider:
    """Fail every request with :class:`httpx.ConnectError`."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(message, request=request)

    return MockProvider(handler)
