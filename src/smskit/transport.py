"""HTTP transports used by the SMS clients."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from smskit.errors import TransportError


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of a completed HTTP exchange."""

    status_code: int
    text: str


class HTTPTransport(ABC):
    """Synchronous HTTP POST collaborator."""

    @abstractmethod
    def post(self, url: str, *, headers: dict[str, str], content: str) -> TransportResponse:
        """POST *content* to *url*.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: If the request could not be completed.
        """
        ...

    def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""


class AsyncHTTPTransport(ABC):
    """Asynchronous HTTP POST collaborator."""

    @abstractmethod
    async def post(
        self, url: str, *, headers: dict[str, str], content: str
    ) -> TransportResponse:
        """POST *content* to *url*. See :meth:`HTTPTransport.post`."""
        ...

    async def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""


def _wrap_error(exc: Exception) -> TransportError:
    if isinstance(exc, httpx.TimeoutException):
        return TransportError(f"transport failed: timeout ({exc})", cause=exc, timeout=True)
    return TransportError(f"transport failed: {exc}", cause=exc)


# httpx client defaults that are not part of the API request.
_UNSENT_DEFAULT_HEADERS = ("user-agent", "accept-encoding", "connection")


def _strip_default_headers(client: httpx.Client | httpx.AsyncClient) -> None:
    for name in _UNSENT_DEFAULT_HEADERS:
        client.headers.pop(name, None)


class HttpxTransport(HTTPTransport):
    """Transport backed by ``httpx.Client``.

    With ``verify_tls=False`` both certificate and hostname checks are
    skipped. *transport* is handed to ``httpx.Client`` unchanged, which lets
    tests mount a stub.
    """

    def __init__(
        self,
        *,
        verify_tls: bool = True,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(verify=verify_tls, timeout=timeout, transport=transport)
        _strip_default_headers(self._client)

    def post(self, url: str, *, headers: dict[str, str], content: str) -> TransportResponse:
        try:
            resp = self._client.post(url, headers=headers, content=content)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise _wrap_error(exc) from exc
        return TransportResponse(status_code=resp.status_code, text=resp.text)

    def close(self) -> None:
        self._client.close()


class AsyncHttpxTransport(AsyncHTTPTransport):
    """Transport backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        verify_tls: bool = True,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(verify=verify_tls, timeout=timeout, transport=transport)
        _strip_default_headers(self._client)

    async def post(
        self, url: str, *, headers: dict[str, str], content: str
    ) -> TransportResponse:
        try:
            resp = await self._client.post(url, headers=headers, content=content)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise _wrap_error(exc) from exc
        return TransportResponse(status_code=resp.status_code, text=resp.text)

    async def close(self) -> None:
        await self._client.aclose()


class MockTransport(HTTPTransport):
    """Records POSTs and returns a canned response, for tests and dry runs."""

    def __init__(
        self, status_code: int = 200, text: str = "OK", *, error: TransportError | None = None
    ) -> None:
        self.status_code = status_code
        self.text = text
        self.error = error
        self.requests: list[dict[str, Any]] = []

    def post(self, url: str, *, headers: dict[str, str], content: str) -> TransportResponse:
        self.requests.append({"url": url, "headers": dict(headers), "content": content})
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, text=self.text)


class MockAsyncTransport(AsyncHTTPTransport):
    """Async counterpart of :class:`MockTransport`."""

    def __init__(
        self, status_code: int = 200, text: str = "OK", *, error: TransportError | None = None
    ) -> None:
        self.status_code = status_code
        self.text = text
        self.error = error
        self.requests: list[dict[str, Any]] = []

    async def post(
        self, url: str, *, headers: dict[str, str], content: str
    ) -> TransportResponse:
        self.requests.append({"url": url, "headers": dict(headers), "content": content})
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, text=self.text)
