"""Shared test fixtures and helpers."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from smskit.client import AsyncSMSClient, SMSClient
from smskit.telemetry.mock import MockTelemetryProvider
from smskit.transport import (
    AsyncHTTPTransport,
    AsyncHttpxTransport,
    HTTPTransport,
    HttpxTransport,
    MockAsyncTransport,
    MockTransport,
)

API_TOKEN = "test-token-123"
API_URL = "https://sms.example.com/v1/send"


class StubTransport(httpx.BaseTransport):
    """Captures requests and returns a canned response."""

    def __init__(self, status_code: int = 200, text: str = "OK") -> None:
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text, request=request)


class AsyncStubTransport(httpx.AsyncBaseTransport):
    def __init__(self, status_code: int = 200, text: str = "OK") -> None:
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text, request=request)


class FailingTransport(httpx.BaseTransport):
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        raise self.exc


class AsyncFailingTransport(httpx.AsyncBaseTransport):
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise self.exc


def make_client(
    transport: httpx.BaseTransport | HTTPTransport | None = None, **kwargs: Any
) -> SMSClient:
    """Build an ``SMSClient`` over a smskit transport or a stubbed httpx one."""
    if isinstance(transport, httpx.BaseTransport):
        transport = HttpxTransport(transport=transport)
    return SMSClient(API_TOKEN, API_URL, transport=transport or MockTransport(), **kwargs)


def make_async_client(
    transport: httpx.AsyncBaseTransport | AsyncHTTPTransport | None = None, **kwargs: Any
) -> AsyncSMSClient:
    if isinstance(transport, httpx.AsyncBaseTransport):
        transport = AsyncHttpxTransport(transport=transport)
    return AsyncSMSClient(
        API_TOKEN, API_URL, transport=transport or MockAsyncTransport(), **kwargs
    )


def sent_payload(transport: MockTransport | MockAsyncTransport, index: int = 0) -> Any:
    return json.loads(transport.requests[index]["content"])


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def async_transport() -> MockAsyncTransport:
    return MockAsyncTransport()


@pytest.fixture
def telemetry() -> MockTelemetryProvider:
    return MockTelemetryProvider()
