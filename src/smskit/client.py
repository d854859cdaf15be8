"""SMS API clients — validate, build the JSON payload and POST it once."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Sequence
from types import TracebackType
from typing import Any, Self

from pydantic import SecretStr

from smskit.config import SMSClientConfig, SMSSettings
from smskit.errors import ConfigError
from smskit.models import SendRequest, SendResult
from smskit.telemetry.base import Attr, SpanKind, TelemetryProvider
from smskit.telemetry.noop import NoopTelemetryProvider
from smskit.transport import (
    AsyncHTTPTransport,
    AsyncHttpxTransport,
    HTTPTransport,
    HttpxTransport,
    TransportResponse,
)

logger = logging.getLogger(__name__)

_ACCEPT = "application/json, text/plain"
_SEND_METRIC = "smskit.delivery.send_ms"


class _BaseSMSClient:
    """Configuration, validation and request building shared by both clients."""

    def __init__(
        self,
        api_token: str | SecretStr,
        api_url: str,
        verify_tls: bool = True,
        *,
        timeout: float = 10.0,
        telemetry: TelemetryProvider | None = None,
    ) -> None:
        token = api_token.get_secret_value() if isinstance(api_token, SecretStr) else api_token
        if not token or not api_url:
            raise ConfigError("credential or endpoint missing")
        self._config = SMSClientConfig(
            api_token=SecretStr(token),
            api_url=api_url,
            verify_tls=bool(verify_tls),
            timeout=timeout,
        )
        self._telemetry = telemetry or NoopTelemetryProvider()

    @classmethod
    def from_config(cls, config: SMSClientConfig, **kwargs: Any) -> Self:
        return cls(
            config.api_token,
            config.api_url,
            config.verify_tls,
            timeout=config.timeout,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> Self:
        """Build a client from ``SMSKIT_*`` environment variables."""
        return cls.from_config(SMSSettings().to_config(), **kwargs)

    @property
    def api_token(self) -> str:
        return self._config.api_token.get_secret_value()

    @property
    def api_url(self) -> str:
        return self._config.api_url

    @property
    def verify_tls(self) -> bool:
        return self._config.verify_tls

    @property
    def timeout(self) -> float:
        return self._config.timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": _ACCEPT,
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }

    def _prepare(
        self, recipients: str | Sequence[str], from_: str, text: str
    ) -> tuple[SendRequest, str]:
        request = SendRequest.create(recipients, from_, text)
        return request, json.dumps(request.to_payload())

    def _span_attributes(self, request: SendRequest) -> dict[str, Any]:
        return {
            Attr.PROVIDER: self.__class__.__name__,
            Attr.SMS_RECIPIENT_COUNT: len(request.recipients),
            Attr.SMS_SENDER: request.from_,
        }

    def _finish(self, resp: TransportResponse, started: float, count: int) -> SendResult:
        send_ms = (time.monotonic() - started) * 1000
        self._telemetry.record_metric(
            _SEND_METRIC,
            send_ms,
            unit="ms",
            attributes={Attr.PROVIDER: self.__class__.__name__},
        )
        logger.debug(
            "SMS to %d recipient(s) completed with HTTP %d in %.1fms",
            count,
            resp.status_code,
            send_ms,
        )
        return SendResult(http_status=resp.status_code, body=resp.text)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(api_url={self.api_url!r}, verify_tls={self.verify_tls})"


class SMSClient(_BaseSMSClient):
    """Blocking SMS API client.

    Holds only immutable configuration, so one instance may be shared by
    several threads sending concurrently.

    Example::

        with SMSClient(token, "https://api.example.com/sms/send") as client:
            result = client.send("+358501234567", "Alerts", "Threshold exceeded")
            print(result.http_status, result.body)
    """

    def __init__(
        self,
        api_token: str | SecretStr,
        api_url: str,
        verify_tls: bool = True,
        *,
        timeout: float = 10.0,
        transport: HTTPTransport | None = None,
        telemetry: TelemetryProvider | None = None,
    ) -> None:
        super().__init__(api_token, api_url, verify_tls, timeout=timeout, telemetry=telemetry)
        self._owns_transport = transport is None
        self._transport: HTTPTransport = transport or HttpxTransport(
            verify_tls=self.verify_tls, timeout=self.timeout
        )

    def send(self, recipients: str | Sequence[str], from_: str, text: str) -> SendResult:
        """Send one message to one or more recipients.

        Args:
            recipients: A phone number, or an ordered sequence of them.
            from_: Sender name or number.
            text: Message body.

        Returns:
            The HTTP status and raw body, whatever the status code.

        Raises:
            ValidationError: If the input is rejected. Nothing is sent.
            TransportError: If the request could not be completed.
        """
        request, content = self._prepare(recipients, from_, text)
        started = time.monotonic()
        with self._telemetry.span(
            SpanKind.SMS_SEND, "SMSClient.send", attributes=self._span_attributes(request)
        ) as span_id:
            resp = self._transport.post(self.api_url, headers=self._headers(), content=content)
            self._telemetry.set_attribute(span_id, Attr.HTTP_STATUS_CODE, resp.status_code)
        return self._finish(resp, started, len(request.recipients))

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class AsyncSMSClient(_BaseSMSClient):
    """Asyncio SMS API client. The HTTP call is the only suspension point."""

    def __init__(
        self,
        api_token: str | SecretStr,
        api_url: str,
        verify_tls: bool = True,
        *,
        timeout: float = 10.0,
        transport: AsyncHTTPTransport | None = None,
        telemetry: TelemetryProvider | None = None,
    ) -> None:
        super().__init__(api_token, api_url, verify_tls, timeout=timeout, telemetry=telemetry)
        self._owns_transport = transport is None
        self._transport: AsyncHTTPTransport = transport or AsyncHttpxTransport(
            verify_tls=self.verify_tls, timeout=self.timeout
        )

    async def send(self, recipients: str | Sequence[str], from_: str, text: str) -> SendResult:
        """Send one message to one or more recipients. See :meth:`SMSClient.send`."""
        request, content = self._prepare(recipients, from_, text)
        started = time.monotonic()
        with self._telemetry.span(
            SpanKind.SMS_SEND, "AsyncSMSClient.send", attributes=self._span_attributes(request)
        ) as span_id:
            resp = await self._transport.post(
                self.api_url, headers=self._headers(), content=content
            )
            self._telemetry.set_attribute(span_id, Attr.HTTP_STATUS_CODE, resp.status_code)
        return self._finish(resp, started, len(request.recipients))

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
