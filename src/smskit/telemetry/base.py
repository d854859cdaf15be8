"""Telemetry interface for SMS sends: span kinds, attribute keys and providers."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class SpanKind(StrEnum):
    SMS_SEND = "sms.send"


class Attr:
    """Attribute keys attached to send spans and metrics."""

    PROVIDER = "provider"
    SMS_RECIPIENT_COUNT = "sms.recipient_count"
    SMS_SENDER = "sms.sender"
    HTTP_STATUS_CODE = "http.status_code"


@dataclass
class Span:
    """One timed send, as recorded by a provider."""

    kind: SpanKind
    name: str
    attributes: dict[str, Any] = field(default_factory=dict)
    status: str = "ok"
    error_message: str | None = None
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    ended_at: datetime | None = None

    @property
    def duration_ms(self) -> float | None:
        if self.ended_at is None:
            return None
        return (self.ended_at - self.started_at).total_seconds() * 1000


class TelemetryProvider(ABC):
    """Receives spans and metrics from :class:`~smskit.client.SMSClient` sends."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def start_span(
        self, kind: SpanKind, name: str, *, attributes: dict[str, Any] | None = None
    ) -> str:
        """Open a span and return an ID for the other calls."""
        ...

    @abstractmethod
    def end_span(
        self, span_id: str, *, status: str = "ok", error_message: str | None = None
    ) -> None: ...

    @abstractmethod
    def set_attribute(self, span_id: str, key: str, value: Any) -> None: ...

    @abstractmethod
    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None: ...

    @contextmanager
    def span(
        self, kind: SpanKind, name: str, **kwargs: Any
    ) -> Generator[str, None, None]:
        """Wrap a block in a span.

        The span is ended with ``status="error"`` whenever the block exits by
        raising, including task cancellation.
        """
        span_id = self.start_span(kind, name, **kwargs)
        try:
            yield span_id
        except BaseException as exc:
            self.end_span(span_id, status="error", error_message=str(exc) or type(exc).__name__)
            raise
        else:
            self.end_span(span_id)


class SpanTrackingProvider(TelemetryProvider):
    """Keeps open spans in memory and hands each one to :meth:`on_span_end`."""

    def __init__(self) -> None:
        self._open: dict[str, Span] = {}

    def start_span(
        self, kind: SpanKind, name: str, *, attributes: dict[str, Any] | None = None
    ) -> str:
        span_id = uuid.uuid4().hex[:16]
        self._open[span_id] = Span(kind=kind, name=name, attributes=dict(attributes or {}))
        return span_id

    def set_attribute(self, span_id: str, key: str, value: Any) -> None:
        if span_id in self._open:
            self._open[span_id].attributes[key] = value

    def end_span(
        self, span_id: str, *, status: str = "ok", error_message: str | None = None
    ) -> None:
        span = self._open.pop(span_id, None)
        if span is None:
            return
        span.ended_at = datetime.now(UTC)
        span.status = status
        span.error_message = error_message
        self.on_span_end(span)

    @abstractmethod
    def on_span_end(self, span: Span) -> None: ...
