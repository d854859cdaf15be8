"""In-memory telemetry provider for test assertions."""

from __future__ import annotations

from typing import Any

from smskit.telemetry.base import Span, SpanKind, SpanTrackingProvider


class MockTelemetryProvider(SpanTrackingProvider):
    """Collects finished spans in ``spans`` and metrics in ``metrics``.

    Example::

        telemetry = MockTelemetryProvider()
        client = SMSClient(token, url, telemetry=telemetry)
        client.send("+358501234567", "Alerts", "hi")
        span = telemetry.get_spans(SpanKind.SMS_SEND)[0]
        assert span.attributes["http.status_code"] == 200
    """

    def __init__(self) -> None:
        super().__init__()
        self.spans: list[Span] = []
        self.metrics: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return "mock"

    def get_spans(self, kind: SpanKind) -> list[Span]:
        return [s for s in self.spans if s.kind == kind]

    def on_span_end(self, span: Span) -> None:
        self.spans.append(span)

    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None:
        self.metrics.append(
            {"name": name, "value": value, "unit": unit, "attributes": dict(attributes or {})}
        )
