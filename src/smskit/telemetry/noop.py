"""Telemetry provider that discards everything; the client default."""

from __future__ import annotations

from typing import Any

from smskit.telemetry.base import SpanKind, TelemetryProvider


class NoopTelemetryProvider(TelemetryProvider):
    @property
    def name(self) -> str:
        return "noop"

    def start_span(
        self, kind: SpanKind, name: str, *, attributes: dict[str, Any] | None = None
    ) -> str:
        return ""

    def end_span(
        self, span_id: str, *, status: str = "ok", error_message: str | None = None
    ) -> None:
        pass

    def set_attribute(self, span_id: str, key: str, value: Any) -> None:
        pass

    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None:
        pass
