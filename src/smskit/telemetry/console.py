"""Telemetry provider that writes span and metric summaries to ``logging``."""

from __future__ import annotations

import logging
from typing import Any

from smskit.telemetry.base import Span, SpanTrackingProvider

logger = logging.getLogger("smskit.telemetry")


def _format_attrs(attributes: dict[str, Any]) -> str:
    if not attributes:
        return ""
    return " [" + ", ".join(f"{k}={v}" for k, v in attributes.items()) + "]"


class ConsoleTelemetryProvider(SpanTrackingProvider):
    """Logs to the ``smskit.telemetry`` logger; ``smskit -v`` turns it on."""

    def __init__(self, *, level: int = logging.INFO) -> None:
        super().__init__()
        self._level = level

    @property
    def name(self) -> str:
        return "console"

    def on_span_end(self, span: Span) -> None:
        attrs = _format_attrs(span.attributes)
        summary = f"{span.kind} {span.name} {span.duration_ms:.1f}ms{attrs}"
        if span.status == "error":
            logger.log(self._level, "[SPAN ERROR] %s error=%s", summary, span.error_message)
        else:
            logger.log(self._level, "[SPAN END] %s", summary)

    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None:
        unit_str = f" {unit}" if unit else ""
        logger.log(
            self._level,
            "[METRIC] %s = %.2f%s%s",
            name,
            value,
            unit_str,
            _format_attrs(attributes or {}),
        )
