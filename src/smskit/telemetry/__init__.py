"""Telemetry providers for smskit."""

from smskit.telemetry.base import Attr, Span, SpanKind, SpanTrackingProvider, TelemetryProvider
from smskit.telemetry.console import ConsoleTelemetryProvider
from smskit.telemetry.mock import MockTelemetryProvider
from smskit.telemetry.noop import NoopTelemetryProvider

__all__ = [
    "Attr",
    "ConsoleTelemetryProvider",
    "MockTelemetryProvider",
    "NoopTelemetryProvider",
    "Span",
    "SpanKind",
    "SpanTrackingProvider",
    "TelemetryProvider",
]
