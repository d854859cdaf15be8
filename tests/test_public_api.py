"""Tests for public API surface."""

from __future__ import annotations

import smskit


class TestPublicAPI:
    def test_version_string(self) -> None:
        assert isinstance(smskit.__version__, str)
        assert smskit.__version__ == "0.1.0"

    def test_all_names_importable(self) -> None:
        for name in smskit.__all__:
            obj = getattr(smskit, name)
            assert obj is not None, f"{name} is None"

    def test_exception_hierarchy(self) -> None:
        for exc in (smskit.ConfigError, smskit.ValidationError, smskit.TransportError):
            assert issubclass(exc, smskit.SMSKitError)
        assert issubclass(smskit.SMSKitError, Exception)

    def test_subpackage_imports(self) -> None:
        from smskit import cli, telemetry

        assert telemetry.NoopTelemetryProvider is not None
        assert cli.main is not None
