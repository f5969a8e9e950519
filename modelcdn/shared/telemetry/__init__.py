"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from modelcdn.shared.telemetry.logging import setup_logging
from modelcdn.shared.telemetry.telemetry import TelemetryConfig
from modelcdn.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "traced",
    "add_span_attributes",
]
