"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from bubbles_search.shared.telemetry.logging import setup_logging
from bubbles_search.shared.telemetry.telemetry import TelemetryConfig, build_exporter
from bubbles_search.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "build_exporter",
    "traced",
    "add_span_attributes",
    "add_span_event",
]
