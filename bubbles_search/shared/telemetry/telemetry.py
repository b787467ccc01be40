"""OpenTelemetry tracing for the search service.

Spans come from the FastAPI and SQLAlchemy instrumentors plus the
``search.execute`` span opened by the orchestrator. Exporters: console
(development), OTLP over gRPC, or none (spans created, nothing exported).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from bubbles_search.core.config import Settings

logger = logging.getLogger(__name__)

# Health checks are polled by load balancers and are not traced.
UNTRACED_URLS = "/api/v1/health,/api/v1/health/ready"


def build_exporter(exporter_type: str, otlp_endpoint: str | None = None) -> SpanExporter | None:
    """Span exporter for TELEMETRY_EXPORTER; None means spans are not exported.

    "otlp" without an endpoint, or an unknown name, falls back to console.
    """
    if exporter_type == "none":
        return None
    if exporter_type == "otlp" and otlp_endpoint:
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if exporter_type != "console":
        logger.warning(
            "Unusable telemetry exporter %r (endpoint=%s), using console",
            exporter_type,
            otlp_endpoint,
        )
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider plus instrumentation for one application instance.

    Built from Settings at startup and kept on ``app.state.telemetry`` until
    shutdown flushes it.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.exporter_type = exporter_type
        self.otlp_endpoint = otlp_endpoint
        self.sample_rate = sample_rate
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> TelemetryConfig:
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )

    def setup(self) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Returns:
            The provider, or None when it could not be created (tracing off).
        """
        try:
            resource = Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            )
            provider = TracerProvider(
                resource=resource, sampler=TraceIdRatioBased(self.sample_rate)
            )
            exporter = build_exporter(self.exporter_type, self.otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("Failed to initialize telemetry; tracing disabled")
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            self.exporter_type,
            self.sample_rate,
        )
        return provider

    def instrument(self, app: FastAPI, engine: AsyncEngine | None = None) -> None:
        """Instrument FastAPI requests and, when a database is configured, SQL queries."""
        if self.tracer_provider is None:
            return
        try:
            FastAPIInstrumentor.instrument_app(
                app,
                tracer_provider=self.tracer_provider,
                excluded_urls=UNTRACED_URLS,
            )
            if engine is not None:
                SQLAlchemyInstrumentor().instrument(
                    engine=engine.sync_engine,
                    tracer_provider=self.tracer_provider,
                )
        except Exception:
            logger.exception("Failed to instrument the application")

    def shutdown(self) -> None:
        """Flush pending spans and release the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception:
            logger.exception("Error during telemetry shutdown")
        self.tracer_provider = None
        logger.info("Telemetry shutdown complete")
