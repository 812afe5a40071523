"""Tracing for aigw: a tracer accessor, span attribute keys, and SDK setup.

Spans go through the OpenTelemetry API, which stays a no-op until
:func:`configure_telemetry` installs an SDK tracer provider. The SDK and the
OTLP exporter ship in the ``otel`` extra.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from aigw.core.config import TelemetrySettings

SERVICE_NAME = "aigw"

ATTR_OPERATION = "aigw.operation"
ATTR_STATUS = "aigw.status"
ATTR_FILE_BEARING = "aigw.file_bearing"
ATTR_ARTIFACT_COUNT = "aigw.artifacts.count"
ATTR_ARTIFACT_FAILED = "aigw.artifacts.failed"


def get_tracer(name: str = SERVICE_NAME) -> trace.Tracer:
    return trace.get_tracer(name)


def configure_telemetry(settings: TelemetrySettings) -> bool:
    """Export gateway spans over OTLP/gRPC when *settings* enables tracing.

    Returns whether a tracer provider was installed. With no
    ``otlp_endpoint`` the exporter reads ``OTEL_EXPORTER_OTLP_ENDPOINT`` or
    falls back to its local default.

    Raises
    ------
    ImportError
        If tracing is enabled but the ``otel`` extra is not installed.
    """
    if not settings.enabled:
        return False

    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace.export import BatchSpanProcessor  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = "Tracing needs opentelemetry-sdk and opentelemetry-exporter-otlp: pip install 'aigw[otel]'"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))  # pyright: ignore[reportUnknownVariableType,reportUnknownMemberType]
    exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint)  # pyright: ignore[reportUnknownVariableType]
    provider.add_span_processor(BatchSpanProcessor(exporter))  # pyright: ignore[reportUnknownMemberType]
    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]
    return True
