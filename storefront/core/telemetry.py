from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter

from storefront.core.config import settings


def build_tracer_provider(exporter: SpanExporter | None = None) -> TracerProvider:
    resource = Resource.create({"service.name": settings.service_name, "deployment.environment": settings.env})
    provider = TracerProvider(resource=resource)
    if exporter is None:
        exporter = OTLPSpanExporter(endpoint=f"{settings.otlp_endpoint}/v1/traces")
    provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider


def setup_telemetry() -> bool:
    """
    Install the global tracer provider. Without it, spans emitted by the
    submission controller go to the API's no-op tracer.
    """
    if not settings.telemetry_enabled:
        return False
    trace.set_tracer_provider(build_tracer_provider())
    return True
