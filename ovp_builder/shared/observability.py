# ovp_builder/shared/observability.py
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

from ovp_builder.shared.config import settings

def setup_observability() -> TracerProvider:
    """
    Installs the global OpenTelemetry tracer provider for the service.

    No exporter is attached; spans exist so that log lines carry trace and
    span ids (see logging_config.add_open_telemetry_spans).
    """
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.environment": settings.APP_ENV.value,
    })
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)
    return provider

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
