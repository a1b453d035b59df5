"""
OpenTelemetry Trace Context Management

Spans around dispatch cycles and W3C trace context propagation over HTTP
headers, so a client call and the server cycle it triggers share a trace.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional

from opentelemetry import context as otel_context
from opentelemetry import propagate, trace
from opentelemetry.context import Context
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

logger = logging.getLogger(__name__)

def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
    """
    provider = TracerProvider(sampler=ALWAYS_ON)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    trace.set_tracer_provider(provider)

    tracer = trace.get_tracer(service_name)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return tracer

def inject_trace_headers(headers: Optional[MutableMapping[str, str]] = None) -> MutableMapping[str, str]:
    """Write the current trace context into outgoing headers

    Args:
        headers: Header mapping to update; a new dict is created when omitted

    Returns:
        The updated header mapping
    """
    if headers is None:
        headers = {}
    propagate.inject(headers)
    return headers

def extract_trace_context(headers: Mapping[str, str]) -> Optional[Context]:
    """Build a context from incoming headers, None when they carry no trace"""
    if not headers:
        return None
    carrier: Dict[str, Any] = {key.lower(): value for key, value in headers.items()}
    if "traceparent" not in carrier:
        return None
    return propagate.extract(carrier)

@contextmanager
def with_trace_context(ctx: Optional[Context]) -> Iterator[None]:
    """Use the given context as current for the duration of the block"""
    if ctx is None:
        yield
        return

    token = otel_context.attach(ctx)
    try:
        yield
    finally:
        otel_context.detach(token)

def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create new span

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Context manager yielding the span
    """
    tracer = trace.get_tracer(__name__)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.INTERNAL,
    )
