"""
OpenTelemetry Metrics Collection

Counters and latency histograms recorded by the dispatcher and the transport
adapters. Until setup_metrics() installs a MeterProvider the OpenTelemetry
API hands out no-op instruments, so recording is always safe.
"""

import logging
from typing import Dict, Any

from opentelemetry import metrics
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    PeriodicExportingMetricReader
)
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter

logger = logging.getLogger(__name__)

# Instrument caches keyed by metric name
_counters = {}
_histograms = {}

def setup_metrics(service_name: str,
                  otlp_endpoint: str = "localhost:4317",
                  export_interval_ms: int = 5000,
                  console: bool = False):
    """Configure OpenTelemetry metrics collection

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        export_interval_ms: Metrics export interval in milliseconds
        console: Also export to the console (development only)
    """
    readers = [
        PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=otlp_endpoint),
            export_interval_millis=export_interval_ms
        )
    ]
    if console:
        readers.append(PeriodicExportingMetricReader(
            ConsoleMetricExporter(),
            export_interval_millis=export_interval_ms
        ))

    provider = MeterProvider(metric_readers=readers)
    metrics.set_meter_provider(provider)
    meter = metrics.get_meter(service_name)

    logger.info(f"OpenTelemetry metrics configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return meter

# Descriptions for the instruments recorded by the dispatcher and adapters;
# names not listed here fall back to a generic description
METRIC_DESCRIPTIONS = {
    "rpc.server.requests.received": "Payloads handed to the dispatcher",
    "rpc.server.errors": "Payloads answered with a protocol error, by type",
    "rpc.server.method.calls": "Handler invocations, by method",
    "rpc.server.method.errors": "Handler invocations that raised, by method",
    "rpc.server.request.latency": "Decode to response time of one dispatch cycle",
    "rpc.client.requests": "Requests written by a client adapter, by method",
    "rpc.client.errors": "Client side transport and correlation failures, by type",
    "rpc.client.latency": "Round trip time seen by a client adapter",
}

def _describe(name: str) -> str:
    return METRIC_DESCRIPTIONS.get(name, f"seam-rpc instrument {name}")

def get_counter(name: str, description: str = None, unit: str = "1"):
    """Return the cached counter for a metric name, creating it on first use"""
    if name not in _counters:
        meter = metrics.get_meter(__name__)
        _counters[name] = meter.create_counter(
            name=name,
            description=description or _describe(name),
            unit=unit
        )

    return _counters[name]

def get_histogram(name: str, description: str = None, unit: str = "ms"):
    """Return the cached latency histogram for a metric name"""
    if name not in _histograms:
        meter = metrics.get_meter(__name__)
        _histograms[name] = meter.create_histogram(
            name=name,
            description=description or _describe(name),
            unit=unit
        )

    return _histograms[name]

def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    """Add to a counter such as rpc.server.errors

    Args:
        name: Metric name, e.g. "rpc.client.requests"
        amount: Amount to add
        attributes: Labels such as {"method": "echo"} or {"type": "parse_error"}
    """
    get_counter(name).add(amount, attributes or {})

def record_latency(name: str, value_ms: float, attributes: Dict[str, Any] = None):
    """Record one dispatch or round trip duration in milliseconds"""
    get_histogram(name).record(value_ms, attributes or {})
