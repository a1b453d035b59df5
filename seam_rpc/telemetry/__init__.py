"""
OpenTelemetry Integration Module

Provides distributed tracing and metrics collection capabilities:
- tracer: spans and trace context propagation over HTTP headers
- metrics: counters and latency histograms

Both transports record the same metric names so stdio and HTTP traffic can be
compared side by side.
"""

from .tracer import (
    setup_tracer,
    inject_trace_headers,
    extract_trace_context,
    with_trace_context,
    create_span
)
from .metrics import setup_metrics, increment_counter, record_latency

__all__ = [
    "setup_tracer",
    "setup_metrics",
    "inject_trace_headers",
    "extract_trace_context",
    "with_trace_context",
    "create_span",
    "increment_counter",
    "record_latency"
]
