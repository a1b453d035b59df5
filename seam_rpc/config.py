"""
Configuration settings for the JSON-RPC transports
"""
import os
from dataclasses import dataclass, asdict
from typing import Dict, Any


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class HttpServerConfig:
    """Listen address and limits of the HTTP transport"""
    host: str = "127.0.0.1"
    port: int = 8000
    path: str = "/"
    client_max_size: int = 1024 ** 2  # Largest accepted request body in bytes

    @classmethod
    def from_env(cls) -> "HttpServerConfig":
        """Create config from environment variables"""
        return cls(
            host=os.getenv("SEAM_RPC_HTTP_HOST", cls.host),
            port=int(os.getenv("SEAM_RPC_HTTP_PORT", cls.port)),
            path=os.getenv("SEAM_RPC_HTTP_PATH", cls.path),
            client_max_size=int(os.getenv("SEAM_RPC_HTTP_MAX_BODY", cls.client_max_size)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class HttpClientConfig:
    endpoint: str = "http://localhost:8000"
    timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> "HttpClientConfig":
        """Create config from environment variables"""
        return cls(
            endpoint=os.getenv("SEAM_RPC_HTTP_ENDPOINT", cls.endpoint),
            timeout_seconds=float(os.getenv("SEAM_RPC_HTTP_TIMEOUT", cls.timeout_seconds)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TelemetryConfig:
    """OpenTelemetry export settings; both exporters are off by default"""
    service_name: str = "seam-rpc"
    enable_tracing: bool = False
    enable_metrics: bool = False
    otlp_endpoint: str = "localhost:4317"

    @classmethod
    def from_env(cls) -> "TelemetryConfig":
        """Create config from environment variables"""
        return cls(
            service_name=os.getenv("SEAM_RPC_SERVICE_NAME", cls.service_name),
            enable_tracing=_env_bool("SEAM_RPC_ENABLE_TRACING", cls.enable_tracing),
            enable_metrics=_env_bool("SEAM_RPC_ENABLE_METRICS", cls.enable_metrics),
            otlp_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", cls.otlp_endpoint),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
