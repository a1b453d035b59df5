"""
Tests for transport configuration
"""
import os
import pytest
from unittest.mock import patch

from seam_rpc.config import HttpClientConfig, HttpServerConfig, TelemetryConfig


class TestHttpServerConfig:
    """Test HTTP server configuration"""

    def test_default_values(self):
        config = HttpServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.path == "/"
        assert config.client_max_size == 1024 ** 2

    def test_from_env(self):
        with patch.dict(os.environ, {
            "SEAM_RPC_HTTP_HOST": "0.0.0.0",
            "SEAM_RPC_HTTP_PORT": "9000",
            "SEAM_RPC_HTTP_PATH": "/rpc",
            "SEAM_RPC_HTTP_MAX_BODY": "2048"
        }):
            config = HttpServerConfig.from_env()
            assert config.host == "0.0.0.0"
            assert config.port == 9000
            assert config.path == "/rpc"
            assert config.client_max_size == 2048

    def test_invalid_port(self):
        with patch.dict(os.environ, {"SEAM_RPC_HTTP_PORT": "eighty"}):
            with pytest.raises(ValueError):
                HttpServerConfig.from_env()

    def test_to_dict(self):
        assert HttpServerConfig(port=1234).to_dict() == {
            "host": "127.0.0.1",
            "port": 1234,
            "path": "/",
            "client_max_size": 1024 ** 2,
        }


class TestHttpClientConfig:
    """Test HTTP client configuration"""

    def test_from_env(self):
        with patch.dict(os.environ, {
            "SEAM_RPC_HTTP_ENDPOINT": "http://rpc.internal:8080/",
            "SEAM_RPC_HTTP_TIMEOUT": "2.5"
        }):
            config = HttpClientConfig.from_env()
            assert config.endpoint == "http://rpc.internal:8080/"
            assert config.timeout_seconds == 2.5

    def test_defaults_without_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = HttpClientConfig.from_env()
            assert config.endpoint == "http://localhost:8000"
            assert config.timeout_seconds == 10.0


class TestTelemetryConfig:
    """Test telemetry configuration"""

    def test_disabled_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            config = TelemetryConfig.from_env()
            assert config.enable_tracing is False
            assert config.enable_metrics is False
            assert config.service_name == "seam-rpc"

    @pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("off", False)])
    def test_boolean_flags(self, value, expected):
        with patch.dict(os.environ, {"SEAM_RPC_ENABLE_TRACING": value, "SEAM_RPC_ENABLE_METRICS": value}):
            config = TelemetryConfig.from_env()
            assert config.enable_tracing is expected
            assert config.enable_metrics is expected

    def test_otlp_endpoint(self):
        with patch.dict(os.environ, {"OTEL_EXPORTER_OTLP_ENDPOINT": "collector:4317"}):
            assert TelemetryConfig.from_env().otlp_endpoint == "collector:4317"
