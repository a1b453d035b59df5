"""
Adapter factory

Creates server and client adapters (stdio, HTTP) from a type name and a
configuration dictionary, so callers select the transport at runtime.
"""

from typing import Dict, Any

from seam_rpc.adapters.adapter_interface import ClientAdapterInterface, ServerAdapterInterface
from seam_rpc.adapters.http.client import HttpClient
from seam_rpc.adapters.http.server import HttpServer
from seam_rpc.adapters.stdio.client import StdioClient
from seam_rpc.adapters.stdio.server import StdioServer
from seam_rpc.config import HttpClientConfig, HttpServerConfig
from seam_rpc.rpc.dispatcher import Dispatcher

class AdapterType:
    """Adapter type constants"""
    STDIO = "stdio"
    HTTP = "http"

class AdapterFactory:
    """Adapter factory, used to create transport adapter instances"""

    @staticmethod
    def create_client(adapter_type: str, config: Dict[str, Any] = None) -> ClientAdapterInterface:
        """Create client adapter

        Args:
            adapter_type: Adapter type, "stdio" or "http"
            config: Adapter configuration. The stdio client needs "source" and
                "sink" streams; use StdioClient.spawn() to start a peer process.

        Returns:
            ClientAdapterInterface: Client adapter instance

        Raises:
            ValueError: Invalid adapter type or missing stdio streams
        """
        if config is None:
            config = {}

        if adapter_type.lower() == AdapterType.STDIO:
            if "source" not in config or "sink" not in config:
                raise ValueError("stdio client requires 'source' and 'sink' streams")
            return StdioClient(config["source"], config["sink"])
        elif adapter_type.lower() == AdapterType.HTTP:
            defaults = HttpClientConfig()
            return HttpClient(
                endpoint=config.get("endpoint", defaults.endpoint),
                timeout_seconds=config.get("timeout_seconds", defaults.timeout_seconds)
            )
        else:
            raise ValueError(f"Invalid adapter type: {adapter_type}")

    @staticmethod
    def create_server(adapter_type: str,
                      dispatcher: Dispatcher,
                      config: Dict[str, Any] = None) -> ServerAdapterInterface:
        """Create server adapter

        Args:
            adapter_type: Adapter type, "stdio" or "http"
            dispatcher: Dispatcher serving the requests
            config: Adapter configuration

        Returns:
            ServerAdapterInterface: Server adapter instance

        Raises:
            ValueError: Invalid adapter type
        """
        if config is None:
            config = {}

        if adapter_type.lower() == AdapterType.STDIO:
            return StdioServer(
                dispatcher,
                source=config.get("source"),
                sink=config.get("sink")
            )
        elif adapter_type.lower() == AdapterType.HTTP:
            defaults = HttpServerConfig()
            return HttpServer(dispatcher, HttpServerConfig(
                host=config.get("host", defaults.host),
                port=config.get("port", defaults.port),
                path=config.get("path", defaults.path),
                client_max_size=config.get("client_max_size", defaults.client_max_size)
            ))
        else:
            raise ValueError(f"Invalid adapter type: {adapter_type}")
