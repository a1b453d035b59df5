"""
Command line entry points

    python -m seam_rpc stdio-server
    python -m seam_rpc http-server --port 8000
    python -m seam_rpc stdio-client
    python -m seam_rpc http-client --endpoint http://localhost:8000
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from seam_rpc.adapters.http.client import HttpClient
from seam_rpc.adapters.http.server import HttpServer
from seam_rpc.adapters.stdio.client import StdioClient
from seam_rpc.adapters.stdio.server import StdioServer
from seam_rpc.adapters.adapter_interface import ClientAdapterInterface
from seam_rpc.config import HttpClientConfig, HttpServerConfig, TelemetryConfig
from seam_rpc.rpc.dispatcher import Dispatcher
from seam_rpc.rpc.errors import RemoteCallError, TransportError
from seam_rpc.rpc.methods import default_registry
from seam_rpc.telemetry.metrics import setup_metrics
from seam_rpc.telemetry.tracer import setup_tracer

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure logging on stderr; stdout is reserved for stdio frames"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def setup_telemetry(config: TelemetryConfig):
    if config.enable_tracing:
        setup_tracer(config.service_name, config.otlp_endpoint)
    if config.enable_metrics:
        setup_metrics(config.service_name, config.otlp_endpoint)


async def run_demo_calls(client: ClientAdapterInterface):
    """Call echo and add and print the results"""
    echo_result = await client.call("echo", {"text": "Hello, JSON-RPC!"})
    print(f"Echo result: {echo_result}")

    add_result = await client.call("add", [10, 15])
    print(f"Add result: {add_result}")


async def run_stdio_server() -> int:
    server = StdioServer(Dispatcher(default_registry()))
    await server.serve()
    return 0


async def run_http_server(config: HttpServerConfig) -> int:
    server = HttpServer(Dispatcher(default_registry()), config)
    await server.serve()
    return 0


async def run_stdio_client(server_cmd: List[str]) -> int:
    client = await StdioClient.spawn(*server_cmd)
    try:
        await run_demo_calls(client)
    finally:
        await client.close()
    return 0


async def run_http_client(config: HttpClientConfig) -> int:
    async with HttpClient(config.endpoint, config.timeout_seconds) as client:
        await run_demo_calls(client)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seam-rpc",
        description="JSON-RPC 2.0 over stdio and HTTP"
    )
    parser.add_argument("--log-level", default="INFO",
                        help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("stdio-server", help="Serve requests on stdin/stdout")

    http_server = subparsers.add_parser("http-server", help="Serve requests over HTTP")
    http_server.add_argument("--host", help="Listen address")
    http_server.add_argument("--port", type=int, help="Listen port")
    http_server.add_argument("--path", help="Endpoint path")

    stdio_client = subparsers.add_parser("stdio-client", help="Spawn a stdio server and call it")
    stdio_client.add_argument(
        "--server-cmd", nargs=argparse.REMAINDER,
        help="Server command line (default: this interpreter running stdio-server)"
    )

    http_client = subparsers.add_parser("http-client", help="Call an HTTP server")
    http_client.add_argument("--endpoint", help="JSON-RPC endpoint URL")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    setup_telemetry(TelemetryConfig.from_env())

    try:
        if args.command == "stdio-server":
            return asyncio.run(run_stdio_server())

        elif args.command == "http-server":
            config = HttpServerConfig.from_env()
            if args.host:
                config.host = args.host
            if args.port:
                config.port = args.port
            if args.path:
                config.path = args.path
            return asyncio.run(run_http_server(config))

        elif args.command == "stdio-client":
            server_cmd = args.server_cmd or [sys.executable, "-m", "seam_rpc", "stdio-server"]
            return asyncio.run(run_stdio_client(server_cmd))

        elif args.command == "http-client":
            config = HttpClientConfig.from_env()
            if args.endpoint:
                config.endpoint = args.endpoint
            return asyncio.run(run_http_client(config))

    except RemoteCallError as e:
        logger.error(f"RPC call failed: {e}")
        return 1
    except TransportError as e:
        logger.error(f"Transport failure: {str(e)}")
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    return 1
