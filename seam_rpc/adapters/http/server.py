"""
HTTP server adapter

Serves JSON-RPC 2.0 with aiohttp: one POST body is one request payload and
the response body is the encoded response. JSON-RPC errors are application
level and travel with status 200; only failures before the dispatcher runs
change the HTTP status.
"""

import asyncio
import logging
import time

from aiohttp import web

from seam_rpc.adapters.adapter_interface import ServerAdapterInterface
from seam_rpc.config import HttpServerConfig
from seam_rpc.rpc.codec import encode_response
from seam_rpc.rpc.dispatcher import Dispatcher
from seam_rpc.rpc.errors import ParseError
from seam_rpc.rpc.messages import Response
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.telemetry.tracer import extract_trace_context, with_trace_context

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

class HttpServer(ServerAdapterInterface):
    """aiohttp based JSON-RPC server, one dispatch cycle per request"""

    def __init__(self, dispatcher: Dispatcher, config: HttpServerConfig = None):
        """Initialize the HTTP server

        Args:
            dispatcher: Dispatcher shared by all concurrent requests
            config: Listen address, endpoint path and body size limit
        """
        self.dispatcher = dispatcher
        self.config = config or HttpServerConfig()
        self.runner = None
        self._stopped = None
        self._serving = False

    def build_app(self) -> web.Application:
        """Create the aiohttp application serving the RPC endpoint"""
        app = web.Application(client_max_size=self.config.client_max_size)
        app.router.add_route("*", self.config.path, self.handle)
        return app

    async def handle(self, request: web.Request) -> web.Response:
        """Handle one HTTP request"""
        if request.method != "POST":
            logger.info(f"Rejected {request.method} {request.path}: method not allowed")
            increment_counter("rpc.http.rejected", 1, {"method": request.method})
            return web.Response(status=405, text="Method Not Allowed", headers={"Allow": "POST"})

        start_time = time.time()
        body = await request.read()
        try:
            payload = body.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Request body is not UTF-8 text: {str(e)}")
            increment_counter("rpc.server.errors", 1, {"type": "parse_error"})
            return web.Response(
                status=400,
                text=encode_response(Response.failure(None, ParseError().to_error_object())),
                content_type=JSON_CONTENT_TYPE,
            )

        with with_trace_context(extract_trace_context(request.headers)):
            response_text = await self.dispatcher.handle_payload_text(payload)

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.http.request.latency", latency_ms)
        logger.debug(f"Answered POST {request.path} in {latency_ms:.2f}ms")

        return web.Response(text=response_text, content_type=JSON_CONTENT_TYPE)

    async def start(self):
        """Bind the listening socket and start accepting requests"""
        self.runner = web.AppRunner(self.build_app())
        await self.runner.setup()
        site = web.TCPSite(self.runner, self.config.host, self.config.port)
        await site.start()
        self._stopped = asyncio.Event()
        logger.info(f"JSON-RPC HTTP server listening on http://{self.config.host}:{self.config.port}{self.config.path}")

    async def serve(self):
        """Start the server and run until stop() is called"""
        if self.runner is None:
            await self.start()
        self._serving = True
        try:
            await self._stopped.wait()
        finally:
            self._serving = False
            await self._cleanup()

    async def stop(self):
        """Stop the server"""
        if self._serving:
            self._stopped.set()
        else:
            await self._cleanup()

    async def _cleanup(self):
        if self.runner is not None:
            await self.runner.cleanup()
            self.runner = None
            logger.info("JSON-RPC HTTP server stopped")
