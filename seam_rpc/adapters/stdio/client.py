"""
Stdio client adapter

Writes one request frame to a peer's input stream and reads exactly one
response frame from its output stream. Only one request is in flight at a
time: responses are correlated by order, and the id is checked as a guard.
"""

import asyncio
import itertools
import logging
import time
from typing import Any, Optional

from seam_rpc.adapters.adapter_interface import ClientAdapterInterface
from seam_rpc.rpc.codec import decode_response, encode_request
from seam_rpc.rpc.errors import InvalidResponseError, TransportError
from seam_rpc.rpc.framing import encode_frame, read_frames
from seam_rpc.rpc.messages import Request, Response
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.utils.streams import ByteSink, ByteSource

logger = logging.getLogger(__name__)

class StdioClient(ClientAdapterInterface):
    """JSON-RPC client over a pair of byte streams connected to a server"""

    def __init__(self, source: ByteSource, sink: ByteSink, process: Optional[asyncio.subprocess.Process] = None):
        """Initialize the stdio client

        Args:
            source: Stream carrying the server's responses
            sink: Stream carrying requests to the server
            process: Peer process, when the client started it
        """
        self.source = source
        self.sink = sink
        self.process = process
        self._frames = read_frames(source)
        self._ids = itertools.count(1)
        # Created on first request so the lock belongs to the loop that uses it
        self._in_flight: Optional[asyncio.Lock] = None

    @classmethod
    async def spawn(cls, *argv: str) -> "StdioClient":
        """Start a server process and connect to its stdin/stdout

        Args:
            argv: Program and arguments of the server process
        """
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
        )
        logger.info(f"Spawned stdio server {argv[0]} (pid {process.pid})")
        return cls(process.stdout, process.stdin, process=process)

    async def request(self, method: str, params: Any = None) -> Response:
        """Send a request frame and read the matching response frame

        Raises:
            TransportError: The peer closed its output or a stream failed
            InvalidResponseError: The reply is malformed or answers another id
        """
        if self._in_flight is None:
            self._in_flight = asyncio.Lock()
        async with self._in_flight:
            request = Request(method=method, id=next(self._ids), params=params)
            start_time = time.time()

            try:
                self.sink.write(encode_frame(encode_request(request)))
                await self.sink.drain()
            except (OSError, EOFError) as e:
                increment_counter("rpc.client.errors", 1, {"type": "transport_error", "method": method})
                raise TransportError(f"Failed to send request: {str(e)}") from e
            increment_counter("rpc.client.requests", 1, {"method": method})

            try:
                payload = await self._frames.__anext__()
            except StopAsyncIteration:
                increment_counter("rpc.client.errors", 1, {"type": "no_response", "method": method})
                raise TransportError("No response received") from None

            latency_ms = (time.time() - start_time) * 1000
            record_latency("rpc.client.latency", latency_ms, {"method": method})
            logger.debug(f"Received response for {method}, latency: {latency_ms:.2f}ms")

            response = decode_response(payload)
            if response.id != request.id:
                increment_counter("rpc.client.errors", 1, {"type": "id_mismatch", "method": method})
                raise InvalidResponseError(f"Response id mismatch: {response.id!r} != {request.id!r}")
            return response

    async def close(self) -> None:
        """Close the request stream and wait for a spawned peer to exit"""
        if hasattr(self.sink, "close"):
            self.sink.close()
            if hasattr(self.sink, "wait_closed"):
                try:
                    await self.sink.wait_closed()
                except (OSError, EOFError) as e:
                    logger.debug(f"Ignoring error while closing request stream: {str(e)}")
        if self.process is not None:
            returncode = await self.process.wait()
            logger.info(f"Stdio server exited with code {returncode}")
            self.process = None
