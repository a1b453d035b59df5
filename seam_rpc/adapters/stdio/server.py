"""
Stdio server adapter

Serves JSON-RPC 2.0 over a byte stream, one newline-delimited frame per
request and one frame per response. Frames are processed strictly in order:
a frame is fully dispatched before the next one is read.
"""

import logging
import time

from seam_rpc.adapters.adapter_interface import ServerAdapterInterface
from seam_rpc.rpc.dispatcher import Dispatcher
from seam_rpc.rpc.errors import TransportError
from seam_rpc.rpc.framing import encode_frame, read_frames
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.utils.streams import ByteSink, ByteSource, open_stdio

logger = logging.getLogger(__name__)

class StdioServer(ServerAdapterInterface):
    """JSON-RPC server over a readable source and a writable sink"""

    def __init__(self,
                 dispatcher: Dispatcher,
                 source: ByteSource = None,
                 sink: ByteSink = None):
        """Initialize the stdio server

        Args:
            dispatcher: Dispatcher running each cycle
            source: Byte source to read frames from (default: process stdin)
            sink: Byte sink to write responses to (default: process stdout)
        """
        if source is None or sink is None:
            stdin, stdout = open_stdio()
            source = source or stdin
            sink = sink or stdout
        self.dispatcher = dispatcher
        self.source = source
        self.sink = sink
        self.running = False
        self.frames_processed = 0

    async def serve(self) -> int:
        """Process frames until end of input

        Returns:
            int: Number of frames answered

        Raises:
            TransportError: Reading or writing the stream failed
        """
        self.running = True
        logger.info("Stdio server reading frames")

        try:
            async for payload in read_frames(self.source):
                start_time = time.time()
                response = await self.dispatcher.handle_payload_text(payload)
                await self._write(response)
                self.frames_processed += 1

                latency_ms = (time.time() - start_time) * 1000
                record_latency("rpc.stdio.frame.latency", latency_ms)
                if not self.running:
                    break
        finally:
            self.running = False

        logger.info(f"Stdio input ended after {self.frames_processed} frames")
        return self.frames_processed

    async def stop(self):
        """Stop after the frame currently being processed"""
        self.running = False

    async def _write(self, payload: str):
        try:
            self.sink.write(encode_frame(payload))
            await self.sink.drain()
        except (OSError, EOFError) as e:
            logger.error(f"Write to stdout failed: {str(e)}")
            increment_counter("rpc.server.errors", 1, {"type": "transport_error"})
            raise TransportError(f"Stream write failed: {str(e)}") from e
