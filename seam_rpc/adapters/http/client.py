"""
HTTP client adapter

Sends each JSON-RPC request as one POST body to a fixed endpoint and decodes
the single response body.
"""

import asyncio
import itertools
import logging
import time
from typing import Any

import aiohttp

from seam_rpc.adapters.adapter_interface import ClientAdapterInterface
from seam_rpc.rpc.codec import decode_response, encode_request
from seam_rpc.rpc.errors import InvalidResponseError, TransportError
from seam_rpc.rpc.messages import Request, Response
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.telemetry.tracer import inject_trace_headers

logger = logging.getLogger(__name__)

class HttpClient(ClientAdapterInterface):
    """aiohttp based JSON-RPC client"""

    def __init__(self,
                 endpoint: str = "http://localhost:8000",
                 timeout_seconds: float = 10.0):
        """Initialize the HTTP client

        Args:
            endpoint: URL of the JSON-RPC endpoint
            timeout_seconds: Total timeout per request
        """
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        self._ids = itertools.count(1)
        self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds)
            )
        return self._session

    async def request(self, method: str, params: Any = None, request_id=None) -> Response:
        """POST one request and decode the response body

        Args:
            method: Method name to call
            params: Method parameters
            request_id: Explicit request id (default: next integer)

        Raises:
            TransportError: Connection failed, timed out, or the server answered
                with a non-JSON-RPC HTTP error
            InvalidResponseError: The body is not a valid response
        """
        if request_id is None:
            request_id = next(self._ids)
        request = Request(method=method, id=request_id, params=params)
        headers = inject_trace_headers({"Content-Type": "application/json"})
        start_time = time.time()

        try:
            async with self._get_session().post(
                self.endpoint,
                data=encode_request(request).encode("utf-8"),
                headers=headers,
            ) as http_response:
                status = http_response.status
                body = await http_response.text()
        except aiohttp.ClientError as e:
            logger.error(f"HTTP request to {self.endpoint} failed: {str(e)}")
            increment_counter("rpc.client.errors", 1, {"type": "transport_error", "method": method})
            raise TransportError(f"HTTP request failed: {str(e)}") from e
        except asyncio.TimeoutError as e:
            increment_counter("rpc.client.errors", 1, {"type": "timeout", "method": method})
            raise TransportError(f"HTTP request timed out ({self.timeout_seconds}s)") from e

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, {"method": method})
        increment_counter("rpc.client.requests", 1, {"method": method})

        try:
            response = decode_response(body)
        except InvalidResponseError:
            if status != 200:
                raise TransportError(f"HTTP {status}: {body[:200]}") from None
            raise

        if response.id is not None and response.id != request.id:
            raise InvalidResponseError(f"Response id mismatch: {response.id!r} != {request.id!r}")
        if response.error is not None:
            logger.debug(f"RPC call {method} returned error {response.error.code}: {response.error.message}")
        return response

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
