"""
JSON-RPC dispatcher

Runs one request/response cycle: decode -> validate -> resolve -> invoke.
Every protocol and handler failure is converted into an error response here;
only TransportError is left to the caller.
"""

import inspect
import logging
import time

from seam_rpc.rpc.codec import decode_request, encode_response
from seam_rpc.rpc.errors import MethodNotFoundError, RpcError
from seam_rpc.rpc.messages import PARSE_ERROR, SERVER_ERROR, ErrorObject, Request, Response
from seam_rpc.rpc.registry import MethodRegistry
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.telemetry.tracer import create_span

logger = logging.getLogger(__name__)


def _failure_message(exc: BaseException) -> str:
    if isinstance(exc, RpcError):
        return exc.message
    return str(exc) or type(exc).__name__


class Dispatcher:
    """Maps payloads to responses using a read-only method registry

    A Dispatcher holds no per-cycle state, so one instance can serve
    concurrent cycles.
    """

    def __init__(self, registry: MethodRegistry):
        self.registry = registry

    async def handle_payload(self, payload: str) -> Response:
        """Run a full cycle for one payload

        Decoding, resolution and the handler call all run inside one
        rpc.dispatch span, so rejected payloads are traced too.

        Args:
            payload: One frame or one HTTP body

        Returns:
            Response: Always produced, including for notifications
        """
        start_time = time.time()
        increment_counter("rpc.server.requests.received", 1)

        with create_span("rpc.dispatch", {"rpc.system": "jsonrpc"}) as span:
            try:
                request = decode_request(payload)
            except RpcError as e:
                error_type = "parse_error" if e.code == PARSE_ERROR else "invalid_request"
                logger.warning(f"Rejected payload ({error_type}): {payload[:200]!r}")
                increment_counter("rpc.server.errors", 1, {"type": error_type})
                span.set_attribute("rpc.jsonrpc.error_code", e.code)
                return Response.failure(None, e.to_error_object())

            span.set_attribute("rpc.method", request.method)
            response = await self.dispatch(request)
            if response.is_error:
                span.set_attribute("rpc.jsonrpc.error_code", response.error.code)

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.server.request.latency", latency_ms, {"method": request.method})
        logger.debug(f"Cycle for {request.method} (id={request.id!r}) finished in {latency_ms:.2f}ms")

        return response

    async def dispatch(self, request: Request) -> Response:
        """Resolve and invoke the handler for an already decoded request"""
        handler = self.registry.resolve(request.method)
        if handler is None:
            logger.info(f"Method not found: {request.method}")
            increment_counter("rpc.server.errors", 1, {"type": "method_not_found"})
            return Response.failure(request.id, MethodNotFoundError().to_error_object())

        increment_counter("rpc.server.method.calls", 1, {"method": request.method})
        try:
            result = handler(request.params)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.warning(f"Handler for {request.method} failed: {_failure_message(e)}")
            increment_counter("rpc.server.method.errors", 1, {"method": request.method})
            return Response.failure(
                request.id,
                ErrorObject(code=SERVER_ERROR, message=_failure_message(e)),
            )

        return Response.success(request.id, result)

    async def handle_payload_text(self, payload: str) -> str:
        """Run a cycle and return the encoded response"""
        response = await self.handle_payload(payload)
        try:
            return encode_response(response)
        except (TypeError, ValueError, RecursionError) as e:
            logger.error(f"Result of request id={response.id!r} is not JSON serializable: {str(e)}")
            increment_counter("rpc.server.errors", 1, {"type": "unserializable_result"})
            return encode_response(Response.failure(
                response.id,
                ErrorObject(code=SERVER_ERROR, message=f"Result is not JSON serializable: {str(e)}"),
            ))

