"""
JSON-RPC 2.0 Implementation Module

The transport-independent protocol core:
- framing: newline frame reader for byte streams
- codec: payload <-> Request/Response conversion
- registry / methods: the fixed method table and built-in handlers
- dispatcher: one decode -> dispatch -> respond cycle per payload
"""

from .codec import decode_request, decode_response, encode_request, encode_response
from .dispatcher import Dispatcher
from .errors import (
    HandlerError,
    InvalidRequestError,
    InvalidResponseError,
    MethodNotFoundError,
    ParseError,
    RemoteCallError,
    RpcError,
    TransportError,
)
from .framing import encode_frame, read_frames
from .messages import ErrorObject, Request, Response
from .methods import BuiltinMethod, default_registry
from .registry import MethodRegistry

__all__ = [
    "BuiltinMethod",
    "Dispatcher",
    "ErrorObject",
    "HandlerError",
    "InvalidRequestError",
    "InvalidResponseError",
    "MethodNotFoundError",
    "MethodRegistry",
    "ParseError",
    "RemoteCallError",
    "Request",
    "Response",
    "RpcError",
    "TransportError",
    "decode_request",
    "decode_response",
    "default_registry",
    "encode_frame",
    "encode_request",
    "encode_response",
    "read_frames",
]
