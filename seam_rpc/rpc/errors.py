"""
JSON-RPC error taxonomy

Protocol failures (parse, validation, dispatch) are recovered inside the
dispatcher and turned into error responses. TransportError is the only
fatal class: it ends the stream or connection without a response.
"""

from typing import Any

from seam_rpc.rpc.messages import (
    ErrorObject,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
)


class RpcError(Exception):
    """Base class for failures that map onto a JSON-RPC error object"""

    code = SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str = None, data: Any = None):
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)

    def to_error_object(self) -> ErrorObject:
        return ErrorObject(code=self.code, message=self.message, data=self.data)


class ParseError(RpcError):
    """Payload is not syntactically valid JSON"""

    code = PARSE_ERROR
    default_message = "Parse error"


class InvalidRequestError(RpcError):
    """Payload is valid JSON but not a valid JSON-RPC 2.0 request"""

    code = INVALID_REQUEST
    default_message = "Invalid Request"


class MethodNotFoundError(RpcError):
    code = METHOD_NOT_FOUND
    default_message = "Method not found"


class HandlerError(RpcError):
    """Raised by handlers when their params have the wrong shape"""

    code = SERVER_ERROR
    default_message = "Handler execution failed"


class RemoteCallError(RpcError):
    """Client side: the peer answered with an error response"""

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        super().__init__(message, data)

    def __str__(self):
        text = f"Error {self.code}: {self.message}"
        if self.data is not None:
            text += f": {self.data}"
        return text


class InvalidResponseError(ValueError):
    """Client side: the reply is not a well-formed JSON-RPC 2.0 response"""


class TransportError(ConnectionError):
    """I/O failure on the underlying stream or socket"""
