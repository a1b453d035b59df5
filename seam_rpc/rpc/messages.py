"""
JSON-RPC 2.0 message types

Request, Response and ErrorObject are plain values owned by a single
dispatch cycle. Responses are built through the helpers below so a
response never carries both a result and an error.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

JSONRPC_VERSION = "2.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
SERVER_ERROR = -32000

RequestId = Optional[Union[int, str]]


@dataclass(frozen=True)
class ErrorObject:
    code: int
    message: str
    data: Any = None

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


@dataclass
class Request:
    """A decoded JSON-RPC request

    A request whose id is None is a notification. It is still answered.
    """

    method: str
    id: RequestId = None
    params: Any = None
    jsonrpc: str = JSONRPC_VERSION

    @property
    def is_notification(self) -> bool:
        return self.id is None

    def to_dict(self) -> Dict[str, Any]:
        request = {"jsonrpc": self.jsonrpc}
        if self.id is not None:
            request["id"] = self.id
        request["method"] = self.method
        if self.params is not None:
            request["params"] = self.params
        return request


@dataclass
class Response:
    id: RequestId = None
    result: Any = None
    error: Optional[ErrorObject] = None
    jsonrpc: str = JSONRPC_VERSION

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "Response":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: RequestId, error: ErrorObject) -> "Response":
        return cls(id=request_id, error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        response = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            response["error"] = self.error.to_dict()
        else:
            response["result"] = self.result
        return response
