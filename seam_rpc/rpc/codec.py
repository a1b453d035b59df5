"""
JSON-RPC message codec

Pure conversions between payload text and Request/Response values. The
server side uses decode_request/encode_response; clients use the mirror
pair encode_request/decode_response.
"""

import json
from typing import Any, Dict

from seam_rpc.rpc.errors import InvalidRequestError, InvalidResponseError, ParseError
from seam_rpc.rpc.messages import JSONRPC_VERSION, ErrorObject, Request, Response


def _dumps(message: Dict[str, Any]) -> str:
    # NaN and Infinity have no JSON spelling; dumps raises ValueError instead
    return json.dumps(message, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _loads(payload: str) -> Any:
    return json.loads(payload, parse_constant=_reject_constant)


def _is_valid_id(value: Any) -> bool:
    # bool is an int subclass but not a valid identifier
    return value is None or (isinstance(value, (int, str)) and not isinstance(value, bool))


def decode_request(payload: str) -> Request:
    """Parse and validate one request payload

    Args:
        payload: Request text, one frame or one HTTP body

    Returns:
        Request: The validated request

    Raises:
        ParseError: The payload is not valid JSON
        InvalidRequestError: Valid JSON that is not a JSON-RPC 2.0 request
    """
    try:
        message = _loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        raise ParseError() from e

    if not isinstance(message, dict):
        raise InvalidRequestError()
    if message.get("jsonrpc") != JSONRPC_VERSION:
        raise InvalidRequestError()

    method = message.get("method")
    if not isinstance(method, str) or not method:
        raise InvalidRequestError()

    request_id = message.get("id")
    if not _is_valid_id(request_id):
        raise InvalidRequestError()

    return Request(method=method, id=request_id, params=message.get("params"))


def encode_response(response: Response) -> str:
    return _dumps(response.to_dict())


def encode_request(request: Request) -> str:
    return _dumps(request.to_dict())


def decode_response(payload: str) -> Response:
    """Parse a response payload received by a client

    Raises:
        InvalidResponseError: The payload is not a well-formed response
    """
    try:
        message = _loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        raise InvalidResponseError(f"Response is not valid JSON: {str(e)}") from e

    if not isinstance(message, dict) or message.get("jsonrpc") != JSONRPC_VERSION:
        raise InvalidResponseError(f"Invalid JSON-RPC 2.0 response: {message!r}")
    if not _is_valid_id(message.get("id")):
        raise InvalidResponseError(f"Invalid response id: {message.get('id')!r}")

    has_result = "result" in message
    has_error = "error" in message
    if has_result == has_error:
        raise InvalidResponseError("Response must carry exactly one of result or error")

    if has_result:
        return Response.success(message.get("id"), message["result"])

    error = message["error"]
    if (
        not isinstance(error, dict)
        or not isinstance(error.get("code"), int)
        or isinstance(error.get("code"), bool)
        or not isinstance(error.get("message"), str)
    ):
        raise InvalidResponseError(f"Malformed error object: {error!r}")

    return Response.failure(
        message.get("id"),
        ErrorObject(code=error["code"], message=error["message"], data=error.get("data")),
    )
