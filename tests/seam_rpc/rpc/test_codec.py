"""
Tests for the JSON-RPC message codec
"""
import json

import pytest

from seam_rpc.rpc.codec import decode_request, decode_response, encode_request, encode_response
from seam_rpc.rpc.errors import InvalidRequestError, InvalidResponseError, ParseError
from seam_rpc.rpc.messages import ErrorObject, Request, Response


class TestDecodeRequest:
    """Test request parsing and validation"""

    def test_valid_request(self):
        request = decode_request('{"jsonrpc":"2.0","id":1,"method":"echo","params":{"text":"hi"}}')
        assert request == Request(method="echo", id=1, params={"text": "hi"})
        assert not request.is_notification

    def test_request_without_id_is_notification(self):
        request = decode_request('{"jsonrpc":"2.0","method":"add","params":[1,2]}')
        assert request.id is None
        assert request.is_notification

    def test_string_id_and_missing_params(self):
        request = decode_request('{"jsonrpc":"2.0","id":"abc","method":"ping"}')
        assert request.id == "abc"
        assert request.params is None

    @pytest.mark.parametrize("payload", [
        "not json",
        "",
        "{",
        '{"jsonrpc":"2.0",}',
        "NaN",
        "-Infinity",
        '{"jsonrpc":"2.0","id":1,"method":"add","params":[NaN,1]}',
        '{"jsonrpc":"2.0","id":1,"method":"add","params":[Infinity,1]}',
        pytest.param("[" * 100000, id="deeply-nested"),
    ])
    def test_malformed_json_is_parse_error(self, payload):
        with pytest.raises(ParseError) as exc_info:
            decode_request(payload)
        assert exc_info.value.code == -32700
        assert exc_info.value.message == "Parse error"

    @pytest.mark.parametrize("payload", [
        '{"jsonrpc":"2.0","id":1}',
        '{"jsonrpc":"1.0","id":1,"method":"echo"}',
        '{"id":1,"method":"echo"}',
        '{"jsonrpc":"2.0","id":1,"method":""}',
        '{"jsonrpc":"2.0","id":1,"method":42}',
        '{"jsonrpc":"2.0","id":true,"method":"echo"}',
        '{"jsonrpc":"2.0","id":{"a":1},"method":"echo"}',
        '[{"jsonrpc":"2.0","id":1,"method":"echo"}]',
        '42',
    ])
    def test_invalid_request(self, payload):
        with pytest.raises(InvalidRequestError) as exc_info:
            decode_request(payload)
        assert exc_info.value.code == -32600
        assert exc_info.value.message == "Invalid Request"


class TestEncodeResponse:
    """Test response serialization"""

    def test_success_is_compact_and_ordered(self):
        assert encode_response(Response.success(1, "hi")) == '{"jsonrpc":"2.0","id":1,"result":"hi"}'

    def test_error_omits_result_and_empty_data(self):
        response = Response.failure(3, ErrorObject(-32601, "Method not found"))
        assert encode_response(response) == (
            '{"jsonrpc":"2.0","id":3,"error":{"code":-32601,"message":"Method not found"}}'
        )

    def test_error_with_data(self):
        response = Response.failure(None, ErrorObject(-32000, "boom", data={"detail": 1}))
        decoded = json.loads(encode_response(response))
        assert decoded == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32000, "message": "boom", "data": {"detail": 1}},
        }
        assert "result" not in decoded

    def test_null_result_is_still_present(self):
        assert encode_response(Response.success(7, None)) == '{"jsonrpc":"2.0","id":7,"result":null}'

    def test_non_ascii_is_kept(self):
        assert encode_response(Response.success(1, "日本")) == '{"jsonrpc":"2.0","id":1,"result":"日本"}'

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_numbers_are_not_written(self, value):
        with pytest.raises(ValueError):
            encode_response(Response.success(1, value))


class TestClientSide:
    """Test the request encoder and response decoder used by clients"""

    def test_encode_request(self):
        payload = encode_request(Request(method="add", id=2, params=[10, 15]))
        assert payload == '{"jsonrpc":"2.0","id":2,"method":"add","params":[10,15]}'

    def test_encode_notification_omits_id(self):
        payload = encode_request(Request(method="echo"))
        assert payload == '{"jsonrpc":"2.0","method":"echo"}'

    def test_result_survives_round_trip(self):
        result = {"nested": [1, 2.5, "three", None, True], "empty": {}}
        response = decode_response(encode_response(Response.success(9, result)))
        assert response.result == result
        assert response.id == 9
        assert not response.is_error

    def test_decode_error_response(self):
        response = decode_response('{"jsonrpc":"2.0","id":null,"error":{"code":-32700,"message":"Parse error"}}')
        assert response.is_error
        assert response.error == ErrorObject(-32700, "Parse error")

    @pytest.mark.parametrize("payload", [
        "Method Not Allowed",
        '{"id":1,"result":1}',
        '{"jsonrpc":"2.0","id":1}',
        '{"jsonrpc":"2.0","id":1,"result":1,"error":{"code":1,"message":"x"}}',
        '{"jsonrpc":"2.0","id":1,"error":"boom"}',
        '{"jsonrpc":"2.0","id":1,"error":{"code":"x","message":"boom"}}',
    ])
    def test_malformed_response(self, payload):
        with pytest.raises(InvalidResponseError):
            decode_response(payload)

    @pytest.mark.parametrize("payload", [
        '{"jsonrpc":"2.0","id":1,"result":NaN}',
        pytest.param('{"jsonrpc":"2.0","id":1,"result":' + "[" * 100000, id="deeply-nested"),
    ])
    def test_non_json_response(self, payload):
        with pytest.raises(InvalidResponseError, match="not valid JSON"):
            decode_response(payload)
