"""
Tests for the command line entry points
"""
import pytest

from seam_rpc import cli
from seam_rpc.rpc.errors import RemoteCallError, TransportError


class FakeClient:
    def __init__(self):
        self.calls = []

    async def call(self, method, params=None):
        self.calls.append((method, params))
        return {"echo": "Hello, JSON-RPC!", "add": 25}[method]


class TestParser:
    """Test argument parsing"""

    def test_http_server_options(self):
        args = cli.build_parser().parse_args(["http-server", "--port", "9000", "--path", "/rpc"])
        assert args.command == "http-server"
        assert args.port == 9000
        assert args.path == "/rpc"

    def test_stdio_client_server_cmd(self):
        args = cli.build_parser().parse_args(["stdio-client", "--server-cmd", "python", "server.py"])
        assert args.server_cmd == ["python", "server.py"]

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


@pytest.mark.asyncio
async def test_demo_calls(capsys):
    client = FakeClient()
    await cli.run_demo_calls(client)
    assert client.calls == [("echo", {"text": "Hello, JSON-RPC!"}), ("add", [10, 15])]
    out = capsys.readouterr().out
    assert "Echo result: Hello, JSON-RPC!" in out
    assert "Add result: 25" in out


def test_http_client_config_from_arguments(monkeypatch):
    seen = {}

    async def fake_run_http_client(config):
        seen["endpoint"] = config.endpoint
        return 0

    monkeypatch.setattr(cli, "run_http_client", fake_run_http_client)
    assert cli.main(["http-client", "--endpoint", "http://127.0.0.1:9999/"]) == 0
    assert seen["endpoint"] == "http://127.0.0.1:9999/"


@pytest.mark.parametrize("error,code", [
    (RemoteCallError(-32601, "Method not found"), 1),
    (TransportError("connection refused"), 2),
])
def test_failures_map_to_exit_codes(monkeypatch, error, code):
    async def failing_run_http_client(config):
        raise error

    monkeypatch.setattr(cli, "run_http_client", failing_run_http_client)
    assert cli.main(["http-client"]) == code
