import base64
import json

import httpx
import pytest
from typer.testing import CliRunner

import bitcoin_api.cli.bitcoin_cli as bitcoin_cli
from bitcoin_api.client import BitcoinClient
from bitcoin_api.transport.http import HttpxTransport

runner = CliRunner()


@pytest.fixture
def daemon(monkeypatch):
    """Route the CLI's client through a mock daemon and record requests."""
    state = {"status": 200, "body": b'{"result": null, "error": null}', "requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return httpx.Response(state["status"], content=state["body"])

    def make_client(endpoint):
        return BitcoinClient(endpoint, transport=HttpxTransport(mount=httpx.MockTransport(handler)))

    monkeypatch.setattr(bitcoin_cli, "BitcoinClient", make_client)
    return state


def test_call_prints_json_result(daemon):
    daemon["body"] = b'{"result": {"blocks": 812345, "chain": "main"}, "error": null}'
    result = runner.invoke(
        bitcoin_cli.app,
        ["call", "getblockchaininfo", "--url", "http://127.0.0.1:8332", "-u", "alice", "-p", "pw"],
    )
    assert result.exit_code == 0
    assert '"blocks": 812345' in result.output
    req = daemon["requests"][0]
    assert json.loads(req.content)["method"] == "getblockchaininfo"
    token = base64.b64encode(b"alice:pw").decode("ascii")
    assert req.headers["Authorization"] == f"Basic {token}"


def test_call_passes_params_in_order(daemon):
    daemon["body"] = b'{"result": "000000deadbeef", "error": null}'
    result = runner.invoke(
        bitcoin_cli.app, ["call", "getblockhash", "100", "extra", "--url", "http://127.0.0.1:8332"]
    )
    assert result.exit_code == 0
    assert "000000deadbeef" in result.output
    assert '"000000deadbeef"' not in result.output
    assert json.loads(daemon["requests"][0].content)["params"] == ["100", "extra"]


def test_call_reports_rpc_error(daemon):
    daemon["status"] = 500
    daemon["body"] = (
        b'{"result": null, "error": {"code": -8, "message": "Block height out of range"}}'
    )
    result = runner.invoke(
        bitcoin_cli.app, ["call", "getblockhash", "99999999", "--url", "http://127.0.0.1:8332"]
    )
    assert result.exit_code == 1
    assert "error code: -8" in result.output
    assert "Block height out of range" in result.output


def test_call_reports_decode_error(daemon):
    daemon["status"] = 401
    daemon["body"] = b""
    result = runner.invoke(
        bitcoin_cli.app, ["call", "getblockcount", "--url", "http://127.0.0.1:8332"]
    )
    assert result.exit_code == 2
    assert "401" in result.output


def test_call_without_url_is_configuration_error(daemon):
    result = runner.invoke(bitcoin_cli.app, ["call", "getblockcount"])
    assert result.exit_code == 2
    assert daemon["requests"] == []


def test_call_reads_config_file(daemon, tmp_path):
    cfg = tmp_path / "rpc.yaml"
    cfg.write_text("url: http://127.0.0.1:18443\nusername: bob\npassword: pw\n")
    daemon["body"] = b'{"result": 42, "error": null}'
    result = runner.invoke(bitcoin_cli.app, ["call", "getblockcount", "-c", str(cfg)])
    assert result.exit_code == 0
    assert "42" in result.output
    assert daemon["requests"][0].url.port == 18443


def test_call_empty_command_is_usage_error(daemon):
    result = runner.invoke(bitcoin_cli.app, ["call", "", "--url", "http://127.0.0.1:8332"])
    assert result.exit_code == 2
    assert daemon["requests"] == []


def test_call_accepts_negative_numeric_params(daemon):
    daemon["body"] = b'{"result": 0, "error": null}'
    result = runner.invoke(
        bitcoin_cli.app, ["call", "getblockhash", "-1", "--url", "http://127.0.0.1:8332"]
    )
    assert result.exit_code == 0
    assert json.loads(daemon["requests"][0].content)["params"] == ["-1"]
