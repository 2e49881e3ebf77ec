from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qsl

import requests

from bitcoincoid import cli
from bitcoincoid.core import BitcoinCoIdClient


class DummyResponse:
    status_code = 200

    def __init__(self, payload: Any) -> None:
        self.text = json.dumps(payload)

    def json(self) -> Any:
        return json.loads(self.text)


class DummySession:
    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload if payload is not None else {"success": 1, "return": {}}
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> DummyResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return DummyResponse(self.payload)


def patch_client(monkeypatch, session: DummySession) -> None:
    monkeypatch.setattr(
        cli,
        "build_client",
        lambda args: BitcoinCoIdClient("AK1", "SK1", session=session),  # type: ignore[arg-type]
    )


def test_ticker_command_prints_json(monkeypatch, capsys):
    payload = {"ticker": {"last": "100", "server_time": 1519000000}}
    session = DummySession(payload)
    patch_client(monkeypatch, session)

    assert cli.main(["ticker", "btc_idr"]) == 0

    assert json.loads(capsys.readouterr().out) == payload
    assert session.calls[0]["url"].endswith("/api/btc_idr/ticker")


def test_private_command_sends_params(monkeypatch, capsys):
    session = DummySession()
    patch_client(monkeypatch, session)

    assert cli.main(["private", "tradeHistory", "pair=xrp_idr", "count=10"]) == 0

    fields = dict(parse_qsl(session.calls[0]["data"].decode()))
    assert fields["method"] == "tradeHistory"
    assert fields["pair"] == "xrp_idr"
    assert fields["count"] == "10"
    assert json.loads(capsys.readouterr().out) == {"success": 1, "return": {}}


def test_private_command_rejects_malformed_param(monkeypatch, capsys):
    session = DummySession()
    patch_client(monkeypatch, session)

    assert cli.main(["private", "openOrders", "pair"]) == 2
    assert "key=value" in capsys.readouterr().err
    assert session.calls == []


def test_network_error_exit_code(monkeypatch, capsys):
    patch_client(monkeypatch, DummySession(error=requests.ConnectionError("refused")))

    assert cli.main(["depth", "btc_idr"]) == 1
    assert "refused" in capsys.readouterr().err


def test_private_command_without_credentials(clean_env, capsys):
    assert cli.main(["private", "getInfo"]) == 1
    assert "Failed to load settings" in capsys.readouterr().err


def test_private_command_builds_client_from_env_file(clean_env):
    env_file = clean_env / "bci.env"
    env_file.write_text("BCI_AK=file-key\nBCI_SK=file-secret\nBCI_TRADE_API_URL=https://example.test/tapi/\n")
    args = cli.parse_args(["--env-file", str(env_file), "private", "getInfo"])

    client = cli.build_client(args)

    assert client.api_key == "file-key"
    assert client.trade_url == "https://example.test/tapi/"


def test_public_command_uses_env_file_endpoint(clean_env):
    env_file = clean_env / "bci.env"
    env_file.write_text("BCI_PUBLIC_API_URL=https://mirror.test/api/\nBCI_TIMEOUT=3\n")
    args = cli.parse_args(["--env-file", str(env_file), "ticker", "btc_idr"])

    client = cli.build_client(args)

    assert client.public_url == "https://mirror.test/api/"
    assert client.timeout == 3.0
    assert client.api_key == ""


def test_private_command_accepts_unlisted_method(monkeypatch):
    session = DummySession()
    patch_client(monkeypatch, session)

    assert cli.main(["private", "listDownline", "page=2"]) == 0

    fields = dict(parse_qsl(session.calls[0]["data"].decode()))
    assert fields["method"] == "listDownline"
    assert fields["page"] == "2"
