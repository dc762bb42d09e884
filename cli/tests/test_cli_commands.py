from __future__ import annotations

import functools

import httpx
import pytest
from typer.testing import CliRunner

from tgtg_cli import config, http
from tgtg_cli.commands import auth_cmd, items_cmd, orders_cmd
from tgtg_cli.main import app

runner = CliRunner()


@pytest.fixture()
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    return tmp_path


@pytest.fixture()
def use_mock(monkeypatch, http_client):
    factory = functools.partial(http.make_client, http_client=http_client)
    for mod in (auth_cmd, items_cmd, orders_cmd):
        monkeypatch.setattr(mod, "make_client", factory)


def _save_session(access: str = "a", refresh: str = "r", user_id: str = "u1") -> None:
    cfg = config.load_config()
    cfg.auth.access_token = access
    cfg.auth.refresh_token = refresh
    cfg.auth.user_id = user_id
    config.save_config(cfg)


def test_help_lists_command_groups() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("auth", "items", "orders"):
        assert name in result.output


def test_login_then_poll_saves_session(config_dir, use_mock, recorder) -> None:
    recorder.on("/api/auth/v3/authByEmail", json_body={"polling_id": "pid", "state": "TERMS"})
    recorder.on(
        "/api/auth/v3/authByRequestPollingId",
        json_body={"access_token": "a", "refresh_token": "r", "startup_data": {"user": {"user_id": "1"}}},
    )

    result = runner.invoke(app, ["auth", "login", "--email", "me@example.com"])
    assert result.exit_code == 0, result.output
    cfg = config.load_config()
    assert cfg.email == "me@example.com"
    assert cfg.auth.polling_id == "pid"

    result = runner.invoke(app, ["auth", "poll"])
    assert result.exit_code == 0, result.output
    assert recorder.last_json() == {
        "device_type": "ANDROID",
        "email": "me@example.com",
        "request_polling_id": "pid",
    }
    cfg = config.load_config()
    assert (cfg.auth.access_token, cfg.auth.refresh_token, cfg.auth.user_id) == ("a", "r", "1")
    assert cfg.auth.polling_id == ""


def test_poll_pending(config_dir, use_mock, recorder) -> None:
    cfg = config.load_config()
    cfg.email = "me@example.com"
    cfg.auth.polling_id = "pid"
    config.save_config(cfg)
    recorder.on("/api/auth/v3/authByRequestPollingId", 202)

    result = runner.invoke(app, ["auth", "poll"])

    assert result.exit_code == 1
    assert "not confirmed" in result.output
    assert config.load_config().auth.access_token == ""


def test_poll_without_login(config_dir, use_mock, recorder) -> None:
    result = runner.invoke(app, ["auth", "poll"])

    assert result.exit_code == 2
    assert recorder.requests == []


def test_refresh_updates_tokens(config_dir, use_mock, recorder) -> None:
    _save_session()
    recorder.on("/api/auth/v3/token/refresh", json_body={"access_token": "a2", "refresh_token": "r2"})

    result = runner.invoke(app, ["auth", "refresh"])

    assert result.exit_code == 0, result.output
    cfg = config.load_config()
    assert (cfg.auth.access_token, cfg.auth.refresh_token, cfg.auth.user_id) == ("a2", "r2", "u1")


def test_refresh_without_session(config_dir, use_mock, recorder) -> None:
    result = runner.invoke(app, ["auth", "refresh"])

    assert result.exit_code == 2
    assert "refresh_request" in result.output


def test_logout_clears_session(config_dir) -> None:
    _save_session()

    result = runner.invoke(app, ["auth", "logout"])

    assert result.exit_code == 0
    assert config.load_config().auth == config.AuthConfig()


def test_items_list_json(config_dir, use_mock, recorder) -> None:
    _save_session()
    recorder.on(
        "/api/item/v7/",
        json_body={"items": [{"item": {"item_id": "123"}, "display_name": "Bakery", "items_available": 2}]},
    )

    result = runner.invoke(app, ["items", "list", "--lat", "52.1", "--lng", "21.0", "--json"])

    assert result.exit_code == 0, result.output
    assert '"item_id": "123"' in result.output
    sent = recorder.last_json()
    assert sent["user_id"] == "u1"
    assert sent["origin"] == {"latitude": 52.1, "longitude": 21.0}
    assert recorder.last.headers["Authorization"] == "Bearer a"


def test_items_list_requires_login(config_dir, use_mock, recorder) -> None:
    result = runner.invoke(app, ["items", "list"])

    assert result.exit_code == 2
    assert recorder.requests == []


def test_items_favorite_unauthorized(config_dir, use_mock, recorder) -> None:
    _save_session()
    recorder.on("/api/item/v7/123/setFavorite", 401, json_body={"errors": [{"code": "UNAUTHORIZED"}]})

    result = runner.invoke(app, ["items", "favorite", "123"])

    assert result.exit_code == 2
    assert "auth refresh" in result.output


def test_orders_inactive_table(config_dir, use_mock, recorder) -> None:
    _save_session()
    recorder.on(
        "/api/order/v6/inactive",
        json_body={"has_more": True, "orders": [{"order_id": "o1", "state": "REDEEMED", "quantity": 1}]},
    )

    result = runner.invoke(app, ["orders", "inactive", "--page", "0", "--size", "5"])

    assert result.exit_code == 0, result.output
    assert "o1" in result.output
    assert "--page 1" in result.output
    assert recorder.last_json()["paging"] == {"page": 0, "size": 5}


def test_network_error_exit_code(config_dir, monkeypatch) -> None:
    _save_session()

    def _boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    factory = functools.partial(http.make_client, http_client=httpx.Client(transport=httpx.MockTransport(_boom)))
    monkeypatch.setattr(orders_cmd, "make_client", factory)

    result = runner.invoke(app, ["orders", "active"])

    assert result.exit_code == 2
    assert "network error" in result.output
