from __future__ import annotations

import pytest

from tgtg_cli import config
from tgtg_client.config_types import DEFAULT_BASE_URL


@pytest.fixture()
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    return tmp_path


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("https://apptoogoodtogo.com/api/", "https://apptoogoodtogo.com/api/"),
        ("https://apptoogoodtogo.com/api", "https://apptoogoodtogo.com/api/"),
        ("example.com/api", "https://example.com/api/"),
        ("localhost:8080", "http://localhost:8080/"),
        ("  ", ""),
        (None, ""),
    ],
)
def test_normalize_base_url(raw, expected) -> None:
    assert config.normalize_base_url(raw) == expected


def test_load_missing_file_returns_defaults(config_dir) -> None:
    cfg = config.load_config()

    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.device_type == "ANDROID"
    assert cfg.auth.access_token == ""


def test_save_and_load_session(config_dir) -> None:
    cfg = config.default_config()
    cfg.email = "me@example.com"
    cfg.headers = {"X-Test": "1"}
    cfg.auth.access_token = "a"
    cfg.auth.refresh_token = "r"
    cfg.auth.user_id = "u"

    path = config.save_config(cfg)
    loaded = config.load_config()

    assert path == f"{config_dir}/config.toml"
    assert loaded == cfg


def test_from_toml_tolerates_junk(config_dir) -> None:
    (config_dir / "config.toml").write_text(
        '\n'.join(
            [
                'base_url = "api.test/v1"',
                'device_type = "ios"',
                'headers = "not a table"',
                "auth = 5",
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.load_config()

    assert cfg.base_url == "https://api.test/v1/"
    assert cfg.device_type == "IOS"
    assert cfg.headers == {}
    assert cfg.auth == config.AuthConfig()


def test_resolve_base_url_precedence(monkeypatch) -> None:
    cfg = config.default_config()
    cfg.base_url = "https://from-config.test/api/"

    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    assert config.resolve_base_url(cfg) == "https://from-config.test/api/"

    monkeypatch.setenv(config.ENV_BASE_URL, "https://from-env.test/api")
    assert config.resolve_base_url(cfg) == "https://from-env.test/api/"
    assert config.resolve_base_url(cfg, "https://override.test/") == "https://override.test/"
