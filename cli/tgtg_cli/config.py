from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from tgtg_client.config_types import DEFAULT_BASE_URL, DEFAULT_USER_AGENT

APP_NAME = "tgtg"
CONFIG_FILENAME = "config.toml"
ENV_BASE_URL = "TGTG_BASE_URL"
DEFAULT_DEVICE_TYPE = "ANDROID"


@dataclass
class AuthConfig:
    access_token: str = ""
    refresh_token: str = ""
    user_id: str = ""
    polling_id: str = ""


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    device_type: str = DEFAULT_DEVICE_TYPE
    email: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    auth: AuthConfig = field(default_factory=AuthConfig)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None) -> str:
    """Add a scheme if missing and make sure the URL ends with "/".

    Request paths are resolved relative to the base URL, so "https://host/api"
    would otherwise drop the "api" segment.
    """
    value = (raw or "").strip()
    if not value:
        return ""
    lowered = value.lower()
    if not (lowered.startswith("http://") or lowered.startswith("https://")):
        host = value.split("/", 1)[0].split(":", 1)[0].lower()
        scheme = "http://" if host in {"localhost", "127.0.0.1", "0.0.0.0"} else "https://"
        value = f"{scheme}{value}"
    if not value.endswith("/"):
        value += "/"
    return value


def resolve_base_url(cfg: AppConfig, override: str | None = None) -> str:
    for candidate in (override, os.getenv(ENV_BASE_URL, ""), cfg.base_url):
        value = normalize_base_url(candidate)
        if value:
            return value
    return DEFAULT_BASE_URL


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "user_agent": cfg.user_agent,
        "device_type": cfg.device_type,
        "email": cfg.email,
        "headers": dict(cfg.headers),
        "auth": {
            "access_token": cfg.auth.access_token,
            "refresh_token": cfg.auth.refresh_token,
            "user_id": cfg.auth.user_id,
            "polling_id": cfg.auth.polling_id,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.base_url = normalize_base_url(str(data.get("base_url") or "")) or DEFAULT_BASE_URL
    cfg.user_agent = str(data.get("user_agent") or "").strip() or DEFAULT_USER_AGENT
    cfg.device_type = str(data.get("device_type") or "").strip().upper() or DEFAULT_DEVICE_TYPE
    cfg.email = str(data.get("email") or "").strip()

    headers_raw = data.get("headers") or {}
    if isinstance(headers_raw, dict):
        cfg.headers = {str(k): str(v) for k, v in headers_raw.items() if isinstance(v, (str, int, float))}

    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth = AuthConfig(
            access_token=str(auth_raw.get("access_token") or ""),
            refresh_token=str(auth_raw.get("refresh_token") or ""),
            user_id=str(auth_raw.get("user_id") or ""),
            polling_id=str(auth_raw.get("polling_id") or ""),
        )
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
