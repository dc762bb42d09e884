from __future__ import annotations

from typing import NoReturn

import httpx
import typer

from tgtg_client import ApiError, ArgumentError, AuthError, ClientConfig, ConfigurationError, DecodeError, TgtgClient

from . import console
from .config import AppConfig, resolve_base_url, save_config


def make_client(
    cfg: AppConfig,
    *,
    base_url_override: str | None = None,
    http_client: httpx.Client | None = None,
) -> TgtgClient:
    client = TgtgClient(
        ClientConfig(
            base_url=resolve_base_url(cfg, base_url_override),
            user_agent=cfg.user_agent,
            headers=dict(cfg.headers),
        ),
        http_client=http_client,
    )
    client.set_auth_context(cfg.auth.access_token, cfg.auth.refresh_token, cfg.auth.user_id)
    return client


def save_session(cfg: AppConfig, client: TgtgClient) -> str:
    """Copy the client's tokens and user id into the config file."""
    session = client.auth_context.snapshot()
    cfg.auth.access_token = session.access_token
    cfg.auth.refresh_token = session.refresh_token
    cfg.auth.user_id = session.user_id
    return save_config(cfg)


def fail(action: str, exc: Exception) -> NoReturn:
    if isinstance(exc, (ArgumentError, ConfigurationError)):
        console.err(f"{action} failed: {exc}")
    elif isinstance(exc, AuthError):
        console.err(f"{action} failed: unauthorized ({exc.status_code}). Try `tgtg auth refresh` or log in again.")
    elif isinstance(exc, ApiError):
        console.err(f"{action} failed: {exc}")
    elif isinstance(exc, DecodeError):
        console.err(f"{action} failed: unexpected response: {exc}")
    elif isinstance(exc, httpx.HTTPError):
        console.err(f"{action} failed: network error: {exc}")
    else:
        raise exc
    raise typer.Exit(code=2)
