from __future__ import annotations

import time

import httpx
import typer
from rich.table import Table

from tgtg_client import DecodeError, TgtgClientError
from tgtg_client.auth_types import LoginRequest, PollRequest, SignupRequest

from .. import console
from ..config import load_config, save_config
from ..formatting import mask_token
from ..http import fail, make_client, save_session

app = typer.Typer(help="Auth commands.")


@app.command("login")
def login(
    email: str = typer.Option(..., "--email", prompt=True, help="Account e-mail."),
    device_type: str | None = typer.Option(None, "--device-type", help="ANDROID or IOS."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    if device_type:
        cfg.device_type = device_type.strip().upper()
    client = make_client(cfg, base_url_override=base_url)
    try:
        resp = client.auth.login(LoginRequest(device_type=cfg.device_type, email=email))
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Login", e)
    finally:
        client.close()

    cfg.email = email
    cfg.auth.polling_id = resp.polling_id
    save_config(cfg)
    console.ok(f"Login e-mail sent to {email} (state: {resp.state or '-'}).")
    console.info("Open the link from the e-mail, then run `tgtg auth poll`.")


@app.command("poll")
def poll(
    wait: bool = typer.Option(False, "--wait", help="Keep polling until the login is confirmed."),
    interval: int = typer.Option(5, "--interval", help="Seconds between polls with --wait."),
    timeout: int = typer.Option(300, "--timeout", help="Give up after this many seconds with --wait."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    if not cfg.email or not cfg.auth.polling_id:
        console.err("No login in progress. Run `tgtg auth login` first.")
        raise typer.Exit(code=2)

    request = PollRequest(device_type=cfg.device_type, email=cfg.email, request_polling_id=cfg.auth.polling_id)
    client = make_client(cfg, base_url_override=base_url)
    deadline = time.monotonic() + max(0, timeout)
    try:
        while True:
            try:
                client.auth.poll(request)
                break
            except DecodeError:
                # 202 with an empty body: the e-mail link was not clicked yet
                if not wait or time.monotonic() >= deadline:
                    console.warn("Login not confirmed yet. Click the link in the e-mail and poll again.")
                    raise typer.Exit(code=1)
            time.sleep(max(1, interval))
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Poll", e)
    finally:
        client.close()

    cfg.auth.polling_id = ""
    save_path = save_session(cfg, client)
    console.ok(f"Logged in as user {client.auth_context.user_id}. Tokens saved to {save_path}.")


@app.command("refresh")
def refresh(
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    try:
        client.auth.refresh()
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Refresh", e)
    finally:
        client.close()

    save_path = save_session(cfg, client)
    console.ok(f"Tokens refreshed and saved to {save_path}.")


@app.command("signup")
def signup(
    email: str = typer.Option(..., "--email", prompt=True, help="Account e-mail."),
    name: str = typer.Option(..., "--name", prompt=True, help="Display name."),
    country_id: str = typer.Option(..., "--country-id", help="Country code, e.g. GB."),
    newsletter: bool = typer.Option(False, "--newsletter/--no-newsletter", help="Opt in to the newsletter."),
    push_notifications: bool = typer.Option(False, "--push/--no-push", help="Opt in to push notifications."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)
    request = SignupRequest(
        country_id=country_id.strip().upper(),
        device_type=cfg.device_type,
        email=email,
        name=name,
        newsletter_opt_in=newsletter,
        push_notification_opt_in=push_notifications,
    )
    try:
        resp = client.auth.signup(request)
    except (TgtgClientError, httpx.HTTPError) as e:
        fail("Signup", e)
    finally:
        client.close()

    cfg.email = email
    save_path = save_session(cfg, client)
    if json_out:
        console.print_model(resp)
        return
    console.ok(f"Account created for {email}. Tokens saved to {save_path}.")


@app.command("status")
def status():
    cfg = load_config()
    table = Table(title="Session")
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("base_url", cfg.base_url)
    table.add_row("email", cfg.email or "-")
    table.add_row("device_type", cfg.device_type)
    table.add_row("user_id", cfg.auth.user_id or "-")
    table.add_row("access_token", mask_token(cfg.auth.access_token))
    table.add_row("refresh_token", mask_token(cfg.auth.refresh_token))
    table.add_row("pending login", "yes" if cfg.auth.polling_id else "no")
    console.print(table)


@app.command("logout", help="Forget stored tokens. The API has no logout call.")
def logout():
    cfg = load_config()
    cfg.auth.access_token = ""
    cfg.auth.refresh_token = ""
    cfg.auth.user_id = ""
    cfg.auth.polling_id = ""
    save_path = save_config(cfg)
    console.ok(f"Session cleared from {save_path}.")
