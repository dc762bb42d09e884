from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from tgtg_client import WireModel

console = Console()
err_console = Console(stderr=True)


def print_model(model: WireModel) -> None:
    """Print an API response as JSON, timestamps in ISO-8601."""
    console.print_json(model.model_dump_json())


def info(msg: str) -> None:
    console.print(f"[cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    console.print(f"[bold green]✓[/] {escape(msg)}")


def warn(msg: str) -> None:
    err_console.print(f"[bold yellow]![/] {escape(msg)}")


def err(msg: str) -> None:
    err_console.print(f"[bold red]✗[/] {escape(msg)}")


def print(*args, **kwargs):
    console.print(*args, **kwargs)
