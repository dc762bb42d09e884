from __future__ import annotations

import typer

from .commands import auth_cmd, items_cmd, orders_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="tgtg",
        help="Too Good To Go CLI",
        no_args_is_help=True,
    )

    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(items_cmd.app, name="items")
    app.add_typer(orders_cmd.app, name="orders")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
