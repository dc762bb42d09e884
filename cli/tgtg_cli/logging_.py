from __future__ import annotations

import logging

from rich.logging import RichHandler

from .console import err_console

# Loggers that get the verbose level; everything else stays at WARNING.
_VERBOSE_LOGGERS = ("tgtg_client", "tgtg_cli", "httpx")


def setup_logging(verbose: bool) -> None:
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    logging.basicConfig(level=logging.WARNING, format="%(name)s: %(message)s", handlers=[handler])

    level = logging.DEBUG if verbose else logging.WARNING
    for name in _VERBOSE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    # httpcore connection chatter is too noisy even with -v
    logging.getLogger("httpcore").setLevel(logging.INFO if verbose else logging.WARNING)
