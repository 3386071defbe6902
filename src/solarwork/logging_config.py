# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

_configured = False


def configure_logging(level: str = "WARNING") -> None:
    """Install a rich stderr handler on the package logger.

    Calling it again only changes the level.
    """
    global _configured

    logger = logging.getLogger("solarwork")
    logger.setLevel(level.upper())

    if _configured:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    _configured = True
