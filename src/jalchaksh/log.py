"""Logging setup for command-line entry points."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from jalchaksh.config import LOG_LEVEL


def setup_logging(level: str | int = LOG_LEVEL) -> None:
    """Route the root logger through a single RichHandler on stderr.

    stdout stays free for command output such as ``detect --json``.
    """
    root = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)
    root.setLevel(level)
