from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from bing_translator.core.config import LogLevel


def setup_logging(level: LogLevel = LogLevel.WARNING, *, console: Console | None = None) -> None:
    """Route every package logger through a single Rich handler on stderr."""

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.value)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(root.level, logging.WARNING))
