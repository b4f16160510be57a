from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    Records go out as JSON lines unless plain text is asked for, either with
    force_format="plain" or COUNTRY_BROWSER_LOG_FORMAT=plain. The argument wins
    over the environment. Calling it again replaces the handler.
    """

    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv("COUNTRY_BROWSER_LOG_FORMAT", "json").lower()

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        # Local runs
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        # extra={...} fields become top-level JSON keys
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler.setFormatter(formatter)

    root.handlers.clear()
    root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
