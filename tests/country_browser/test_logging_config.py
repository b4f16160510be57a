from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from country_browser.logging_config import configure_logging


def test_configure_logging_replaces_handlers_and_picks_format(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        monkeypatch.setenv("COUNTRY_BROWSER_LOG_FORMAT", "plain")
        configure_logging()
        configure_logging()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)

        configure_logging(force_format="json")
        assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
