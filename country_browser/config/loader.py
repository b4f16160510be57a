from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from country_browser.config.model import AppSettings
from country_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_API_URL = "COUNTRY_BROWSER_API_URL"
ENV_PAGE_SIZE = "COUNTRY_BROWSER_PAGE_SIZE"


def load_app_config(root: Path, environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    """
    Load settings from `root/global.json`, then apply environment overrides.

    Expected structure:

        root/
            global.json

    Every key is optional; a missing file yields the defaults of AppSettings.

    :param root: Directory that may contain 'global.json'.
    :param environ: Mapping used for overrides, defaults to os.environ.
    :return: An AppSettings instance.
    :raises ConfigError: if the file is not valid JSON or a value has the wrong type.
    """
    environ = os.environ if environ is None else environ
    root = Path(root)

    logger.info("Loading app config", extra={"config_root": str(root)})

    raw: Dict[str, Any] = {}
    global_path = root / "global.json"
    if global_path.is_file():
        try:
            with global_path.open() as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.info("No global.json found, using defaults", extra={"config_root": str(root)})

    if environ.get(ENV_API_URL):
        raw["api_url"] = environ[ENV_API_URL]
    if environ.get(ENV_PAGE_SIZE):
        raw["page_size"] = environ[ENV_PAGE_SIZE]

    defaults = AppSettings()

    return AppSettings(
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
        api_url=_require_url(raw.get("api_url", defaults.api_url)),
        page_size=_positive_int("page_size", raw.get("page_size", defaults.page_size)),
        request_timeout=_optional_seconds(
            "request_timeout", raw.get("request_timeout", defaults.request_timeout)
        ),
        search_debounce_seconds=_seconds(
            "search_debounce_seconds",
            raw.get("search_debounce_seconds", defaults.search_debounce_seconds),
        ),
    )


def _require_url(value: Any) -> str:
    if not isinstance(value, str) or not value.startswith(("http://", "https://")):
        raise ConfigError(f"api_url must be an http(s) URL, got {value!r}")
    return value


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}") from e
    if number <= 0:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return number


def _seconds(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be a number of seconds, got {value!r}")
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a number of seconds, got {value!r}") from e
    if seconds < 0:
        raise ConfigError(f"{name} must not be negative, got {value!r}")
    return seconds


def _optional_seconds(name: str, value: Any) -> Optional[float]:
    if value is None:
        return None
    return _seconds(name, value)
