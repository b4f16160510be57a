from __future__ import annotations

import json
from pathlib import Path

import pytest

from country_browser.config.loader import load_app_config
from country_browser.config.model import DEFAULT_API_URL, AppSettings
from country_browser.core.exceptions import ConfigError


def _write_global(root: Path, data) -> None:
    (root / "global.json").write_text(json.dumps(data))


def test_missing_global_json_yields_defaults(tmp_path):
    settings = load_app_config(tmp_path, environ={})

    assert settings == AppSettings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.page_size == 10
    assert settings.request_timeout is None


def test_global_json_values_are_read(tmp_path):
    _write_global(
        tmp_path,
        {
            "ui_title": "Atlas",
            "api_url": "http://localhost:9000/all",
            "page_size": 12,
            "request_timeout": 5,
            "search_debounce_seconds": 0.5,
        },
    )

    settings = load_app_config(tmp_path, environ={})

    assert settings.ui_title == "Atlas"
    assert settings.api_url == "http://localhost:9000/all"
    assert settings.page_size == 12
    assert settings.request_timeout == 5.0
    assert settings.search_debounce_seconds == 0.5


def test_environment_overrides_file(tmp_path):
    _write_global(tmp_path, {"page_size": 12})

    settings = load_app_config(
        tmp_path,
        environ={
            "COUNTRY_BROWSER_API_URL": "https://mirror.test/all",
            "COUNTRY_BROWSER_PAGE_SIZE": "20",
        },
    )

    assert settings.api_url == "https://mirror.test/all"
    assert settings.page_size == 20


@pytest.mark.parametrize(
    "data",
    [
        {"page_size": 0},
        {"page_size": "ten"},
        {"page_size": True},
        {"page_size": 12.7},
        {"page_size": "12.7"},
        {"api_url": "ftp://countries.test"},
        {"request_timeout": -1},
        {"search_debounce_seconds": "soon"},
    ],
)
def test_invalid_values_raise_config_error(tmp_path, data):
    _write_global(tmp_path, data)

    with pytest.raises(ConfigError):
        load_app_config(tmp_path, environ={})


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json")

    with pytest.raises(ConfigError):
        load_app_config(tmp_path, environ={})


def test_repository_config_is_valid():
    root = Path(__file__).resolve().parents[3] / "config"
    settings = load_app_config(root, environ={})
    assert settings.page_size == 10
