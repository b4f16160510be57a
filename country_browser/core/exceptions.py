from __future__ import annotations

from typing import Optional


class CountryBrowserError(Exception):
    """Base exception for all country_browser errors"""
    pass


class ConfigError(CountryBrowserError):
    """Invalid or inconsistent global.json or environment override"""
    pass


class FetchError(CountryBrowserError):
    """
    The country data source could not be reached or returned something unusable:
    network failure, non-success status, body that is not a JSON list.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
