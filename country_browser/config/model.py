from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = (
    "https://restcountries.com/v3.1/all"
    "?fields=name,capital,region,subregion,population,flags,cca3"
)


@dataclass(frozen=True)
class AppSettings:
    """
    Parsed global.json plus environment overrides.

    - request_timeout: seconds for the dataset fetch; None waits indefinitely
    - search_debounce_seconds: pause after the last keystroke before a search runs
    """
    ui_title: str = "Country Browser"
    subtitle: str = "Search, filter and sort the countries of the world"
    api_url: str = DEFAULT_API_URL
    page_size: int = 10
    request_timeout: Optional[float] = None
    search_debounce_seconds: float = 0.3
