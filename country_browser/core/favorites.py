from __future__ import annotations

from typing import Iterable, List, Optional

from country_browser.core.country import Country


def normalise_favorites(data: object) -> List[str]:
    """Coerce the browser-side store value into a list of unique codes."""
    if not isinstance(data, list):
        return []
    return list(dict.fromkeys(str(code) for code in data if code))


def toggle_favorite(favorites: Iterable[str] | None, code: Optional[str]) -> List[str]:
    """Add `code` when absent, remove it when present. Order of the rest is kept."""
    current = normalise_favorites(list(favorites or []))
    if not code:
        return current
    if code in current:
        return [c for c in current if c != code]
    return current + [code]


def favorite_key(country: Country) -> str:
    """Cards, favorites and details are keyed by code, or by name without one."""
    return country.code or country.name
