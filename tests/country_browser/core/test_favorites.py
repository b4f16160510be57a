from __future__ import annotations

from country_browser.core.favorites import normalise_favorites, toggle_favorite


def test_toggle_favorite_adds_then_removes():
    favorites = toggle_favorite(None, "BRA")
    assert favorites == ["BRA"]

    favorites = toggle_favorite(favorites, "AND")
    assert favorites == ["BRA", "AND"]

    favorites = toggle_favorite(favorites, "BRA")
    assert favorites == ["AND"]


def test_toggle_favorite_ignores_empty_code():
    assert toggle_favorite(["BRA"], None) == ["BRA"]
    assert toggle_favorite(["BRA"], "") == ["BRA"]


def test_normalise_favorites_drops_garbage_and_duplicates():
    assert normalise_favorites("BRA") == []
    assert normalise_favorites(None) == []
    assert normalise_favorites(["BRA", None, "BRA", "AND"]) == ["BRA", "AND"]
