from __future__ import annotations

from country_browser.core.country import Country
from country_browser.services.export_service import EXPORT_COLUMNS, countries_to_frame


def test_countries_to_frame_keeps_order_and_missing_population():
    df = countries_to_frame(
        [
            Country(name="Brazil", region="Americas", population=214000000, code="BRA"),
            Country(name="Andorra", region="Europe", population=None, code="AND"),
        ]
    )

    assert list(df.columns) == EXPORT_COLUMNS
    assert list(df["name"]) == ["Brazil", "Andorra"]
    assert df["population"].iloc[0] == 214000000
    assert df["population"].isna().iloc[1]


def test_countries_to_frame_empty():
    df = countries_to_frame([])

    assert df.empty
    assert list(df.columns) == EXPORT_COLUMNS
