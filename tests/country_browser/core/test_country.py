from __future__ import annotations

from country_browser.core.country import Country


def test_from_api_reads_rest_countries_fields():
    raw = {
        "name": {"common": "Brazil", "official": "Federative Republic of Brazil"},
        "capital": ["Brasília"],
        "region": "Americas",
        "subregion": "South America",
        "population": 214000000,
        "flags": {"png": "https://flagcdn.com/w320/br.png", "alt": "Green field"},
        "cca3": "BRA",
    }

    country = Country.from_api(raw)

    assert country == Country(
        name="Brazil",
        region="Americas",
        population=214000000,
        capital="Brasília",
        subregion="South America",
        flag_url="https://flagcdn.com/w320/br.png",
        flag_alt="Green field",
        code="BRA",
    )


def test_from_api_degrades_missing_fields():
    country = Country.from_api({"name": {"common": "Antarctica"}, "capital": []})

    assert country.name == "Antarctica"
    assert country.region == ""
    assert country.capital is None
    assert country.population is None
    assert country.flag_url is None
    assert country.code is None
    assert country.population_or_zero == 0


def test_from_api_rejects_malformed_population():
    assert Country.from_api({"name": "X", "population": "lots"}).population is None
    assert Country.from_api({"name": "X", "population": -1}).population is None
    assert Country.from_api({"name": "X", "population": True}).population is None
    assert Country.from_api({"name": "X", "population": "12"}).population == 12


def test_from_api_without_name_gives_empty_string():
    assert Country.from_api({"region": "Europe"}).name == ""
