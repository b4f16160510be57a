from __future__ import annotations

import httpx
import pytest

from country_browser.core.exceptions import FetchError
from country_browser.services.fetcher import CountryFetcher

API_URL = "https://countries.test/v3.1/all"


def _fetcher(handler) -> CountryFetcher:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return CountryFetcher(API_URL, client=client)


def test_fetch_parses_records_in_order():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json=[
                {"name": {"common": "Brazil"}, "region": "Americas", "population": 214000000},
                {"name": {"common": "Andorra"}, "region": "Europe"},
            ],
        )

    countries = _fetcher(handler).fetch()

    assert [c.name for c in countries] == ["Brazil", "Andorra"]
    assert countries[1].population is None
    assert len(requests) == 1
    assert str(requests[0].url) == API_URL


def test_fetch_skips_non_object_entries():
    def handler(request):
        return httpx.Response(200, json=[{"name": {"common": "Peru"}}, "junk", 3])

    countries = _fetcher(handler).fetch()

    assert [c.name for c in countries] == ["Peru"]


def test_fetch_raises_on_error_status():
    def handler(request):
        return httpx.Response(500, json={"message": "boom"})

    with pytest.raises(FetchError) as excinfo:
        _fetcher(handler).fetch()

    assert excinfo.value.status_code == 500


def test_fetch_raises_on_invalid_json():
    def handler(request):
        return httpx.Response(200, content=b"<html>not json</html>")

    with pytest.raises(FetchError):
        _fetcher(handler).fetch()


def test_fetch_raises_when_payload_is_not_a_list():
    def handler(request):
        return httpx.Response(200, json={"status": 400, "message": "fields required"})

    with pytest.raises(FetchError):
        _fetcher(handler).fetch()


def test_fetch_raises_on_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError) as excinfo:
        _fetcher(handler).fetch()

    assert excinfo.value.status_code is None
