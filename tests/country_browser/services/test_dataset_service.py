from __future__ import annotations

import threading

import pytest

from country_browser.core.country import Country
from country_browser.core.exceptions import FetchError
from country_browser.services.dataset_service import DatasetService


class _StubFetcher:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    def fetch(self):
        self.calls += 1
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_get_fetches_once_and_caches():
    dataset = (Country(name="Brazil"),)
    fetcher = _StubFetcher([dataset])
    service = DatasetService(fetcher)

    assert service.is_loaded() is False
    assert service.cached() == ()

    assert service.get() == dataset
    assert service.get() == dataset
    assert fetcher.calls == 1
    assert service.cached() == dataset


def test_failed_fetch_is_propagated_and_not_cached():
    dataset = (Country(name="Brazil"),)
    fetcher = _StubFetcher([FetchError("down", status_code=503), dataset])
    service = DatasetService(fetcher)

    with pytest.raises(FetchError):
        service.get()
    assert service.is_loaded() is False

    # A later page load asks the source again
    assert service.get() == dataset
    assert fetcher.calls == 2


def test_concurrent_first_loads_fetch_once():
    dataset = (Country(name="Brazil"),)
    started = threading.Event()
    release = threading.Event()

    class _SlowFetcher:
        calls = 0

        def fetch(self):
            _SlowFetcher.calls += 1
            started.set()
            release.wait(timeout=5)
            return dataset

    service = DatasetService(_SlowFetcher())
    results = []

    threads = [threading.Thread(target=lambda: results.append(service.get())) for _ in range(4)]
    threads[0].start()
    started.wait(timeout=5)
    for t in threads[1:]:
        t.start()
    release.set()
    for t in threads:
        t.join(timeout=5)

    assert _SlowFetcher.calls == 1
    assert results == [dataset] * 4
