from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from country_browser.core.country import Country
from country_browser.core.exceptions import FetchError
from country_browser.services.fetcher import CountryFetcher

logger = logging.getLogger(__name__)


class DatasetService:
    """
    Holds the fetched dataset for the lifetime of the process.

    The first `get()` triggers the fetch; concurrent callers wait for it rather
    than fetching again. A failure is not cached, so the next page load asks the
    source again; there is no automatic retry.
    """

    def __init__(self, fetcher: CountryFetcher):
        self._fetcher = fetcher
        self._dataset: Optional[Tuple[Country, ...]] = None
        self._lock = threading.Lock()

    def get(self) -> Tuple[Country, ...]:
        # 1. Fast path: already fetched
        if self._dataset is not None:
            return self._dataset

        with self._lock:
            # 2. Another request may have fetched while we waited
            if self._dataset is not None:
                return self._dataset

            # 3. Fetch once
            try:
                dataset = self._fetcher.fetch()
            except FetchError as e:
                logger.error(
                    "Country dataset could not be loaded",
                    extra={"error": str(e), "status_code": e.status_code},
                )
                raise

            self._dataset = dataset
            return dataset

    def cached(self) -> Tuple[Country, ...]:
        """Return the dataset if already fetched, otherwise an empty tuple."""
        return self._dataset or ()

    def is_loaded(self) -> bool:
        return self._dataset is not None
