from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import httpx

from country_browser.config.model import DEFAULT_API_URL
from country_browser.core.country import Country
from country_browser.core.exceptions import FetchError

logger = logging.getLogger(__name__)


class CountryFetcher:
    """
    Retrieves the full country dataset with one bulk GET.

    No query is built here: `api_url` is used as given. Failures are raised as
    FetchError and never retried.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self._client = client

    def fetch(self) -> Tuple[Country, ...]:
        logger.info("Fetching country dataset", extra={"url": self.api_url})

        if self._client is not None:
            payload = self._get_json(self._client)
        else:
            with httpx.Client(timeout=self.timeout) as client:
                payload = self._get_json(client)

        if not isinstance(payload, list):
            raise FetchError(
                f"Expected a JSON list of countries, got {type(payload).__name__}"
            )

        countries: List[Country] = []
        skipped = 0
        for item in payload:
            if not isinstance(item, dict):
                skipped += 1
                continue
            countries.append(Country.from_api(item))

        if skipped:
            logger.warning(
                "Skipped malformed country entries",
                extra={"n_skipped": skipped},
            )

        logger.info("Country dataset fetched", extra={"n_countries": len(countries)})
        return tuple(countries)

    def _get_json(self, client: httpx.Client):
        try:
            response = client.get(self.api_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(
                "Country source returned an error status",
                extra={"url": self.api_url, "status_code": status},
            )
            raise FetchError(
                f"Country source responded with HTTP {status}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Could not reach the country source",
                extra={"url": self.api_url, "error": str(e)},
            )
            raise FetchError(f"Could not reach the country source: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise FetchError("Country source returned a body that is not JSON") from e
