from __future__ import annotations

import logging
import math
import unicodedata
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from country_browser.core.country import Country
from country_browser.core.view_state import SortKey, ViewState

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


# -----------------------------------------------------------------------------
# Pure derivation helpers
# -----------------------------------------------------------------------------
def _collation_key(name: str) -> Tuple[str, str, str]:
    # Accents and case only break ties between otherwise equal names
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name.casefold(), name


def filter_countries(
    dataset: Iterable[Country],
    search_term: str = "",
    region: Optional[str] = "",
) -> List[Country]:
    """
    Keep records whose name contains `search_term` (case-insensitive) and whose
    region equals `region`. Empty values disable the respective filter.
    Fetch order is preserved.
    """
    needle = (search_term or "").strip().casefold()
    region = region or ""

    out: List[Country] = []
    for country in dataset:
        if needle and needle not in country.name.casefold():
            continue
        if region and country.region != region:
            continue
        out.append(country)
    return out


def sort_countries(records: Iterable[Country], sort_key: SortKey) -> List[Country]:
    """
    Stable sort by `sort_key`. Records with equal keys keep their incoming order,
    for descending keys too. Missing population sorts as 0.
    """
    sort_key = SortKey.parse(sort_key)

    if sort_key in (SortKey.NAME_ASC, SortKey.NAME_DESC):
        key = lambda c: _collation_key(c.name)  # noqa: E731
    else:
        key = lambda c: c.population_or_zero  # noqa: E731

    reverse = sort_key in (SortKey.NAME_DESC, SortKey.POP_DESC)
    return sorted(records, key=key, reverse=reverse)


def derive_view(dataset: Sequence[Country], state: ViewState) -> List[Country]:
    """Filter from the full dataset, then sort the result."""
    return sort_countries(
        filter_countries(dataset, state.search_term, state.region),
        state.sort_key,
    )


def compute_total_pages(count: int, page_size: int) -> int:
    if page_size <= 0:
        return 1
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, 1), max(total_pages, 1))


def page_bounds(page: int, page_size: int) -> Tuple[int, int]:
    """Return the [start, end) offsets of `page` in the derived view."""
    start = (page - 1) * page_size
    return start, start + page_size


def region_options(dataset: Iterable[Country]) -> List[str]:
    return sorted({c.region for c in dataset if c.region})


# -----------------------------------------------------------------------------
# Pipeline
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class VisibleSlice:
    records: Tuple[Country, ...]
    page: int
    total_pages: int
    total_count: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.records


class DatasetViewPipeline:
    """
    Owns the dataset and the view state, and derives the visible page from them.

    Every filter change re-derives from the full dataset rather than narrowing the
    previous result. All operations are synchronous and never raise on
    well-formed input.
    """

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        state: Optional[ViewState] = None,
        dataset: Sequence[Country] = (),
    ):
        if not isinstance(page_size, int) or page_size <= 0:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")

        self.page_size = page_size
        self._state = replace(state) if state is not None else ViewState()
        self._dataset: Tuple[Country, ...] = tuple(dataset)
        self._derived: List[Country] = derive_view(self._dataset, self._state)
        self._clamp()

    # ---- read side --------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return replace(self._state)

    @property
    def dataset(self) -> Tuple[Country, ...]:
        return self._dataset

    @property
    def derived_view(self) -> List[Country]:
        return list(self._derived)

    @property
    def total_pages(self) -> int:
        return compute_total_pages(len(self._derived), self.page_size)

    def get_visible_slice(self) -> VisibleSlice:
        start, end = page_bounds(self._state.page, self.page_size)
        return VisibleSlice(
            records=tuple(self._derived[start:end]),
            page=self._state.page,
            total_pages=self.total_pages,
            total_count=len(self._derived),
        )

    # ---- operations -------------------------------------------------------

    def load(self, records: Iterable[Country]) -> None:
        self._dataset = tuple(records)
        self._state.page = 1
        self._rederive()
        logger.info(
            "Dataset loaded into pipeline",
            extra={"n_records": len(self._dataset), "n_visible": len(self._derived)},
        )

    def set_search(self, term: Optional[str]) -> None:
        self._state.search_term = (term or "").strip()
        self._state.page = 1
        self._rederive()

    def set_region(self, region: Optional[str]) -> None:
        self._state.region = region or ""
        self._state.page = 1
        self._rederive()

    def set_sort(self, key: SortKey | str | None) -> None:
        self._state.sort_key = SortKey.parse(key)
        # Re-deriving keeps fetch order as the tie-breaker
        self._rederive()

    def next_page(self) -> None:
        self._state.page += 1
        self._clamp()

    def prev_page(self) -> None:
        self._state.page -= 1
        self._clamp()

    # ---- internals --------------------------------------------------------

    def _rederive(self) -> None:
        self._derived = derive_view(self._dataset, self._state)
        self._clamp()

    def _clamp(self) -> None:
        self._state.page = clamp_page(self._state.page, self.total_pages)
