from __future__ import annotations

__all__ = ["IDs", "favorite_toggle_id", "details_open_id"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"
        FAVORITES = "favorites"

    class Control:
        ROOT = "cb-root"
        INITIAL_LOAD = "initial-load"

        # Controls
        SEARCH_INPUT = "search-input"
        SEARCH_BTN = "search-btn"
        REGION_SELECT = "region-filter"
        SORT_SELECT = "sort-by"
        PREV_PAGE = "prev-page"
        NEXT_PAGE = "next-page"
        THEME_SWITCH = "theme-switch"

        # Results
        COUNTRIES_CONTAINER = "countries-container"
        PAGE_INFO = "page-info"
        RESULT_COUNT = "result-count"
        LOAD_STATUS = "load-status"

        # Details modal
        DETAILS_MODAL = "details-modal"
        DETAILS_TITLE = "details-title"
        DETAILS_BODY = "details-body"
        DETAILS_CLOSE = "details-close"

        # Downloads
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"

    class Pattern:
        # pattern-matching "type" strings
        FAVORITE_TOGGLE = "favorite-toggle"
        DETAILS_OPEN = "details-open"


def favorite_toggle_id(code: str) -> dict:
    return {"type": IDs.Pattern.FAVORITE_TOGGLE, "index": code}


def details_open_id(code: str) -> dict:
    return {"type": IDs.Pattern.DETAILS_OPEN, "index": code}
