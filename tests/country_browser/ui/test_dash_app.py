from __future__ import annotations

from country_browser.core.country import Country
from country_browser.ui.dash_app import create_dash_app
from country_browser.ui.ids import IDs


class _StubFetcher:
    def __init__(self):
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return (Country(name="Brazil", region="Americas"),)


def _collect_ids(component, out=None) -> set:
    out = set() if out is None else out
    if isinstance(component, (list, tuple)):
        for child in component:
            _collect_ids(child, out)
        return out
    component_id = getattr(component, "id", None)
    if isinstance(component_id, str):
        out.add(component_id)
    children = getattr(component, "children", None)
    if children is not None and not isinstance(children, str):
        _collect_ids(children, out)
    return out


def test_create_dash_app_builds_layout_without_fetching(tmp_path):
    fetcher = _StubFetcher()

    app = create_dash_app(config_root=tmp_path, fetcher=fetcher)

    ids = _collect_ids(app.layout)
    for expected in (
        IDs.Store.VIEW_STATE,
        IDs.Store.FAVORITES,
        IDs.Control.SEARCH_INPUT,
        IDs.Control.REGION_SELECT,
        IDs.Control.SORT_SELECT,
        IDs.Control.PREV_PAGE,
        IDs.Control.NEXT_PAGE,
        IDs.Control.PAGE_INFO,
        IDs.Control.COUNTRIES_CONTAINER,
    ):
        assert expected in ids

    assert app.title == "Country Browser"
    # The dataset is fetched by the first page load, not at startup
    assert fetcher.calls == 0
