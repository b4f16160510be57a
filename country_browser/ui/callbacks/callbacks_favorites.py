from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from country_browser.core.country import Country
from country_browser.core.favorites import favorite_key, toggle_favorite
from country_browser.ui.ids import IDs
from country_browser.ui.render import country_details, display_name

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def find_country(dataset: Iterable[Country], key: Optional[str]) -> Optional[Country]:
    """Look up the record behind a card key."""
    if not key:
        return None
    for country in dataset:
        if favorite_key(country) == key:
            return country
    return None


def _clicked_pattern_index() -> Optional[str]:
    # Re-rendered cards fire the pattern callback with n_clicks=None
    triggered = dash.ctx.triggered_id
    if not triggered or not isinstance(triggered, dict):
        return None
    if not dash.ctx.triggered or not dash.ctx.triggered[0].get("value"):
        return None
    return triggered.get("index")


def register_favorite_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Toggle a favorite (browser-local store)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FAVORITES, "data"),
        Input({"type": IDs.Pattern.FAVORITE_TOGGLE, "index": ALL}, "n_clicks"),
        State(IDs.Store.FAVORITES, "data"),
        prevent_initial_call=True,
    )
    def update_favorites(_n_clicks_list, favorites_data):
        code = _clicked_pattern_index()
        if not code:
            raise exceptions.PreventUpdate

        favorites = toggle_favorite(favorites_data, code)
        logger.info(
            "Favorite toggled",
            extra={"code": code, "is_favorite": code in favorites},
        )
        return favorites

    # ---------------------------------------------------------
    # Details modal
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DETAILS_MODAL, "is_open"),
        Output(IDs.Control.DETAILS_TITLE, "children"),
        Output(IDs.Control.DETAILS_BODY, "children"),
        Input({"type": IDs.Pattern.DETAILS_OPEN, "index": ALL}, "n_clicks"),
        Input(IDs.Control.DETAILS_CLOSE, "n_clicks"),
        prevent_initial_call=True,
    )
    def show_country_details(_open_clicks, _close_clicks):
        if dash.ctx.triggered_id == IDs.Control.DETAILS_CLOSE:
            return False, dash.no_update, dash.no_update

        key = _clicked_pattern_index()
        if not key:
            raise exceptions.PreventUpdate

        country = find_country(ctx.datasets.cached(), key)
        if country is None:
            raise exceptions.PreventUpdate

        return True, display_name(country), country_details(country)
