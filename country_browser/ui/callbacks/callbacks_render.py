from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from country_browser.core.favorites import normalise_favorites
from country_browser.ui.callbacks.callbacks_controls import build_pipeline
from country_browser.ui.ids import IDs
from country_browser.ui.render import (
    error_message,
    page_label,
    pager_disabled,
    render_slice,
    result_count_label,
)

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

DARK_THEME_CLASS = "cb-root dark-theme"
LIGHT_THEME_CLASS = "cb-root"


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    page_size = ctx.settings.page_size

    # ---------------------------------------------------------
    # View state -> cards + pagination
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.COUNTRIES_CONTAINER, "children"),
        Output(IDs.Control.PAGE_INFO, "children"),
        Output(IDs.Control.PREV_PAGE, "disabled"),
        Output(IDs.Control.NEXT_PAGE, "disabled"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Input(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Store.FAVORITES, "data"),
        prevent_initial_call=True,
    )
    def render_countries(state_data: dict[str, Any] | None, favorites_data):
        if not ctx.datasets.is_loaded():
            return [], "Page 1 of 1", True, True, ""

        try:
            pipeline = build_pipeline(ctx.datasets.cached(), state_data, page_size)
            visible = pipeline.get_visible_slice()
            prev_disabled, next_disabled = pager_disabled(visible)
            return (
                render_slice(visible, normalise_favorites(favorites_data)),
                page_label(visible),
                prev_disabled,
                next_disabled,
                result_count_label(visible),
            )
        except Exception:
            logger.exception(
                "Error while rendering countries",
                extra={"view_state": state_data},
            )
            return (
                [error_message("Something went wrong while rendering the countries.")],
                "Page 1 of 1",
                True,
                True,
                "",
            )

    # ---------------------------------------------------------
    # Theme switch
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.ROOT, "className"),
        Input(IDs.Control.THEME_SWITCH, "value"),
    )
    def toggle_theme(dark: bool | None):
        return DARK_THEME_CLASS if dark else LIGHT_THEME_CLASS
