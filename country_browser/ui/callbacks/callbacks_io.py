from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from country_browser.services.export_service import countries_to_frame
from country_browser.ui.callbacks.callbacks_controls import build_pipeline
from country_browser.ui.ids import IDs

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # CSV download of the whole derived view
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_current_data(n_clicks, state_data):
        if not n_clicks or not ctx.datasets.is_loaded():
            raise exceptions.PreventUpdate

        pipeline = build_pipeline(ctx.datasets.cached(), state_data, ctx.settings.page_size)
        data = countries_to_frame(pipeline.derived_view)

        logger.info("Exporting derived view", extra={"n_rows": len(data)})
        return dcc.send_data_frame(data.to_csv, "countries.csv", index=False)
