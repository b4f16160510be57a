from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from country_browser.ui.ids import IDs
from country_browser.ui.layout.build_controls_panel import build_controls_panel
from country_browser.ui.layout.build_navbar import build_navbar
from country_browser.ui.layout.build_results_panel import (
    build_details_modal,
    build_results_panel,
)

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    return dbc.Container(
        id=IDs.Control.ROOT,
        fluid=True,
        className="cb-root",
        children=[
            build_navbar(ctx.settings),

            # App-level stores
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.FAVORITES, storage_type="local"),

            # Fires once after the page is up to trigger the dataset fetch
            dcc.Interval(
                id=IDs.Control.INITIAL_LOAD,
                interval=100,
                n_intervals=0,
                max_intervals=1,
            ),

            build_controls_panel(ctx.settings),
            build_results_panel(),
            build_details_modal(),
        ],
    )
