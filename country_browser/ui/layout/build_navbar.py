from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from country_browser.config.model import AppSettings
from country_browser.ui.ids import IDs


def build_navbar(settings: AppSettings) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(settings.ui_title, className="mb-0"),
                        html.Small(
                            settings.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    dbc.Switch(
                        id=IDs.Control.THEME_SWITCH,
                        label="Dark theme",
                        value=False,
                    ),
                    className="ms-auto",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm cb-navbar",
    )
