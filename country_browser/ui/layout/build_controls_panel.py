from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from country_browser.config.model import AppSettings
from country_browser.core.view_state import SortKey
from country_browser.ui.ids import IDs

SORT_OPTIONS = [
    {"label": "Name (A-Z)", "value": SortKey.NAME_ASC.value},
    {"label": "Name (Z-A)", "value": SortKey.NAME_DESC.value},
    {"label": "Population (lowest first)", "value": SortKey.POP_ASC.value},
    {"label": "Population (highest first)", "value": SortKey.POP_DESC.value},
]


def build_controls_panel(settings: AppSettings) -> dbc.Card:
    # A debounce of 0 means "fire on every keystroke"
    debounce = settings.search_debounce_seconds or False

    return dbc.Card(
        dbc.CardBody(
            dbc.Row(
                [
                    dbc.Col(
                        [
                            html.Label("Search", className="form-label"),
                            dbc.InputGroup(
                                [
                                    dcc.Input(
                                        id=IDs.Control.SEARCH_INPUT,
                                        type="text",
                                        value="",
                                        placeholder="Search for a country...",
                                        debounce=debounce,
                                        className="form-control",
                                    ),
                                    dbc.Button(
                                        "Search",
                                        id=IDs.Control.SEARCH_BTN,
                                        color="primary",
                                    ),
                                ]
                            ),
                        ],
                        md=6,
                    ),
                    dbc.Col(
                        [
                            html.Label("Region", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.REGION_SELECT,
                                options=[],
                                value=None,
                                placeholder="All regions",
                            ),
                        ],
                        md=3,
                    ),
                    dbc.Col(
                        [
                            html.Label("Sort by", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.SORT_SELECT,
                                options=SORT_OPTIONS,
                                value=SortKey.NAME_ASC.value,
                                clearable=False,
                            ),
                        ],
                        md=3,
                    ),
                ],
                className="g-3",
            )
        ),
        className="cb-controls mt-3",
    )
