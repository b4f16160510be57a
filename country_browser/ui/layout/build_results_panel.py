from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from country_browser.ui.ids import IDs


def build_results_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Countries"),
                        html.Span(
                            id=IDs.Control.RESULT_COUNT,
                            className="text-muted ms-2",
                        ),
                        dbc.Button(
                            "Download results (CSV)",
                            id=IDs.Control.DOWNLOAD_DATA_BTN,
                            color="secondary",
                            size="sm",
                            className="ms-auto",
                        ),
                        dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="countries-loading",
                        type="default",
                        children=[
                            html.Div(id=IDs.Control.LOAD_STATUS),
                            dbc.Row(id=IDs.Control.COUNTRIES_CONTAINER),
                        ],
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Previous",
                                id=IDs.Control.PREV_PAGE,
                                color="primary",
                                outline=True,
                                disabled=True,
                            ),
                            html.Span(
                                "Page 1 of 1",
                                id=IDs.Control.PAGE_INFO,
                                className="mx-3",
                            ),
                            dbc.Button(
                                "Next",
                                id=IDs.Control.NEXT_PAGE,
                                color="primary",
                                outline=True,
                                disabled=True,
                            ),
                        ],
                        className="d-flex justify-content-center align-items-center mt-2",
                    ),
                ]
            ),
        ],
        className="cb-maincard mt-3",
    )


def build_details_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.DETAILS_TITLE)),
            dbc.ModalBody(id=IDs.Control.DETAILS_BODY),
            dbc.ModalFooter(
                dbc.Button("Close", id=IDs.Control.DETAILS_CLOSE, color="secondary")
            ),
        ],
        id=IDs.Control.DETAILS_MODAL,
        is_open=False,
    )
