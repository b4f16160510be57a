from __future__ import annotations

from typing import Collection, List, Optional, Tuple

import dash_bootstrap_components as dbc
from dash import html

from country_browser.core.country import Country
from country_browser.core.favorites import favorite_key
from country_browser.core.pipeline import VisibleSlice
from country_browser.ui.ids import details_open_id, favorite_toggle_id

PLACEHOLDER = "N/A"
UNKNOWN_COUNTRY = "Unknown country"
NO_RESULTS_TEXT = "No countries match the current criteria."
FETCH_ERROR_TEXT = "The countries could not be loaded. Please try again later."


def format_population(value: Optional[int]) -> str:
    """Thousands-separated population, or the placeholder when unknown/zero."""
    if not value:
        return PLACEHOLDER
    return f"{value:,}"


def display_name(country: Country) -> str:
    return country.name or UNKNOWN_COUNTRY


def _detail(label: str, value: str) -> html.P:
    return html.P(
        [html.Span(f"{label}: ", className="fw-semibold"), value],
        className="country-detail mb-1",
    )


def country_card(country: Country, is_favorite: bool = False) -> dbc.Card:
    name = display_name(country)
    key = favorite_key(country)

    return dbc.Card(
        [
            dbc.CardImg(
                src=country.flag_url or "",
                alt=country.flag_alt or f"Flag of {name}",
                top=True,
                className="country-flag",
            ),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            html.H5(name, className="country-name mb-2"),
                            dbc.Button(
                                "★" if is_favorite else "☆",
                                id=favorite_toggle_id(key),
                                color="link",
                                size="sm",
                                title="Remove from favorites" if is_favorite else "Add to favorites",
                                className="favorite-toggle p-0",
                            ),
                        ],
                        className="d-flex justify-content-between align-items-start",
                    ),
                    _detail("Capital", country.capital or PLACEHOLDER),
                    _detail("Population", format_population(country.population)),
                    _detail("Region", country.region or PLACEHOLDER),
                    dbc.Button(
                        "Details",
                        id=details_open_id(key),
                        color="secondary",
                        outline=True,
                        size="sm",
                        className="mt-2",
                    ),
                ]
            ),
        ],
        className="country-card h-100" + (" is-favorite" if is_favorite else ""),
    )


def no_results() -> html.Div:
    return html.Div(html.P(NO_RESULTS_TEXT), className="no-results text-muted p-4")


def error_message(text: str = FETCH_ERROR_TEXT) -> dbc.Alert:
    return dbc.Alert(text, color="danger", className="error-message")


def render_slice(visible: VisibleSlice, favorites: Collection[str] = ()) -> List:
    """Cards for the visible page, or the no-results state."""
    if visible.is_empty:
        return [no_results()]

    favorites = set(favorites)
    return [
        dbc.Col(
            country_card(c, is_favorite=favorite_key(c) in favorites),
            xs=12,
            sm=6,
            lg=4,
            xl=3,
            className="mb-3",
        )
        for c in visible.records
    ]


def page_label(visible: VisibleSlice) -> str:
    return f"Page {visible.page} of {visible.total_pages}"


def result_count_label(visible: VisibleSlice) -> str:
    noun = "country" if visible.total_count == 1 else "countries"
    return f"{visible.total_count} {noun}"


def pager_disabled(visible: VisibleSlice) -> Tuple[bool, bool]:
    """(prev_disabled, next_disabled) for the pagination buttons."""
    return not visible.has_prev, not visible.has_next


def country_details(country: Country) -> html.Div:
    name = display_name(country)
    children = []
    if country.flag_url:
        children.append(
            html.Img(
                src=country.flag_url,
                alt=country.flag_alt or f"Flag of {name}",
                className="details-flag mb-3",
                style={"maxWidth": "160px"},
            )
        )
    children.extend(
        [
            _detail("Code", country.code or PLACEHOLDER),
            _detail("Capital", country.capital or PLACEHOLDER),
            _detail("Region", country.region or PLACEHOLDER),
            _detail("Subregion", country.subregion or PLACEHOLDER),
            _detail("Population", format_population(country.population)),
        ]
    )
    return html.Div(children)
