from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import dash
from dash import Input, Output, State, exceptions

from country_browser.core.country import Country
from country_browser.core.exceptions import FetchError
from country_browser.core.pipeline import DatasetViewPipeline, region_options
from country_browser.core.view_state import SortKey, ViewState
from country_browser.ui.ids import IDs
from country_browser.ui.render import error_message

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_pipeline(
    dataset: Sequence[Country],
    state_data: Optional[Dict[str, Any]],
    page_size: int,
) -> DatasetViewPipeline:
    """Rebuild the pipeline from the stored view state and the cached dataset."""
    return DatasetViewPipeline(
        page_size=page_size,
        state=ViewState.from_dict(state_data),
        dataset=dataset,
    )


def apply_control_event(
    pipeline: DatasetViewPipeline,
    triggered_id: Optional[str],
    values: Dict[str, Any],
) -> bool:
    """
    Map one control event onto one pipeline operation.

    `values` holds the current control values under "search", "region" and
    "sort". Returns False when the trigger is not a known control.
    """
    if triggered_id in (IDs.Control.SEARCH_INPUT, IDs.Control.SEARCH_BTN):
        pipeline.set_search(values.get("search"))
    elif triggered_id == IDs.Control.REGION_SELECT:
        pipeline.set_region(values.get("region"))
    elif triggered_id == IDs.Control.SORT_SELECT:
        pipeline.set_sort(values.get("sort"))
    elif triggered_id == IDs.Control.PREV_PAGE:
        pipeline.prev_page()
    elif triggered_id == IDs.Control.NEXT_PAGE:
        pipeline.next_page()
    else:
        return False
    return True


def state_from_controls(values: Dict[str, Any]) -> ViewState:
    return ViewState(
        search_term=(values.get("search") or "").strip(),
        region=values.get("region") or "",
        sort_key=SortKey.parse(values.get("sort")),
    )


def register_control_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    page_size = ctx.settings.page_size

    # ---------------------------------------------------------
    # Initial load: fetch once, seed the view state from the controls
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.REGION_SELECT, "options"),
        Output(IDs.Control.LOAD_STATUS, "children"),
        Input(IDs.Control.INITIAL_LOAD, "n_intervals"),
        State(IDs.Control.SEARCH_INPUT, "value"),
        State(IDs.Control.REGION_SELECT, "value"),
        State(IDs.Control.SORT_SELECT, "value"),
        prevent_initial_call=True,
    )
    def load_dataset(n_intervals, search, region, sort):
        if not n_intervals:
            raise exceptions.PreventUpdate

        try:
            dataset = ctx.datasets.get()
        except FetchError:
            # Already logged by the dataset service
            return dash.no_update, [], error_message()

        values = {"search": search, "region": region, "sort": sort}
        pipeline = DatasetViewPipeline(page_size=page_size, state=state_from_controls(values))
        pipeline.load(dataset)

        options = [{"label": r, "value": r} for r in region_options(dataset)]
        return pipeline.state.to_dict(), options, None

    # ---------------------------------------------------------
    # Controls -> pipeline operation -> view state
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.SEARCH_BTN, "n_clicks"),
        Input(IDs.Control.REGION_SELECT, "value"),
        Input(IDs.Control.SORT_SELECT, "value"),
        Input(IDs.Control.PREV_PAGE, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_view_state(search, _search_clicks, region, sort, _prev, _next, state_data):
        if not ctx.datasets.is_loaded():
            raise exceptions.PreventUpdate

        pipeline = build_pipeline(ctx.datasets.cached(), state_data, page_size)
        values = {"search": search, "region": region, "sort": sort}

        if not apply_control_event(pipeline, dash.ctx.triggered_id, values):
            raise exceptions.PreventUpdate

        logger.debug(
            "View state updated",
            extra={"trigger": dash.ctx.triggered_id, **pipeline.state.to_dict()},
        )
        return pipeline.state.to_dict()
