from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from country_browser.config.loader import load_app_config
from country_browser.services.dataset_service import DatasetService
from country_browser.services.fetcher import CountryFetcher
from country_browser.ui.callbacks.callbacks_controls import register_control_callbacks
from country_browser.ui.callbacks.callbacks_favorites import register_favorite_callbacks
from country_browser.ui.callbacks.callbacks_io import register_io_callbacks
from country_browser.ui.callbacks.callbacks_render import register_render_callbacks
from country_browser.ui.config import AppConfig
from country_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    fetcher: Optional[CountryFetcher] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    settings = load_app_config(config_root)

    # 2) Initialize Service Layer (the fetch itself happens on first page load)
    if fetcher is None:
        fetcher = CountryFetcher(settings.api_url, timeout=settings.request_timeout)
    datasets = DatasetService(fetcher)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        settings=settings,
        datasets=datasets,
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_control_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_favorite_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"api_url": settings.api_url, "page_size": settings.page_size},
    )
    return app
