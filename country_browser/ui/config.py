from dataclasses import dataclass
from pathlib import Path

from country_browser.config.model import AppSettings
from country_browser.services.dataset_service import DatasetService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app. Passed into layout + callback registration
    functions instead of using module-level globals.
    """
    config_root: Path
    settings: AppSettings
    datasets: DatasetService
