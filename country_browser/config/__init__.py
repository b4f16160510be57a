"""
Config package for country_browser.

Responsible for:
- the settings model (AppSettings)
- loading global.json with environment overrides (load_app_config)
"""

from .model import AppSettings
from .loader import load_app_config

__all__ = ["AppSettings", "load_app_config"]
