"""
Configuration package

settings.yaml loading and the Settings singleton
"""

from core.config.loader import (
    AppConfig,
    ConfigLoadError,
    Settings,
    get_settings,
    load_config,
    parse_config,
)

__all__ = [
    "AppConfig",
    "ConfigLoadError",
    "Settings",
    "get_settings",
    "load_config",
    "parse_config",
]
