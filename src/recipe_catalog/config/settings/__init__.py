"""Config settings – 12-factor env-based configuration."""
from recipe_catalog.config.settings.base import CatalogSettings, Settings
from recipe_catalog.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    load_settings,
)

__all__ = [
    "CatalogSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
