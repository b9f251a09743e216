"""Config settings – 12-factor env-based configuration."""
from mp_cloudsearch.config.settings.base import Settings
from mp_cloudsearch.config.settings.cloudsearch import (
    DEFAULT_API_VERSION,
    LEGACY_API_VERSION,
    STRUCTURED_API_VERSION,
    SUPPORTED_API_VERSIONS,
    ClientMode,
    CloudSearchSettings,
    coerce_mode,
)
from mp_cloudsearch.config.settings.factory import SettingsFactory
from mp_cloudsearch.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "ClientMode",
    "CloudSearchSettings",
    "DEFAULT_API_VERSION",
    "EnvSettingsLoader",
    "LEGACY_API_VERSION",
    "STRUCTURED_API_VERSION",
    "SUPPORTED_API_VERSIONS",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "coerce_mode",
]
