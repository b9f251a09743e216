"""Config – 12-factor settings and loaders."""

from mp_cloudsearch.config.settings import (
    ClientMode,
    CloudSearchSettings,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from mp_cloudsearch.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingConfigurationError,
    MissingRequiredSettingError,
)

__all__ = [
    "ClientMode",
    "CloudSearchSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingConfigurationError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
