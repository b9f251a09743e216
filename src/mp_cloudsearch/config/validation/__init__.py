"""Config validation errors."""
from mp_cloudsearch.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingConfigurationError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingConfigurationError",
    "MissingRequiredSettingError",
]
