"""Config – 12-factor settings and loaders."""

from togglekit.config.settings import EnvSettingsLoader, Settings, SettingsLoader, ToggleSettings
from togglekit.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "ToggleSettings",
]
