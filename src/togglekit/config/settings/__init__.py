"""Config settings – 12-factor env-based configuration."""
from togglekit.config.settings.base import Settings
from togglekit.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from togglekit.config.settings.toggles import ToggleSettings

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "ToggleSettings"]
