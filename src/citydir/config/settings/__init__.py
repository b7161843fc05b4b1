"""Config settings – 12-factor env-based configuration."""
from citydir.config.settings.base import Settings
from citydir.config.settings.factory import SettingsFactory
from citydir.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
