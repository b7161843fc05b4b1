"""Config – settings, validation and application context."""

from citydir.config.app import DirectorySettings, load_settings
from citydir.config.context import AppContext, Locale, Theme, locale_from_path, strip_locale
from citydir.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from citydir.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "AppContext",
    "ConfigError",
    "DirectorySettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Locale",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "Theme",
    "load_settings",
    "locale_from_path",
    "strip_locale",
]
