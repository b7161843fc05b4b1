"""Config – DirectorySettings for the listing client."""
from __future__ import annotations

import dataclasses

from citydir.application.pagination import MIN_VISIBLE_PAGES
from citydir.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsFactory
from citydir.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class DirectorySettings(Settings):
    """Settings read from ``CITYDIR_*`` environment variables."""

    api_url: str = "http://localhost:5000/api"
    page_size: int = 12
    max_visible_pages: int = 7
    request_timeout: float = 10.0
    default_locale: str = "en"
    default_theme: str = "system"
    log_level: str = "INFO"
    nearby_radius_km: float = 10.0
    related_limit: int = 3

    def _reject(self, field_name: str, reason: str) -> None:
        raise InvalidSettingValueError(self.env_key(field_name), getattr(self, field_name), reason)

    def _validate(self) -> None:
        if not self.api_url:
            self._reject("api_url", "must not be empty")
        if not 1 <= self.page_size <= 1000:
            self._reject("page_size", "must be between 1 and 1000")
        if self.max_visible_pages < MIN_VISIBLE_PAGES:
            self._reject("max_visible_pages", f"must be >= {MIN_VISIBLE_PAGES}")
        if self.request_timeout <= 0:
            self._reject("request_timeout", "must be > 0")
        if self.nearby_radius_km < 0:
            self._reject("nearby_radius_km", "must be >= 0")
        if self.related_limit < 1:
            self._reject("related_limit", "must be >= 1")


def load_settings(env_file: str | None = ".env", **overrides: object) -> DirectorySettings:
    """Load settings from ``.env`` (when *env_file* is given) and the environment."""
    loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
    return SettingsFactory.create(DirectorySettings, [loader], overrides=dict(overrides) or None)


__all__ = ["DirectorySettings", "load_settings"]
