"""Config – application context (locale, theme, notifications).

App-wide preferences are carried in an explicit :class:`AppContext` handed to
the components that need them, never read from module globals.
"""
from __future__ import annotations

import dataclasses
from enum import Enum

from citydir.config.app import DirectorySettings


class Locale(str, Enum):
    EN = "en"
    TH = "th"

    @property
    def display_name(self) -> str:
        return _LOCALE_NAMES[self]


_LOCALE_NAMES: dict[Locale, str] = {Locale.EN: "English", Locale.TH: "ไทย"}

DEFAULT_LOCALE = Locale.EN


def locale_from_path(pathname: str) -> Locale:
    """First path segment as a locale, ``DEFAULT_LOCALE`` otherwise."""
    segments = pathname.split("/")
    candidate = segments[1] if len(segments) > 1 else ""
    try:
        return Locale(candidate)
    except ValueError:
        return DEFAULT_LOCALE


def strip_locale(pathname: str) -> str:
    """Remove a leading ``/<locale>`` segment; the bare root becomes ``/``."""
    segments = pathname.split("/")
    if len(segments) > 1 and segments[1] in {loc.value for loc in Locale}:
        rest = "/".join(segments[2:])
        return f"/{rest}" if rest else "/"
    return pathname or "/"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    def resolve(self, prefers_dark: bool) -> "Theme":
        """Concrete theme; ``SYSTEM`` follows the platform preference."""
        if self is Theme.SYSTEM:
            return Theme.DARK if prefers_dark else Theme.LIGHT
        return self


@dataclasses.dataclass(frozen=True)
class AppContext:
    locale: Locale = DEFAULT_LOCALE
    theme: Theme = Theme.SYSTEM
    notifications_enabled: bool = False

    @classmethod
    def from_settings(cls, settings: DirectorySettings) -> "AppContext":
        try:
            locale = Locale(settings.default_locale)
        except ValueError:
            locale = DEFAULT_LOCALE
        try:
            theme = Theme(settings.default_theme)
        except ValueError:
            theme = Theme.SYSTEM
        return cls(locale=locale, theme=theme)

    def with_locale(self, locale: Locale) -> "AppContext":
        return dataclasses.replace(self, locale=locale)

    def with_theme(self, theme: Theme) -> "AppContext":
        return dataclasses.replace(self, theme=theme)

    @property
    def accept_language(self) -> str:
        return self.locale.value


__all__ = ["AppContext", "DEFAULT_LOCALE", "Locale", "Theme", "locale_from_path", "strip_locale"]
