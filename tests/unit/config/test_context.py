"""Unit tests for the application context (locale, theme)."""

from __future__ import annotations

import pytest

from citydir.config import AppContext, DirectorySettings, Locale, Theme, locale_from_path, strip_locale


class TestLocaleRouting:
    @pytest.mark.parametrize(
        "path, expected",
        [("/th/events", Locale.TH), ("/en", Locale.EN), ("/events", Locale.EN), ("", Locale.EN)],
    )
    def test_locale_from_path(self, path: str, expected: Locale) -> None:
        assert locale_from_path(path) is expected

    @pytest.mark.parametrize(
        "path, expected",
        [("/th/events/1", "/events/1"), ("/en", "/"), ("/events", "/events"), ("", "/")],
    )
    def test_strip_locale(self, path: str, expected: str) -> None:
        assert strip_locale(path) == expected

    def test_display_name(self) -> None:
        assert Locale.TH.display_name == "ไทย"


class TestTheme:
    def test_system_follows_preference(self) -> None:
        assert Theme.SYSTEM.resolve(prefers_dark=True) is Theme.DARK
        assert Theme.SYSTEM.resolve(prefers_dark=False) is Theme.LIGHT

    def test_explicit_theme_ignores_preference(self) -> None:
        assert Theme.LIGHT.resolve(prefers_dark=True) is Theme.LIGHT


class TestAppContext:
    def test_defaults(self) -> None:
        ctx = AppContext()
        assert ctx.locale is Locale.EN
        assert ctx.theme is Theme.SYSTEM
        assert ctx.notifications_enabled is False

    def test_from_settings(self) -> None:
        ctx = AppContext.from_settings(DirectorySettings(default_locale="th", default_theme="dark"))
        assert ctx.locale is Locale.TH
        assert ctx.theme is Theme.DARK

    def test_from_settings_unknown_values(self) -> None:
        ctx = AppContext.from_settings(DirectorySettings(default_locale="fr", default_theme="neon"))
        assert ctx == AppContext()

    def test_with_helpers_are_immutable(self) -> None:
        ctx = AppContext()
        thai = ctx.with_locale(Locale.TH)
        assert ctx.locale is Locale.EN
        assert thai.accept_language == "th"
        assert thai.with_theme(Theme.DARK).theme is Theme.DARK
