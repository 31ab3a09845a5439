"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings validation and defaults
- Settings class initialization
- get_settings() singleton
"""

import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services.providers import get_settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings-related environment variables."""
    for name in (
        "I18N_KEY_LANGUAGE",
        "I18N_DEFAULT_LANGUAGE",
        "I18N_FALLBACK_LANGUAGE",
        "I18N_STRICT_PLACEHOLDERS",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_i18n_settings_defaults(self, clean_env):
        """Test I18nSettings uses correct default values."""
        i18n = I18nSettings()

        assert i18n.key_language is None
        assert i18n.default_language is None
        assert i18n.fallback_language == "en"
        assert i18n.strict_placeholders is False

    def test_i18n_settings_custom_values(self, clean_env):
        """Test I18nSettings reads environment variables."""
        clean_env.setenv("I18N_KEY_LANGUAGE", "en")
        clean_env.setenv("I18N_DEFAULT_LANGUAGE", "es")
        clean_env.setenv("I18N_FALLBACK_LANGUAGE", "jp")
        clean_env.setenv("I18N_STRICT_PLACEHOLDERS", "true")

        i18n = I18nSettings()

        assert i18n.key_language == "en"
        assert i18n.default_language == "es"
        assert i18n.fallback_language == "jp"
        assert i18n.strict_placeholders is True

    def test_i18n_settings_blank_values_are_unset(self, clean_env):
        """Blank language variables mean "not configured"."""
        clean_env.setenv("I18N_KEY_LANGUAGE", "")
        clean_env.setenv("I18N_DEFAULT_LANGUAGE", "  ")

        i18n = I18nSettings()

        assert i18n.key_language is None
        assert i18n.default_language is None

    def test_i18n_settings_init_by_alias(self, clean_env):
        """Settings can be constructed directly for tests and overrides."""
        i18n = I18nSettings(I18N_KEY_LANGUAGE="en", I18N_STRICT_PLACEHOLDERS=True)

        assert i18n.key_language == "en"
        assert i18n.strict_placeholders is True


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_defaults(self, clean_env):
        """Settings instantiates its subsettings."""
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.PREFIX == ""

    def test_settings_accepts_subsettings_override(self, clean_env):
        """Provided subsettings are used as-is."""
        i18n = I18nSettings(I18N_KEY_LANGUAGE="fr")
        settings = Settings(i18n=i18n)

        assert settings.i18n.key_language == "fr"

    def test_is_production_without_prefix(self, clean_env):
        """An empty PREFIX means production."""
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, clean_env):
        """A PREFIX marks a non-production environment."""
        clean_env.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_log_level_from_env(self, clean_env):
        """LOG_LEVEL is read from the environment."""
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().LOG_LEVEL == "DEBUG"


class TestGetSettings:
    """Test suite for the get_settings provider."""

    def test_get_settings_is_singleton(self, clean_env):
        """get_settings() caches one instance."""
        assert get_settings() is get_settings()

    def test_get_settings_cache_clear(self, clean_env):
        """Clearing the cache picks up environment changes."""
        first = get_settings()
        clean_env.setenv("I18N_KEY_LANGUAGE", "es")
        get_settings.cache_clear()
        second = get_settings()

        assert first is not second
        assert second.i18n.key_language == "es"
