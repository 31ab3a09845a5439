"""Feature-level fixtures for i18n system tests.

Provides message tables, translators and context carriers for translation
scenarios.
"""

from unittest.mock import patch

import pytest

from tests.factories.i18n import (
    make_i18n_context,
    make_message_table_data,
    make_translator,
)


@pytest.fixture
def message_table_data():
    """Raw message table keyed by English text."""
    return make_message_table_data()


@pytest.fixture
def translator():
    """TemplateTranslator with English as the key language."""
    return make_translator()


@pytest.fixture
def keyless_translator():
    """TemplateTranslator without a key language (conventional keys)."""
    return make_translator(
        entries={
            "counter.button.label": {
                "en": "Click me",
                "es": "Haz clic",
            },
        },
        key_lang=None,
    )


@pytest.fixture
def i18n_context():
    """I18nContext with English key and default language."""
    return make_i18n_context()


@pytest.fixture
def mock_translator_logger():
    """Patch the translator module logger to capture diagnostics."""
    with patch("infrastructure.i18n.translator.logger") as mock_logger:
        yield mock_logger


@pytest.fixture
def locale_env(monkeypatch):
    """Clear locale environment variables; returns monkeypatch for setting them."""
    for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_es": "es",
        "specific_es_mx": "es-MX",
        "with_quality": "en-US,en;q=0.9,es;q=0.8",
        "quality_ordering": "jp;q=0.5,es;q=0.9",
        "wildcard": "*;q=0.8,fr;q=0.5",
        "invalid_quality": "de;q=invalid,es",
        "zero_quality": "es;q=0,jp",
    }
