"""Factory functions for creating i18n components.

Provides convenience functions for building a context carrier from the
application settings.
"""

from typing import Any, Mapping, Optional, TYPE_CHECKING

import structlog
from infrastructure.i18n.context import I18nContext
from infrastructure.i18n.models import LanguageTag
from infrastructure.i18n.resolvers import detect_system_language

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

# Distinguishes "not passed" from an explicit None
_UNSET: Any = object()


def create_context_from_settings(
    message_table: Mapping[str, Any],
    settings: Optional["Settings"] = None,
    key_lang: Optional[LanguageTag] = _UNSET,
    default_language: Optional[LanguageTag] = None,
    strict_placeholders: Optional[bool] = None,
) -> I18nContext:
    """Create an I18nContext configured from settings.

    Explicit arguments override the matching settings. The default language
    is resolved once here: I18N_DEFAULT_LANGUAGE if set, otherwise the system
    locale, otherwise I18N_FALLBACK_LANGUAGE.

    Args:
        message_table: Mapping of canonical key to {language: template}.
        settings: Settings instance (default: application singleton).
        key_lang: Overrides I18N_KEY_LANGUAGE. Pass None to disable the key
            language even when the setting is present.
        default_language: Overrides I18N_DEFAULT_LANGUAGE.
        strict_placeholders: Overrides I18N_STRICT_PLACEHOLDERS.

    Returns:
        I18nContext: Configured context carrier

    Usage:
        I18N = create_context_from_settings(MESSAGES)

        with I18N.provide("es"):
            _ = I18N.consume()
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    i18n_settings = settings.i18n
    if key_lang is _UNSET:
        key_lang = i18n_settings.key_language
    default_language = (
        default_language
        or i18n_settings.default_language
        or detect_system_language(fallback=i18n_settings.fallback_language)
    )
    if strict_placeholders is None:
        strict_placeholders = i18n_settings.strict_placeholders

    context = I18nContext(
        message_table,
        key_lang=key_lang,
        default_language=default_language,
        strict_placeholders=strict_placeholders,
    )
    logger.info(
        "i18n_context_created",
        key_lang=key_lang,
        default_language=default_language,
        strict_placeholders=strict_placeholders,
        entry_count=len(context.message_table),
    )
    return context
