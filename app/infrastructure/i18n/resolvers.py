"""Language resolution for picking the active language.

Provides the system-locale detection used for the default language and
Accept-Language negotiation for hosts that choose a language per request.
"""

import locale
import os
from typing import Iterable, Optional

import structlog
from infrastructure.i18n.models import LanguageTag, primary_subtag

logger = structlog.get_logger().bind(component="i18n.resolver")

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = {"C", "POSIX"}


def _usable(tag: Optional[str]) -> bool:
    if not tag:
        return False
    return tag.split(".", 1)[0] not in _NEUTRAL_LOCALES


def detect_system_language(fallback: LanguageTag = "en") -> LanguageTag:
    """Detect the primary language of the runtime locale.

    Checks LC_ALL, LC_MESSAGES and LANG in POSIX precedence order, then the
    interpreter's current locale. Neutral locales ("C", "POSIX") are skipped.

    Args:
        fallback: Language returned when nothing usable is found.

    Returns:
        Primary language subtag (e.g., "en" for "en_US.UTF-8").
    """
    for name in _LOCALE_ENV_VARS:
        value = os.environ.get(name)
        if _usable(value):
            language = primary_subtag(value)
            logger.debug("detected_system_language", source=name, language=language)
            return language

    try:
        current = locale.getlocale()[0]
    except ValueError:
        current = None
    if _usable(current):
        language = primary_subtag(current)
        logger.debug("detected_system_language", source="locale", language=language)
        return language

    logger.info("system_language_not_detected", fallback=fallback)
    return fallback


class LanguageNegotiator:
    """Picks an active language from client preferences.

    Matches exact tags first, then primary subtags (e.g., a request for
    "pt-BR" is served by "pt").
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        return primary_subtag(requested).lower() == primary_subtag(available).lower()

    @staticmethod
    def parse_accept_language(header: Optional[str]) -> list[str]:
        """Parse an Accept-Language header into tags by descending quality.

        Args:
            header: Header value (e.g., "fr-CA,fr;q=0.9,en;q=0.8").

        Returns:
            Language ranges, best first. Wildcards and q=0 ranges are dropped.
        """
        if not header:
            return []

        preferences = []
        for part in header.split(","):
            lang_range, *params = part.split(";")
            lang_range = lang_range.strip()
            if not lang_range or lang_range == "*":
                continue
            quality = 1.0
            for param in params:
                name, _, value = param.partition("=")
                if name.strip().lower() != "q":
                    continue
                try:
                    quality = float(value.strip())
                except ValueError:
                    quality = 1.0
                break
            if quality <= 0:
                continue
            preferences.append((lang_range, quality))

        # sorted() is stable, so equal qualities keep header order
        return [tag for tag, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]

    @classmethod
    def find_best_match(
        cls,
        requested: Iterable[str],
        available: Iterable[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Default if no match found.

        Returns:
            Best matching language from available, or default if no match.
        """
        available = list(available)
        for req_lang in requested:
            for avail_lang in available:
                if cls.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if cls.matches_language(req_lang, avail_lang, strict=False):
                    return avail_lang

        return default

    @classmethod
    def from_accept_language(
        cls,
        header: Optional[str],
        available: Iterable[str],
        default: LanguageTag,
    ) -> LanguageTag:
        """Resolve the active language from an Accept-Language header.

        Args:
            header: Accept-Language header value.
            available: Language tags the application can display.
            default: Language used when nothing matches.

        Returns:
            Matching available language, or default.
        """
        match = cls.find_best_match(cls.parse_accept_language(header), available)
        if match is None:
            logger.info("no_matching_language_in_header", default=default)
            return default
        logger.debug("resolved_from_header", language=match)
        return match
