"""Context carrier that threads the active language to nested code.

An I18nContext owns a message table and hands out resolvers bound to the
language of the nearest enclosing ``provide`` block. Bindings live in a
ContextVar, so they are local to the current thread or asyncio task and are
restored when the block exits.

Usage:
    I18N = create_i18n_context(
        {"You have clicked %% times": {"es": "Ha hecho clic %% veces"}},
        key_lang="en",
    )

    def counter_label(count):
        _ = I18N.consume()
        return _(("You have clicked ", " times"), count)

    with I18N.provide("es"):
        counter_label(3)  # "Ha hecho clic 3 veces"
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar

from infrastructure.i18n.models import LanguageTag
from infrastructure.i18n.resolvers import detect_system_language
from infrastructure.i18n.translator import BoundResolver, TemplateTranslator

T = TypeVar("T")


class I18nContext:
    """Carrier binding an active language to a resolver for nested consumers.

    Attributes:
        translator: TemplateTranslator for the message table.
        default_language: Language used outside any provide() block and when
            provide() is given no language. Computed once at construction.
    """

    def __init__(
        self,
        message_table: Mapping[str, Any],
        key_lang: Optional[LanguageTag] = None,
        default_language: Optional[LanguageTag] = None,
        strict_placeholders: bool = False,
    ):
        self.translator = TemplateTranslator(
            message_table,
            key_lang=key_lang,
            strict_placeholders=strict_placeholders,
        )
        self.default_language = default_language or detect_system_language()
        self._current: ContextVar[Optional[BoundResolver]] = ContextVar(
            f"i18n_resolver_{id(self)}", default=None
        )

    @property
    def key_lang(self) -> Optional[LanguageTag]:
        return self.translator.key_lang

    @property
    def message_table(self):
        return self.translator.message_table

    @contextmanager
    def provide(self, language: Optional[LanguageTag] = None) -> Iterator[BoundResolver]:
        """Bind a language for the duration of the block.

        Args:
            language: Active language. Defaults to default_language.

        Yields:
            The resolver bound for the block.
        """
        if language is None:
            language = self.default_language
        resolver = self.translator.bind(language)
        token = self._current.set(resolver)
        try:
            yield resolver
        finally:
            self._current.reset(token)

    def run(
        self,
        language: Optional[LanguageTag],
        content: Callable[..., T],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Evaluate content with language bound and return its result."""
        with self.provide(language):
            return content(*args, **kwargs)

    def consume(self) -> BoundResolver:
        """Get the nearest enclosing resolver.

        Returns:
            Resolver from the innermost provide() block, or one bound to
            default_language when no block is active.
        """
        resolver = self._current.get()
        if resolver is None:
            return self.translator.bind(self.default_language)
        return resolver

    @property
    def active_language(self) -> LanguageTag:
        return self.consume().language


def create_i18n_context(
    message_table: Mapping[str, Any],
    key_lang: Optional[LanguageTag] = None,
    default_language: Optional[LanguageTag] = None,
    strict_placeholders: bool = False,
) -> I18nContext:
    """Create a context carrier for a message table.

    If key_lang is set, keys are the strings written in that language with
    each substitution replaced by "%%", and that language never needs table
    entries. Without key_lang, keys may be conventional identifiers
    (e.g., "counter.button.label") and every language needs a translation.

    Args:
        message_table: Mapping of canonical key to {language: template}.
        key_lang: Language whose text is the key itself.
        default_language: Language used when none is provided. Detected from
            the system locale if not given.
        strict_placeholders: Raise on placeholder count mismatches.

    Returns:
        I18nContext bound to the table.
    """
    return I18nContext(
        message_table,
        key_lang=key_lang,
        default_language=default_language,
        strict_placeholders=strict_placeholders,
    )
