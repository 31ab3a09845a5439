"""Template translator for resolving messages at render time.

Core component of the i18n system: derives the canonical key for a template,
picks the translation for the active language, and splices the live values
back in. Gaps in the message table never raise; they fall back to the
template's own text and are reported as warnings.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from infrastructure.i18n.exceptions import StructuralMismatchError, TemplateArityError
from infrastructure.i18n.models import (
    PLACEHOLDER,
    LanguageTag,
    MessageTable,
    MissingEntry,
    MissingTranslation,
    PlaceholderMismatch,
    TemplateParts,
    derive_key,
    reassemble,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

Diagnostic = Union[MissingEntry, MissingTranslation, PlaceholderMismatch]


class TemplateTranslator:
    """Resolves templates against a message table.

    Attributes:
        message_table: Table of translations keyed by canonical key.
        key_lang: Language whose text is the key itself (optional).
        strict_placeholders: Raise StructuralMismatchError instead of
            warning when a translation's placeholders don't fit.
    """

    def __init__(
        self,
        message_table: Mapping[str, Any],
        key_lang: Optional[LanguageTag] = None,
        strict_placeholders: bool = False,
    ):
        if not isinstance(message_table, MessageTable):
            message_table = MessageTable(message_table)
        self.message_table = message_table
        self.key_lang = key_lang
        self.strict_placeholders = strict_placeholders

    def translate(
        self,
        segments: Sequence[str],
        values: Sequence[Any],
        language: LanguageTag,
    ) -> str:
        """Resolve one template into display text.

        Args:
            segments: N+1 literal fragments of the template, taken verbatim.
            values: N substitution values.
            language: Active language tag.

        Returns:
            The translated string, or the template's own text when the key
            language is active or no translation exists.

        Raises:
            TemplateArityError: If len(segments) != len(values) + 1.
            StructuralMismatchError: In strict mode, if the translation's
                placeholder count differs from the template's.
        """
        segments = tuple(segments)
        values = tuple(values)
        if len(segments) != len(values) + 1:
            raise TemplateArityError(len(segments), len(values))

        key = derive_key(segments)
        entry = self.message_table.get(key)
        translation = self.message_table.get_translation(key, language)

        if entry is None:
            self._report(MissingEntry(key))
        elif not translation and language != self.key_lang:
            self._report(MissingTranslation(key, language))

        # The key language always wins, even over a table entry for that tag
        if (self.key_lang and language == self.key_lang) or not translation:
            return reassemble(segments, values)

        fragments = translation.split(PLACEHOLDER)
        if len(fragments) != len(segments):
            mismatch = PlaceholderMismatch(
                key=key,
                language=language,
                expected=len(segments) - 1,
                actual=len(fragments) - 1,
            )
            if self.strict_placeholders:
                logger.error(
                    "placeholder_mismatch",
                    key=key,
                    language=language,
                    expected=mismatch.expected,
                    actual=mismatch.actual,
                )
                raise StructuralMismatchError(mismatch)
            self._report(mismatch)
            return reassemble(segments, values)

        return reassemble(fragments, values)

    def bind(self, language: LanguageTag) -> "BoundResolver":
        """Create a resolver bound to a language.

        Args:
            language: Active language tag.

        Returns:
            BoundResolver for this translator and language.
        """
        return BoundResolver(translator=self, language=language)

    def _report(self, diagnostic: Diagnostic) -> None:
        fields = {"diagnostic": diagnostic.kind, "key": diagnostic.key}
        language = getattr(diagnostic, "language", None)
        if language is not None:
            fields["language"] = language
        logger.warning(str(diagnostic), **fields)


@dataclass(frozen=True)
class BoundResolver:
    """A translator pre-associated with one active language.

    Call it like a template tag::

        _ = context.consume()
        _(("You have clicked ", " times"), count)

    Attributes:
        translator: TemplateTranslator holding the message table.
        language: Active language captured when the resolver was bound.
    """

    translator: TemplateTranslator
    language: LanguageTag

    def __call__(self, segments: Sequence[str], *values: Any) -> str:
        return self.translator.translate(segments, values, self.language)

    def t(self, fragments: Sequence[str], values: Iterable[Any] = ()) -> str:
        """Resolve a template given as a fragment list and a value list."""
        return self.translator.translate(fragments, tuple(values), self.language)

    def render(self, parts: TemplateParts) -> str:
        """Resolve a TemplateParts instance."""
        return self.translator.translate(parts.segments, parts.values, self.language)
