"""i18n system - template-keyed message translation.

Messages are written directly in a base language and looked up by their
own literal text, so translations can be added later without touching call
sites.

Main components:
- models: MessageTable, TemplateParts, key derivation and diagnostics
- translator: TemplateTranslator and BoundResolver
- context: I18nContext carrier threading the active language
- resolvers: system language detection and LanguageNegotiator
- factory: create_context_from_settings
"""

from infrastructure.i18n.context import I18nContext, create_i18n_context
from infrastructure.i18n.exceptions import (
    I18nError,
    StructuralMismatchError,
    TemplateArityError,
)
from infrastructure.i18n.factory import create_context_from_settings
from infrastructure.i18n.models import (
    PLACEHOLDER,
    MessageTable,
    MissingEntry,
    MissingTranslation,
    PlaceholderMismatch,
    TemplateParts,
    derive_key,
    primary_subtag,
    reassemble,
)
from infrastructure.i18n.resolvers import LanguageNegotiator, detect_system_language
from infrastructure.i18n.translator import BoundResolver, TemplateTranslator

__all__ = [
    "PLACEHOLDER",
    "MessageTable",
    "TemplateParts",
    "MissingEntry",
    "MissingTranslation",
    "PlaceholderMismatch",
    "derive_key",
    "reassemble",
    "primary_subtag",
    "TemplateTranslator",
    "BoundResolver",
    "I18nContext",
    "create_i18n_context",
    "create_context_from_settings",
    "LanguageNegotiator",
    "detect_system_language",
    "I18nError",
    "TemplateArityError",
    "StructuralMismatchError",
]
