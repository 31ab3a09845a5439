"""Message table models for the i18n system.

A message is keyed by the literal text of its template in the key language,
with every substitution slot replaced by ``%%``. For example the template
``("Downloaded ", " MiB")`` with one value has the key ``"Downloaded %% MiB"``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Optional, Sequence

from infrastructure.i18n.exceptions import TemplateArityError

PLACEHOLDER = "%%"

CanonicalKey = str
LanguageTag = str
TranslationEntry = Mapping[LanguageTag, str]


def derive_key(segments: Sequence[str]) -> CanonicalKey:
    """Build the lookup key for a template.

    Segments are joined verbatim; escape sequences are not interpreted.

    Args:
        segments: Literal fragments of the template, in order.

    Returns:
        The canonical key (e.g., "You have clicked %% times").
    """
    return PLACEHOLDER.join(segments)


def reassemble(fragments: Sequence[str], values: Sequence[Any]) -> str:
    """Interleave fragments with stringified values.

    The fragment count drives the output: surplus values are dropped and
    fragments without a matching value are concatenated directly.

    Args:
        fragments: Literal fragments, in order.
        values: Substitution values, in order.

    Returns:
        fragment0 + str(value0) + fragment1 + ... + fragmentN
    """
    parts = []
    last = len(fragments) - 1
    for index, fragment in enumerate(fragments):
        parts.append(fragment)
        if index < last and index < len(values):
            parts.append(str(values[index]))
    return "".join(parts)


def primary_subtag(tag: str) -> LanguageTag:
    """Get the primary language subtag of a locale tag.

    Accepts BCP 47 ("en-US") and POSIX ("en_US.UTF-8") forms.

    Args:
        tag: Locale tag.

    Returns:
        Language code (e.g., "en").
    """
    tag = tag.split(".", 1)[0].split("@", 1)[0]
    return tag.replace("_", "-").split("-")[0]


@dataclass(frozen=True)
class TemplateParts:
    """A template decomposed into literal segments and substitution values.

    Attributes:
        segments: N+1 literal fragments.
        values: N substitution values.
    """

    segments: tuple[str, ...]
    values: tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.segments) != len(self.values) + 1:
            raise TemplateArityError(len(self.segments), len(self.values))

    @property
    def key(self) -> CanonicalKey:
        return derive_key(self.segments)

    def render(self) -> str:
        """Render the template with its own literal text."""
        return reassemble(self.segments, self.values)


class MessageTable(Mapping):
    """Read-only mapping from canonical key to translation entry.

    Entries are not validated on construction. An entry that is not a
    mapping, or a translation that is not a string, reads as absent.

    Attributes:
        entries: Read-only view of the supplied table.
    """

    def __init__(self, entries: Optional[Mapping[CanonicalKey, Any]] = None):
        self.entries: Mapping[CanonicalKey, Any] = MappingProxyType(
            dict(entries or {})
        )

    def __getitem__(self, key: CanonicalKey) -> Any:
        return self.entries[key]

    def __iter__(self) -> Iterator[CanonicalKey]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"MessageTable({dict(self.entries)!r})"

    def get_translation(
        self, key: CanonicalKey, language: LanguageTag
    ) -> Optional[str]:
        """Retrieve a translated template.

        Args:
            key: Canonical key.
            language: Language tag.

        Returns:
            Translated template, or None if the entry or translation is absent.
        """
        entry = self.entries.get(key)
        if not isinstance(entry, Mapping):
            return None
        translation = entry.get(language)
        return translation if isinstance(translation, str) else None

    def languages(self) -> set[LanguageTag]:
        """Get every language tag used by any entry."""
        found: set[LanguageTag] = set()
        for entry in self.entries.values():
            if isinstance(entry, Mapping):
                found.update(entry.keys())
        return found

    def missing_translations(self, language: LanguageTag) -> list[CanonicalKey]:
        """List keys with no usable translation for a language.

        Args:
            language: Language tag to check.

        Returns:
            Keys in table order.
        """
        return [key for key in self.entries if not self.get_translation(key, language)]


@dataclass(frozen=True)
class MissingEntry:
    """The canonical key has no row in the table."""

    key: CanonicalKey
    kind: str = field(default="missing_entry", init=False)

    def __str__(self) -> str:
        return f'No i18n entries for "{self.key}"'


@dataclass(frozen=True)
class MissingTranslation:
    """The row exists but lacks the active language."""

    key: CanonicalKey
    language: LanguageTag
    kind: str = field(default="missing_translation", init=False)

    def __str__(self) -> str:
        return f'No {self.language} translation for "{self.key}"'


@dataclass(frozen=True)
class PlaceholderMismatch:
    """A translation's placeholder count differs from its template's."""

    key: CanonicalKey
    language: LanguageTag
    expected: int
    actual: int
    kind: str = field(default="placeholder_mismatch", init=False)

    def __str__(self) -> str:
        return (
            f'{self.language} translation for "{self.key}" has {self.actual} '
            f"placeholders, expected {self.expected}"
        )
