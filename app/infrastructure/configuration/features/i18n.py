"""Internationalization feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Message translation configuration.

    Environment Variables:
        I18N_KEY_LANGUAGE: Language whose literal text doubles as the lookup key
        I18N_DEFAULT_LANGUAGE: Overrides the language detected from the system locale
        I18N_FALLBACK_LANGUAGE: Used when the system locale cannot be detected (default: en)
        I18N_STRICT_PLACEHOLDERS: Raise instead of warning when a translation's
            placeholder count differs from its template (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        key_lang = settings.i18n.key_language
        ```
    """

    key_language: str | None = Field(
        default=None,
        alias="I18N_KEY_LANGUAGE",
        description="Language tag whose text is used verbatim as the message key",
    )
    default_language: str | None = Field(
        default=None,
        alias="I18N_DEFAULT_LANGUAGE",
        description="Active language when none is provided (detected if unset)",
    )
    fallback_language: str = Field(
        default="en",
        alias="I18N_FALLBACK_LANGUAGE",
        description="Language used when the system locale is unavailable",
    )
    strict_placeholders: bool = Field(
        default=False,
        alias="I18N_STRICT_PLACEHOLDERS",
        description="Raise on placeholder count mismatches instead of warning",
    )

    @field_validator("key_language", "default_language", mode="before")
    @classmethod
    def _empty_as_none(cls, v):
        """Treat blank environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
