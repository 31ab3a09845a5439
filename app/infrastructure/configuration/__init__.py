"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    key_lang = settings.i18n.key_language
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import I18nSettings

__all__ = ["Settings", "I18nSettings"]
