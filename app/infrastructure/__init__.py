"""Infrastructure modules.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging setup (configure_logging, get_module_logger)
- services: Application-scoped providers (get_settings)
- i18n: Template-keyed message translation
"""
