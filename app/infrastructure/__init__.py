"""Infrastructure modules for the slackin application.

Centralized infrastructure components:
- configuration: Settings management (Settings)
- i18n: Message catalogs, pluralization and placeholder substitution
- services: Dependency injection providers (SettingsDep, TranslatorDep, get_settings)
"""
