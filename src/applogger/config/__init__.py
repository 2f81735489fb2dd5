"""Config – dataclass settings, env loading and validation errors."""

from applogger.config.settings import (
    AppLoggerSettings,
    ConsoleProviderSettings,
    EnvSettingsLoader,
    FileProviderSettings,
    ProviderSettings,
    Settings,
    SettingsLoader,
)
from applogger.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "AppLoggerSettings",
    "ConfigError",
    "ConsoleProviderSettings",
    "EnvSettingsLoader",
    "FileProviderSettings",
    "InvalidSettingValueError",
    "ProviderSettings",
    "Settings",
    "SettingsLoader",
]
