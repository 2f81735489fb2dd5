"""Config settings – env-based configuration for the dispatcher and providers."""
from applogger.config.settings.base import Settings
from applogger.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from applogger.config.settings.providers import (
    AppLoggerSettings,
    ConsoleProviderSettings,
    FileProviderSettings,
    ProviderSettings,
)

__all__ = [
    "AppLoggerSettings",
    "ConsoleProviderSettings",
    "EnvSettingsLoader",
    "FileProviderSettings",
    "ProviderSettings",
    "Settings",
    "SettingsLoader",
]
