"""Config validation – errors raised while building dispatcher and provider settings."""
from __future__ import annotations

from applogger.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """A settings object could not be built (bad value or unreadable environment)."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """One setting of a dispatcher or provider has a value it cannot use.

    ``prefix`` is the settings class' environment prefix (``APPLOGGER_FILE``,
    ``APPLOGGER_CONSOLE`` …), so the message names the environment variable a
    user would change.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, prefix: str = "") -> None:
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.prefix = prefix
        super().__init__(
            f"Invalid value {value!r} for {self.env_var}: {reason}",
            detail={"setting": setting_name, "env_var": self.env_var},
        )

    @property
    def env_var(self) -> str:
        if not self.prefix:
            return self.setting_name
        return f"{self.prefix}_{self.setting_name}".upper()


__all__ = ["ConfigError", "InvalidSettingValueError"]
