"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from applogger.config.settings.base import Settings
from applogger.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each field ``name`` is read from ``<PREFIX>_<NAME>`` (upper-cased); unset
    variables keep the field's default. Float fields are parsed here; levels
    and rotation intervals are passed through as text and parsed by the
    settings class itself.
    """

    def __init__(self, environ: typing.Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            raw = environ.get(f"{prefix}_{field.name}".upper().lstrip("_"))
            if raw is None:
                continue
            if hints.get(field.name) is float:
                kwargs[field.name] = _parse_float(field.name, raw, prefix)
            else:
                kwargs[field.name] = raw

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


def _parse_float(name: str, raw: str, prefix: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidSettingValueError(name, raw, "not a number", prefix=prefix) from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
