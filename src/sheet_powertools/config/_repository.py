"""Where setting values come from."""

from __future__ import annotations

import os
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ConfigRepository(Protocol):
    """Two lookups: the process environment and an application mapping."""

    def get_env(self, key: str) -> str | None:
        ...

    def get_setting(self, key: str) -> Any:
        ...


class EnvConfigRepository:
    """Reads ``os.environ`` plus an optional mapping supplied by the application."""

    def __init__(self, settings: Mapping[str, Any] | None = None) -> None:
        self._settings: dict[str, Any] = dict(settings or {})

    def get_env(self, key: str) -> str | None:
        return os.environ.get(key)

    def get_setting(self, key: str) -> Any:
        return self._settings.get(key)


class FakeConfigRepository:
    """Dict-backed repository for tests.

    >>> repo = FakeConfigRepository(env={"SHEET_POWERTOOLS_CULTURE": "en-US"})
    >>> repo.get_env("SHEET_POWERTOOLS_CULTURE")
    'en-US'
    """

    def __init__(
        self,
        env: dict[str, str] | None = None,
        settings: dict[str, Any] | None = None,
    ) -> None:
        self._env: dict[str, str] = dict(env or {})
        self._settings: dict[str, Any] = dict(settings or {})

    def get_env(self, key: str) -> str | None:
        return self._env.get(key)

    def get_setting(self, key: str) -> Any:
        return self._settings.get(key)

    def set_env(self, key: str, value: str) -> None:
        self._env[key] = value

    def set_setting(self, key: str, value: Any) -> None:
        self._settings[key] = value
