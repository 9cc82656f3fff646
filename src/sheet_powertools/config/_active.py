"""The repository every ``SettingsGroup.load()`` reads from by default."""

from __future__ import annotations

from ._repository import ConfigRepository

_active_repository: ConfigRepository | None = None


def set_repository(repo: ConfigRepository | None) -> None:
    global _active_repository
    _active_repository = repo


def get_repository() -> ConfigRepository | None:
    return _active_repository


def _auto_repository() -> ConfigRepository:
    """Lazily install an ``EnvConfigRepository`` when nothing is set."""
    global _active_repository
    if _active_repository is None:
        from ._repository import EnvConfigRepository

        _active_repository = EnvConfigRepository()
    return _active_repository
