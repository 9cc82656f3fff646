"""Typed settings for sheet_powertools.

Values come from environment variables or an application-supplied mapping
and are validated up front by pydantic when a group is loaded.
"""

from ._active import get_repository, set_repository
from ._repository import ConfigRepository, EnvConfigRepository, FakeConfigRepository
from ._settings import SettingsGroup, WorkbookSettings
from ._testing import override_settings
from ._types import ConfigError

__all__ = [
    "get_repository",
    "set_repository",
    "ConfigError",
    "SettingsGroup",
    "WorkbookSettings",
    "ConfigRepository",
    "EnvConfigRepository",
    "FakeConfigRepository",
    "override_settings",
]
