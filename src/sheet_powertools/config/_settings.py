"""Declarative settings groups backed by pydantic.

Subclass ``SettingsGroup`` and declare fields; ``load()`` resolves each field
from the environment (``{ENV_PREFIX}_{FIELD}``) and then from the
application mapping (``{prefix}_{field}``)::

    class ExportSettings(SettingsGroup):
        class Meta:
            prefix = "export"
            env_prefix = "EXPORT"

        header_row: int = 1
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ._repository import ConfigRepository


class SettingsGroup(BaseModel):
    """Base class for typed groups of settings."""

    model_config = ConfigDict(frozen=True)

    class Meta:
        prefix: str = ""
        env_prefix: str = ""

    @classmethod
    def load(cls, repo: ConfigRepository | None = None):
        """Resolve every field and return a validated instance.

        Missing fields fall back to their declared default; pydantic raises
        ``ValidationError`` for values it cannot coerce.
        """
        from ._active import _auto_repository

        active_repo = repo or _auto_repository()
        prefix = getattr(cls.Meta, "prefix", "")
        env_prefix = getattr(cls.Meta, "env_prefix", "")

        raw: dict[str, object] = {}
        for field_name in cls.model_fields:
            if env_prefix:
                env_value = active_repo.get_env(f"{env_prefix}_{field_name}".upper())
                if env_value is not None:
                    raw[field_name] = env_value
                    continue
            key = f"{prefix}_{field_name}" if prefix else field_name
            value = active_repo.get_setting(key)
            if value is not None:
                raw[field_name] = value

        return cls.model_validate(raw)


class WorkbookSettings(SettingsGroup):
    """Library-wide defaults, overridable through ``SHEET_POWERTOOLS_*``."""

    class Meta:
        prefix = "sheet_powertools"
        env_prefix = "SHEET_POWERTOOLS"

    culture: str = "es-AR"
    include_sheet_name_in_errors: bool = True
    named_range_max_row: int = Field(default=9999, ge=1)
    auto_fit_min_width: float = Field(default=8, gt=0)
    auto_fit_padding: float = Field(default=2, ge=0)
