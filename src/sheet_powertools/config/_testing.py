"""Test helpers for the settings layer."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from ._active import get_repository, set_repository
from ._repository import FakeConfigRepository


@contextmanager
def override_settings(
    *,
    settings: dict[str, Any] | None = None,
    env: dict[str, str] | None = None,
) -> Iterator[FakeConfigRepository]:
    """Swap the active repository for a ``FakeConfigRepository``.

    Usage::

        with override_settings(env={"SHEET_POWERTOOLS_CULTURE": "en-US"}):
            assert WorkbookSettings.load().culture == "en-US"
    """
    previous = get_repository()
    fake = FakeConfigRepository(env=env, settings=settings)
    set_repository(fake)
    try:
        yield fake
    finally:
        set_repository(previous)
