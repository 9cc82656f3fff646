"""Exceptions surfaced to users and the per-row error collector.

Structural problems (missing sheet, header mismatch, unknown named range)
raise a ``UserFacingError`` whose message can be shown as-is. Field-level
problems never raise; they are appended to an ``ErrorCollector``.
"""

from __future__ import annotations

from typing import Iterator

from .cells import CellLike, cell_address


class UserFacingError(Exception):
    """An error whose ``message`` is ready to display to an end user."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SheetNotFoundError(UserFacingError):
    def __init__(self, message: str, sheet: str | int) -> None:
        self.sheet = sheet
        super().__init__(message)


class HeaderMismatchError(UserFacingError):
    """Raised once with every header that did not match."""

    def __init__(self, message: str, sheet: str, missing: list[str]) -> None:
        self.sheet = sheet
        self.missing = missing
        super().__init__(message)


class NamedRangeNotFoundError(UserFacingError):
    def __init__(self, message: str, name: str) -> None:
        self.name = name
        super().__init__(message)


class ErrorCollector:
    """Ordered list of cell-tagged error strings; empty means valid."""

    def __init__(self) -> None:
        self._errors: list[str] = []

    def add(
        self,
        message: str,
        cell: CellLike | None = None,
        *,
        include_sheet_name: bool = True,
    ) -> None:
        if cell is None:
            self._errors.append(message)
            return
        address = cell_address(cell, include_sheet_name=include_sheet_name)
        self._errors.append(f"[{address}] {message}")

    def extend(self, other: ErrorCollector) -> None:
        self._errors.extend(other.errors)

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._errors))

    def __repr__(self) -> str:
        return f"ErrorCollector({self._errors!r})"
