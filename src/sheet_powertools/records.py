"""Row records: one object per data row, populated while it is built.

Any class exposing ``row``, ``errors``, ``is_valid`` and ``is_blank`` is a
``RowRecord``. ``SheetRecord`` is an optional base that wires up a
``RowReader`` and a ``RowWriter``::

    class CustomerRow(SheetRecord):
        def __init__(self, sheet, row):
            super().__init__(sheet, row)
            self.name = self.reader.get_string(1, "Name", strip=True)
            self.active = self.reader.get_bool(2, "Active", required=False)

        @property
        def is_blank(self) -> bool:
            return self.reader.is_blank(1, 2)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence, runtime_checkable

from openpyxl.worksheet.worksheet import Worksheet

from .culture import Culture
from .reader import RowReader
from .writer import RowWriter


@runtime_checkable
class RowRecord(Protocol):
    row: int

    @property
    def errors(self) -> Sequence[str]:
        ...

    @property
    def is_valid(self) -> bool:
        ...

    @property
    def is_blank(self) -> bool:
        ...


class SheetRecord(ABC):
    """Base for records read from a worksheet or a ``SheetWrapper``."""

    def __init__(
        self,
        sheet: Any,
        row: int,
        *,
        include_sheet_name: bool | None = None,
        culture: Culture | str | None = None,
    ) -> None:
        if sheet is None:
            raise ValueError("sheet is required")
        worksheet: Worksheet = getattr(sheet, "worksheet", sheet)
        if culture is None:
            culture = getattr(sheet, "culture", None)

        self.worksheet = worksheet
        self.row = row
        self.reader = RowReader(
            worksheet, row, culture=culture, include_sheet_name=include_sheet_name
        )
        self.writer = RowWriter(worksheet, row, culture=self.reader.culture)

    @property
    def errors(self) -> tuple[str, ...]:
        return self.reader.errors.errors

    @property
    def is_valid(self) -> bool:
        return self.reader.is_valid

    @property
    @abstractmethod
    def is_blank(self) -> bool:
        """True when the raw cells of the row are empty and it should be skipped."""
