"""Worksheet wrapper: sheet lookup, header validation, styling and row iteration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence, TypeVar

from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from .cells import cell_at, cell_block, cell_text, peek_cell
from .culture import Culture, resolve_culture
from .errors import HeaderMismatchError, SheetNotFoundError
from .reader import RowReader
from .styles import apply_style

logger = logging.getLogger(__name__)

TRecord = TypeVar("TRecord")


@dataclass(frozen=True)
class Header:
    """Expected header text at a 1-based column."""

    column: int
    text: str


def find_worksheet(workbook: Workbook, sheet: str | int, culture: Culture) -> Worksheet:
    """Sheet by title (exact, then case-insensitive) or by 1-based position."""
    messages = culture.messages
    if isinstance(sheet, int):
        if 1 <= sheet <= len(workbook.worksheets):
            return workbook.worksheets[sheet - 1]
        raise SheetNotFoundError(messages.sheet_not_found_by_index.format(index=sheet), sheet)

    if sheet in workbook.sheetnames:
        return workbook[sheet]
    wanted = sheet.casefold()
    for worksheet in workbook.worksheets:
        if worksheet.title.casefold() == wanted:
            return worksheet
    raise SheetNotFoundError(messages.sheet_not_found_by_name.format(sheet=sheet), sheet)


class SheetWrapper:
    """A workbook plus one selected worksheet.

    Args:
        workbook: openpyxl workbook, already loaded by the caller
        sheet: sheet title or 1-based sheet position
        culture: culture instance or registered name; default from settings

    Raises:
        ValueError: workbook missing or blank sheet name
        SheetNotFoundError: no such sheet
    """

    def __init__(
        self,
        workbook: Workbook,
        sheet: str | int = 1,
        *,
        culture: Culture | str | None = None,
    ) -> None:
        if workbook is None:
            raise ValueError("workbook is required")
        if isinstance(sheet, str) and not sheet.strip():
            raise ValueError("sheet name is required")

        self.workbook = workbook
        self.culture = resolve_culture(culture)
        self.worksheet = find_worksheet(workbook, sheet, self.culture)
        self.name = self.worksheet.title
        logger.debug("Selected sheet %r", self.name)

    def __repr__(self) -> str:
        return f"SheetWrapper(name={self.name!r})"

    # -- headers ---------------------------------------------------------

    def validate_headers(
        self,
        headers: Sequence[str | Header],
        column: int = 1,
        row: int = 1,
    ) -> None:
        """Check header texts, ignoring case and surrounding whitespace.

        Plain strings are laid out left to right from ``column``; ``Header``
        items carry their own column. Every mismatch is reported in a single
        ``HeaderMismatchError``.
        """
        missing: list[str] = []
        for offset, header in enumerate(headers):
            if isinstance(header, Header):
                expected, target_column = header.text, header.column
            else:
                expected, target_column = header, column + offset
            cell = peek_cell(self.worksheet, row, target_column)
            actual = cell_text(cell, self.culture)
            if actual.strip().lower() != expected.strip().lower():
                missing.append(f"{expected} ({cell.coordinate})")

        if missing:
            message = self.culture.messages.headers_not_found.format(
                sheet=self.name, headers=", ".join(missing)
            )
            logger.warning("Header validation failed on sheet %r: %s", self.name, missing)
            raise HeaderMismatchError(message, self.name, missing)

    # -- styling ---------------------------------------------------------

    def style_cell(self, row: int, column: int, **style: Any) -> None:
        apply_style(cell_at(self.worksheet, row, column), **style)

    def style_range(
        self,
        from_row: int,
        from_column: int,
        to_row: int,
        to_column: int,
        **style: Any,
    ) -> None:
        apply_style(cell_block(self.worksheet, from_row, from_column, to_row, to_column), **style)

    def style_address(self, address: str, **style: Any) -> None:
        """Style an A1 address or range such as ``"B2"`` or ``"A1:D1"``."""
        if not address or not address.strip():
            raise ValueError("address is required")
        apply_style(self.worksheet[address.strip()], **style)

    # -- rows ------------------------------------------------------------

    def row_reader(self, row: int, *, include_sheet_name: bool | None = None) -> RowReader:
        return RowReader(
            self.worksheet, row, culture=self.culture, include_sheet_name=include_sheet_name
        )

    def iter_records(
        self,
        factory: Callable[[SheetWrapper, int], TRecord],
        *,
        start_row: int = 2,
        max_row: int | None = None,
        skip_blank: bool = True,
    ) -> Iterator[TRecord]:
        """Build one record per row from ``start_row`` through ``max_row``.

        ``max_row`` defaults to the last used row of the sheet. Records whose
        ``is_blank`` is true are skipped unless ``skip_blank`` is false, so
        ``is_blank`` must look at raw cells (``RowReader.is_blank``) rather
        than parsed fields, which are also ``None`` when conversion failed.
        """
        if start_row < 1:
            raise ValueError("start_row must be >= 1")
        last_row = self.worksheet.max_row if max_row is None else max_row

        for row in range(start_row, last_row + 1):
            record = factory(self, row)
            if skip_blank and getattr(record, "is_blank", False):
                continue
            yield record
