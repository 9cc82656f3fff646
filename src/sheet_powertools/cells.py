"""Cell addressing and display-text helpers on top of openpyxl."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Iterable, Iterator

from openpyxl.cell.cell import Cell, MergedCell
from openpyxl.utils import absolute_coordinate, get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .culture import Culture

CellLike = Cell | MergedCell


def _check_position(row: int, column: int) -> None:
    if row < 1 or column < 1:
        raise ValueError(f"Row and column are 1-based, got ({row}, {column})")


def quote_sheet_title(title: str) -> str:
    """Always-quoted sheet title, with embedded quotes doubled."""
    return "'" + title.replace("'", "''") + "'"


def cell_at(worksheet: Worksheet, row: int, column: int) -> Cell:
    _check_position(row, column)
    return worksheet.cell(row=row, column=column)


def peek_cell(worksheet: Worksheet, row: int, column: int) -> CellLike:
    """Cell at (row, column) without adding it to the sheet.

    ``worksheet.cell()`` registers every cell it touches, which grows
    ``max_row``/``max_column``. Unwritten positions get a detached empty cell
    that still knows its sheet and coordinate.
    """
    _check_position(row, column)
    existing = worksheet._cells.get((row, column))
    if existing is not None:
        return existing
    return Cell(worksheet, row=row, column=column)


def cell_block(
    worksheet: Worksheet,
    from_row: int,
    from_column: int,
    to_row: int,
    to_column: int,
) -> tuple[tuple[Cell, ...], ...]:
    """Rectangular block of cells as rows, corners given in any order."""
    _check_position(from_row, from_column)
    _check_position(to_row, to_column)
    return tuple(
        worksheet.iter_rows(
            min_row=min(from_row, to_row),
            max_row=max(from_row, to_row),
            min_col=min(from_column, to_column),
            max_col=max(from_column, to_column),
        )
    )


def iter_cells(target: Any) -> Iterator[CellLike]:
    """Flatten anything ``worksheet[...]`` can return into single cells."""
    if isinstance(target, (Cell, MergedCell)):
        yield target
        return
    if isinstance(target, str):
        raise TypeError(
            f"Expected cells, got the string {target!r}; use worksheet[{target!r}]"
        )
    for item in target:
        yield from iter_cells(item)


def cell_address(cell: CellLike, *, include_sheet_name: bool = False) -> str:
    """``A1`` or ``'Sheet'!A1``."""
    if include_sheet_name:
        return f"{quote_sheet_title(cell.parent.title)}!{cell.coordinate}"
    return cell.coordinate


def range_reference(
    worksheet: Worksheet,
    from_row: int,
    column: int,
    to_row: int,
    to_column: int | None = None,
) -> str:
    """Absolute, sheet-qualified reference such as ``'Data'!$B$2:$B$4``."""
    to_column = column if to_column is None else to_column
    start = f"{get_column_letter(column)}{from_row}"
    end = f"{get_column_letter(to_column)}{to_row}"
    coordinate = start if start == end else f"{start}:{end}"
    return f"{quote_sheet_title(worksheet.title)}!{absolute_coordinate(coordinate)}"


def _format_number(value: float, culture: Culture | None) -> str:
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if culture is not None and culture.decimal_separator != ".":
        text = text.replace(".", culture.decimal_separator)
    return text


def cell_text(cell: CellLike, culture: Culture | None = None) -> str:
    """Text the way a user would read it in the sheet; empty cells give ``""``."""
    return value_text(cell.value, culture)


def value_text(value: Any, culture: Culture | None = None) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value, culture)
    if isinstance(value, datetime):
        date_format = culture.short_date_format if culture else "%Y-%m-%d"
        if value.time() == time(0, 0):
            return value.strftime(date_format)
        return value.strftime(f"{date_format} %H:%M:%S")
    if isinstance(value, date):
        return value.strftime(culture.short_date_format if culture else "%Y-%m-%d")
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, timedelta):
        return str(value)
    return str(value)


def column_texts(worksheet: Worksheet, column: int, culture: Culture | None = None) -> Iterable[str]:
    for (cell,) in worksheet.iter_rows(min_col=column, max_col=column):
        yield cell_text(cell, culture)
