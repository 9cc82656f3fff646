"""Formatted writes into one worksheet row."""

from __future__ import annotations

from copy import copy
from typing import Any

from openpyxl.cell.cell import Cell
from openpyxl.styles import PatternFill
from openpyxl.worksheet.worksheet import Worksheet

from .cells import cell_at, cell_block
from .culture import Culture, resolve_culture
from .styles import HORIZONTAL_ALIGNMENTS, normalize_color, thin_side

CURRENCY_FORMAT = '_-$* #,##0.00_-;-$* #,##0.00_-;_-$* "-"??_-;_-@_-'
PERCENTAGE_FORMAT = "0%"


class RowWriter:
    """Writes values, number formats and row-span styling into ``row``."""

    def __init__(
        self,
        worksheet: Worksheet,
        row: int,
        *,
        culture: Culture | str | None = None,
    ) -> None:
        if worksheet is None:
            raise ValueError("worksheet is required")
        if row < 1:
            raise ValueError(f"row is 1-based, got {row}")
        self.worksheet = worksheet
        self.row = row
        self.culture = resolve_culture(culture)

    def cell(self, column: int) -> Cell:
        return cell_at(self.worksheet, self.row, column)

    def set_value(self, column: int, value: Any) -> Cell:
        cell = self.cell(column)
        cell.value = value
        return cell

    def set_wrapped_value(self, column: int, value: Any) -> Cell:
        cell = self.set_value(column, value)
        alignment = copy(cell.alignment)
        alignment.wrap_text = True
        cell.alignment = alignment
        return cell

    def set_number_format(self, column: int, value: Any, number_format: str) -> Cell:
        cell = self.set_value(column, value)
        cell.number_format = number_format
        return cell

    def set_currency(self, column: int, value: Any) -> Cell:
        return self.set_number_format(column, value, CURRENCY_FORMAT)

    def set_percentage(self, column: int, value: Any) -> Cell:
        return self.set_number_format(column, value, PERCENTAGE_FORMAT)

    def set_short_date(self, column: int, value: Any) -> Cell:
        return self.set_number_format(column, value, self.culture.short_date_number_format)

    def set_long_date(self, column: int, value: Any) -> Cell:
        return self.set_number_format(column, value, self.culture.long_date_number_format)

    def style(
        self,
        from_column: int,
        to_column: int | None = None,
        *,
        horizontal: str | None = None,
        font_color: str | None = None,
        fill_color: str | None = None,
        border_color: str | None = None,
    ) -> None:
        """Style the span ``from_column..to_column`` of this row.

        Unlike ``apply_style``, the border outlines the span as a whole.
        """
        if horizontal is not None and horizontal not in HORIZONTAL_ALIGNMENTS:
            raise ValueError(f"Invalid horizontal alignment {horizontal!r}")
        to_column = from_column if to_column is None else to_column
        (cells,) = cell_block(self.worksheet, self.row, from_column, self.row, to_column)

        font_argb = normalize_color(font_color) if font_color is not None else None
        fill_argb = normalize_color(fill_color) if fill_color is not None else None
        side = thin_side(border_color) if border_color is not None else None

        last = len(cells) - 1
        for position, cell in enumerate(cells):
            if font_argb is not None:
                font = copy(cell.font)
                font.color = font_argb
                cell.font = font
            if fill_argb is not None:
                cell.fill = PatternFill(
                    fill_type="solid", start_color=fill_argb, end_color=fill_argb
                )
            if side is not None:
                border = copy(cell.border)
                border.top = side
                border.bottom = side
                if position == 0:
                    border.left = side
                if position == last:
                    border.right = side
                cell.border = border
            if horizontal is not None:
                alignment = copy(cell.alignment)
                alignment.horizontal = horizontal
                cell.alignment = alignment
