"""Typed reads of one worksheet row with accumulated validation errors.

``RowReader`` never raises for bad data. Every getter returns ``None`` when a
value is blank or cannot be converted, and records the reason in its
``ErrorCollector``, so a caller can read a whole row and report every
problem at once::

    reader = RowReader(worksheet, row=5, culture=get_culture("en-US"))
    name = reader.get_string(1, "Name", max_length=40)
    age = reader.get_int(2, "Age", required=False)
    if not reader.is_valid:
        print(reader.errors)
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Callable, TypeVar

from openpyxl.worksheet.worksheet import Worksheet

from . import converters
from .cells import CellLike, cell_text, peek_cell
from .config import WorkbookSettings
from .culture import Culture, resolve_culture
from .errors import ErrorCollector

T = TypeVar("T")


class RowReader:
    """Reads cells of ``row`` in ``worksheet``.

    Attributes:
        worksheet: openpyxl worksheet being read
        row: 1-based row number
        errors: sink for field errors, shareable between readers
        culture: month names, number separators and message templates
        include_sheet_name: prefix error addresses with the sheet title
    """

    def __init__(
        self,
        worksheet: Worksheet,
        row: int,
        *,
        errors: ErrorCollector | None = None,
        culture: Culture | str | None = None,
        include_sheet_name: bool | None = None,
    ) -> None:
        if worksheet is None:
            raise ValueError("worksheet is required")
        if row < 1:
            raise ValueError(f"row is 1-based, got {row}")
        if include_sheet_name is None:
            include_sheet_name = WorkbookSettings.load().include_sheet_name_in_errors

        self.worksheet = worksheet
        self.row = row
        self.errors = ErrorCollector() if errors is None else errors
        self.culture = resolve_culture(culture)
        self.include_sheet_name = include_sheet_name

    @property
    def is_valid(self) -> bool:
        return self.errors.is_valid

    def cell(self, column: int) -> CellLike:
        """Cell in this row; reading never adds cells to the worksheet."""
        return peek_cell(self.worksheet, self.row, column)

    def is_blank(self, *columns: int) -> bool:
        """True when every listed cell is empty or whitespace.

        Looks at raw values, so a cell holding text that failed conversion is
        not blank even though its getter returned ``None``.
        """
        return all(converters.is_blank(self.cell(column).value) for column in columns)

    def add_error(self, message: str, cell: CellLike | None = None) -> None:
        self.errors.add(message, cell, include_sheet_name=self.include_sheet_name)

    # -- message helpers -------------------------------------------------

    def _required(self, cell: CellLike, description: str) -> None:
        self.add_error(self.culture.messages.required.format(field=description), cell)

    def _wrong_type(self, cell: CellLike, description: str, type_name: str) -> None:
        message = self.culture.messages.wrong_type.format(
            field=description, type_name=type_name
        )
        self.add_error(message, cell)

    def _convert(
        self,
        column: int,
        description: str,
        required: bool,
        type_name: str,
        convert: Callable[[Any], T],
        *,
        dashes_are_blank: bool = False,
    ) -> T | None:
        cell = self.cell(column)
        value = cell.value
        if converters.is_blank(value, dashes_are_blank=dashes_are_blank):
            if required:
                self._required(cell, description)
            return None
        try:
            return convert(value)
        except ValueError:
            self._wrong_type(cell, description, type_name)
            return None

    # -- text ------------------------------------------------------------

    def get_string(
        self,
        column: int,
        description: str,
        required: bool = True,
        *,
        max_length: int | None = None,
        exact_length: int | None = None,
        strip: bool = False,
    ) -> str | None:
        """Display text of the cell.

        Length problems are recorded but the text is still returned; it is
        only stripped when it passed validation.
        """
        cell = self.cell(column)
        text = cell_text(cell, self.culture)
        if not text.strip():
            if required:
                self._required(cell, description)
            return None

        messages = self.culture.messages
        valid = True
        if max_length is not None and len(text) > max_length:
            self.add_error(
                messages.max_length.format(field=description, max_length=max_length), cell
            )
            valid = False
        if exact_length is not None and len(text) != exact_length:
            self.add_error(
                messages.exact_length.format(field=description, length=exact_length), cell
            )
            valid = False

        if valid and strip:
            return text.strip()
        return text

    def get_email(self, column: int, description: str, required: bool = True) -> str | None:
        """``get_string`` plus a format check that keeps the raw text."""
        text = self.get_string(column, description, required)
        if text and not converters.is_email(text):
            self.add_error(
                self.culture.messages.invalid_email.format(field=description),
                self.cell(column),
            )
        return text

    # -- numbers ---------------------------------------------------------

    def get_int(self, column: int, description: str, required: bool = True) -> int | None:
        return self._convert(
            column,
            description,
            required,
            self.culture.type_names.integer,
            lambda value: converters.to_integer(value, converters.INT32_RANGE),
        )

    def get_short(self, column: int, description: str, required: bool = True) -> int | None:
        return self._convert(
            column,
            description,
            required,
            self.culture.type_names.short,
            lambda value: converters.to_integer(value, converters.INT16_RANGE),
        )

    def get_long(self, column: int, description: str, required: bool = True) -> int | None:
        return self._convert(
            column,
            description,
            required,
            self.culture.type_names.long,
            lambda value: converters.to_integer(value, converters.INT64_RANGE),
        )

    def get_double(self, column: int, description: str, required: bool = True) -> float | None:
        return self._convert(
            column,
            description,
            required,
            self.culture.type_names.number,
            lambda value: converters.to_float(value, self.culture),
        )

    def get_decimal(self, column: int, description: str, required: bool = True) -> Decimal | None:
        return self._convert(
            column,
            description,
            required,
            self.culture.type_names.number,
            lambda value: converters.to_decimal(value, self.culture),
        )

    # -- dates and times -------------------------------------------------

    def get_datetime(self, column: int, description: str, required: bool = True) -> datetime | None:
        """Native date, ISO or culture-formatted text, else a serial day number."""
        return self._convert(
            column,
            description,
            required,
            self.culture.type_names.datetime,
            lambda value: converters.to_datetime_or_serial(value, self.culture),
            dashes_are_blank=True,
        )

    def get_time(self, column: int, description: str, required: bool = True) -> timedelta | None:
        """Duration text first; otherwise the time of day of a full date/time."""

        def convert(value: Any) -> timedelta:
            try:
                return converters.to_timedelta(value)
            except ValueError:
                return converters.time_of_day(value, self.culture)

        return self._convert(
            column,
            description,
            required,
            self.culture.type_names.time,
            convert,
            dashes_are_blank=True,
        )

    # -- others ----------------------------------------------------------

    def get_bool(self, column: int, description: str, required: bool = True) -> bool | None:
        cell = self.cell(column)
        if converters.is_blank(cell.value):
            if required:
                self._required(cell, description)
            return None
        return converters.to_bool(cell.value)

    def get_month_number(self, column: int, description: str, required: bool = True) -> int | None:
        """Month as 1..12 from a number or a month name of the culture."""
        text = self.get_string(column, description, required)
        if text is None:
            return None
        try:
            return converters.to_month(text, self.culture)
        except ValueError:
            self.add_error(
                self.culture.messages.invalid_month.format(field=description),
                self.cell(column),
            )
            return None
