"""Refresh the values behind a workbook-level defined name."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from openpyxl.workbook.workbook import Workbook

from .cells import cell_at, range_reference
from .config import WorkbookSettings
from .culture import Culture, resolve_culture
from .errors import NamedRangeNotFoundError
from .sheet import find_worksheet

logger = logging.getLogger(__name__)

T = TypeVar("T")


def update_named_range(
    workbook: Workbook,
    sheet_name: str,
    name: str,
    column: int,
    values: Iterable[T],
    mapper: Callable[[T], Any] | None = None,
    start_row: int = 1,
    max_row: int | None = None,
    *,
    culture: Culture | str | None = None,
) -> str:
    """Rewrite a column of values and point ``name`` at exactly those rows.

    Cells ``start_row..max_row`` of ``column`` are cleared first so stale
    values past the new end disappear. With no values the name points at the
    start cell alone.

    Returns:
        The new reference, e.g. ``'Lists'!$B$2:$B$4``.

    Raises:
        SheetNotFoundError: ``sheet_name`` does not exist
        NamedRangeNotFoundError: ``name`` is not a workbook-level defined name
    """
    if workbook is None:
        raise ValueError("workbook is required")
    if start_row < 1 or column < 1:
        raise ValueError("start_row and column are 1-based")
    if max_row is None:
        max_row = WorkbookSettings.load().named_range_max_row
    active_culture = resolve_culture(culture)

    worksheet = find_worksheet(workbook, sheet_name, active_culture)
    if name not in workbook.defined_names:
        raise NamedRangeNotFoundError(
            active_culture.messages.named_range_not_found.format(name=name), name
        )

    # Only cells that exist need clearing; touching the rest would create them.
    for (cell,) in worksheet.iter_rows(
        min_row=start_row,
        max_row=min(max_row, worksheet.max_row),
        min_col=column,
        max_col=column,
    ):
        cell.value = None

    row = start_row - 1
    for value in values:
        row += 1
        cell_at(worksheet, row, column).value = mapper(value) if mapper else value

    last_row = max(row, start_row)
    reference = range_reference(worksheet, start_row, column, last_row)
    workbook.defined_names[name].attr_text = reference
    logger.debug("Named range %r now refers to %s", name, reference)
    return reference
