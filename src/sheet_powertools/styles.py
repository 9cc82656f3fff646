"""Presentation styling for cells and ranges.

Only the aspects passed explicitly are changed; everything else on the
target cells is left as it was.
"""

from __future__ import annotations

import logging
import re
from copy import copy
from typing import Any

from openpyxl.styles import PatternFill, Side
from openpyxl.utils import get_column_letter

from .cells import CellLike, cell_text, iter_cells
from .config import WorkbookSettings

logger = logging.getLogger(__name__)

HORIZONTAL_ALIGNMENTS = frozenset(
    {"general", "left", "center", "right", "fill", "justify", "centerContinuous", "distributed"}
)
VERTICAL_ALIGNMENTS = frozenset({"top", "center", "bottom", "justify", "distributed"})

_HEX_COLOR = re.compile(r"^#?(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def normalize_color(value: str) -> str:
    """``RRGGBB``, ``#RRGGBB`` or ``AARRGGBB`` to upper-case ``AARRGGBB``."""
    candidate = value.strip()
    if not _HEX_COLOR.match(candidate):
        raise ValueError(f"Invalid color: {value!r}. Use RRGGBB or AARRGGBB.")
    raw = candidate.lstrip("#").upper()
    return raw if len(raw) == 8 else f"FF{raw}"


def _check_alignment(value: str | None, allowed: frozenset[str], kind: str) -> None:
    if value is not None and value not in allowed:
        raise ValueError(f"Invalid {kind} alignment {value!r}. Use one of {sorted(allowed)}")


def thin_side(color: str) -> Side:
    return Side(style="thin", color=normalize_color(color))


def apply_style(
    target: Any,
    *,
    horizontal: str | None = None,
    vertical: str | None = None,
    bold: bool | None = None,
    auto_fit: bool | None = None,
    font_color: str | None = None,
    fill_color: str | None = None,
    border_color: str | None = None,
) -> None:
    """Style a cell, a row of cells or a block of rows.

    Args:
        target: anything ``worksheet[...]`` or ``iter_rows`` returns
        horizontal: openpyxl horizontal alignment name
        vertical: openpyxl vertical alignment name
        bold: font weight
        auto_fit: when true, size columns to their content and wrap text
        font_color: font color as hex
        fill_color: solid background color as hex
        border_color: thin border of this color on all four sides of every cell
    """
    _check_alignment(horizontal, HORIZONTAL_ALIGNMENTS, "horizontal")
    _check_alignment(vertical, VERTICAL_ALIGNMENTS, "vertical")
    font_argb = normalize_color(font_color) if font_color is not None else None
    fill_argb = normalize_color(fill_color) if fill_color is not None else None
    side = thin_side(border_color) if border_color is not None else None
    wrap = auto_fit is True

    cells = list(iter_cells(target))
    for cell in cells:
        if font_argb is not None or bold is not None:
            font = copy(cell.font)
            if font_argb is not None:
                font.color = font_argb
            if bold is not None:
                font.bold = bold
            cell.font = font

        if fill_argb is not None:
            cell.fill = PatternFill(fill_type="solid", start_color=fill_argb, end_color=fill_argb)

        if side is not None:
            border = copy(cell.border)
            border.top = side
            border.right = side
            border.bottom = side
            border.left = side
            cell.border = border

        if horizontal is not None or vertical is not None or wrap:
            alignment = copy(cell.alignment)
            if horizontal is not None:
                alignment.horizontal = horizontal
            if vertical is not None:
                alignment.vertical = vertical
            if wrap:
                alignment.wrap_text = True
            cell.alignment = alignment

    if wrap:
        auto_fit_columns(cells)
    logger.debug("Styled %d cell(s)", len(cells))


def _display_length(cell: CellLike) -> int:
    text = cell_text(cell)
    return max((len(line) for line in text.splitlines()), default=0)


def auto_fit_columns(cells: list[CellLike]) -> None:
    """Widen each column touched by ``cells`` to its longest text."""
    if not cells:
        return
    settings = WorkbookSettings.load()
    longest: dict[int, int] = {}
    for cell in cells:
        column = cell.column
        longest[column] = max(longest.get(column, 0), _display_length(cell))

    worksheet = cells[0].parent
    for column, length in longest.items():
        width = max(length + settings.auto_fit_padding, settings.auto_fit_min_width)
        worksheet.column_dimensions[get_column_letter(column)].width = float(width)
