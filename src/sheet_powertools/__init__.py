"""Helpers for reading, validating and styling openpyxl worksheets."""

from ._version import __version__
from .culture import Culture, get_culture, register_culture
from .errors import (
    ErrorCollector,
    HeaderMismatchError,
    NamedRangeNotFoundError,
    SheetNotFoundError,
    UserFacingError,
)
from .named_ranges import update_named_range
from .reader import RowReader
from .records import RowRecord, SheetRecord
from .sheet import Header, SheetWrapper
from .styles import apply_style
from .writer import RowWriter

__all__ = [
    "__version__",
    "Culture",
    "get_culture",
    "register_culture",
    "ErrorCollector",
    "UserFacingError",
    "SheetNotFoundError",
    "HeaderMismatchError",
    "NamedRangeNotFoundError",
    "SheetWrapper",
    "Header",
    "RowReader",
    "RowWriter",
    "RowRecord",
    "SheetRecord",
    "apply_style",
    "update_named_range",
]
