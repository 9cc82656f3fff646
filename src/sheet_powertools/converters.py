"""Pure conversions from raw cell values to Python types.

Each function raises ``ValueError`` when the value cannot be converted;
``RowReader`` turns that into a recorded error.
"""

from __future__ import annotations

import math
import re
import unicodedata
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Any

from openpyxl.utils.datetime import from_excel

from .culture import Culture

INT16_RANGE = (-(2**15), 2**15 - 1)
INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)

# Day zero for serial values below 1, which openpyxl returns as bare times.
SERIAL_EPOCH = date(1899, 12, 30)

_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")
_FLOAT_TEXT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_DURATION_TEXT = re.compile(
    r"^(?P<sign>-)?(?:(?P<days>\d+)\.)?(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?$"
)
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")

TRUE_WORDS = frozenset({"si", "yes"})


def is_blank(value: Any, *, dashes_are_blank: bool = False) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        text = value.replace("-", "") if dashes_are_blank else value
        return not text.strip()
    return False


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def to_integer(value: Any, bounds: tuple[int, int] = INT32_RANGE) -> int:
    """Integer within ``bounds``; floats round half to even."""
    if isinstance(value, bool):
        result = int(value)
    elif isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value!r} is not finite")
        result = round(value)
    elif isinstance(value, Decimal):
        result = int(value.to_integral_value(rounding=ROUND_HALF_EVEN))
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_TEXT.match(text):
            raise ValueError(f"{value!r} is not an integer")
        result = int(text)
    else:
        raise ValueError(f"Cannot convert {type(value).__name__} to int")

    low, high = bounds
    if not low <= result <= high:
        raise ValueError(f"{result} is outside [{low}, {high}]")
    return result


def _number_text(value: str, culture: Culture) -> str:
    text = value.strip().replace(culture.group_separator, "")
    if culture.decimal_separator != ".":
        text = text.replace(culture.decimal_separator, ".")
    if not _FLOAT_TEXT.match(text):
        raise ValueError(f"{value!r} is not a number")
    return text


def to_float(value: Any, culture: Culture) -> float:
    if isinstance(value, (bool, int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        return float(_number_text(value, culture))
    raise ValueError(f"Cannot convert {type(value).__name__} to float")


def to_decimal(value: Any, culture: Culture) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (bool, int)):
        return Decimal(int(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value!r} is not finite")
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(_number_text(value, culture))
        except InvalidOperation as exc:
            raise ValueError(f"{value!r} is not a number") from exc
    raise ValueError(f"Cannot convert {type(value).__name__} to Decimal")


def to_datetime(value: Any, culture: Culture) -> datetime:
    """Direct conversion: native dates, or text in ISO or culture formats."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        raise ValueError(f"Cannot convert {type(value).__name__} to datetime")

    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for pattern in culture.date_input_formats:
        try:
            return datetime.strptime(text, pattern)
        except ValueError:
            continue
    raise ValueError(f"{value!r} is not a date")


def from_serial(value: Any, culture: Culture) -> datetime:
    """Interpret ``value`` as a spreadsheet serial day number."""
    if isinstance(value, (datetime, date, time, timedelta)):
        raise ValueError(f"{value!r} is not a serial number")
    number = to_float(value, culture)
    try:
        converted = from_excel(number)
    except (OverflowError, ValueError) as exc:
        raise ValueError(f"{number} is not a valid serial date") from exc
    if isinstance(converted, time):
        return datetime.combine(SERIAL_EPOCH, converted)
    return converted


def to_datetime_or_serial(value: Any, culture: Culture) -> datetime:
    try:
        return to_datetime(value, culture)
    except ValueError:
        return from_serial(value, culture)


def _days(count: int) -> timedelta:
    try:
        return timedelta(days=count)
    except OverflowError as exc:
        raise ValueError(f"{count} days is out of range") from exc


def to_timedelta(value: Any) -> timedelta:
    """Duration from a native value or ``[-][d.]hh:mm[:ss[.f]]`` text.

    A bare integer, as text or a whole-number cell, is a number of days.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, time):
        return timedelta(
            hours=value.hour,
            minutes=value.minute,
            seconds=value.second,
            microseconds=value.microsecond,
        )
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{value!r} is not a whole number of days")
        return _days(int(value))
    if not isinstance(value, str):
        raise ValueError(f"Cannot convert {type(value).__name__} to timedelta")

    text = value.strip()
    if _INTEGER_TEXT.match(text):
        return _days(int(text))

    match = _DURATION_TEXT.match(text)
    if match is None:
        raise ValueError(f"{value!r} is not a duration")
    hours = int(match["hours"])
    minutes = int(match["minutes"])
    seconds = int(match["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValueError(f"{value!r} has an out-of-range component")
    fraction = (match["fraction"] or "").ljust(7, "0")
    result = timedelta(
        days=int(match["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=int(fraction) // 10,
    )
    return -result if match["sign"] else result


def time_of_day(value: Any, culture: Culture) -> timedelta:
    moment = to_datetime_or_serial(value, culture)
    return moment - datetime.combine(moment.date(), time(), tzinfo=moment.tzinfo)


def to_bool(value: Any) -> bool:
    """Native booleans pass; text is true only for "sí", "si" or "yes"."""
    if isinstance(value, bool):
        return value
    return strip_accents(str(value)).strip().casefold() in TRUE_WORDS


def to_month(text: str, culture: Culture) -> int:
    candidate = text.strip()
    if _INTEGER_TEXT.match(candidate):
        month = int(candidate)
        if 1 <= month <= 12:
            return month
        raise ValueError(f"{text!r} is outside 1..12")
    month = culture.month_number(candidate)
    if month is None:
        raise ValueError(f"{text!r} is not a month name")
    return month


def is_email(text: str) -> bool:
    return bool(_EMAIL.match(text.strip()))
