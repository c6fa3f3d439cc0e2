"""Date and time formula functions."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from typing import Any

from termsheet.functions.helpers import (
    FormulaError,
    FormulaFunction,
    parse_datetime,
    to_float,
    to_string,
    validate_args,
)

# A time of day alone is taken to fall on 1 January of year 0, which the
# proleptic Gregorian calendar puts 366 days before 1 January of year 1.
_YEAR_ZERO_ORDINAL = 1 - 366


def _now(*args: Any) -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _today(*args: Any) -> str:
    return datetime.now().strftime("%Y-%m-%d")


def _whole_numbers(args: tuple[Any, ...], message: str) -> list[int]:
    try:
        return [int(to_float(arg)) for arg in args]
    except (FormulaError, ValueError, OverflowError) as err:
        raise FormulaError(message) from err


def _date(*args: Any) -> str:
    validate_args("DATE", args, 3, 3)
    year, month, day = _whole_numbers(args, "invalid date arguments")
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        result = date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as err:
        raise FormulaError("DATE: date out of range") from err
    return result.isoformat()


def _time(*args: Any) -> str:
    validate_args("TIME", args, 2, 3)
    hour, minute, *rest = _whole_numbers(args, "invalid time arguments")
    second = rest[0] if rest else 0
    total = (hour * 3600 + minute * 60 + second) % 86400
    return f"{total // 3600:02d}:{total % 3600 // 60:02d}:{total % 60:02d}"


def _parse(args: tuple[Any, ...], message: str) -> datetime | time:
    try:
        return parse_datetime(to_string(args[0]))
    except FormulaError as err:
        raise FormulaError(message) from err


def _date_part(name: str, field: str, fallback: int) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 1, 1)
        value = _parse(args, "invalid date format")
        if isinstance(value, time):
            return float(fallback)
        return float(getattr(value, field))

    function.__name__ = name.lower()
    return function


def _time_part(name: str, field: str) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 1, 1)
        value = _parse(args, "invalid time format")
        return float(getattr(value, field))

    function.__name__ = name.lower()
    return function


def _weekday(*args: Any) -> float:
    validate_args("WEEKDAY", args, 1, 1)
    value = _parse(args, "invalid date format")
    ordinal = _YEAR_ZERO_ORDINAL if isinstance(value, time) else value.toordinal()
    # Ordinal 1 is a Monday; Sunday counts as 1.
    return float(ordinal % 7 + 1)


def _seconds(value: datetime | time) -> float:
    if isinstance(value, time):
        ordinal, clock = _YEAR_ZERO_ORDINAL, value
    else:
        ordinal, clock = value.toordinal(), value.time()
    return (
        ordinal * 86400
        + clock.hour * 3600
        + clock.minute * 60
        + clock.second
        + clock.microsecond / 1e6
    )


def _datediff(*args: Any) -> float:
    validate_args("DATEDIFF", args, 2, 2)
    try:
        first = parse_datetime(to_string(args[0]))
        second = parse_datetime(to_string(args[1]))
    except FormulaError as err:
        raise FormulaError(f"DATEDIFF: {err}") from err
    return (_seconds(second) - _seconds(first)) / 3600 / 24


def _dateadd(*args: Any) -> str:
    validate_args("DATEADD", args, 2, 2)
    try:
        days = to_float(args[1])
    except FormulaError as err:
        raise FormulaError(f"DATEADD: {err}") from err
    if not math.isfinite(days):
        raise FormulaError("DATEADD: day count must be finite")
    try:
        value = parse_datetime(to_string(args[0]))
    except FormulaError as err:
        raise FormulaError(f"DATEADD: {err}") from err
    start = _YEAR_ZERO_ORDINAL if isinstance(value, time) else value.toordinal()
    try:
        return date.fromordinal(start + int(days)).isoformat()
    except (ValueError, OverflowError) as err:
        raise FormulaError("DATEADD: date out of range") from err


def datetime_functions() -> dict[str, FormulaFunction]:
    """Return the date and time functions by formula name."""
    return {
        "NOW": _now,
        "TODAY": _today,
        "DATE": _date,
        "TIME": _time,
        "YEAR": _date_part("YEAR", "year", 0),
        "MONTH": _date_part("MONTH", "month", 1),
        "DAY": _date_part("DAY", "day", 1),
        "HOUR": _time_part("HOUR", "hour"),
        "MINUTE": _time_part("MINUTE", "minute"),
        "SECOND": _time_part("SECOND", "second"),
        "WEEKDAY": _weekday,
        "DATEDIFF": _datediff,
        "DATEADD": _dateadd,
    }