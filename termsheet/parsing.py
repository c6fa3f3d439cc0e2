"""Number and date/time recognition and formatting for cell values."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time

SEPARATORS = ("Ø", ".", ",", "`", "'", '"', "_")
DECIMAL_SEPARATORS = SEPARATORS
FINANCIAL_SIGNS = ("$", "€", "£", "¥", "₩", "₹", "₽", "R", "₱", "₿", "Ξ")

_SPECIAL_FLOAT = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)


def _is_float_literal(text: str) -> bool:
    if _SPECIAL_FLOAT.fullmatch(text):
        return True
    if _DECIMAL_FLOAT.fullmatch(text):
        return math.isfinite(float(text))
    if _HEX_FLOAT.fullmatch(text):
        try:
            float.fromhex(text)
        except OverflowError:
            return False
        return True
    return False


def is_number(text: str, financial_sign: str) -> bool:
    """Tell whether the text is a number, ignoring a surrounding financial sign."""
    text = text.strip()
    if financial_sign:
        text = text.strip(financial_sign)
    return bool(text) and _is_float_literal(text)


_LAYOUT_TOKENS = re.compile(r"2006|Jan|PM|15|01|02|04|05|06|2|3")
_TOKEN_PATTERNS = {
    "2006": r"(?P<year>[0-9]{4})",
    "06": r"(?P<year2>[0-9]{2})",
    "01": r"(?P<month>[0-9]{2})",
    "Jan": r"(?P<month_name>[A-Za-z]{3})",
    "02": r"(?P<day>[0-9]{2})",
    "2": r"(?P<day>[0-9]{1,2})",
    "15": r"(?P<hour>[0-9]{1,2})",
    "3": r"(?P<hour12>[0-9]{1,2})",
    "04": r"(?P<minute>[0-9]{2})",
    "05": r"(?P<second>[0-9]{2})(?:[.,](?P<fraction>[0-9]+))?",
    "PM": r"(?P<meridiem>AM|PM)",
}
_MONTH_NAMES = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

_DATETIME_LAYOUTS = (
    "2006-01-02 15:04:05",
    "01/02/2006 15:04:05",
    "02-01-2006 15:04:05",
    "2006-01-02 15:04",
    "01/02/2006 15:04",
    "Jan 2, 2006 3:04 PM",
    "2 Jan 2006 15:04",
)
_DATE_LAYOUTS = (
    "2006-01-02",
    "01/02/2006",
    "02-01-2006",
    "01-02-2006",
    "2006/01/02",
    "Jan 2, 2006",
    "2 Jan 2006",
    "01/02/06",
)
_TIME_LAYOUTS = (
    "15:04:05",
    "15:04",
    "3:04 PM",
    "3:04:05 PM",
)


def _compile_layout(layout: str) -> re.Pattern[str]:
    parts = []
    position = 0
    for token in _LAYOUT_TOKENS.finditer(layout):
        parts.append(re.escape(layout[position:token.start()]))
        parts.append(_TOKEN_PATTERNS[token.group()])
        position = token.end()
    parts.append(re.escape(layout[position:]))
    return re.compile("".join(parts))


_LAYOUTS = tuple(
    (kind, _compile_layout(layout))
    for kind, layouts in (
        ("datetime", _DATETIME_LAYOUTS),
        ("date", _DATE_LAYOUTS),
        ("time", _TIME_LAYOUTS),
    )
    for layout in layouts
)


def _in_range(value: int, low: int, high: int, what: str) -> int:
    if not low <= value <= high:
        raise ValueError(f"{what} out of range")
    return value


def _build(fields: dict[str, str | None]) -> datetime | time:
    if fields.get("hour") is not None:
        hour = _in_range(int(fields["hour"]), 0, 23, "hour")
    elif fields.get("hour12") is not None:
        hour = _in_range(int(fields["hour12"]), 0, 12, "hour")
        if fields.get("meridiem") == "PM" and hour < 12:
            hour += 12
        elif fields.get("meridiem") == "AM" and hour == 12:
            hour = 0
    else:
        hour = 0
    minute = _in_range(int(fields.get("minute") or 0), 0, 59, "minute")
    second = _in_range(int(fields.get("second") or 0), 0, 59, "second")
    microsecond = int((fields.get("fraction") or "0")[:6].ljust(6, "0"))
    clock = time(hour, minute, second, microsecond)

    if fields.get("year") is not None:
        year = int(fields["year"])
    elif fields.get("year2") is not None:
        year = int(fields["year2"])
        year += 1900 if year >= 69 else 2000
    else:
        return clock

    if fields.get("month_name") is not None:
        name = fields["month_name"].lower()
        if name not in _MONTH_NAMES:
            raise ValueError("unknown month name")
        month = _MONTH_NAMES.index(name) + 1
    else:
        month = _in_range(int(fields["month"]), 1, 12, "month")

    return datetime.combine(date(year, month, int(fields["day"])), clock)


def _match(text: str) -> tuple[str, datetime | time] | None:
    text = text.strip()
    for kind, pattern in _LAYOUTS:
        found = pattern.fullmatch(text)
        if found is None:
            continue
        try:
            return kind, _build(found.groupdict())
        except ValueError:
            continue
    return None


def is_valid_datetime(text: str) -> tuple[bool, str]:
    """Return ``(True, kind)`` for a recognised value, kind being
    ``"datetime"``, ``"date"`` or ``"time"``; otherwise ``(False, "")``."""
    found = _match(text)
    if found is None:
        return False, ""
    return True, found[0]


def parse_datetime(text: str) -> datetime | time:
    """Parse a date/time value; a time-of-day alone comes back as a ``time``."""
    found = _match(text)
    if found is None:
        raise ValueError("invalid datetime format")
    return found[1]


def format_datetime(value: datetime | date | time, preferred_format: str) -> str:
    """Format a value as ``YYYY-MM-DD``, ``HH:MM:SS`` or both.

    A bare ``time`` is treated as falling on the date ``0000-01-01``.
    """
    if isinstance(value, time):
        date_text, has_date, clock = "0000-01-01", False, value
    else:
        date_text = f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        has_date = True
        clock = value.time() if isinstance(value, datetime) else time()
    time_text = f"{clock.hour:02d}:{clock.minute:02d}:{clock.second:02d}"
    has_time = bool(clock.hour or clock.minute or clock.second)

    if preferred_format == "datetime":
        return f"{date_text} {time_text}" if has_time else date_text
    if preferred_format == "date":
        return date_text
    if preferred_format == "time":
        return time_text
    if has_date and has_time:
        return f"{date_text} {time_text}"
    return date_text if has_date else time_text


def format_with_commas(
    value: float,
    thousands_separator: str,
    decimal_separator: str,
    decimal_points: int,
    financial_sign: str,
) -> str:
    """Format a number with grouped thousands and a chosen decimal separator.

    The financial sign is accepted for symmetry with the cell settings; it is
    not part of the output.
    """
    negative = value < 0
    if negative:
        value = -value

    if math.isnan(value):
        text = "NaN"
    elif math.isinf(value):
        text = "+Inf"
    else:
        precision = decimal_points if decimal_points >= 0 else 6
        text = f"{value:.{precision}f}"

    int_part, dot, dec_part = text.partition(".")
    lead = len(int_part) % 3
    groups = [int_part[:lead]] if lead else []
    groups += [int_part[i:i + 3] for i in range(lead, len(int_part), 3)]
    result = thousands_separator.join(groups)
    if dot:
        result += decimal_separator + dec_part
    return "-" + result if negative else result