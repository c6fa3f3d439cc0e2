"""Value conversion and argument checking shared by the formula functions."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from datetime import datetime, time
from typing import Any, Callable, Sequence

from termsheet import parsing

FormulaFunction = Callable[..., Any]

_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:inf|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]*)?)",
    re.IGNORECASE,
)
_INT64_LIMIT = 2**63


class FormulaError(ValueError):
    """Raised when a formula function cannot produce a result."""


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and -_INT64_LIMIT <= value < _INT64_LIMIT:
        return str(int(value))
    text = repr(value)
    _, marker, exponent = text.partition("e")
    if marker and -4 <= int(exponent) < 21:
        return format(Decimal(text), "f")
    return text


def to_string(value: Any) -> str:
    """Render a formula value as text; booleans become TRUE/FALSE."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, int):
        return str(value)
    if value is None:
        return "<nil>"
    return str(value)


def to_float(value: Any) -> float:
    """Convert a formula value to a float.

    Text is read from its leading number; anything after it is ignored.
    Raises FormulaError when no number can be read.
    """
    if isinstance(value, bool):
        raise FormulaError("cannot convert bool to float64")
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        return float(value)
    if isinstance(value, str):
        found = _NUMBER_PREFIX.match(value.lstrip(" \t\r"))
        if found is None:
            raise FormulaError(f"cannot read a number from {value!r}")
        token = found.group()
        try:
            result = float(token)
        except ValueError as err:
            raise FormulaError(f"cannot read a number from {value!r}") from err
        if math.isinf(result) and "inf" not in token.lower():
            raise FormulaError(f"number out of range: {token}")
        return result
    raise FormulaError(f"cannot convert {type(value).__name__} to float64")


def validate_args(
    name: str, args: Sequence[Any], min_args: int, max_args: int | None
) -> None:
    """Check the argument count; ``max_args`` of None means no upper limit."""
    count = len(args)
    if count < min_args:
        if min_args == max_args:
            raise FormulaError(
                f"{name} requires exactly {min_args} argument(s), got {count}"
            )
        raise FormulaError(
            f"{name} requires at least {min_args} argument(s), got {count}"
        )
    if max_args is not None and count > max_args:
        raise FormulaError(
            f"{name} accepts at most {max_args} argument(s), got {count}"
        )


def parse_datetime(text: str) -> datetime | time:
    """Parse a date/time value as cells hold them."""
    try:
        return parsing.parse_datetime(text)
    except ValueError as err:
        raise FormulaError("invalid datetime format") from err