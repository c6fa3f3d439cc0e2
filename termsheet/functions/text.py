"""Text formula functions."""

from __future__ import annotations

import math
import re
from typing import Any

from termsheet.functions.helpers import (
    FormulaError,
    FormulaFunction,
    to_float,
    to_string,
    validate_args,
)

_WORD = re.compile(r"[^\W_]+(?:['\u2019][^\W_]+)*")


def _whole(name: str, value: Any) -> int:
    try:
        number = to_float(value)
    except FormulaError as err:
        raise FormulaError(f"{name}: {err}") from err
    if not math.isfinite(number):
        raise FormulaError(f"{name}: {to_string(number)} is not a whole number")
    return int(number)


def _left(*args: Any) -> str:
    validate_args("LEFT", args, 2, 2)
    text = to_string(args[0])
    count = _whole("LEFT", args[1])
    if count < 0:
        raise FormulaError("LEFT: length must not be negative")
    return text[:count]


def _right(*args: Any) -> str:
    validate_args("RIGHT", args, 2, 2)
    text = to_string(args[0])
    count = _whole("RIGHT", args[1])
    if count < 0:
        raise FormulaError("RIGHT: length must not be negative")
    return text[len(text) - count:] if count < len(text) else text


def _mid(*args: Any) -> str:
    validate_args("MID", args, 3, 3)
    text = to_string(args[0])
    start = max(_whole("MID", args[1]) - 1, 0)
    count = _whole("MID", args[2])
    if start > len(text):
        raise FormulaError("MID: start position is past the end of the text")
    if count < 0:
        raise FormulaError("MID: length must not be negative")
    return text[start:start + count]


def _upper(*args: Any) -> str:
    validate_args("UPPER", args, 1, 1)
    return to_string(args[0]).upper()


def _lower(*args: Any) -> str:
    validate_args("LOWER", args, 1, 1)
    return to_string(args[0]).lower()


def _proper(*args: Any) -> str:
    validate_args("PROPER", args, 1, 1)
    text = to_string(args[0]).lower()
    return _WORD.sub(lambda word: word.group()[0].upper() + word.group()[1:], text)


def _trim(*args: Any) -> str:
    validate_args("TRIM", args, 1, 1)
    return to_string(args[0]).strip()


def _find(*args: Any) -> float:
    validate_args("FIND", args, 2, 3)
    needle = to_string(args[0]).encode("utf-8")
    haystack = to_string(args[1]).encode("utf-8")
    start = _whole("FIND", args[2]) if len(args) > 2 else 1
    if start < 1:
        raise FormulaError("start position must be >= 1")
    if start > len(haystack):
        return -1.0
    position = haystack.find(needle, start - 1)
    return -1.0 if position == -1 else float(position + 1)


def _substitute(*args: Any) -> str:
    validate_args("SUBSTITUTE", args, 3, 4)
    text, old, new = (to_string(arg) for arg in args[:3])
    instance = _whole("SUBSTITUTE", args[3]) if len(args) > 3 else -1
    if instance == -1:
        return text.replace(old, new)
    if instance < 0:
        raise FormulaError("SUBSTITUTE: instance number must not be negative")

    parts = text.split(old) if old else list(text)
    if instance >= len(parts):
        return text
    return old.join(parts[:instance]) + new + old.join(parts[instance:])


def _len(*args: Any) -> float:
    validate_args("LEN", args, 1, 1)
    return float(len(to_string(args[0]).encode("utf-8")))


def _concat(*args: Any) -> str:
    validate_args("CONCAT", args, 1, None)
    return "".join(map(to_string, args))


def string_functions() -> dict[str, FormulaFunction]:
    """Return the text functions by formula name."""
    return {
        "LEFT": _left,
        "RIGHT": _right,
        "MID": _mid,
        "UPPER": _upper,
        "LOWER": _lower,
        "PROPER": _proper,
        "TRIM": _trim,
        "FIND": _find,
        "SUBSTITUTE": _substitute,
        "LEN": _len,
        "CONCAT": _concat,
    }