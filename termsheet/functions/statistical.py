"""Aggregate and type-test formula functions."""

from __future__ import annotations

import math
from typing import Any

from termsheet.functions.helpers import (
    FormulaError,
    FormulaFunction,
    to_float,
    to_string,
    validate_args,
)


def _float_or_zero(value: Any) -> float:
    try:
        return to_float(value)
    except FormulaError:
        return 0.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _avg(*args: Any) -> float:
    validate_args("AVG", args, 2, None)
    return sum(map(_float_or_zero, args)) / len(args)


def _count(*args: Any) -> float:
    validate_args("COUNT", args, 1, None)
    return float(sum(1 for arg in args if _is_number(arg)))


def _sum(*args: Any) -> float:
    validate_args("SUM", args, 2, None)
    return sum(map(_float_or_zero, args), 0.0)


def _product(*args: Any) -> float:
    validate_args("PRODUCT", args, 2, None)
    return math.prod(map(_float_or_zero, args), start=1.0)


def _choose(*args: Any) -> Any:
    validate_args("CHOOSE", args, 2, None)
    try:
        index = to_float(args[0])
    except FormulaError as err:
        raise FormulaError(f"CHOOSE: {err}") from err
    if not math.isfinite(index) or not 1 <= int(index) < len(args):
        raise FormulaError("index out of range")
    return args[int(index)]


def _isnumber(*args: Any) -> bool:
    validate_args("ISNUMBER", args, 1, 1)
    return _is_number(args[0])


def _istext(*args: Any) -> bool:
    validate_args("ISTEXT", args, 1, 1)
    return isinstance(args[0], str)


def _isblank(*args: Any) -> bool:
    validate_args("ISBLANK", args, 1, 1)
    return to_string(args[0]) == ""


def statistical_functions() -> dict[str, FormulaFunction]:
    """Return the statistical functions by formula name."""
    return {
        "AVG": _avg,
        "COUNT": _count,
        "SUM": _sum,
        "PRODUCT": _product,
        "CHOOSE": _choose,
        "ISNUMBER": _isnumber,
        "ISTEXT": _istext,
        "ISBLANK": _isblank,
    }