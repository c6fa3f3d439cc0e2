"""Trigonometric and hyperbolic formula functions, with their inverses."""

from __future__ import annotations

import math
from typing import Any, Callable

from termsheet.functions.helpers import (
    FormulaError,
    FormulaFunction,
    to_float,
    validate_args,
)

_NAN = math.nan
_INF = math.inf


def _number(name: str, value: Any) -> float:
    try:
        return to_float(value)
    except FormulaError as err:
        raise FormulaError(f"{name}: {err}") from err


def _div(a: float, b: float) -> float:
    """Divide with IEEE 754 results instead of raising on a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return _NAN
        return math.copysign(_INF, a) * math.copysign(1.0, b)
    return a / b


def _or_nan(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        try:
            return fn(x)
        except ValueError:
            return _NAN

    return wrapped


_sin = _or_nan(math.sin)
_cos = _or_nan(math.cos)
_tan = _or_nan(math.tan)
_asin = _or_nan(math.asin)
_acos = _or_nan(math.acos)


def _sqrt(x: float) -> float:
    if x < 0:
        return _NAN
    return math.sqrt(x)


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return _NAN
    if x == 0:
        return -_INF
    if math.isinf(x):
        return _INF
    return math.log(x)


def _sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(_INF, x)


def _cosh(x: float) -> float:
    try:
        return math.cosh(x)
    except OverflowError:
        return _INF


def _unary(name: str, fn: Callable[[float], float]) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 1, 1)
        return fn(_number(name, args[0]))

    function.__name__ = name.lower()
    return function


def _reciprocal_of(value: float, message: str = "division by zero") -> float:
    if value == 0:
        raise FormulaError(message)
    return _div(1.0, value)


def _ctan(x: float) -> float:
    value = _tan(x)
    if abs(value) < 1e-10:
        raise FormulaError("CTAN: division by zero")
    return _div(1.0, value)


def _atan2(*args: Any) -> float:
    validate_args("ATAN2", args, 2, 2)
    y = _number("ATAN2", args[0])
    x = _number("ATAN2", args[1])
    return math.atan2(y, x)


def _asinh(x: float) -> float:
    return _log(x + _sqrt(x * x + 1))


def _acosh(x: float) -> float:
    return _log(x + _sqrt(x * x - 1))


def _atanh(x: float) -> float:
    return 0.5 * _log(_div(1 + x, 1 - x))


def _asech(x: float) -> float:
    return _log(_div(1 + _sqrt(1 - x * x), x))


def _acsch(x: float) -> float:
    return _log(_div(1.0, x) + _sqrt(1 + _div(1.0, x * x)))


def _acoth(x: float) -> float:
    return 0.5 * _log(_div(x + 1, x - 1))


def trig_functions() -> dict[str, FormulaFunction]:
    """Return the trigonometric and hyperbolic functions by formula name."""
    return {
        "SIN": _unary("SIN", _sin),
        "COS": _unary("COS", _cos),
        "TAN": _unary("TAN", _tan),
        "CTAN": _unary("CTAN", _ctan),
        "ASIN": _unary("ASIN", _asin),
        "ACOS": _unary("ACOS", _acos),
        "ATAN": _unary("ATAN", math.atan),
        "ATAN2": _atan2,
        "ACTAN": _unary("ACTAN", lambda x: math.pi / 2 - math.atan(x)),
        "SEC": _unary("SEC", lambda x: _reciprocal_of(_cos(x))),
        "CSEC": _unary("CSEC", lambda x: _reciprocal_of(_sin(x))),
        "ASEC": _unary("ASEC", lambda x: _acos(_div(1.0, x))),
        "ACSC": _unary("ACSC", lambda x: _asin(_div(1.0, x))),
        "RAD": _unary("RAD", lambda x: x * math.pi / 180),
        "DEG": _unary("DEG", lambda x: x * 180 / math.pi),
        "SINH": _unary("SINH", _sinh),
        "COSH": _unary("COSH", _cosh),
        "TANH": _unary("TANH", math.tanh),
        "CTANH": _unary("CTANH", lambda x: _reciprocal_of(math.tanh(x))),
        "SECH": _unary("SECH", lambda x: _reciprocal_of(_cosh(x))),
        "CSCH": _unary("CSCH", lambda x: _reciprocal_of(_sinh(x))),
        "ASINH": _unary("ASINH", _asinh),
        "ACOSH": _unary("ACOSH", _acosh),
        "ATANH": _unary("ATANH", _atanh),
        "ASECH": _unary("ASECH", _asech),
        "ACSCH": _unary("ACSCH", _acsch),
        "ACOTH": _unary("ACOTH", _acoth),
    }