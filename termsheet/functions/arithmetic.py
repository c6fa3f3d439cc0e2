"""Arithmetic, rounding, special, bitwise and constant formula functions."""

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
_INT64_MIN = -(2**63)
_INT64_SPAN = 2**64


def _number(name: str, value: Any) -> float:
    try:
        return to_float(value)
    except FormulaError as err:
        raise FormulaError(f"{name}: {err}") from err


def _integer(name: str, value: float) -> int:
    if not math.isfinite(value):
        raise FormulaError(f"{name}: {value} is not a finite number")
    return int(value)


def _wrap64(value: int) -> int:
    return (value - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


def _unary(name: str, fn: Callable[[float], float]) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 1, 1)
        return fn(_number(name, args[0]))

    function.__name__ = name.lower()
    return function


def _binary(name: str, fn: Callable[[float, float], float]) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 2, 2)
        return fn(_number(name, args[0]), _number(name, args[1]))

    function.__name__ = name.lower()
    return function


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return _INF


def _logarithm(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        if math.isnan(x) or x < 0:
            return _NAN
        if x == 0:
            return -_INF
        if math.isinf(x):
            return _INF
        return fn(x)

    return wrapped


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0:
        return _NAN
    return math.sqrt(x)


def _cbrt(x: float) -> float:
    if x == 0 or not math.isfinite(x):
        return x
    y = math.copysign(abs(x) ** (1.0 / 3.0), x)
    return y - (y * y * y - x) / (3 * y * y)


def _odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1


def _pow(x: float, y: float) -> float:
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _odd_integer(y):
            return -_INF
        return _INF
    except ValueError:
        if x == 0:
            if _odd_integer(y):
                return math.copysign(_INF, x)
            return _INF
        return _NAN


def _keep_special(fn: Callable[[float], int]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        if not math.isfinite(x):
            return x
        return math.copysign(float(fn(x)), x) if fn(x) == 0 else float(fn(x))

    return wrapped


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    whole = float(math.trunc(x))
    if abs(x - whole) >= 0.5:
        whole += math.copysign(1.0, x)
    return math.copysign(whole, x) if whole == 0 else whole


def _extreme(name: str, pick: Callable[..., float]) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 2, None)
        values = [_number(name, arg) for arg in args]
        if any(math.isnan(value) for value in values):
            return _NAN
        return pick(values)

    function.__name__ = name.lower()
    return function


def _sign(x: float) -> float:
    if x > 0:
        return 1.0
    if x < 0:
        return -1.0
    return 0.0


def _clamp(*args: Any) -> float:
    validate_args("CLAMP", args, 3, 3)
    x, low, high = (_number("CLAMP", arg) for arg in args)
    if x < low:
        return low
    if x > high:
        return high
    return x


def _lerp(*args: Any) -> float:
    validate_args("LERP", args, 3, 3)
    a, b, t = (_number("LERP", arg) for arg in args)
    return a + t * (b - a)


def _erfc(x: float) -> float:
    return math.erfc(x)


def _gamma(x: float) -> float:
    if math.isnan(x) or x == -_INF:
        return _NAN
    if x == 0:
        return math.copysign(_INF, x)
    try:
        return math.gamma(x)
    except OverflowError:
        return _INF
    except ValueError:
        return _NAN


def _bessel_j(order: int, x: float) -> float:
    """Bessel function of the first kind, by the periodic trapezoid rule."""
    if math.isnan(x):
        return _NAN
    if math.isinf(x):
        return 0.0
    points = 2 * (int(abs(x)) + abs(order)) + 64
    total = math.fsum(
        math.cos(order * tau - x * math.sin(tau))
        for tau in (2 * math.pi * k / points for k in range(points))
    )
    return total / points


def _simpson(fn: Callable[[float], float], low: float, high: float, steps: int) -> float:
    width = (high - low) / steps
    inner = math.fsum(
        (4 if k % 2 else 2) * fn(low + k * width) for k in range(1, steps)
    )
    return (fn(low) + fn(high) + inner) * width / 3


def _bessel_y_base(order: int, x: float) -> float:
    steps = 2 * int(x) + 4000
    oscillating = _simpson(
        lambda t: math.sin(x * math.sin(t) - order * t), 0.0, math.pi, steps
    )
    sign = -1.0 if order % 2 else 1.0
    upper = math.asinh(60.0 / x) + 2.0

    def decaying(t: float) -> float:
        return (math.exp(order * t) + sign * math.exp(-order * t)) * math.exp(
            -x * math.sinh(t)
        )

    return (oscillating - _simpson(decaying, 0.0, upper, 4000)) / math.pi


def _bessel_y(order: int, x: float) -> float:
    """Bessel function of the second kind of integer order."""
    sign = 1.0
    if order < 0:
        order = -order
        if order % 2:
            sign = -1.0
    if math.isnan(x) or x < 0:
        return _NAN
    if x == 0:
        return -_INF if sign > 0 or order == 0 else _INF
    if math.isinf(x):
        return 0.0
    previous = _bessel_y_base(0, x)
    if order == 0:
        return sign * previous
    current = _bessel_y_base(1, x)
    for n in range(1, order):
        previous, current = current, 2 * n / x * current - previous
    return sign * current


def _yn(*args: Any) -> float:
    validate_args("YN", args, 2, 2)
    order = _integer("YN", _number("YN", args[0]))
    return _bessel_y(order, _number("YN", args[1]))


def _roundto(value: float, places: float) -> float:
    scale = _pow(10.0, places)
    return _round_half_away(value * scale) / scale


def _mod(x: float, y: float) -> float:
    try:
        return math.fmod(x, y)
    except ValueError:
        return _NAN


def _remainder(x: float, y: float) -> float:
    try:
        return math.remainder(x, y)
    except ValueError:
        return _NAN


def _bitwise(name: str, op: Callable[[int, int], int]) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 2, 2)
        a = _wrap64(_integer(name, _number(name, args[0])))
        b = _wrap64(_integer(name, _number(name, args[1])))
        return float(_wrap64(op(a, b)))

    function.__name__ = name.lower()
    return function


def _shift(name: str, left: bool) -> FormulaFunction:
    def function(*args: Any) -> float:
        validate_args(name, args, 2, 2)
        value = _wrap64(_integer(name, _number(name, args[0])))
        count = _wrap64(_integer(name, _number(name, args[1])))
        if count < 0:
            raise FormulaError(f"{name}: negative shift amount")
        if left:
            return float(_wrap64(value << min(count, 64)))
        return float(value >> min(count, 64))

    function.__name__ = name.lower()
    return function


def _factorial(*args: Any) -> float:
    validate_args("FACTORIAL", args, 1, 1)
    try:
        n = to_float(args[0])
    except FormulaError:
        n = 0.0
    if not math.isfinite(n):
        return 1.0
    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
        if math.isinf(result):
            break
    return result


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _truncated_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _gcd_of(a: int, b: int) -> int:
    while b != 0:
        a, b = b, _truncated_mod(a, b)
    return a


def _gcd(*args: Any) -> float:
    validate_args("GCD", args, 2, 2)
    a = _integer("GCD", _number("GCD", args[0]))
    b = _integer("GCD", _number("GCD", args[1]))
    return float(_gcd_of(a, b))


def _lcm(*args: Any) -> float:
    validate_args("LCM", args, 2, 2)
    a = _integer("LCM", _number("LCM", args[0]))
    b = _integer("LCM", _number("LCM", args[1]))
    divisor = _gcd_of(a, b)
    if divisor == 0:
        raise FormulaError("LCM: division by zero")
    return float(_truncated_div(a, divisor) * b)


def _constant(value: float) -> FormulaFunction:
    def function(*args: Any) -> float:
        return value

    return function


def arithmetic_functions() -> dict[str, FormulaFunction]:
    """Return the arithmetic, special and constant functions by formula name."""
    return {
        "EXP": _unary("EXP", _exp),
        "LOG": _unary("LOG", _logarithm(math.log)),
        "LOG10": _unary("LOG10", _logarithm(math.log10)),
        "LOG2": _unary("LOG2", _logarithm(math.log2)),
        "SQRT": _unary("SQRT", _sqrt),
        "CBRT": _unary("CBRT", _cbrt),
        "POW": _binary("POW", _pow),
        "ABS": _unary("ABS", abs),
        "CEIL": _unary("CEIL", _keep_special(math.ceil)),
        "FLOOR": _unary("FLOOR", _keep_special(math.floor)),
        "ROUND": _unary("ROUND", _round_half_away),
        "MIN": _extreme("MIN", min),
        "MAX": _extreme("MAX", max),
        "SIGN": _unary("SIGN", _sign),
        "CLAMP": _clamp,
        "LERP": _lerp,
        "ERF": _unary("ERF", math.erf),
        "ERFC": _unary("ERFC", _erfc),
        "GAMMA": _unary("GAMMA", _gamma),
        "J0": _unary("J0", lambda x: _bessel_j(0, x)),
        "J1": _unary("J1", lambda x: _bessel_j(1, x)),
        "YN": _yn,
        "TRUNC": _unary("TRUNC", _keep_special(math.trunc)),
        "ROUNDTO": _binary("ROUNDTO", _roundto),
        "HYPOT": _binary("HYPOT", math.hypot),
        "MOD": _binary("MOD", _mod),
        "REMAINDER": _binary("REMAINDER", _remainder),
        "BITAND": _bitwise("BITAND", lambda a, b: a & b),
        "BITOR": _bitwise("BITOR", lambda a, b: a | b),
        "BITXOR": _bitwise("BITXOR", lambda a, b: a ^ b),
        "BITSHIFTLEFT": _shift("BITSHIFTLEFT", True),
        "BITSHIFTRIGHT": _shift("BITSHIFTRIGHT", False),
        "FACTORIAL": _factorial,
        "GCD": _gcd,
        "LCM": _lcm,
        "PI": _constant(math.pi),
        "E": _constant(math.e),
        "PHI": _constant((1 + math.sqrt(5)) / 2),
        "INF": _constant(_INF),
        "NAN": _constant(_NAN),
    }