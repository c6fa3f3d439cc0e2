"""Boolean formula functions: IF, IFS, AND, OR, NOT, XOR."""

from __future__ import annotations

from typing import Any

from termsheet.functions.helpers import FormulaError, FormulaFunction, validate_args


def _condition(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise FormulaError(f"{name}: condition must be a boolean, got {value!r}")
    return value


def _if(*args: Any) -> Any:
    validate_args("IF", args, 3, 3)
    return args[1] if _condition("IF", args[0]) else args[2]


def _ifs(*args: Any) -> Any:
    validate_args("IFS", args, 2, None)
    for condition, result in zip(args[:-1:2], args[1::2]):
        if _condition("IFS", condition):
            return result
    return args[-1]


def _and(*args: Any) -> bool:
    validate_args("AND", args, 2, None)
    return all(_condition("AND", arg) for arg in args)


def _or(*args: Any) -> bool:
    validate_args("OR", args, 2, None)
    return any(_condition("OR", arg) for arg in args)


def _not(*args: Any) -> bool:
    validate_args("NOT", args, 1, 1)
    return not _condition("NOT", args[0])


def _xor(*args: Any) -> bool:
    validate_args("XOR", args, 2, None)
    return sum(_condition("XOR", arg) for arg in args) % 2 == 1


def logical_functions() -> dict[str, FormulaFunction]:
    """Return the logical functions by formula name."""
    return {
        "IF": _if,
        "IFS": _ifs,
        "AND": _and,
        "OR": _or,
        "NOT": _not,
        "XOR": _xor,
    }