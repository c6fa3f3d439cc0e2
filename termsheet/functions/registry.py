"""The combined table of every formula function, keyed by formula name."""

from __future__ import annotations

from termsheet.functions.arithmetic import arithmetic_functions
from termsheet.functions.dates import datetime_functions
from termsheet.functions.helpers import FormulaFunction
from termsheet.functions.logical import logical_functions
from termsheet.functions.statistical import statistical_functions
from termsheet.functions.text import string_functions
from termsheet.functions.trig import trig_functions

# Later categories win when two define the same name.
_CATEGORIES = (
    trig_functions,
    arithmetic_functions,
    statistical_functions,
    string_functions,
    datetime_functions,
    logical_functions,
)


def all_functions() -> dict[str, FormulaFunction]:
    """Return a fresh mapping of every formula function by name."""
    functions: dict[str, FormulaFunction] = {}
    for category in _CATEGORIES:
        functions.update(category())
    return functions