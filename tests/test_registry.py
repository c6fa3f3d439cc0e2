import math

import pytest

from termsheet.functions.arithmetic import arithmetic_functions
from termsheet.functions.dates import datetime_functions
from termsheet.functions.helpers import FormulaError
from termsheet.functions.logical import logical_functions
from termsheet.functions.registry import all_functions
from termsheet.functions.statistical import statistical_functions
from termsheet.functions.text import string_functions
from termsheet.functions.trig import trig_functions

CATEGORIES = (
    trig_functions,
    arithmetic_functions,
    statistical_functions,
    string_functions,
    datetime_functions,
    logical_functions,
)


def test_contains_every_category_name():
    names = set(all_functions())
    expected = set()
    for category in CATEGORIES:
        expected |= set(category())
    assert names == expected


def test_no_name_is_lost_to_overlap():
    total = sum(len(category()) for category in CATEGORIES)
    assert len(all_functions()) == total


def test_every_entry_is_callable():
    functions = all_functions()
    callable_names = {name for name, fn in functions.items() if callable(fn)}
    assert callable_names == set(functions)


def test_names_are_upper_case():
    assert all(name == name.upper() for name in all_functions())


def test_each_call_returns_a_fresh_mapping():
    first = all_functions()
    first.pop("SUM")
    assert "SUM" in all_functions()


@pytest.mark.parametrize(
    "name, args",
    [
        ("SIN", (0.5,)),
        ("SQRT", (16,)),
        ("POW", (2, 10)),
        ("AVG", (1, 2, 3)),
        ("UPPER", ("hello",)),
        ("YEAR", ("2024-03-15",)),
        ("XOR", (True, False, True)),
    ],
)
def test_entries_behave_like_their_category(name, args):
    source = next(category() for category in CATEGORIES if name in category())
    assert all_functions()[name](*args) == source[name](*args)


def test_constants_are_reachable():
    functions = all_functions()
    assert functions["PI"]() == math.pi
    assert functions["E"]() == math.e


def test_statistical_entries_are_the_same_objects():
    functions = all_functions()
    for name, fn in statistical_functions().items():
        assert functions[name] is fn


def test_argument_errors_propagate():
    with pytest.raises(FormulaError):
        all_functions()["SQRT"]()


def test_logical_condition_errors_propagate():
    with pytest.raises(FormulaError):
        all_functions()["NOT"]("yes")


def test_date_formatting_through_registry():
    assert all_functions()["DATE"](2024, 3, 15) == "2024-03-15"