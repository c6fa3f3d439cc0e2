import math

import pytest

from termsheet.functions.helpers import FormulaError
from termsheet.functions.trig import trig_functions


@pytest.fixture
def fn():
    return trig_functions()


def test_registered_names(fn):
    assert set(fn) == {
        "SIN", "COS", "TAN", "CTAN", "ASIN", "ACOS", "ATAN", "ATAN2", "ACTAN",
        "SEC", "CSEC", "ASEC", "ACSC", "RAD", "DEG", "SINH", "COSH", "TANH",
        "CTANH", "SECH", "CSCH", "ASINH", "ACOSH", "ATANH", "ASECH", "ACSCH",
        "ACOTH",
    }


@pytest.mark.parametrize("x", [-2.5, -0.3, 0.0, 0.7, 1.9, 10.0])
def test_pythagorean_identity(fn, x):
    assert fn["SIN"](x) ** 2 + fn["COS"](x) ** 2 == pytest.approx(1.0)


@pytest.mark.parametrize("x", [-1.2, 0.4, 1.1])
def test_tan_matches_sin_over_cos(fn, x):
    assert fn["TAN"](x) == pytest.approx(fn["SIN"](x) / fn["COS"](x))
    assert fn["CTAN"](x) == pytest.approx(1 / fn["TAN"](x))


@pytest.mark.parametrize("x", [-0.9, -0.2, 0.0, 0.5, 0.99])
def test_inverse_round_trips(fn, x):
    assert fn["SIN"](fn["ASIN"](x)) == pytest.approx(x)
    assert fn["COS"](fn["ACOS"](x)) == pytest.approx(x)
    assert fn["TAN"](fn["ATAN"](x)) == pytest.approx(x, abs=1e-12)


def test_asin_out_of_domain_is_nan(fn):
    assert str(fn["ASIN"](2)) == "nan"
    assert str(fn["ACOS"](-3)) == "nan"


def test_sin_of_infinity_is_nan(fn):
    assert math.isnan(fn["SIN"](math.inf))


def test_atan2_and_actan(fn):
    assert fn["ATAN2"](1, 1) == pytest.approx(math.pi / 4)
    assert fn["ACTAN"](1) == pytest.approx(math.pi / 4)
    assert fn["ATAN2"](2.0, -3.0) == pytest.approx(math.atan2(2.0, -3.0))


def test_ctan_zero_raises(fn):
    with pytest.raises(FormulaError, match="CTAN: division by zero"):
        fn["CTAN"](0)


def test_csec_zero_raises(fn):
    with pytest.raises(FormulaError, match="division by zero"):
        fn["CSEC"](0)


def test_sec_and_csec_are_reciprocals(fn):
    assert fn["SEC"](0.6) == pytest.approx(1 / math.cos(0.6))
    assert fn["CSEC"](0.6) == pytest.approx(1 / math.sin(0.6))


def test_asec_acsc(fn):
    assert fn["ASEC"](2.0) == pytest.approx(math.acos(0.5))
    assert fn["ACSC"](2.0) == pytest.approx(math.asin(0.5))
    assert math.isnan(fn["ASEC"](0))


def test_rad_deg_round_trip(fn):
    assert fn["RAD"](180) == pytest.approx(math.pi)
    for x in (-45.0, 0.0, 30.0, 720.0):
        assert fn["DEG"](fn["RAD"](x)) == pytest.approx(x)


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.3, 1.5])
def test_hyperbolic_identity(fn, x):
    assert fn["COSH"](x) ** 2 - fn["SINH"](x) ** 2 == pytest.approx(1.0)
    assert fn["TANH"](x) == pytest.approx(fn["SINH"](x) / fn["COSH"](x))


def test_hyperbolic_overflow_gives_infinity(fn):
    assert fn["SINH"](1000) == math.inf
    assert fn["SINH"](-1000) == -math.inf
    assert fn["COSH"](1000) == math.inf
    assert fn["SECH"](1000) == 0.0


def test_hyperbolic_reciprocals(fn):
    assert fn["CTANH"](0.8) == pytest.approx(1 / math.tanh(0.8))
    assert fn["SECH"](0.8) == pytest.approx(1 / math.cosh(0.8))
    assert fn["CSCH"](0.8) == pytest.approx(1 / math.sinh(0.8))


@pytest.mark.parametrize("name", ["CTANH", "CSCH"])
def test_hyperbolic_reciprocal_at_zero_raises(fn, name):
    with pytest.raises(FormulaError, match="division by zero"):
        fn[name](0)


def test_inverse_hyperbolic_match_library(fn):
    assert fn["ASINH"](0.5) == pytest.approx(math.asinh(0.5))
    assert fn["ACOSH"](2.5) == pytest.approx(math.acosh(2.5))
    assert fn["ATANH"](0.4) == pytest.approx(math.atanh(0.4))
    assert fn["ASECH"](0.5) == pytest.approx(math.acosh(2.0))
    assert fn["ACSCH"](0.5) == pytest.approx(math.asinh(2.0))
    assert fn["ACOTH"](2.0) == pytest.approx(math.atanh(0.5))


def test_inverse_hyperbolic_edges(fn):
    assert fn["ATANH"](1) == math.inf
    assert fn["ACOTH"](1) == math.inf
    assert fn["ACOTH"](-1) == -math.inf
    assert fn["ACSCH"](0) == math.inf
    assert math.isnan(fn["ACOSH"](0.5))


def test_numeric_text_argument(fn):
    assert fn["SIN"]("0.5") == pytest.approx(math.sin(0.5))


def test_non_numeric_argument_is_prefixed(fn):
    with pytest.raises(FormulaError, match="^SIN: "):
        fn["SIN"]("abc")


def test_argument_count_checked(fn):
    with pytest.raises(FormulaError, match="SIN requires exactly 1 argument\\(s\\), got 0"):
        fn["SIN"]()
    with pytest.raises(FormulaError, match="ATAN2 requires exactly 2 argument\\(s\\), got 1"):
        fn["ATAN2"](1)