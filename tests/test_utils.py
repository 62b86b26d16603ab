import math

from colorapi.utils import format_number, is_real_number, value_or_default, zero_none
import numpy as np


def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0
    assert value_or_default(2.5, 3) == 2.5

def test_zero_none():
    assert zero_none([None, 0.5, None]) == (0.0, 0.5, 0.0)
    assert zero_none((1, 2, 3)) == (1, 2, 3)

def test_is_real_number():
    assert is_real_number(1)
    assert is_real_number(0.5)
    assert is_real_number(np.float64(0.5))
    assert not is_real_number(True)
    assert not is_real_number("1")
    assert not is_real_number(None)

def test_format_integers():
    assert format_number(255.0) == "255"
    assert format_number(0) == "0"
    assert format_number(-0.0) == "0"
    assert format_number(-20) == "-20"

def test_format_significant_digits():
    assert format_number(1 / 3) == "0.33333"
    assert format_number(12.345678) == "12.346"
    assert format_number(0.1 + 0.2) == "0.3"
    assert format_number(0.5) == "0.5"
    assert format_number(123456.7) == "123460"

def test_format_precision_argument():
    assert format_number(1 / 3, precision=2) == "0.33"
    assert format_number(2 / 3, precision=3) == "0.667"

def test_format_tiny_values_are_zero():
    assert format_number(1e-12) == "0"
    assert format_number(-3e-11) == "0"

def test_format_small_values_keep_digits():
    # only values under 1e-10 collapse to 0
    assert format_number(1e-9) == "0.000000001"
    assert format_number(2.5e-9) == "0.0000000025"
    assert format_number(-4e-10) == "-0.0000000004"

def test_format_special_values():
    assert format_number(None) == "none"
    assert format_number(math.nan) == "calc(NaN)"
    assert format_number(math.inf) == "calc(infinity)"
    assert format_number(-math.inf) == "calc(-infinity)"
