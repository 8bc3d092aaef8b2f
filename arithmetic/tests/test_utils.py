"""Tests for the service layer and the width setting."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from arithmetic.conf import get_integer_bits
from arithmetic.dsl import ArithmeticErrorKind, LexicalError, ParseError
from arithmetic.utils import evaluate_expression


def test_evaluate_expression_runs_whole_pipeline():
    assert evaluate_expression("(3 + 5) * (2 - 1)").unwrap() == 8


def test_first_failing_stage_is_reported():
    assert isinstance(evaluate_expression("1 / 0 + @").error, LexicalError)
    assert isinstance(evaluate_expression("1 / (0").error, ParseError)
    assert evaluate_expression("1 / 0").error.kind is ArithmeticErrorKind.DIVISION_BY_ZERO


def test_width_comes_from_settings(settings):
    settings.ARITHMETIC_INTEGER_BITS = 16
    assert evaluate_expression("32767").unwrap() == 32767
    assert evaluate_expression("32767 + 1").error.kind is ArithmeticErrorKind.OVERFLOW


def test_explicit_width_wins_over_settings(settings):
    settings.ARITHMETIC_INTEGER_BITS = 8
    assert evaluate_expression("1000", bits=16).unwrap() == 1000


def test_width_setting_accepts_strings(settings):
    settings.ARITHMETIC_INTEGER_BITS = "32"
    assert get_integer_bits() == 32


@pytest.mark.parametrize("value", ["wide", None, 1, 0, 4097, 20000])
def test_invalid_width_setting(settings, value):
    settings.ARITHMETIC_INTEGER_BITS = value
    with pytest.raises(ImproperlyConfigured):
        get_integer_bits()
