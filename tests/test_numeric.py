import math
from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from patsolve.numeric import (
    black_hole,
    compare_significant,
    count_pat,
    expand_scientific,
    longest_consecutive_factors,
    sum_exceeds,
)

decimal_text = st.from_regex(r"[0-9]{1,8}(\.[0-9]{1,8})?", fullmatch=True)


def test_compare_ignores_leading_zeros_and_trailing_point():
    result = compare_significant(3, "00123.0", "123")
    assert result.startswith("YES 0.123*10^")


def test_compare_all_zero_numbers():
    assert compare_significant(4, "0.000", "0") == "YES 0." + "0" * 4 + "*10^0"


def test_compare_truncates_to_requested_digits():
    assert compare_significant(2, "12345", "12399").startswith("YES ")


def test_compare_reports_both_forms_when_different():
    result = compare_significant(3, "120", "1.2")
    verdict, first, second = result.split(" ")
    assert verdict == "NO"
    assert first != second


def test_compare_rejects_negative_digits():
    with pytest.raises(ValueError):
        compare_significant(-1, "1", "1")


@given(st.integers(min_value=1, max_value=10), decimal_text)
def test_compare_is_reflexive_and_ignores_padding(digits, number):
    assert compare_significant(digits, number, number).startswith("YES ")
    assert compare_significant(digits, "0" + number, number).startswith("YES ")


@given(st.integers(min_value=1, max_value=10), decimal_text)
def test_compare_mantissa_has_at_most_requested_digits(digits, number):
    mantissa = compare_significant(digits, number, number).split(" ")[1].split("*")[0]
    assert mantissa.startswith("0.")
    assert len(mantissa) - 2 <= digits


@pytest.mark.parametrize(
    "a, b, c, expected",
    [
        (2**63 - 1, 1, 0, True),
        (-(2**63), -1, 0, False),
        (1, 2, 3, False),
        (2, 2, 3, True),
        (-(2**63), -(2**63), 2**63 - 1, False),
    ],
)
def test_sum_exceeds(a, b, c, expected):
    assert sum_exceeds(a, b, c) is expected


def test_sum_exceeds_rejects_values_outside_int64():
    with pytest.raises(ValueError):
        sum_exceeds(2**63, 0, 0)


def test_black_hole_of_kaprekar_constant_is_one_step():
    steps = black_hole(6174)
    assert len(steps) == 1
    assert steps[0].endswith("= 6174")


def test_black_hole_of_repeated_digits():
    assert black_hole(2222) == ["2222 - 2222 = 0000"]


@pytest.mark.parametrize("number", [-1, 10000])
def test_black_hole_rejects_out_of_range(number):
    with pytest.raises(ValueError):
        black_hole(number)


@given(st.integers(min_value=0, max_value=9999))
def test_black_hole_steps_are_consistent(number):
    steps = black_hole(number)
    assert steps[-1].endswith(("= 0000", "= 6174"))
    previous = f"{number:04d}"
    for step in steps:
        high, low, difference = step.replace(" - ", " ").replace(" = ", " ").split(" ")
        assert sorted(high) == sorted(low) == sorted(previous)
        assert list(high) == sorted(high, reverse=True)
        assert int(high) - int(low) == int(difference)
        previous = difference


def test_expand_negative_exponent_example():
    assert expand_scientific("+1.23400E-03") == "0.00123400"


def test_expand_zero_exponent_keeps_digits():
    assert expand_scientific("-1.5E+00") == "-1.5"


def test_expand_rejects_missing_exponent():
    with pytest.raises(ValueError):
        expand_scientific("+1.5")


@given(
    st.sampled_from("+-"),
    st.integers(min_value=1, max_value=9),
    st.from_regex(r"[0-9]{1,10}", fullmatch=True),
    st.integers(min_value=-20, max_value=20),
)
def test_expand_preserves_value(sign, lead, decimals, exponent):
    notation = f"{sign}{lead}.{decimals}E{exponent:+03d}"
    assert Decimal(expand_scientific(notation)) == Decimal(notation)


def test_count_pat_example():
    assert count_pat("APPAPT") == 2


def test_count_pat_empty():
    assert count_pat("") == 0


@given(
    st.integers(min_value=0, max_value=15),
    st.integers(min_value=0, max_value=15),
    st.integers(min_value=0, max_value=15),
)
def test_count_pat_grouped_letters(p, a, t):
    assert count_pat("P" * p + "A" * a + "T" * t) == p * a * t
    assert count_pat("T" * t + "A" * a + "P" * p) == 0


def test_count_pat_wraps_modulus():
    size = 2000
    assert count_pat("P" * size + "A" * size + "T" * size) == size**3 % 1_000_000_007


def test_longest_factors_example():
    assert longest_consecutive_factors(630) == [5, 6, 7]


def test_longest_factors_of_one_is_empty():
    assert longest_consecutive_factors(1) == []


def test_longest_factors_of_prime_is_itself():
    assert longest_consecutive_factors(13) == [13]


def test_longest_factors_rejects_non_positive():
    with pytest.raises(ValueError):
        longest_consecutive_factors(0)


@given(st.integers(min_value=2, max_value=10**6))
def test_longest_factors_are_consecutive_divisors(n):
    factors = longest_consecutive_factors(n)
    assert factors
    assert factors == list(range(factors[0], factors[0] + len(factors)))
    assert n % math.prod(factors) == 0