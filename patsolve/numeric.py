"""Puzzles about number representation and integer arithmetic."""

from __future__ import annotations

import math

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)
PAT_MODULUS = 1_000_000_007
KAPREKAR_CONSTANT = 6174


def _normalize(number: str, digits: int) -> tuple[str, int]:
    """Return the truncated ``0.ddd`` mantissa and the power of ten for ``number``."""
    point = number.find(".")
    if point == -1:
        exponent = len(number)
        all_digits = number
    else:
        exponent = point
        all_digits = number[:point] + number[point + 1 :]
    significant = all_digits.lstrip("0")
    if not significant:
        return "0." + "0" * digits, 0
    leading_zeros = len(all_digits) - len(significant)
    return "0." + significant[:digits], exponent - leading_zeros


def compare_significant(digits: int, a: str, b: str) -> str:
    """Tell whether two decimals agree in their first ``digits`` significant digits.

    The answer is ``"YES <mantissa>*10^<exp>"`` when both numbers normalise to
    the same form, and ``"NO <a form> <b form>"`` otherwise.
    """
    if digits < 0:
        raise ValueError("digits must not be negative")
    mantissa_a, exponent_a = _normalize(a, digits)
    mantissa_b, exponent_b = _normalize(b, digits)
    if (mantissa_a, exponent_a) == (mantissa_b, exponent_b):
        return f"YES {mantissa_a}*10^{exponent_a}"
    return f"NO {mantissa_a}*10^{exponent_a} {mantissa_b}*10^{exponent_b}"


def sum_exceeds(a: int, b: int, c: int) -> bool:
    """Tell whether ``a + b > c`` when the sum is taken in signed 64-bit arithmetic.

    A positive overflow counts as greater, a negative overflow as not greater.
    """
    for value in (a, b, c):
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"{value} does not fit in a signed 64-bit integer")
    if a > 0 and b > 0 and a > INT64_MAX - b:
        return True
    if a < 0 and b < 0 and a < INT64_MIN - b:
        return False
    return a + b > c


def black_hole(number: int) -> list[str]:
    """List the Kaprekar steps for a four-digit number until 0000 or 6174 appears."""
    if not 0 <= number <= 9999:
        raise ValueError("number must lie between 0 and 9999")
    steps = []
    while True:
        digits = f"{number:04d}"
        high = int("".join(sorted(digits, reverse=True)))
        low = int("".join(sorted(digits)))
        number = high - low
        steps.append(f"{high:04d} - {low:04d} = {number:04d}")
        if number in (0, KAPREKAR_CONSTANT):
            return steps


def expand_scientific(notation: str) -> str:
    """Write a number such as ``+1.23E-03`` out in plain decimal notation."""
    e_pos = notation.find("E")
    if e_pos < 2:
        raise ValueError(f"not in scientific notation: {notation!r}")
    sign = notation[0]
    integer = notation[1]
    decimals = notation[3:e_pos]
    exponent = int(notation[e_pos + 1 :])
    if exponent > 0:
        if exponent <= len(decimals):
            integer += decimals[:exponent]
            decimals = decimals[exponent:]
        else:
            integer += decimals + "0" * (exponent - len(decimals))
            decimals = ""
    elif exponent < 0:
        decimals = "0" * (-exponent - 1) + integer + decimals
        integer = "0"
    prefix = "-" if sign == "-" else ""
    suffix = "." + decimals if decimals else ""
    return prefix + integer + suffix


def count_pat(text: str) -> int:
    """Count the subsequences ``PAT`` in ``text`` modulo 1000000007.

    Characters other than ``P`` and ``A`` are counted as ``T``.
    """
    count_p = count_pa = count_total = 0
    for char in text:
        if char == "P":
            count_p += 1
        elif char == "A":
            count_pa = (count_pa + count_p) % PAT_MODULUS
        else:
            count_total = (count_total + count_pa) % PAT_MODULUS
    return count_total


def longest_consecutive_factors(n: int) -> list[int]:
    """Return the longest run of consecutive integers whose product divides ``n``.

    The smallest starting factor wins among runs of equal length; a number
    without such a run is its own single factor, and 1 has none.
    """
    if n < 1:
        raise ValueError("n must be a positive integer")
    longest: list[int] = []
    for start in range(2, math.isqrt(n) + 1):
        if n % start:
            continue
        factors = [start]
        product = start
        following = start + 1
        while product * following <= n and n % (product * following) == 0:
            factors.append(following)
            product *= following
            following += 1
        if len(factors) > len(longest):
            longest = factors
    if not longest and n != 1:
        longest = [n]
    return longest