import math

import pytest

from randpass.charset import Charset, Criteria, resolve_charset
from randpass.entropy import log2_factorial, log2_binomial, count_outcomes, \
    calculate_entropy, charset_entropy, suggest_password_length, ENTROPY_THRESHOLD
from randpass.errors import InfeasibleLength


def test_log2_factorial():
    assert log2_factorial(0) == pytest.approx(0.0)
    assert log2_factorial(5) == pytest.approx(math.log2(120))
    assert log2_factorial(10) == pytest.approx(math.log2(3628800))
    # no overflow for long passwords
    assert log2_factorial(500) == pytest.approx(sum(math.log2(x) for x in range(1, 501)))


def test_log2_binomial():
    assert log2_binomial(0, 0) == pytest.approx(0.0)
    assert log2_binomial(5, 0) == pytest.approx(0.0)
    assert log2_binomial(10, 5) == pytest.approx(log2_factorial(10) - 2 * log2_factorial(5))
    assert log2_binomial(10, 10) == pytest.approx(0.0)
    with pytest.raises(ValueError):
        log2_binomial(3, 4)


def test_count_outcomes():
    assert count_outcomes(2, 3) == 9
    # two positions reserved for '!' and '?' in either order, one free of 4
    assert count_outcomes(3, 4, (1, 1)) == 3 * 2 * 4
    assert count_outcomes(5, 62, (5,)) == 1
    with pytest.raises(InfeasibleLength):
        count_outcomes(2, 10, (1, 2))


def test_entropy_without_extra():
    assert calculate_entropy(10, 62) == pytest.approx(10 * math.log2(62), abs=1e-9)
    assert calculate_entropy(20, 36) == pytest.approx(20 * math.log2(36), abs=1e-9)
    assert calculate_entropy(20, 36) == pytest.approx(103.4, abs=0.05)
    assert calculate_entropy(20, 9) == pytest.approx(63.4, abs=0.05)


def test_entropy_with_extra():
    assert calculate_entropy(5, 62, (1, 1, 1, 1, 1)) == pytest.approx(log2_factorial(5))
    assert calculate_entropy(5, 62, (5,)) == 0.0
    expected = log2_binomial(10, 5) + log2_factorial(5) + 5 * math.log2(62)
    assert calculate_entropy(10, 62, (1, 1, 1, 1, 1)) == pytest.approx(expected)
    expected = (log2_binomial(20, 15) + log2_factorial(15)
                - log2_factorial(5) - log2_factorial(4) - log2_factorial(3)
                - log2_factorial(2) - log2_factorial(1)
                + 5 * math.log2(62))
    charset = resolve_charset(criteria=Criteria.ALPHANUMERIC, extra="000001111222334")
    assert charset_entropy(charset, 20) == pytest.approx(expected)


def test_entropy_full_formula():
    # 62 alphanumerics and 5 symbols, 20 characters
    charset = resolve_charset(extra="!@#$%")
    expected = log2_binomial(20, 5) + log2_factorial(5) + 15 * math.log2(67)
    assert charset_entropy(charset, 20) == pytest.approx(expected)
    assert charset_entropy(charset, 20) != pytest.approx(20 * math.log2(67))


def test_entropy_degenerate():
    assert calculate_entropy(20, 1) == 0.0
    assert calculate_entropy(20, 0) == 0.0
    assert calculate_entropy(0, 0) == 0.0
    assert calculate_entropy(3, 1, (2,)) == 0.0
    assert charset_entropy(Charset("a", "aa"), 5) == 0.0
    assert calculate_entropy(0, 62) == 0.0


def test_entropy_is_not_negative():
    for length in range(0, 30):
        for size in range(0, 5):
            assert calculate_entropy(length, size) >= 0.0
        assert calculate_entropy(length + 3, 4, (1, 2)) >= 0.0


def test_entropy_infeasible():
    with pytest.raises(InfeasibleLength):
        calculate_entropy(4, 62, (5,))
    with pytest.raises(InfeasibleLength):
        calculate_entropy(1, 1, (2,))


def test_long_password():
    # exact integers, no float overflow before the logarithm
    assert calculate_entropy(400, 95, (3, 2, 1)) > 2000
    assert calculate_entropy(400, 95) == pytest.approx(400 * math.log2(95))


def test_suggest_password_length():
    assert suggest_password_length(62) == 13
    assert calculate_entropy(13, 62) >= ENTROPY_THRESHOLD
    assert calculate_entropy(12, 62) < ENTROPY_THRESHOLD
    assert suggest_password_length(1) is None
    assert suggest_password_length(10) == 22
    length = suggest_password_length(67, (1, 1, 1, 1, 1))
    assert calculate_entropy(length, 67, (1, 1, 1, 1, 1)) >= ENTROPY_THRESHOLD
    assert calculate_entropy(length - 1, 67, (1, 1, 1, 1, 1)) < ENTROPY_THRESHOLD


def test_entropy_overlapping_extra():
    # '0' is both base and extra, the fill alphabet has 10 characters, not 11
    charset = resolve_charset(regex="[0-9]", extra="00000")
    assert len(charset.alphabet) == 10
    expected = math.log2(math.comb(10, 5)) + 5 * math.log2(10)
    assert charset_entropy(charset, 10) == pytest.approx(expected)
