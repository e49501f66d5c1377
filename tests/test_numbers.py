import math

import pytest

from algoshelf.numbers import (
    DEFAULT_DENOMINATIONS,
    binary_sqrt,
    factorial,
    factorial_digits,
    fibonacci,
    fibonacci_number,
    heron_area,
    josephus,
    make_change,
    prime_factors,
    quadratic_roots,
    reverse_digits,
    smallest_prime_factors,
)


def _is_prime(k):
    return k > 1 and all(k % d for d in range(2, math.isqrt(k) + 1))


@pytest.mark.parametrize("n", [1, 2, 12, 97, 360, 1001, 2**10 * 3**5, 2 * 999983])
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    assert math.prod(p**e for p, e in factors.items()) == n
    assert all(_is_prime(p) for p in factors)
    assert list(factors) == sorted(factors)


def test_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        prime_factors(0)


def test_smallest_prime_factors_match_factorisation():
    table = smallest_prime_factors(200)
    assert list(table) == list(range(2, 201))
    for number, factor in table.items():
        assert number % factor == 0
        assert factor == min(prime_factors(number))
        assert (factor == number) == _is_prime(number)


def test_smallest_prime_factors_small_limit():
    assert smallest_prime_factors(1) == {}


@pytest.mark.parametrize("n", [0, 1, 5, 10, 25, 60])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)
    assert "".join(map(str, factorial_digits(n))) == str(math.factorial(n))


@pytest.mark.parametrize("func", [factorial, factorial_digits])
def test_factorial_rejects_negative(func):
    with pytest.raises(ValueError):
        func(-1)


def test_fibonacci_series():
    series = fibonacci(20)
    assert series[:2] == [0, 1]
    assert len(series) == 20
    assert all(series[i] == series[i - 1] + series[i - 2] for i in range(2, 20))
    assert series == [fibonacci_number(i) for i in range(20)]
    assert fibonacci(0) == []


def test_fibonacci_number_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci_number(-3)


def test_reverse_digits_drops_leading_zero():
    assert reverse_digits(120) == 21


@pytest.mark.parametrize("n", [0, 7, 12345, 908172635])
def test_reverse_digits_is_involution(n):
    assert reverse_digits(reverse_digits(n)) == n
    assert reverse_digits(-n) == -reverse_digits(n)


def test_josephus_source_example():
    assert josephus(10, 3) == 4


@pytest.mark.parametrize("n", [1, 2, 7, 41])
def test_josephus_invariants(n):
    assert josephus(n, 1) == n
    assert 1 <= josephus(n, 4) <= n


def test_josephus_rejects_bad_input():
    with pytest.raises(ValueError):
        josephus(0, 3)
    with pytest.raises(ValueError):
        josephus(5, 0)


@pytest.mark.parametrize("x", [0, 0.25, 1, 2, 6, 1000])
def test_binary_sqrt_close_and_lower_bound(x):
    root = binary_sqrt(x)
    assert abs(root - math.sqrt(x)) < 1e-5
    assert root <= math.sqrt(x) + 1e-12


def test_binary_sqrt_rejects_negative():
    with pytest.raises(ValueError):
        binary_sqrt(-4)


def test_heron_area_right_triangle():
    assert heron_area(3, 4, 5) == pytest.approx(6.0)


def test_heron_area_rejects_impossible_triangle():
    with pytest.raises(ValueError):
        heron_area(1, 2, 10)


@pytest.mark.parametrize("a,b,c", [(1, -3, 2), (1, 2, 1), (2, 0, 8), (1, 1, 1), (3, -7, -6)])
def test_quadratic_roots_solve_equation(a, b, c):
    for root in quadratic_roots(a, b, c):
        assert abs(a * root * root + b * root + c) < 1e-9


def test_quadratic_complex_roots_are_conjugate():
    first, second = quadratic_roots(1, 2, 5)
    assert first == second.conjugate()
    assert first.imag != 0


def test_quadratic_rejects_zero_leading_coefficient():
    with pytest.raises(ValueError):
        quadratic_roots(0, 2, 1)


@pytest.mark.parametrize("amount", [0, 93, 1, 1999, 4321])
def test_make_change_pays_amount(amount):
    change = make_change(amount)
    assert sum(change) == amount
    assert change == sorted(change, reverse=True)
    assert set(change) <= set(DEFAULT_DENOMINATIONS)


def test_make_change_custom_denominations_leave_remainder():
    change = make_change(7, [5, 3])
    assert change == [5]


def test_make_change_rejects_bad_input():
    with pytest.raises(ValueError):
        make_change(-1)
    with pytest.raises(ValueError):
        make_change(10, [0, 5])