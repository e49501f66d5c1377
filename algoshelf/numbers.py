"""Number-theory helpers and small numeric routines."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable

__all__ = [
    "DEFAULT_DENOMINATIONS",
    "prime_factors",
    "smallest_prime_factors",
    "factorial_digits",
    "factorial",
    "fibonacci",
    "fibonacci_number",
    "reverse_digits",
    "josephus",
    "binary_sqrt",
    "heron_area",
    "quadratic_roots",
    "make_change",
]

DEFAULT_DENOMINATIONS = (1, 2, 5, 10, 20, 50, 100, 500, 1000)


def prime_factors(n: int) -> dict[int, int]:
    """Return the prime factorisation of ``n`` as {prime: exponent}, primes ascending."""
    if n < 1:
        raise ValueError(f"cannot factorise {n}")
    factors: dict[int, int] = {}
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            n //= divisor
        divisor += 1 if divisor == 2 else 2
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return factors


def smallest_prime_factors(n: int) -> dict[int, int]:
    """Map every number 2..n to its smallest prime factor, by a sieve."""
    if n < 2:
        return {}
    first: list[int | None] = [None] * (n + 1)
    for i in range(2, math.isqrt(n) + 1):
        if first[i] is None:
            for multiple in range(i * i, n + 1, i):
                if first[multiple] is None:
                    first[multiple] = i
    return {k: first[k] or k for k in range(2, n + 1)}


def factorial(n: int) -> int:
    """Return n! for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial of a negative number does not exist")
    return math.prod(range(2, n + 1))


def factorial_digits(n: int) -> list[int]:
    """Return the decimal digits of n!, most significant first."""
    digits = [1]  # least significant first while multiplying
    for multiplier in range(2, n + 1):
        carry = 0
        for position, digit in enumerate(digits):
            carry, digits[position] = divmod(digit * multiplier + carry, 10)
        while carry:
            carry, digit = divmod(carry, 10)
            digits.append(digit)
    if n < 0:
        raise ValueError("factorial of a negative number does not exist")
    return digits[::-1]


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def fibonacci_number(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("Fibonacci index must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping its sign."""
    reversed_value = int(str(abs(n))[::-1])
    return -reversed_value if n < 0 else reversed_value


def josephus(n: int, k: int) -> int:
    """Return the 1-based place of the survivor when every ``k``-th of ``n`` people is removed."""
    if n < 1 or k < 1:
        raise ValueError("josephus needs n >= 1 and k >= 1")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def binary_sqrt(x: float, epsilon: float = 1e-6) -> float:
    """Approximate the square root of ``x`` by bisection, returning the lower bound."""
    if x < 0:
        raise ValueError("cannot take the square root of a negative number")
    if epsilon <= 0:
        raise ValueError("epsilon must be positive")
    low, high = (1.0, float(x)) if x >= 1 else (float(x), 1.0)
    while high - low > epsilon:
        mid = (low + high) / 2
        if mid * mid < x:
            low = mid
        else:
            high = mid
    return low


def heron_area(a: float, b: float, c: float) -> float:
    """Return the area of a triangle with sides ``a``, ``b`` and ``c``."""
    s = (a + b + c) / 2
    product = s * (s - a) * (s - b) * (s - c)
    if min(a, b, c) <= 0 or product < 0:
        raise ValueError(f"sides {a}, {b}, {c} do not form a triangle")
    return math.sqrt(product)


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, float] | tuple[complex, complex]:
    """Return both roots of a*x**2 + b*x + c = 0; complex when the discriminant is negative."""
    if a == 0:
        raise ValueError("coefficient a must not be zero")
    discriminant = b * b - 4 * a * c
    if discriminant >= 0:
        root = math.sqrt(discriminant)
        return (-b + root) / (2 * a), (-b - root) / (2 * a)
    root = cmath.sqrt(discriminant)
    return (-b + root) / (2 * a), (-b - root) / (2 * a)


def make_change(amount: int, denominations: Iterable[int] = DEFAULT_DENOMINATIONS) -> list[int]:
    """Greedily pay ``amount`` with the largest denominations first.

    Any remainder smaller than every denomination is left unpaid.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative")
    coins = sorted(set(denominations), reverse=True)
    if any(coin <= 0 for coin in coins):
        raise ValueError("denominations must be positive")
    change: list[int] = []
    for coin in coins:
        count, amount = divmod(amount, coin)
        change.extend([coin] * count)
    return change