"""Small integer routines: primality, digit reversal, extremes, scaling."""

import math
from collections.abc import Iterable


def is_prime(n: int) -> bool:
    """Report whether ``n`` has no divisor from 2 up to its square root.

    Values with nothing to test in that range, including 0, 1 and
    negative numbers, are reported as prime.
    """
    if n < 4:
        return True
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def primes_between(low: int, high: int) -> list[int]:
    """Return every ``i`` with ``low <= i <= high`` for which ``is_prime`` holds."""
    return [i for i in range(low, high + 1) if is_prime(i)]


def reverse_digits(n: int) -> int:
    """Return the decimal digits of ``n`` reversed; zero for ``n <= 0``."""
    reversed_value = 0
    while n > 0:
        n, last = divmod(n, 10)
        reversed_value = reversed_value * 10 + last
    return reversed_value


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and largest of ``values`` in one pass."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        smallest = min(smallest, value)
        largest = max(largest, value)
    return smallest, largest


def doubled(values: Iterable[int]) -> list[int]:
    """Return a new list with every value multiplied by two."""
    return [2 * value for value in values]