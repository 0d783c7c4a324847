"""
combinatorics.py

Elementary counting formulas. All results are exact Python integers.

API:
 - factorial(n)            n!
 - binom(n, k)             combinations, n! / (k! (n-k)!)
 - P(n, *k)                permutations / arrangements / multiset permutations
 - D(n, k)                 combinations with repetition, binom(n + k - 1, k)
 - summation(start, stop, fn)   fn(start) + ... + fn(stop)
"""

from typing import Callable
import math

from errors import InvalidArgument


def factorial(n: int) -> int:
    """
    Compute n!.
    """
    if n is None:
        raise InvalidArgument("`n` must be provided")
    if n < 0:
        raise InvalidArgument("Number must be >= 0")
    return math.factorial(n)


def binom(n: int, k: int) -> int:
    if n is None or k is None:
        raise InvalidArgument("n and k must be provided")
    if k < 0 or k > n:
        raise InvalidArgument(f"k must be in [0, n], got n={n}, k={k}")
    return factorial(n) // (factorial(k) * factorial(n - k))


def P(n: int, *k: int) -> int:
    """
    Permutation counts.

      P(n)              -> n!                        (permutations of n items)
      P(n, k)           -> n! / (n - k)!             (ordered arrangements of k out of n)
      P(n, k1, k2, ...) -> n! / (k1! * k2! * ...)    (permutations with repetition)
    """
    if n is None:
        raise InvalidArgument("`n` must be provided")
    if len(k) == 0:
        k = (n,)

    if len(k) == 1:
        if k[0] < 0 or k[0] > n:
            raise InvalidArgument(f"k must be in [0, n], got n={n}, k={k[0]}")
        return factorial(n) // factorial(n - k[0])

    if sum(k) > n:
        raise InvalidArgument(f"repetition counts {k} exceed n={n}")
    denominator = 1
    for count in k:
        denominator *= factorial(count)
    return factorial(n) // denominator


def D(n: int, k: int) -> int:
    if n is None or k is None:
        raise InvalidArgument("n and k must be provided")
    return binom(n + k - 1, k)


def summation(start: int, stop: int, fn: Callable[[int], int]) -> int:
    """
    Sum fn(i) for i in the inclusive range [start, stop].
    """
    if start is None or stop is None or fn is None:
        raise InvalidArgument("`start`, `stop` and `fn` must be provided")
    if start > stop:
        raise InvalidArgument("`start` can't be greater than `stop`")
    return sum(fn(i) for i in range(start, stop + 1))


# demo
if __name__ == "__main__":
    print(P(5, 2, 1, 1, 1) * 3 + P(5, 2, 2, 1) * 2 + P(5, 1, 1, 1, 1, 1))
    print(summation(0, 5, lambda i: P(5, i)))
