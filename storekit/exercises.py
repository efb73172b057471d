"""Small command-line exercises: counting, primes, gcd, fizzbuzz and stream copying."""

from __future__ import annotations

import operator
import sys
from functools import reduce
from typing import Callable, Iterable, List, Optional, TextIO, Tuple

from storekit.prompts import trim

_ASCII_DIGITS = frozenset("0123456789")


def hello() -> str:
    """Return the classic greeting."""
    return "Hello, world!"


def count_up(limit: int = 10) -> List[int]:
    """Return the numbers from 1 up to and including ``limit``."""
    return list(range(1, limit + 1))


def count_down(start: int = 10) -> List[int]:
    """Return the numbers from ``start`` down to and including 1."""
    return list(range(start, 0, -1))


def staircase(rows: int = 10, growth: int = 1) -> Tuple[List[str], int]:
    """Return rows of stars, row ``i`` holding ``i * growth`` stars, and the star total."""
    lines = ["*" * (row * growth) for row in range(1, rows + 1)]
    return lines, sum(row * growth for row in range(1, rows + 1))


def is_prime(number: int) -> bool:
    """Return True if ``number`` is a prime number."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, number // 2 + 1))


def is_integer(text: str) -> bool:
    """Return True if ``text`` is ASCII digits, optionally after a leading minus."""
    digits = text[1:] if text.startswith("-") else text
    return bool(digits) and all(char in _ASCII_DIGITS for char in digits)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive integers")
    while b:
        a, b = b, a % b
    return a


def fizzbuzz_word(n: int) -> str:
    """Return Fizz, Buzz, FizzBuzz or the number itself for ``n``."""
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def fizzbuzz(limit: int) -> str:
    """Return the fizzbuzz words for 1..``limit`` joined by commas."""
    return ", ".join(fizzbuzz_word(n) for n in range(1, limit + 1))


def fib(n: int) -> int:
    """Return the ``n``:th Fibonacci number; 0 for ``n`` <= 0."""
    previous, current = 0, 1
    if n <= 0:
        return 0
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def foldl(numbers: Iterable[int], function: Callable[[int, int], int]) -> int:
    """Fold ``numbers`` from the left with ``function``, starting from 0."""
    return reduce(function, numbers, 0)


def total(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    return foldl(numbers, operator.add)


def string_length(text: str) -> int:
    """Return the length of ``text`` in bytes of its UTF-8 encoding."""
    return len(text.encode("utf-8"))


def quoted_trim(text: str) -> str:
    """Return ``text`` without surrounding whitespace, in single quotes."""
    return f"'{trim(text)}'"


def swap(a, b):
    """Return the two values in swapped order."""
    return b, a


def cat(paths: Iterable[str], out: Optional[TextIO] = None) -> None:
    """Write the contents of every file in ``paths`` to ``out``."""
    target = sys.stdout if out is None else out
    for path in paths:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            for chunk in iter(lambda: handle.read(8192), ""):
                target.write(chunk)


def passthrough(
    source: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    limit: int = 1024,
) -> int:
    """Copy characters from ``source`` to ``out``, at most ``limit - 1`` of them.

    Returns the number of characters copied.
    """
    reader = sys.stdin if source is None else source
    target = sys.stdout if out is None else out
    budget = max(limit - 1, 0)
    copied = 0
    while copied < budget:
        chunk = reader.read(min(4096, budget - copied))
        if not chunk:
            break
        target.write(chunk)
        copied += len(chunk)
    return copied