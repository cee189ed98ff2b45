"""Small numeric and text exercises: counting, tips, roots, integrals, factorials."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass
from typing import Callable

TIP_RATE = 0.18
RAND_MAX = 2_147_483_647


def countdown(start: int) -> list[int]:
    """Return the integers from ``start`` down to 0 inclusive."""
    return list(range(start, -1, -1))


def tip_total(bill: float) -> float:
    """Return the bill with an 18% tip added."""
    return bill * (1 + TIP_RATE)


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real roots of ``a*x**2 + b*x + c = 0``.

    One root when the discriminant is zero, two when it is positive
    (the ``+sqrt`` root first) and none when it is negative.
    """
    discriminant = b * b - 4 * a * c
    if discriminant == 0:
        return (-b / (2 * a),)
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    return ()


class _State(enum.Enum):
    NO_MATCH = 0
    MATCH_T = 1
    MATCH_TH = 2


def count_the(text: str) -> int:
    """Count occurrences of ``the`` in the first line of ``text``."""
    count = 0
    state = _State.NO_MATCH
    for ch in text:
        if state is _State.NO_MATCH:
            state = _State.MATCH_T if ch == "t" else _State.NO_MATCH
        elif state is _State.MATCH_T:
            if ch == "h":
                state = _State.MATCH_TH
            elif ch == "t":
                state = _State.MATCH_T
            else:
                state = _State.NO_MATCH
        else:
            if ch == "e":
                count += 1
                state = _State.NO_MATCH
            elif ch == "t":
                state = _State.MATCH_T
            else:
                state = _State.NO_MATCH
        if ch == "\n":
            break
    return count


def riemann(
    a: float, b: float, n: int, f: Callable[[float], float] = math.cos
) -> float:
    """Left Riemann sum of ``f`` over ``[a, b]`` with ``n`` strips."""
    if n < 1:
        raise ValueError("number of strips must be positive")
    dx = (b - a) / n
    return sum(dx * f(a + i * dx) for i in range(n))


def gen_rand(a: float, b: float, rng: random.Random) -> float:
    """Draw a number between ``a`` and ``b`` from a random integer in ``[0, RAND_MAX]``."""
    num = rng.randint(0, RAND_MAX)
    return num * (b - a) / RAND_MAX + a


@dataclass(frozen=True)
class SampleStats:
    """Theoretical and sampled mean and variance of a uniform distribution."""

    theoretical_mean: float
    theoretical_variance: float
    sample_mean: float
    sample_variance: float


def sample_stats(a: float, b: float, n: int, seed: int) -> SampleStats:
    """Draw ``n`` uniform samples on ``[a, b]`` seeded by ``seed`` and summarise them."""
    if n < 1:
        raise ValueError("number of samples must be positive")
    rng = random.Random(seed)
    total = 0.0
    total_sq = 0.0
    for _ in range(n):
        x = gen_rand(a, b, rng)
        total += x
        total_sq += x * x
    mean = total / n
    return SampleStats(
        theoretical_mean=(b + a) / 2,
        theoretical_variance=(b - a) * (b - a) / 12,
        sample_mean=mean,
        sample_variance=total_sq / n - mean * mean,
    )


def factorial(n: int) -> int:
    """Recursive ``n!`` for ``n >= 1``."""
    if n < 1:
        raise ValueError("factorial is defined here for n >= 1")
    if n == 1:
        return 1
    return n * factorial(n - 1)


def factorial_iter(n: int) -> int:
    """Iterative ``n!``; the empty product 1 for ``n < 1``."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result