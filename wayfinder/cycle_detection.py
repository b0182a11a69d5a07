"""Find the cycle in an eventually periodic sequence."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def floyd(start: T, successor: Callable[[T], T]) -> tuple[int, T, int]:
    """Detect a cycle with Floyd's algorithm.

    Return the cycle length, the first element of the cycle and its index.
    Loops forever if the sequence never repeats.
    """
    tortoise = successor(start)
    hare = successor(successor(start))
    while tortoise != hare:
        tortoise, hare = successor(tortoise), successor(successor(hare))
    mu = 0
    tortoise = start
    while tortoise != hare:
        tortoise, hare, mu = successor(tortoise), successor(hare), mu + 1
    lam = 1
    hare = successor(tortoise)
    while tortoise != hare:
        hare, lam = successor(hare), lam + 1
    return lam, tortoise, mu


def brent(start: T, successor: Callable[[T], T]) -> tuple[int, T, int]:
    """Detect a cycle with Brent's algorithm.

    Return the cycle length, the first element of the cycle and its index.
    Loops forever if the sequence never repeats.
    """
    power = lam = 1
    tortoise = start
    hare = successor(start)
    while tortoise != hare:
        if power == lam:
            tortoise, power, lam = hare, power * 2, 0
        hare, lam = successor(hare), lam + 1
    mu = 0
    tortoise = hare = start
    for _ in range(lam):
        hare = successor(hare)
    while tortoise != hare:
        tortoise, hare, mu = successor(tortoise), successor(hare), mu + 1
    return lam, hare, mu