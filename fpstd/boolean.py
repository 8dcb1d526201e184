"""
Boolean helpers.

The binary and list helpers are curried, so ``and_(x)(y)`` and ``and_(x, y)``
are the same call.
"""

from typing import Callable, Iterable, TypeVar

from toolz import curry

A = TypeVar('A')

__all__ = ['invert', 'and_', 'or_', 'xor', 'all_pass', 'any_pass']


def invert(x: bool) -> bool:
    """Logical negation."""
    return not x


@curry
def and_(x: bool, y: bool) -> bool:
    return x and y


@curry
def or_(x: bool, y: bool) -> bool:
    return x or y


@curry
def xor(x: bool, y: bool) -> bool:
    """True when exactly one side is true."""
    return bool(x) != bool(y)


@curry
def all_pass(fs: Iterable[Callable[[A], bool]], x: A) -> bool:
    """
    Whether every predicate holds for `x`.

    Predicates run left to right and stop at the first failure. An empty list
    of predicates passes.
    """
    return all(f(x) for f in fs)


@curry
def any_pass(fs: Iterable[Callable[[A], bool]], x: A) -> bool:
    """Whether any predicate holds for `x`, stopping at the first success."""
    return any(f(x) for f in fs)
